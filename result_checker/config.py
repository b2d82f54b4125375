import os

# Portal
PORTAL_URL = os.getenv("PORTAL_URL", "https://www.bisefsd.edu.pk/InterResults.aspx")
EXAM_ID = os.getenv("EXAM_ID", "72")  # First Annual 2024
SUBJECT = os.getenv("SUBJECT", "PHYSICS")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36",
)

# Which resolver fetch_one uses when none is passed in: portal, fixed or random
RESOLVER = os.getenv("RESOLVER", "portal")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Roll numbers are 5 to 7 digits long
ROLL_MIN_LENGTH = 5
ROLL_MAX_LENGTH = 7

# Hidden ASP.NET fields echoed back on submit
VIEWSTATE_FIELD = "__VIEWSTATE"
VIEWSTATE_GENERATOR_FIELD = "__VIEWSTATEGENERATOR"
EVENT_VALIDATION_FIELD = "__EVENTVALIDATION"
EVENT_TARGET_FIELD = "__EVENTTARGET"
EVENT_ARGUMENT_FIELD = "__EVENTARGUMENT"

# Form fields of the results page
EXAM_FIELD = "ctl00$ContentPlaceHolder1$ddlExam"
ROLL_FIELD = "ctl00$ContentPlaceHolder1$txtRollNo"
SUBMIT_FIELD = "ctl00$ContentPlaceHolder1$btnResult"
SUBMIT_LABEL = " Get Result"

# Elements of the response page
NAME_ELEMENT_ID = "ContentPlaceHolder1_lblNameValue"
SUBJECTS_TABLE_ID = "ContentPlaceHolder1_gvSubjects"
