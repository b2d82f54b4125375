from bs4 import BeautifulSoup

from result_checker import config
from result_checker.models import NOT_AVAILABLE


def find_subject_marks(soup, subject):
    """
    Returns the last cell of the first subjects-table row mentioning `subject`.

    Matching is a case-sensitive substring test on the row's text, and the
    scan stops at the first hit. A page that lists the subject twice (theory
    and practical rows, say) yields the first row only.
    """
    table = soup.find(id=config.SUBJECTS_TABLE_ID)
    if table is None:
        return NOT_AVAILABLE

    for row in table.find_all("tr"):
        if subject in row.get_text():
            cells = row.find_all("td")
            marks = cells[-1].get_text().strip() if cells else ""
            return marks or NOT_AVAILABLE
    return NOT_AVAILABLE


def parse_result_page(html, subject=None):
    """
    Extracts (student_name, subject_marks, found) from a submitted results page.
    An empty name means the portal has no record for that roll number.
    """
    subject = subject or config.SUBJECT
    soup = BeautifulSoup(html, "html.parser")

    name_tag = soup.find(id=config.NAME_ELEMENT_ID)
    name = name_tag.get_text().strip() if name_tag else ""
    if not name:
        return NOT_AVAILABLE, NOT_AVAILABLE, False

    return name, find_subject_marks(soup, subject), True
