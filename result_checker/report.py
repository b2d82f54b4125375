import csv
import io

from result_checker import config


def report_header(subject=None):
    subject = (subject or config.SUBJECT).title()
    return ["Roll Number", "Student Name", f"{subject} Marks", "Status"]


def write_csv(records, file, subject=None):
    writer = csv.writer(file)
    writer.writerow(report_header(subject))
    for record in records:
        writer.writerow([record.roll_number, record.student_name,
                         record.subject_marks, record.status.value])


def render_csv(records, subject=None):
    output = io.StringIO()
    write_csv(records, output, subject)
    return output.getvalue()


def report_filename(min_marks=None, subject=None):
    subject = (subject or config.SUBJECT).lower()
    if min_marks is not None:
        return f"{subject}-results-min-{min_marks}.csv"
    return f"{subject}-results.csv"
