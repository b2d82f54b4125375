from dataclasses import dataclass
from enum import Enum
from typing import Dict

NOT_AVAILABLE = "N/A"

# Hidden field name -> value, captured from the entry page for one submission
SessionTokens = Dict[str, str]


class ResultStatus(str, Enum):
    SUCCESS = "Success"
    NOT_FOUND = "Not Found"
    ERROR = "Error"


@dataclass(frozen=True)
class ResultRecord:
    """
    One roll number's outcome.
    Use the constructors below so the N/A sentinel rules always hold.
    """
    roll_number: str
    student_name: str
    subject_marks: str
    status: ResultStatus

    @classmethod
    def success(cls, roll_number, student_name, subject_marks):
        if not student_name or student_name == NOT_AVAILABLE:
            raise ValueError("a successful record needs a student name")
        return cls(roll_number, student_name, subject_marks or NOT_AVAILABLE, ResultStatus.SUCCESS)

    @classmethod
    def not_found(cls, roll_number):
        return cls(roll_number, NOT_AVAILABLE, NOT_AVAILABLE, ResultStatus.NOT_FOUND)

    @classmethod
    def error(cls, roll_number):
        return cls(roll_number, NOT_AVAILABLE, NOT_AVAILABLE, ResultStatus.ERROR)

    def to_dict(self):
        return {
            "rollNumber": self.roll_number,
            "studentName": self.student_name,
            "subjectMarks": self.subject_marks,
            "status": self.status.value,
        }
