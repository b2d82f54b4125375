import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_marks(text):
    """Leading-integer parse of a marks cell. Returns None for things like 'N/A'."""
    if text is None:
        return None
    match = _LEADING_INT.match(str(text))
    return int(match.group(1)) if match else None


def meets_min_marks(record, min_marks):
    marks = parse_marks(record.subject_marks)
    return marks is not None and marks >= min_marks


def filter_by_min_marks(records, min_marks):
    return [r for r in records if meets_min_marks(r, min_marks)]
