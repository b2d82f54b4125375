from result_checker import config
from result_checker.errors import InvalidRollNumber


def validate_roll_number(roll_number):
    if not isinstance(roll_number, str) or not roll_number:
        raise InvalidRollNumber("roll number is empty")
    if not (roll_number.isascii() and roll_number.isdigit()):
        raise InvalidRollNumber(f"roll number {roll_number!r} is not numeric")
    if not config.ROLL_MIN_LENGTH <= len(roll_number) <= config.ROLL_MAX_LENGTH:
        raise InvalidRollNumber(
            f"roll number {roll_number!r} must be "
            f"{config.ROLL_MIN_LENGTH}-{config.ROLL_MAX_LENGTH} digits"
        )
    return roll_number
