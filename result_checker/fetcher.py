import logging

from result_checker.errors import InvalidRollNumber, PortalError, ResultCheckerError, TokenUnavailable
from result_checker.models import ResultRecord
from result_checker.resolvers import get_resolver
from result_checker.validation import validate_roll_number

logger = logging.getLogger(__name__)


def fetch_one(roll_number, resolver=None):
    """
    Resolves one roll number to exactly one terminal record.
    Never raises for a fetch failure: every one becomes an Error record for
    this roll only. An unknown configured resolver raises ValueError, as in
    fetch_batch.
    """
    resolver = resolver or get_resolver()

    try:
        validate_roll_number(roll_number)
    except InvalidRollNumber as e:
        # Local rejection, nothing was sent to the portal
        logger.info(f"Rejected {roll_number!r} before fetching: {e}")
        return ResultRecord.error(str(roll_number))

    try:
        record = resolver.resolve(roll_number)
    except TokenUnavailable as e:
        logger.error(f"No session tokens for {roll_number}, submission skipped: {e}")
        return ResultRecord.error(roll_number)
    except PortalError as e:
        logger.warning(f"Portal failure for {roll_number}: {e}")
        return ResultRecord.error(roll_number)
    except ResultCheckerError as e:
        logger.warning(f"Failed {roll_number}: {e}")
        return ResultRecord.error(roll_number)
    except Exception:
        logger.exception(f"Unexpected error fetching {roll_number}")
        return ResultRecord.error(roll_number)

    logger.debug(f"Fetched {roll_number}: {record.status.value}")
    return record
