import concurrent.futures
import logging

from result_checker.fetcher import fetch_one
from result_checker.models import ResultRecord, ResultStatus
from result_checker.resolvers import get_resolver

logger = logging.getLogger(__name__)


def _safe_fetch(roll_number, resolver):
    try:
        return fetch_one(roll_number, resolver)
    except Exception:
        logger.exception(f"Fetcher raised for {roll_number}")
        return ResultRecord.error(str(roll_number))


def fetch_batch(roll_numbers, resolver=None, max_workers=None):
    """
    Fetches every roll number concurrently and returns records in input order.

    One worker per roll number unless the caller passes max_workers. Every
    task is submitted up front, so a very large batch can hit the platform's
    thread limit and raise RuntimeError from here; pass max_workers to bound it.
    Waits for all of them; a failed roll number only affects its own slot.
    """
    roll_numbers = list(roll_numbers)
    if not roll_numbers:
        return []

    resolver = resolver or get_resolver()
    workers = max_workers or len(roll_numbers)

    # executor.map yields in submission order, whatever order the requests finish in
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(lambda roll: _safe_fetch(roll, resolver), roll_numbers))

    found = sum(1 for r in results if r.status is ResultStatus.SUCCESS)
    logger.info(f"Batch of {len(results)} done: {found} found")
    return results
