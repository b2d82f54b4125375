from result_checker.batch import fetch_batch
from result_checker.fetcher import fetch_one
from result_checker.models import NOT_AVAILABLE, ResultRecord, ResultStatus

__all__ = ["fetch_one", "fetch_batch", "ResultRecord", "ResultStatus", "NOT_AVAILABLE"]
