import logging
import random
from abc import ABC, abstractmethod

import requests

from result_checker import config
from result_checker.errors import ParseAnomaly, PortalError
from result_checker.models import ResultRecord, SessionTokens
from result_checker.parser import parse_result_page
from result_checker.tokens import extract_session_tokens

logger = logging.getLogger(__name__)


class BaseResolver(ABC):
    """
    Strategy interface: turn one already-validated roll number into a record.
    Implementations may raise ResultCheckerError; fetch_one maps it to Error.
    """
    name = "base"

    @abstractmethod
    def resolve(self, roll_number: str) -> ResultRecord:
        pass


class PortalResolver(BaseResolver):
    """Live two-request scrape of the ASP.NET results form."""
    name = "portal"

    def __init__(self, portal_url=None, exam_id=None, subject=None, timeout=None,
                 user_agent=None, session_factory=requests.Session):
        self.portal_url = portal_url or config.PORTAL_URL
        self.exam_id = exam_id or config.EXAM_ID
        self.subject = subject or config.SUBJECT
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.user_agent = user_agent or config.USER_AGENT
        self.session_factory = session_factory

    def build_payload(self, roll_number: str, tokens: SessionTokens):
        payload = {
            config.EXAM_FIELD: self.exam_id,
            config.ROLL_FIELD: roll_number,
            config.SUBMIT_FIELD: config.SUBMIT_LABEL,
            config.EVENT_TARGET_FIELD: "",
            config.EVENT_ARGUMENT_FIELD: "",
        }
        payload.update(tokens)
        return payload

    def build_headers(self):
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Referer": self.portal_url,
            "User-Agent": self.user_agent,
        }

    def _load_entry_page(self, session):
        try:
            response = session.get(
                self.portal_url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise PortalError(f"entry page request failed: {e}") from e
        return response.text

    def _submit(self, session, payload):
        try:
            response = session.post(
                self.portal_url,
                data=payload,
                headers=self.build_headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise PortalError(f"result submission failed: {e}") from e
        return response.text

    def resolve(self, roll_number):
        # One session per roll number so cookies and tokens never cross fetches
        with self.session_factory() as session:
            # 1. Capture the hidden fields issued with the entry page
            tokens = extract_session_tokens(self._load_entry_page(session))

            # 2. Replay them with the roll number
            html = self._submit(session, self.build_payload(roll_number, tokens))

        # 3. Read name and marks
        try:
            name, marks, found = parse_result_page(html, self.subject)
        except Exception as e:
            raise ParseAnomaly(f"could not parse result page: {e}") from e

        if not found:
            return ResultRecord.not_found(roll_number)
        return ResultRecord.success(roll_number, name, marks)


# Sample data for the fixed table resolver when no table is supplied
SAMPLE_RESULTS = {
    "120166": ("HAMZA MUNIR", "85"),
    "120167": ("AYESHA KHAN", "72"),
    "120168": ("BILAL AHMED", "N/A"),
    "401236": ("SANA IQBAL", "91"),
}


class FixedTableResolver(BaseResolver):
    """Looks roll numbers up in an in-memory table of roll -> (name, marks)."""
    name = "fixed"

    def __init__(self, table=None):
        self.table = dict(SAMPLE_RESULTS if table is None else table)

    def resolve(self, roll_number):
        entry = self.table.get(roll_number)
        if entry is None:
            return ResultRecord.not_found(roll_number)
        name, marks = entry
        return ResultRecord.success(roll_number, name, marks)


FIRST_NAMES = ["HAMZA", "AYESHA", "BILAL", "SANA", "USMAN", "FATIMA", "ALI", "ZAINAB"]
LAST_NAMES = ["MUNIR", "KHAN", "AHMED", "IQBAL", "RAZA", "SHAH", "MALIK", "TARIQ"]


class RandomResolver(BaseResolver):
    """
    Simulated portal for demos and load tests.

    Each roll number gets its own generator seeded from (seed, roll number),
    so a given roll always produces the same record regardless of batch order.
    The not-found rate and marks range are fixture values.
    """
    name = "random"

    def __init__(self, seed=0, not_found_rate=0.15, min_marks=33, max_marks=100):
        self.seed = seed
        self.not_found_rate = not_found_rate
        self.min_marks = min_marks
        self.max_marks = max_marks

    def resolve(self, roll_number):
        rng = random.Random(f"{self.seed}:{roll_number}")
        if rng.random() < self.not_found_rate:
            return ResultRecord.not_found(roll_number)
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
        marks = str(rng.randint(self.min_marks, self.max_marks))
        return ResultRecord.success(roll_number, name, marks)


RESOLVERS = {
    PortalResolver.name: PortalResolver,
    FixedTableResolver.name: FixedTableResolver,
    RandomResolver.name: RandomResolver,
}


def get_resolver(kind=None):
    kind = (kind or config.RESOLVER).lower()
    if kind not in RESOLVERS:
        raise ValueError(f"Unknown resolver '{kind}'. Choose from: {', '.join(RESOLVERS)}")
    return RESOLVERS[kind]()
