import logging

from bs4 import BeautifulSoup

from result_checker import config
from result_checker.errors import TokenUnavailable
from result_checker.models import SessionTokens

logger = logging.getLogger(__name__)


def _field_value(soup, field_id):
    tag = soup.find(id=field_id)
    if tag is None:
        return None
    return tag.get("value") or ""


def extract_session_tokens(html) -> SessionTokens:
    """Reads the hidden ASP.NET fields the portal expects back on submit."""
    soup = BeautifulSoup(html, "html.parser")

    viewstate = _field_value(soup, config.VIEWSTATE_FIELD)
    if not viewstate:
        raise TokenUnavailable(f"{config.VIEWSTATE_FIELD} missing from entry page")

    # Generator and validation fields are optional in some page states
    generator = _field_value(soup, config.VIEWSTATE_GENERATOR_FIELD)
    validation = _field_value(soup, config.EVENT_VALIDATION_FIELD)
    if generator is None or validation is None:
        logger.debug("Entry page is missing optional session fields")

    return {
        config.VIEWSTATE_FIELD: viewstate,
        config.VIEWSTATE_GENERATOR_FIELD: generator or "",
        config.EVENT_VALIDATION_FIELD: validation or "",
    }
