class ResultCheckerError(Exception):
    """Base class for everything the fetcher maps to an Error record."""


class InvalidRollNumber(ResultCheckerError):
    """Roll number failed the local shape check. No request was made."""


class PortalError(ResultCheckerError):
    """Transport or protocol failure talking to the portal."""


class TokenUnavailable(PortalError):
    """The entry page did not carry a usable __VIEWSTATE."""


class ParseAnomaly(PortalError):
    """The result page could not be read."""
