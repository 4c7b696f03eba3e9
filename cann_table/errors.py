from typing import Optional


class APIError(Exception):
    """Unified error class for the football-data.org client."""

    def __init__(self, source: str, code: str, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.code = code
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "code": self.code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class CannTableError(ValueError):
    """Base class for standings data that cannot be turned into a Cann table."""

    code = "CANN_TABLE_ERROR"

    def to_dict(self) -> dict:
        return {"code": self.code, "message": str(self)}


class EmptyStandingsError(CannTableError):
    """The standings table holds no teams, so there are no point bounds."""

    code = "EMPTY_STANDINGS"


class UnorderedStandingsError(CannTableError):
    """A team's points fall outside the first/last entry bounds."""

    code = "UNORDERED_STANDINGS"


class MalformedStandingsError(CannTableError):
    """The provider payload does not match the standings schema."""

    code = "MALFORMED_STANDINGS"
