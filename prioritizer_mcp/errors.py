"""Error taxonomy for Prioritizer MCP.

Every error carries a ``kind`` and a ``status_code`` so the tool boundary can
render a caller-visible outcome without inspecting the exception type.
"""


class PrioritizerError(Exception):
    """Base class for errors surfaced to callers."""

    kind = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PrioritizerError):
    """Malformed or missing input."""

    kind = "validation_error"
    status_code = 400


class AuthError(PrioritizerError):
    """Missing, malformed or unverifiable credential."""

    kind = "auth_error"
    status_code = 401


class NotFoundError(PrioritizerError):
    """Task is absent or owned by someone else. The two cases are not distinguished."""

    kind = "not_found"
    status_code = 404


class StoreError(PrioritizerError):
    """The document store failed or is not configured."""

    kind = "store_error"
    status_code = 500
