from userdir.domain.schemas.base import WireModel
from userdir.domain.types import ErrorKind


class ErrorResponse(WireModel):
    """Body of a business refusal on the REST surface."""

    detail: str
    error_kind: ErrorKind
