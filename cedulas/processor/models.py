from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a field is absent when absence is not a plain no-match."""

    ACQUISITION = "acquisition"
    UNSUPPORTED_FORMAT = "unsupported_format"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """A field value, or its absence tagged with the failure that caused it.

    ``value is None and failure is None`` means the document was read and no
    pattern matched. Both cases serialize to ``null`` on the wire.
    """

    value: T | None = None
    failure: FailureKind | None = None

    @property
    def matched(self) -> bool:
        return self.value is not None
