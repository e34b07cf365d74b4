from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from result import Result

from hippoo.models.enums import ErrorKind
from hippoo.models.package import PackageMetrics


@dataclass(slots=True, frozen=True)
class FetchError:
    kind: ErrorKind
    package: str
    message: str

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "package": self.package, "message": self.message}


class InsufficientInputError(ValueError):
    """Raised when an operation needs more packages than it was given."""

    kind = ErrorKind.INSUFFICIENT_INPUT

    def __init__(self, operation: str, required: int, actual: int) -> None:
        self.operation = operation
        self.required = required
        self.actual = actual
        super().__init__(f"{operation} needs at least {required} package(s), got {actual}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "operation": self.operation,
            "required": self.required,
            "actual": self.actual,
            "message": str(self),
        }


FetchResult = Result[PackageMetrics, FetchError]
