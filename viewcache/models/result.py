"""Result models returned by engine operations."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from viewcache.core.constants import MergeKind
from viewcache.exceptions import ViewcacheError

T = TypeVar("T")


class MergeResult(BaseModel):
    """Outcome of reconciling one incoming record into a collection."""

    kind: MergeKind
    # Any: the cached dict itself, never a validated copy
    target: Any

    @property
    def is_new(self) -> bool:
        return self.kind == MergeKind.NEW


class OperationResult(BaseModel, Generic[T]):
    """Value or precondition error of a viewport operation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T | None = None
    error: ViewcacheError | None = None

    @property
    def ok(self) -> bool:
        """True when the operation completed without error."""
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, raising the captured error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value
