"""Result types threaded through the commit pipeline.

Contains:
- ErrorKind: Category of a pipeline failure
- Ok: Successful step result carrying a value
- Err: Failed step result carrying a kind and a detail message
- Result: Union of Ok and Err
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union


T = TypeVar("T")


class ErrorKind(Enum):
    """Categories of pipeline failures."""

    USAGE = "usage"
    IO = "io"
    COMMIT = "commit"
    EMPTY_MESSAGE = "empty_message"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A step that completed successfully."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """A step that failed."""

    kind: ErrorKind
    detail: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind.value} error: {self.detail}"


Result = Union[Ok[T], Err]
