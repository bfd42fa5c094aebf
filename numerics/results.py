# numerics/results.py
# Explicit outcomes for searches and range checks.

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


class NumericsError(ValueError):
    """Raised where a plain number is the contract and none can be produced."""


@dataclass(frozen=True)
class Found:
    value: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> int:
        return self.value


@dataclass(frozen=True)
class NotFound:
    reason: str = "not found"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> int:
        raise NumericsError(self.reason)


@dataclass(frozen=True)
class InvalidArgument:
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> int:
        raise NumericsError(self.reason)


Result = Union[Found, NotFound, InvalidArgument]
