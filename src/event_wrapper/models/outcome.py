"""
Execution outcome of a single business function invocation.

An invocation settles into exactly one ``Success`` or ``Failure``; nothing
downstream ever sees both.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """The business function completed and produced ``value``."""

    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The business function raised, rejected or reported ``error``."""

    error: BaseException

    @property
    def ok(self) -> bool:
        return False


ExecutionOutcome = Union[Success, Failure]
