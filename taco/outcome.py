"""Outcome variants returned by actions, and the types that flow between them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Union, runtime_checkable

Tag = Union[str, Enum]
Results = Mapping[Tag, Any]


@dataclass(frozen=True, slots=True)
class Continue:
    """The action succeeded; ``result`` is recorded under its tag."""

    result: Any


@dataclass(frozen=True, slots=True)
class Halt:
    """The action succeeded, but no further actions should run.

    ``result`` becomes the result of the whole run. It is never added to the
    results passed around, since no later action will see it.
    """

    result: Any


@dataclass(frozen=True, slots=True)
class Fail:
    """The action failed; ``error`` is returned to the caller untouched."""

    error: Any


Outcome = Union[Continue, Halt, Fail]


@runtime_checkable
class Action(Protocol):
    """Structural protocol every action satisfies.

    An action receives a read-only mapping of the results of all actions that
    continued before it (the first action receives an empty mapping) and
    returns one of :class:`Continue`, :class:`Halt` or :class:`Fail`.

    Plain functions and lambdas satisfy the protocol::

        def add(results):
            return Continue(2 + 3)
    """

    def __call__(self, results: Results, /) -> Outcome: ...
