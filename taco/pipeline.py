"""Pipeline builder - accumulates tagged actions in registration order.

A :class:`Taco` is an immutable value: :meth:`Taco.then` validates the new
action and returns a fresh taco, leaving the original untouched. Nothing is
executed until :meth:`Taco.run` is called, so a taco can be built in one place
and run (any number of times) in another.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .errors import (
    DuplicateTagError,
    InconsistentPipelineError,
    InvalidActionError,
    InvalidTagError,
)
from .executor import run as _run
from .outcome import Action, Tag
from .result import RunResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Taco:
    """An ordered, uniquely tagged collection of actions.

    ``actions`` maps each tag to its action and ``order`` lists the tags from
    first-registered to last-registered. Every tag in ``order`` is a key of
    ``actions`` and vice versa.

    Building a taco directly validates the same rules as :meth:`then`, and
    raises :class:`InconsistentPipelineError` when ``order`` and ``actions``
    name different tags.
    """

    actions: MappingProxyType = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )
    order: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))
        if not isinstance(self.order, tuple):
            object.__setattr__(self, "order", tuple(self.order))

        seen = set()
        for tag in self.order:
            _check_tag(tag)
            if tag in seen:
                raise DuplicateTagError(tag)
            seen.add(tag)
        if seen != set(self.actions):
            raise InconsistentPipelineError(self.order, tuple(self.actions))
        for tag in self.order:
            _check_action(tag, self.actions[tag])

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, tag: object) -> bool:
        return tag in self.actions

    @property
    def tags(self) -> tuple:
        """Registered tags in execution order."""
        return self.order

    def then(self, tag: Tag, action: Action) -> Taco:
        """Return a new taco with ``action`` appended under ``tag``.

        Raises:
            InvalidTagError: ``tag`` is not a non-empty ``str`` or an
                ``Enum`` member.
            InvalidActionError: ``action`` is not a callable accepting exactly
                one argument.
            DuplicateTagError: an action with ``tag`` is already present.
        """
        _check_tag(tag)
        _check_action(tag, action)
        if tag in self.actions:
            raise DuplicateTagError(tag)

        logger.debug("Taco: registered %r as step %d", tag, len(self.order) + 1)
        return Taco(
            actions=MappingProxyType({**self.actions, tag: action}),
            order=(*self.order, tag),
        )

    register = then

    def run(self) -> RunResult:
        """Execute the actions in order. See :func:`taco.executor.run`."""
        return _run(self)


def new() -> Taco:
    """Return a fresh, empty taco."""
    return Taco()


def then(taco: Taco, tag: Tag, action: Action) -> Taco:
    """Functional form of :meth:`Taco.then`."""
    return taco.then(tag, action)


def _check_tag(tag: Any) -> None:
    if isinstance(tag, Enum):
        return
    if isinstance(tag, str) and tag:
        return
    raise InvalidTagError(tag)


def _check_action(tag: Tag, action: Any) -> None:
    if not isinstance(action, Action):
        raise InvalidActionError(tag, action, "must be callable")
    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust them.
        return
    try:
        signature.bind(None)
    except TypeError:
        raise InvalidActionError(
            tag, action, f"must accept exactly one argument, has signature {signature}"
        ) from None
