"""Usage errors raised by the builder and the executor.

These signal misuse of the API (a bug in the calling code), never a failed
action: an action's own failure is returned as data in
:class:`~taco.result.Failure`.
"""

from __future__ import annotations

from typing import Any


class TacoError(Exception):
    """Base class for every usage error raised by ``taco``."""


class InvalidTagError(TacoError, TypeError):
    """Raised when an action tag is not a non-empty string or an enum member."""

    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(
            f"action tag must be a non-empty str or an Enum member, got {tag!r}"
        )


class InvalidActionError(TacoError, TypeError):
    """Raised when an action is not a callable taking exactly one argument."""

    def __init__(self, tag: Any, action: Any, reason: str):
        self.tag = tag
        self.action = action
        super().__init__(f"action for tag {tag!r} {reason}")


class DuplicateTagError(TacoError, ValueError):
    """Raised when a tag is registered twice in the same taco."""

    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(f"duplicate action tag: {tag!r}")


class EmptyPipelineError(TacoError, ValueError):
    """Raised when a taco with no actions is run."""

    def __init__(self) -> None:
        super().__init__("taco passed to run() has no actions")


class InvalidOutcomeError(TacoError, TypeError):
    """Raised when an action returns something other than an outcome."""

    def __init__(self, tag: Any, outcome: Any):
        self.tag = tag
        self.outcome = outcome
        super().__init__(
            f"action {tag!r} must return Continue, Halt or Fail, got {outcome!r}"
        )


class InconsistentPipelineError(TacoError, ValueError):
    """Raised when a taco's ``order`` and ``actions`` name different tags."""

    def __init__(self, order: tuple, action_tags: tuple):
        self.order = order
        self.action_tags = action_tags
        super().__init__(
            f"taco order {order!r} does not match action tags {action_tags!r}"
        )
