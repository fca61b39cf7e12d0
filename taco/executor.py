"""Executor - runs a taco's actions in order, threading the results through."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict

from .errors import EmptyPipelineError, InvalidOutcomeError
from .outcome import Continue, Fail, Halt
from .result import Failure, RunResult, Success

if TYPE_CHECKING:
    from .pipeline import Taco

logger = logging.getLogger(__name__)


def run(taco: Taco) -> RunResult:
    """Execute the pipeline of actions present in ``taco``.

    Each action is called with a read-only snapshot of the results of the
    actions that continued before it. The run stops at the first
    :class:`~taco.outcome.Halt` or :class:`~taco.outcome.Fail`; actions after
    that point are never called.

    Returns:
        ``Success(tag, result)`` for the last action, or for the action that
        halted; ``Failure(tag, error, results_so_far)`` for the action that
        failed, with the results collected before it.

    Raises:
        EmptyPipelineError: ``taco`` has no actions.
        InvalidOutcomeError: an action returned something other than
            ``Continue``, ``Halt`` or ``Fail``.
    """
    if not taco.order:
        raise EmptyPipelineError()

    results: Dict[Any, Any] = {}

    for tag in taco.order:
        action = taco.actions[tag]
        logger.debug("Taco: running %r", tag)
        outcome = action(MappingProxyType(dict(results)))

        if isinstance(outcome, Fail):
            logger.info("Taco: action %r failed: %r", tag, outcome.error)
            return Failure(tag=tag, error=outcome.error, results_so_far=dict(results))
        if isinstance(outcome, Halt):
            logger.debug("Taco: action %r halted the run", tag)
            return Success(tag=tag, result=outcome.result)
        if not isinstance(outcome, Continue):
            raise InvalidOutcomeError(tag, outcome)

        results[tag] = outcome.result

    last_tag = taco.order[-1]
    return Success(tag=last_tag, result=results[last_tag])
