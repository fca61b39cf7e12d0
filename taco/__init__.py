"""Composition and error handling of sequential computations.

A taco is a chain of tagged actions, each of which may succeed, fail, or halt
the execution of the actions after it. Nothing runs until :meth:`Taco.run`
is called, so a taco can be passed around and run only when its result is
needed.

Public surface::

    from taco import (
        Taco,
        new,
        then,
        run,
        Continue,
        Halt,
        Fail,
        Success,
        Failure,
        TacoError,
        InvalidTagError,
        InvalidActionError,
        DuplicateTagError,
        EmptyPipelineError,
        InconsistentPipelineError,
        InvalidOutcomeError,
    )

Every action takes the results of the previous actions (a read-only mapping,
empty for the first action) and returns one of:

* ``Continue(result)`` - ``result`` is stored under the action's tag and
  passed on; if this was the last action, the run returns
  ``Success(tag, result)``.
* ``Halt(result)`` - the run stops at once with ``Success(tag, result)``.
* ``Fail(error)`` - the run stops at once with
  ``Failure(tag, error, results_so_far)``.

Successful pipeline:

>>> number = 2
>>> (
...     new()
...     .then("add", lambda _: Continue(number + 3))
...     .then("multiply", lambda results: Continue(results["add"] * 2))
...     .run()
... )
Success(tag='multiply', result=10)

Halting pipeline:

>>> (
...     new()
...     .then("add", lambda _: Halt(number + 3))
...     .then("multiply", lambda results: Continue(results["add"] * 2))
...     .run()
... )
Success(tag='add', result=5)

Failing pipeline:

>>> (
...     new()
...     .then("add", lambda _: Continue(number + 3))
...     .then("multiply", lambda _: Fail("boom!"))
...     .then("subtract", lambda results: Continue(results["multiply"] - 2))
...     .run()
... )
Failure(tag='multiply', error='boom!', results_so_far={'add': 5})
"""

from .errors import (
    DuplicateTagError,
    EmptyPipelineError,
    InconsistentPipelineError,
    InvalidActionError,
    InvalidOutcomeError,
    InvalidTagError,
    TacoError,
)
from .executor import run
from .outcome import Action, Continue, Fail, Halt, Outcome, Results, Tag
from .pipeline import Taco, new, then
from .result import Failure, RunResult, Success

__all__ = [
    "Taco",
    "new",
    "then",
    "run",
    # Outcomes
    "Action",
    "Continue",
    "Halt",
    "Fail",
    "Outcome",
    "Results",
    "Tag",
    # Run results
    "Success",
    "Failure",
    "RunResult",
    # Usage errors
    "TacoError",
    "InvalidTagError",
    "InvalidActionError",
    "DuplicateTagError",
    "EmptyPipelineError",
    "InconsistentPipelineError",
    "InvalidOutcomeError",
]
