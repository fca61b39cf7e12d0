"""Run results returned by :func:`taco.executor.run`."""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


class Success(BaseModel):
    """The run completed, either at the last action or at a halting one."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag: Any = Field(..., description="Tag of the action that ended the run")
    result: Any = Field(..., description="Result of that action")

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


class Failure(BaseModel):
    """An action returned :class:`~taco.outcome.Fail` and the run stopped."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag: Any = Field(..., description="Tag of the failing action")
    error: Any = Field(..., description="Error returned by the failing action")
    results_so_far: Dict[Any, Any] = Field(
        default_factory=dict,
        description="Results of the actions completed before the failing one",
    )

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


RunResult = Union[Success, Failure]
