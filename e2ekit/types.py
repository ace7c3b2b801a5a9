"""Core types shared by features, steps and environments."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Dict, List, Protocol, runtime_checkable

from e2ekit.envconf import Config

Labels = Dict[str, str]

# A step receives the current context, the running test and the environment
# configuration, and returns the (possibly updated) context.
StepFunc = Callable[[Any, Any, Config], Any]

# An environment operation receives the context and configuration and returns
# the updated context; failures are raised.
EnvFunc = Callable[[Any, Config], Any]


class Level(IntEnum):
    """The phase of a feature test that a step belongs to."""

    SETUP = 0
    ASSESS = 1
    TEARDOWN = 2


@runtime_checkable
class Step(Protocol):
    """A single named testing task of a feature."""

    @property
    def name(self) -> str:
        """The step name."""
        ...

    @property
    def level(self) -> Level:
        """The phase the step runs in."""
        ...

    @property
    def func(self) -> StepFunc:
        """The operation the step performs."""
        ...


@runtime_checkable
class Feature(Protocol):
    """A testable feature: a name, labels and an ordered list of steps."""

    @property
    def name(self) -> str:
        """A descriptive text for the feature."""
        ...

    @property
    def labels(self) -> Labels:
        """The feature's labels."""
        ...

    @property
    def steps(self) -> List[Step]:
        """The testing tasks that test the feature."""
        ...