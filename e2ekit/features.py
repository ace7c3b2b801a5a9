"""Types used to define feature tests: features, steps, builders and tables."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from e2ekit.types import Labels, Level, Step, StepFunc


@dataclass
class DefaultFeature:
    """A feature built by :class:`FeatureBuilder`."""

    name: str
    labels: Labels = field(default_factory=dict)
    steps: List[Step] = field(default_factory=list)


@dataclass(frozen=True)
class FeatureStep:
    """A named step at a given level."""

    name: str
    level: Level
    func: StepFunc


class FeatureBuilder:
    """Builds a testable feature step by step; every method returns the builder."""

    def __init__(self, name: str) -> None:
        self._feat = DefaultFeature(name)

    def with_label(self, key: str, value: str) -> FeatureBuilder:
        """Add a label key/value pair."""
        self._feat.labels[key] = value
        return self

    def with_step(self, name: str, level: Level, fn: StepFunc) -> FeatureBuilder:
        """Append a step at the given level."""
        self._feat.steps.append(FeatureStep(name, level, fn))
        return self

    def setup(self, fn: StepFunc) -> FeatureBuilder:
        """Add a setup step named after the feature."""
        return self.with_setup(f"{self._feat.name}-setup", fn)

    def with_setup(self, name: str, fn: StepFunc) -> FeatureBuilder:
        """Add a setup step with an explicit name."""
        return self.with_step(name, Level.SETUP, fn)

    def teardown(self, fn: StepFunc) -> FeatureBuilder:
        """Add a teardown step named after the feature."""
        return self.with_teardown(f"{self._feat.name}-teardown", fn)

    def with_teardown(self, name: str, fn: StepFunc) -> FeatureBuilder:
        """Add a teardown step with an explicit name."""
        return self.with_step(name, Level.TEARDOWN, fn)

    def assess(self, desc: str, fn: StepFunc) -> FeatureBuilder:
        """Add an assessment step."""
        return self.with_step(desc, Level.ASSESS, fn)

    def feature(self) -> DefaultFeature:
        """Return the feature configured by this builder."""
        return self._feat


def new(name: str) -> FeatureBuilder:
    """Start building a feature called *name*."""
    return FeatureBuilder(name)


def get_steps_by_level(steps: Optional[Iterable[Step]], level: Level) -> Optional[List[Step]]:
    """Return the steps at *level*, in order; ``None`` when *steps* is ``None``."""
    if steps is None:
        return None
    return [s for s in steps if s.level == level]


def filter_steps_by_name(
    steps: Optional[Iterable[Step]], regex_name: "re.Pattern[str] | str"
) -> Optional[List[Step]]:
    """Return the steps whose names match *regex_name* anywhere."""
    if steps is None:
        return None
    pattern = re.compile(regex_name) if isinstance(regex_name, str) else regex_name
    return [s for s in steps if pattern.search(s.name)]


@dataclass
class TableEntry:
    """One row of a table-driven test."""

    name: str = ""
    assessment: Optional[StepFunc] = None


class Table(list):
    """A list of :class:`TableEntry`, each an executable assessment."""

    def build(self, feature_name: Optional[str] = None) -> FeatureBuilder:
        """Turn the table into a builder; unnamed rows become ``Assessment-<index>``."""
        builder = FeatureBuilder(feature_name or "")
        for index, entry in enumerate(self):
            if entry.assessment is None:
                continue
            builder.assess(entry.name or f"Assessment-{index}", entry.assessment)
        return builder