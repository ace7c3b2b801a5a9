"""Command-line flags that configure a test environment.

Flags follow the conventional single- or double-dash syntax: ``-name value``,
``--name=value`` and, for boolean flags, a bare ``-name``. Parsing stops at the
first argument that is not a flag, or after a ``--`` terminator.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class FlagsError(ValueError):
    """Raised when command-line flags cannot be parsed or are inconsistent."""


class LabelsMap(dict):
    """A mapping of label keys to values, filled from ``key=value`` lists."""

    def set(self, val: str) -> None:
        """Add the comma-separated ``key=value`` pairs in *val*."""
        for label in val.split(","):
            kv = label.split("=")
            if len(kv) != 2:
                raise ValueError(f"label format error: {label}")
            self[kv[0].strip()] = kv[1].strip()

    def __str__(self) -> str:
        items = " ".join(f"{key}:{value}" for key, value in sorted(self.items()))
        return f"map[{items}]"


class _Kind(Enum):
    STRING = "string"
    BOOL = "bool"
    LABELS = "labels"


@dataclass(frozen=True)
class _FlagSpec:
    name: str
    dest: str
    kind: _Kind
    usage: str


_FLAG_SPECS = (
    _FlagSpec("feature", "feature", _Kind.STRING,
              "Regular expression to select feature(s) to test"),
    _FlagSpec("assess", "assessment", _Kind.STRING,
              "Regular expression to select assessment(s) to run"),
    _FlagSpec("labels", "labels", _Kind.LABELS,
              "Comma-separated key=value to filter features by labels"),
    _FlagSpec("kubeconfig", "kubeconfig", _Kind.STRING,
              "Path to a cluster kubeconfig file (optional)"),
    _FlagSpec("namespace", "namespace", _Kind.STRING,
              "A namespace value to use for testing (optional)"),
    _FlagSpec("skip-labels", "skip_labels", _Kind.LABELS,
              "Regular expression to skip label(s) to run"),
    _FlagSpec("skip-features", "skip_features", _Kind.STRING,
              "Regular expression to skip feature(s) to run"),
    _FlagSpec("skip-assessment", "skip_assessment", _Kind.STRING,
              "Regular expression to skip assessment(s) to run"),
    _FlagSpec("parallel", "parallel", _Kind.BOOL,
              "Run test features in parallel"),
    _FlagSpec("dry-run", "dry_run", _Kind.BOOL,
              "Run Test suite in dry-run mode. This will list the tests to be "
              "executed without actually running them"),
    _FlagSpec("fail-fast", "fail_fast", _Kind.BOOL,
              "Fail immediately and stop running untested code"),
    _FlagSpec("disable-graceful-teardown", "disable_graceful_teardown", _Kind.BOOL,
              "Ignore panic recovery while running tests. This will prevent test "
              "finish steps from getting executed on panic"),
)

_FLAGS = {spec.name: spec for spec in _FLAG_SPECS}

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


@dataclass(frozen=True)
class EnvFlags:
    """Resolved flag values for the testing framework."""

    feature: str = ""
    assessment: str = ""
    labels: LabelsMap = field(default_factory=LabelsMap)
    kubeconfig: str = ""
    namespace: str = ""
    skip_labels: LabelsMap = field(default_factory=LabelsMap)
    skip_features: str = ""
    skip_assessment: str = ""
    parallel: bool = False
    dry_run: bool = False
    fail_fast: bool = False
    disable_graceful_teardown: bool = False


def _parse_bool(text: str, name: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value {text!r} for -{name}: parse error")


def _parse_into(args: Iterable[str], values: dict) -> None:
    it = iter(args)
    for arg in it:
        if len(arg) < 2 or not arg.startswith("-"):
            break
        name = arg[1:]
        if name.startswith("-"):
            name = name[1:]
            if not name:
                break
        if not name or name[0] in "-=":
            raise ValueError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")

        spec = _FLAGS.get(name)
        if spec is None:
            if name in ("help", "h"):
                raise ValueError("help requested")
            raise ValueError(f"flag provided but not defined: -{name}")

        if spec.kind is _Kind.BOOL:
            values[spec.dest] = _parse_bool(value, name) if has_value else True
            continue

        if not has_value:
            try:
                value = next(it)
            except StopIteration:
                raise ValueError(f"flag needs an argument: -{name}") from None

        if spec.kind is _Kind.LABELS:
            try:
                values[spec.dest].set(value)
            except ValueError as err:
                raise ValueError(
                    f"invalid value {value!r} for flag -{name}: {err}"
                ) from err
        else:
            values[spec.dest] = value


def parse_args(args: Iterable[str]) -> EnvFlags:
    """Parse *args* into an :class:`EnvFlags`."""
    values: dict = {
        spec.dest: (
            LabelsMap() if spec.kind is _Kind.LABELS
            else False if spec.kind is _Kind.BOOL
            else ""
        )
        for spec in _FLAG_SPECS
    }
    try:
        _parse_into(args, values)
    except ValueError as err:
        raise FlagsError(f"flags parsing: {err}") from err

    if values["fail_fast"] and values["parallel"]:
        raise FlagsError("--fail-fast and --parallel are mutually exclusive options")

    return EnvFlags(**values)


def parse() -> EnvFlags:
    """Parse the process's command-line arguments."""
    return parse_args(sys.argv[1:])