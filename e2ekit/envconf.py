"""Configuration for a test environment."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from e2ekit.flags import parse, parse_args


@dataclass
class Config:
    """An environment configuration; the ``with_*`` methods update it in place."""

    client: Any = None
    kubeconfig: str = ""
    namespace: str = ""
    assessment_regex: re.Pattern | None = None
    feature_regex: re.Pattern | None = None
    labels: dict = field(default_factory=dict)
    skip_feature_regex: re.Pattern | None = None
    skip_labels: dict = field(default_factory=dict)
    skip_assessment_regex: re.Pattern | None = None
    parallel_tests: bool = False
    dry_run: bool = False
    fail_fast: bool = False
    disable_graceful_teardown: bool = False

    def with_kubeconfig_file(self, kubecfg: str) -> Config:
        self.kubeconfig = kubecfg
        return self

    def with_client(self, client: Any) -> Config:
        self.client = client
        return self

    def with_namespace(self, ns: str) -> Config:
        self.namespace = ns
        return self

    def with_random_namespace(self) -> Config:
        self.namespace = random_name("testns-", 32)
        return self

    def with_assessment_regex(self, regex: str) -> Config:
        self.assessment_regex = re.compile(regex)
        return self

    def with_skip_assessment_regex(self, regex: str) -> Config:
        self.skip_assessment_regex = re.compile(regex)
        return self

    def with_feature_regex(self, regex: str) -> Config:
        self.feature_regex = re.compile(regex)
        return self

    def with_skip_feature_regex(self, regex: str) -> Config:
        self.skip_feature_regex = re.compile(regex)
        return self

    def with_labels(self, lbls: Mapping[str, str]) -> Config:
        self.labels = dict(lbls)
        return self

    def with_skip_labels(self, lbls: Mapping[str, str]) -> Config:
        self.skip_labels = dict(lbls)
        return self

    def with_parallel_test_enabled(self) -> Config:
        self.parallel_tests = True
        return self

    def with_dry_run_mode(self) -> Config:
        self.dry_run = True
        return self

    def with_fail_fast(self) -> Config:
        self.fail_fast = True
        return self

    def with_disable_graceful_teardown(self) -> Config:
        self.disable_graceful_teardown = True
        return self


def new_with_kubeconfig(kubeconfig: str) -> Config:
    """Create a configuration that uses the given kubeconfig file."""
    return Config().with_kubeconfig_file(kubeconfig)


def new_from_flags(args: Sequence[str] | None = None) -> Config:
    """Create a configuration from command-line flags.

    With *args* omitted, the process's own arguments are parsed.
    """
    env = parse() if args is None else parse_args(args)
    return Config(
        kubeconfig=env.kubeconfig,
        namespace=env.namespace,
        assessment_regex=re.compile(env.assessment) if env.assessment else None,
        feature_regex=re.compile(env.feature) if env.feature else None,
        labels=dict(env.labels),
        skip_feature_regex=re.compile(env.skip_features) if env.skip_features else None,
        skip_labels=dict(env.skip_labels),
        skip_assessment_regex=(
            re.compile(env.skip_assessment) if env.skip_assessment else None
        ),
        parallel_tests=env.parallel,
        dry_run=env.dry_run,
        fail_fast=env.fail_fast,
        disable_graceful_teardown=env.disable_graceful_teardown,
    )


def random_name(prefix: str, n: int = 32) -> str:
    """Return a random name of length *n* that starts with *prefix*.

    A length of 0 means 32. A prefix at least *n* long is returned unchanged.
    """
    if n == 0:
        n = 32
    if len(prefix) >= n:
        return prefix
    return f"{prefix}-{secrets.token_hex(n)}"[:n]