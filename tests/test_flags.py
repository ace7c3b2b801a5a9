import sys

import pytest

from e2ekit.flags import EnvFlags, FlagsError, LabelsMap, parse, parse_args


def test_parse_all_flags():
    args = [
        "-assess", "volume test",
        "--feature", "beta",
        "--labels", "k0=v0, k1=v1, k2=v2",
        "--skip-labels", "k0=v0, k1=v1",
        "-skip-features", "networking",
        "-skip-assessment", "volume test",
        "-parallel",
        "--dry-run",
        "--disable-graceful-teardown",
    ]
    flags = parse_args(args)
    assert flags.feature == "beta"
    assert flags.assessment == "volume test"
    assert flags.labels == {"k0": "v0", "k1": "v1", "k2": "v2"}
    assert flags.skip_labels == {"k0": "v0", "k1": "v1"}
    assert flags.skip_features == "networking"
    assert flags.skip_assessment == "volume test"
    assert flags.parallel is True
    assert flags.dry_run is True
    assert flags.disable_graceful_teardown is True
    assert flags.fail_fast is False


def test_defaults_when_no_args():
    assert parse_args([]) == EnvFlags()


def test_equals_syntax_and_namespace():
    flags = parse_args(["--namespace=ns1", "-kubeconfig=/tmp/cfg"])
    assert flags.namespace == "ns1"
    assert flags.kubeconfig == "/tmp/cfg"


def test_bool_flag_explicit_values():
    assert parse_args(["-parallel=false"]).parallel is False
    assert parse_args(["-parallel=T"]).parallel is True


def test_bool_flag_invalid_value():
    with pytest.raises(FlagsError, match="invalid boolean value"):
        parse_args(["-dry-run=maybe"])


def test_parsing_stops_at_non_flag():
    flags = parse_args(["-feature", "x", "positional", "-parallel"])
    assert flags.feature == "x"
    assert flags.parallel is False


def test_double_dash_terminator():
    flags = parse_args(["--", "-parallel"])
    assert flags.parallel is False


def test_repeated_labels_merge():
    flags = parse_args(["-labels", "a=1", "-labels", "b=2"])
    assert flags.labels == {"a": "1", "b": "2"}


def test_unknown_flag():
    with pytest.raises(FlagsError, match="flag provided but not defined: -nope"):
        parse_args(["-nope"])


def test_missing_argument():
    with pytest.raises(FlagsError, match="flag needs an argument: -feature"):
        parse_args(["-feature"])


def test_bad_flag_syntax():
    with pytest.raises(FlagsError, match="bad flag syntax"):
        parse_args(["---feature", "x"])


def test_bad_label_format():
    with pytest.raises(FlagsError, match="label format error"):
        parse_args(["-labels", "a=1,b"])


def test_fail_fast_and_parallel_exclusive():
    with pytest.raises(FlagsError, match="mutually exclusive"):
        parse_args(["-fail-fast", "-parallel"])


def test_fail_fast_alone():
    assert parse_args(["-fail-fast"]).fail_fast is True


def test_labels_map_set_and_str():
    labels = LabelsMap()
    labels.set(" b = 2 ,a=1")
    assert labels == {"a": "1", "b": "2"}
    assert str(labels) == "map[a:1 b:2]"


def test_labels_map_set_error():
    with pytest.raises(ValueError, match="label format error: a=b=c"):
        LabelsMap().set("a=b=c")


def test_parse_reads_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "--feature", "gamma"])
    assert parse().feature == "gamma"