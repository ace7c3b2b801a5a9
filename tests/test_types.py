import pytest

from e2ekit.types import Level


def test_levels_follow_phase_order():
    assert [Level(value) for value in range(3)] == [
        Level.SETUP,
        Level.ASSESS,
        Level.TEARDOWN,
    ]


def test_setup_is_first_level():
    assert Level(0) is Level.SETUP


@pytest.mark.parametrize("level", list(Level))
def test_level_round_trips_through_int(level):
    assert Level(int(level)) is level


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        Level(len(Level))