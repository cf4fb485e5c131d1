import pytest

from cfmtkit.flags import Flags, is_specifier


def parse(spec):
    flags = Flags()
    for pos, ch in enumerate(spec):
        if is_specifier(ch):
            break
        flags.update(spec, pos)
    return flags


def test_defaults():
    flags = Flags()
    assert (flags.minus, flags.plus, flags.space, flags.hash, flags.zero) == (
        False,
        False,
        False,
        False,
        False,
    )
    assert flags.width == 0
    assert flags.precision is None


def test_reset_restores_defaults():
    flags = Flags(minus=True, plus=True, space=True, hash=True, zero=True, width=7, precision=3)
    flags.reset()
    assert flags == Flags()


def test_minus_and_width():
    flags = parse("-5d")
    assert flags.minus is True
    assert flags.width == 5
    assert flags.zero is False


def test_zero_flag_before_width():
    flags = parse("05d")
    assert flags.zero is True
    assert flags.width == 5


def test_zero_inside_width_is_not_a_flag():
    flags = parse("10d")
    assert flags.width == 10
    assert flags.zero is False


def test_width_and_precision():
    flags = parse("5.3d")
    assert flags.width == 5
    assert flags.precision == 3


def test_bare_dot_gives_zero_precision():
    flags = parse(".d")
    assert flags.precision == 0
    assert flags.width == 0


def test_precision_digits_do_not_set_zero_or_width():
    flags = parse(".50d")
    assert flags.precision == 50
    assert flags.zero is False
    assert flags.width == 0


def test_second_precision_is_ignored():
    flags = parse("5.3.7d")
    assert flags.precision == 3
    assert flags.width == 5


def test_sign_space_hash():
    flags = parse("+ #x")
    assert flags.plus is True
    assert flags.space is True
    assert flags.hash is True
    assert flags.minus is False


def test_minus_then_zero():
    flags = parse("-08d")
    assert flags.minus is True
    assert flags.zero is True
    assert flags.width == 8


def test_dot_at_end_of_string():
    flags = Flags()
    flags.update("5.", 0)
    assert flags.width == 5
    assert flags.precision == 0


def test_update_past_end_raises():
    with pytest.raises(IndexError):
        Flags().update("5", 3)


@pytest.mark.parametrize("c", list("cspdiuxX%"))
def test_specifiers_recognised(c):
    assert is_specifier(c) is True


@pytest.mark.parametrize("c", ["o", "f", "-", "5", ".", "", "cs"])
def test_non_specifiers(c):
    assert is_specifier(c) is False