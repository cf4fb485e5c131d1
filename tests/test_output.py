import io

import pytest

from cfmtkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_code():
    buf = io.StringIO()
    put_char(ord("Q"), buf)
    assert buf.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(" world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_only_newline():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == "\n"


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 10, -1, 2147483647, -305])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_str("out")
    put_nbr(5)
    assert capsys.readouterr().out == "out5"