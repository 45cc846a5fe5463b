import io

import pytest

from fmtkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def buf():
    return io.StringIO()


def test_putchar_string(buf):
    putchar_fd("a", buf)
    assert buf.getvalue() == "a"


def test_putchar_code(buf):
    putchar_fd(65, buf)
    assert buf.getvalue() == chr(65)


def test_putchar_rejects_long_string(buf):
    with pytest.raises(ValueError):
        putchar_fd("ab", buf)


def test_putstr(buf):
    putstr_fd("Hello", buf)
    putstr_fd(" there", buf)
    assert buf.getvalue() == "Hello" + " there"


def test_putstr_none_writes_nothing(buf):
    putstr_fd(None, buf)
    assert buf.getvalue() == ""


def test_putendl(buf):
    putendl_fd("Hello", buf)
    assert buf.getvalue() == "Hello\n"


def test_putendl_none_writes_newline(buf):
    putendl_fd(None, buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, -1526, 2147483647, -2147483648])
def test_putnbr(buf, n):
    putnbr_fd(n, buf)
    assert buf.getvalue() == str(n)


def test_putnbr_wraps_to_32_bits(buf):
    putnbr_fd(2**31, buf)
    assert buf.getvalue() == str(-(2**31))


def test_putnbr_round_trip(buf):
    putnbr_fd(-98765, buf)
    assert int(buf.getvalue()) == -98765