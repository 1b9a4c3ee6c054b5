import logging
import sys
from typing import List

import pytest

from rfcotp import HOTP, InvalidParameter, hotp, validate_hotp
from rfcotp.utils import lookaround

hotp_module = sys.modules["rfcotp.hotp"]

KEY = b"12345678901234567890"

# RFC 4226 appendix D
RFC_CODES = ["755224", "287082", "359152", "969429", "338314", "254676", "287922", "162583", "399871", "520489"]


@pytest.mark.parametrize("counter, expected", list(enumerate(RFC_CODES)))
def test_rfc4226_vectors(counter: int, expected: str) -> None:
    assert hotp(KEY, counter) == expected


def test_text_key_is_utf8() -> None:
    assert hotp("12345678901234567890", 1) == "287082"


def test_defaults() -> None:
    assert hotp(KEY) == "755224"


@pytest.mark.parametrize("length", range(1, 11))
def test_length_invariant(length: int) -> None:
    for counter in range(10):
        code = hotp(KEY, counter, length)
        assert len(code) == length
        assert code == hotp(KEY, counter, length)


@pytest.mark.parametrize(
    "counter, length, expected",
    [
        # truncated value 82162583 has eight digits
        (7, 10, "0082162583"),
        (7, 8, "82162583"),
        (2, 10, "0137359152"),
        (0, 12, "001284755224"),
    ],
)
def test_zero_padding(counter: int, length: int, expected: str) -> None:
    assert hotp(KEY, counter, length) == expected


def test_negative_counter_wraps() -> None:
    assert hotp(KEY, -1) == hotp(KEY, 2**64 - 1)


@pytest.mark.parametrize("length", [0, -6])
def test_bad_length(length: int) -> None:
    with pytest.raises(InvalidParameter):
        hotp(KEY, 0, length)


@pytest.mark.parametrize("counter", range(10))
def test_validate_own_code(counter: int) -> None:
    assert validate_hotp(hotp(KEY, counter), KEY, counter, 5, 1)


def test_validate_exact_window() -> None:
    assert validate_hotp("338314", KEY, 4, 0, 0)
    assert not validate_hotp("254676", KEY, 4, 0, 0)
    assert not validate_hotp("969429", KEY, 4, 0, 0)


def test_validate_lookahead() -> None:
    assert validate_hotp(RFC_CODES[9], KEY, 4, 5, 1)
    assert not validate_hotp(RFC_CODES[9], KEY, 3, 5, 1)


def test_validate_lookbehind() -> None:
    assert not validate_hotp(RFC_CODES[2], KEY, 4, 5, 1)
    assert validate_hotp(RFC_CODES[2], KEY, 4, 5, 2)
    assert validate_hotp(RFC_CODES[3], KEY, 4)


def test_validate_uses_code_length() -> None:
    assert validate_hotp("82162583", KEY, 7, 0, 0)
    assert validate_hotp("2583", KEY, 7, 0, 0)
    assert not validate_hotp("0162583", KEY, 7, 0, 0)


def test_mismatch() -> None:
    assert not validate_hotp("000000", KEY, 0, 5, 1)


def test_empty_code() -> None:
    with pytest.raises(InvalidParameter):
        validate_hotp("", KEY, 0)


@pytest.mark.parametrize("lookahead, lookbehind", [(-1, 1), (5, -1), (1.5, 1)])
def test_bad_window(lookahead, lookbehind) -> None:
    with pytest.raises(InvalidParameter):
        validate_hotp("755224", KEY, 0, lookahead, lookbehind)


def test_lookaround_order() -> None:
    assert lookaround(10, 3, 2) == [10, 9, 8, 11, 12, 13]
    assert lookaround(10, 0, 0) == [10]


def test_lookaround_skips_negative_counters() -> None:
    assert lookaround(0, 0, 3) == [0]
    assert lookaround(1, 1, 3) == [1, 0, 2]


def test_validate_never_tries_negative_counters(monkeypatch: pytest.MonkeyPatch) -> None:
    tried: List[int] = []
    real = hotp_module.generate

    def spy(key: bytes, counter: int, length: int) -> str:
        tried.append(counter)
        return real(key, counter, length)

    monkeypatch.setattr(hotp_module, "generate", spy)
    assert not validate_hotp("000000", KEY, 0, 2, 3)
    assert tried == [0, 1, 2]


def test_validate_logs_without_secrets(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rfcotp.hotp"):
        assert validate_hotp(RFC_CODES[5], KEY, 4)
        assert not validate_hotp("000000", KEY, 4)
    assert "drift +1" in caplog.text
    assert "12345678901234567890" not in caplog.text
    assert RFC_CODES[5] not in caplog.text


def test_hotp_handler() -> None:
    handler = HOTP(KEY, initial_count=2)
    assert handler.at(0) == RFC_CODES[2]
    assert handler.at(3) == RFC_CODES[5]
    assert handler.verify(RFC_CODES[5], 3)
    assert not handler.verify(RFC_CODES[6], 3)
    assert handler.verify(RFC_CODES[6], 3, lookahead=1)


def test_hotp_handler_length() -> None:
    assert HOTP(KEY, length=8).at(7) == "82162583"


def test_package_exports_functions() -> None:
    import rfcotp

    assert rfcotp.hotp is hotp_module.hotp
    assert rfcotp.validate_hotp is hotp_module.validate_hotp


def test_lookaround_stops_at_counter_max() -> None:
    top = 2**64 - 1
    assert lookaround(top, 5, 1) == [top, top - 1]
    assert lookaround(top - 2, 5, 0) == [top - 2, top - 1, top]


def test_validate_at_counter_max() -> None:
    top = 2**64 - 1
    assert validate_hotp("000000", KEY, top) is False
    assert validate_hotp(hotp(KEY, top), KEY, top - 3, 5, 0) is True
    assert validate_hotp(hotp(KEY, top - 1), KEY, top, 0, 1) is True
