import math
from hmac import compare_digest
from typing import List, Union

from .exceptions import InvalidParameter

COUNTER_MAX = 2**64 - 1


def byte_key(key: Union[bytes, bytearray, str]) -> bytes:
    """
    Returns the shared secret as bytes. Text keys are taken as UTF-8, which
    is what the RFC 4226 reference secret "12345678901234567890" is.
    """
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise InvalidParameter("key must be bytes or str, not {}".format(type(key).__name__))


def check_length(length: int) -> int:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidParameter("length must be a positive integer, got {!r}".format(length))
    return length


def check_step(step: Union[int, float]) -> Union[int, float]:
    if isinstance(step, bool) or not isinstance(step, (int, float)) or not math.isfinite(step) or step <= 0:
        raise InvalidParameter("step must be a positive number of seconds, got {!r}".format(step))
    return step


def check_window(lookahead: int, lookbehind: int) -> None:
    for name, value in (("lookahead", lookahead), ("lookbehind", lookbehind)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidParameter("{} must be a non-negative integer, got {!r}".format(name, value))


def lookaround(counter: int, lookahead: int, lookbehind: int) -> List[int]:
    """
    Builds the ordered list of counters a validator tries.

    The expected counter comes first, then the ones behind it nearest first,
    then the ones ahead of it nearest first. Counters behind zero or past
    the 64-bit range are never tried.

    :param counter: the counter the validator expects
    :param lookahead: how many counters after ``counter`` to accept
    :param lookbehind: how many counters before ``counter`` to accept
    :returns: candidate counters
    """
    check_window(lookahead, lookbehind)
    candidates = [counter]
    candidates.extend(counter - i for i in range(1, lookbehind + 1) if counter - i >= 0)
    candidates.extend(counter + i for i in range(1, lookahead + 1) if counter + i <= COUNTER_MAX)
    return candidates


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.

    No unicode normalization is applied: "４８２１９３" does not equal "482193".
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
