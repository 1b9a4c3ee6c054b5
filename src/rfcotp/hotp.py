import logging
from typing import Union

from . import utils
from .otp import DEFAULT_LENGTH, OTP, generate

log = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 5
DEFAULT_LOOKBEHIND = 1


def hotp(key: Union[bytes, str], counter: int = 0, length: int = DEFAULT_LENGTH) -> str:
    """
    RFC 4226 HMAC-based one-time password.

    :param key: shared secret
    :param counter: the moving factor, 0 <= counter < 2**64
    :param length: number of characters in the code
    :returns: zero-padded decimal code of exactly ``length`` characters
    """
    return generate(utils.byte_key(key), counter, length)


def validate_hotp(
    otp_value: str,
    key: Union[bytes, str],
    counter: int,
    lookahead: int = DEFAULT_LOOKAHEAD,
    lookbehind: int = DEFAULT_LOOKBEHIND,
) -> bool:
    """
    Checks ``otp_value`` against every counter in the window around
    ``counter``. The code length to generate is taken from ``otp_value``.

    :param otp_value: the code to check
    :param key: shared secret
    :param counter: the counter the validator expects
    :param lookahead: counters after ``counter`` to accept
    :param lookbehind: counters before ``counter`` to accept, never below 0
    :returns: True if any counter in the window produces ``otp_value``
    """
    key = utils.byte_key(key)
    length = len(otp_value)
    for candidate in utils.lookaround(counter, lookahead, lookbehind):
        if utils.strings_equal(otp_value, generate(key, candidate, length)):
            log.debug("OTP matched at counter drift %+d", candidate - counter)
            return True
    log.debug("OTP did not match any of counters %d-%d..%d+%d", counter, lookbehind, counter, lookahead)
    return False


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(self, key: Union[bytes, str], length: int = DEFAULT_LENGTH, initial_count: int = 0) -> None:
        """
        :param key: shared secret
        :param length: number of characters in the OTP
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(key=key, length=length)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int, lookahead: int = 0, lookbehind: int = 0) -> bool:
        """
        Verifies the OTP passed in against the OTP for ``counter``.

        By default only the exact counter is accepted; widen the window with
        ``lookahead``/``lookbehind`` to tolerate drift.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return validate_hotp(str(otp), self.key, self.initial_count + counter, lookahead, lookbehind)
