import datetime
import math
import time
from typing import Callable, Optional, Union

from . import utils
from .hotp import DEFAULT_LOOKAHEAD, DEFAULT_LOOKBEHIND, validate_hotp
from .otp import DEFAULT_LENGTH, OTP, generate

DEFAULT_STEP = 30

Clock = Callable[[], float]
Timestamp = Union[int, float, datetime.datetime]


def _seconds(for_time: Timestamp) -> float:
    if isinstance(for_time, datetime.datetime):
        # naive datetimes are taken as local time
        return for_time.timestamp()
    return for_time


def timecode(now: Timestamp, utar: Union[int, float] = 0, step: Union[int, float] = DEFAULT_STEP) -> int:
    """
    Number of whole ``step``-second intervals between ``utar`` and ``now``.

    Negative when ``now`` is before ``utar``.

    :param now: Unix time in seconds, or a datetime
    :param utar: reference Unix time the steps are counted from
    :param step: interval length in seconds
    """
    utils.check_step(step)
    return math.floor((_seconds(now) - utar) / step)


def totp(
    key: Union[bytes, str],
    utar: Union[int, float],
    step: Union[int, float] = DEFAULT_STEP,
    length: int = DEFAULT_LENGTH,
    clock: Clock = time.time,
) -> str:
    """
    RFC 6238 time-based one-time password for the current time.

    :param key: shared secret
    :param utar: Unix time at request, the time steps are counted from
    :param step: how many seconds each code lives
    :param length: number of characters in the code
    :param clock: returns the current Unix time; read once
    """
    return generate(utils.byte_key(key), timecode(clock(), utar, step), length)


def validate_totp(
    otp_value: str,
    key: Union[bytes, str],
    utar: Union[int, float],
    step: Union[int, float] = DEFAULT_STEP,
    lookahead: int = DEFAULT_LOOKAHEAD,
    lookbehind: int = DEFAULT_LOOKBEHIND,
    clock: Clock = time.time,
) -> bool:
    """
    Checks ``otp_value`` against the steps around the current time step.
    See ``validate_hotp`` for the window rules.
    """
    return validate_hotp(otp_value, key, timecode(clock(), utar, step), lookahead, lookbehind)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        key: Union[bytes, str],
        utar: Union[int, float] = 0,
        step: Union[int, float] = DEFAULT_STEP,
        length: int = DEFAULT_LENGTH,
        clock: Clock = time.time,
    ) -> None:
        """
        :param key: shared secret
        :param utar: time the steps are counted from, defaults to the Unix epoch
        :param step: the time interval in seconds for OTP. This defaults to 30.
        :param length: number of characters in the OTP
        :param clock: source of the current Unix time
        """
        self.utar = utar
        self.step = utils.check_step(step)
        self.clock = clock
        super().__init__(key=key, length=length)

    def timecode(self, for_time: Timestamp) -> int:
        return timecode(for_time, self.utar, self.step)

    def at(self, for_time: Timestamp) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock())

    def verify(
        self, otp: str, for_time: Optional[Timestamp] = None, lookahead: int = 0, lookbehind: int = 0
    ) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param lookahead: steps after the current one to accept
        :param lookbehind: steps before the current one to accept
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = self.clock()
        return validate_hotp(str(otp), self.key, self.timecode(for_time), lookahead, lookbehind)
