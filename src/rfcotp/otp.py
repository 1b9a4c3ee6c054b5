import hashlib
import hmac
from typing import Union

from . import utils
from .exceptions import InvalidDigestLength, InvalidParameter

DEFAULT_LENGTH = 6
DIGEST_SIZE = 20

# counters are written as 64-bit unsigned; negatives wrap as two's complement
COUNTER_MIN = -(2**63)
COUNTER_MAX = utils.COUNTER_MAX


def truncate(digest: bytes) -> int:
    """
    RFC 4226 dynamic truncation.

    The low nibble of the last byte picks an offset (0-15); the four bytes
    starting there are read big-endian with the top bit cleared, giving an
    integer in [0, 2**31 - 1].

    :param digest: a 20-byte HMAC-SHA1 digest
    :returns: the 31-bit dynamic binary code
    :raises InvalidDigestLength: if digest is not 20 bytes
    """
    if len(digest) != DIGEST_SIZE:
        raise InvalidDigestLength(len(digest))
    offset = digest[-1] & 0xF
    return (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    if i < COUNTER_MIN or i > COUNTER_MAX:
        raise InvalidParameter("counter {} does not fit in 8 bytes".format(i))
    return (i & COUNTER_MAX).to_bytes(padding, "big")


def generate(key: bytes, counter: int, length: int = DEFAULT_LENGTH) -> str:
    """
    Computes the OTP for raw key bytes and a counter.

    The decimal value is cut to its last ``length`` digits and zero-padded
    up to ``length``, so lengths above 10 are pure padding.
    """
    utils.check_length(length)
    hasher = hmac.new(key, int_to_bytestring(counter), hashlib.sha1)
    value = str(truncate(hasher.digest()))
    return value[-length:].rjust(length, "0")


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(self, key: Union[bytes, str], length: int = DEFAULT_LENGTH) -> None:
        self.key = utils.byte_key(key)
        self.length = utils.check_length(length)

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        return generate(self.key, input, self.length)

    def __repr__(self) -> str:
        # never show the key
        return "<{} length={}>".format(type(self).__name__, self.length)
