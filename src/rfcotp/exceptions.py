class OTPError(ValueError):
    """
    Base class for errors raised by rfcotp.
    """


class InvalidDigestLength(OTPError):
    """
    The HMAC digest handed to dynamic truncation is not 20 bytes long.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__("digest must be exactly 20 bytes, got {}".format(length))


class InvalidParameter(OTPError):
    """
    An argument is outside the range the algorithms accept, e.g. a zero
    length or a zero step.
    """
