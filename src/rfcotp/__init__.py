from .exceptions import InvalidDigestLength as InvalidDigestLength
from .exceptions import InvalidParameter as InvalidParameter
from .exceptions import OTPError as OTPError
from .hotp import DEFAULT_LOOKAHEAD as DEFAULT_LOOKAHEAD
from .hotp import DEFAULT_LOOKBEHIND as DEFAULT_LOOKBEHIND
from .hotp import HOTP as HOTP
from .hotp import hotp as hotp
from .hotp import validate_hotp as validate_hotp
from .otp import DEFAULT_LENGTH as DEFAULT_LENGTH
from .otp import OTP as OTP
from .otp import truncate as truncate
from .totp import DEFAULT_STEP as DEFAULT_STEP
from .totp import TOTP as TOTP
from .totp import timecode as timecode
from .totp import totp as totp
from .totp import validate_totp as validate_totp
