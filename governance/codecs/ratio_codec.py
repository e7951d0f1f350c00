from decimal import ROUND_HALF_UP, Decimal

from utils.exceptions import InvalidPrecisionError, InvalidRatioError

# Decimal digits of the on-chain ratio representation per plugin family
TOKEN_VOTING_RATIO_DIGITS = 18
ADDRESSLIST_VOTING_RATIO_DIGITS = 2


def _check_digits(digits: int) -> int:
    if not isinstance(digits, int) or isinstance(digits, bool) or digits <= 0:
        raise InvalidPrecisionError(digits)
    return digits


def encode_ratio(ratio: float, digits: int) -> int:
    """
    Scales a ratio in [0, 1] to the contract's fixed point integer,
    rounding half away from zero: encode_ratio(0.5, 2) == 50.
    """
    _check_digits(digits)
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not 0 <= ratio <= 1:
        raise InvalidRatioError(ratio)
    scaled = Decimal(str(ratio)) * (Decimal(10) ** digits)
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def decode_ratio(value: int, digits: int) -> float:
    """Inverse of encode_ratio with `digits` decimal digits of precision."""
    _check_digits(digits)
    return float(Decimal(int(value)) / (Decimal(10) ** digits))
