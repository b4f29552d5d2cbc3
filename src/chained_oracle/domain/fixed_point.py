from __future__ import annotations

UINT256_MAX = 2**256 - 1

# Fixed-point precision of every price this package produces.
PRICE_SCALE_DECIMALS = 36


class FixedPointOverflowError(ArithmeticError):
    """Result does not fit in an unsigned 256-bit integer."""


def require_uint256(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
    if value > UINT256_MAX:
        msg = f"{name} does not fit in uint256: {value}"
        raise FixedPointOverflowError(msg)
    return value


def mul_div(x: int, y: int, denominator: int) -> int:
    """Return ``x * y / denominator`` computed as one fused operation.

    The intermediate product is kept at full precision, so it may exceed
    uint256 as long as the quotient fits. Rounds towards zero.

    Raises:
        ZeroDivisionError: if ``denominator`` is zero.
        FixedPointOverflowError: if an operand or the result exceeds uint256.
    """
    require_uint256(x, "x")
    require_uint256(y, "y")
    require_uint256(denominator, "denominator")
    if denominator == 0:
        raise ZeroDivisionError("mul_div denominator is zero")

    quotient = (x * y) // denominator
    if quotient > UINT256_MAX:
        msg = f"mul_div result does not fit in uint256: {quotient}"
        raise FixedPointOverflowError(msg)
    return quotient


def checked_mul(*factors: int) -> int:
    """Multiply uint256 factors, failing as soon as the running product overflows."""
    product = 1
    for idx, factor in enumerate(factors):
        product *= require_uint256(factor, f"factor[{idx}]")
        if product > UINT256_MAX:
            msg = f"product overflows uint256 at factor[{idx}]"
            raise FixedPointOverflowError(msg)
    return product


def pow10(exponent: int) -> int:
    if exponent < 0:
        msg = f"exponent must be >= 0, got {exponent}"
        raise ValueError(msg)
    value = 10**exponent
    if value > UINT256_MAX:
        msg = f"10**{exponent} does not fit in uint256"
        raise FixedPointOverflowError(msg)
    return value


__all__ = [
    "FixedPointOverflowError",
    "PRICE_SCALE_DECIMALS",
    "UINT256_MAX",
    "checked_mul",
    "mul_div",
    "pow10",
    "require_uint256",
]
