"""Deterministic numeric and hashing primitives for trade payload encoding."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from hashlib import sha256
from typing import Any, Iterable

NUMERIC_18 = Decimal("0.000000000000000001")
FIXED_POINT_SCALE = 10**18
UINT256_MAX = 2**256 - 1
# Wide enough for uint256 values carrying 18 fractional digits.
UINT256_PRECISION = 100


def normalize_decimal(value: Decimal, scale: Decimal = NUMERIC_18) -> Decimal:
    """Quantize decimals to deterministic precision."""
    with localcontext() as ctx:
        ctx.prec = UINT256_PRECISION
        return value.quantize(scale, rounding=ROUND_HALF_EVEN)


def _as_decimal(value: Any, name: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        raise TypeError("Float values are not accepted; pass Decimal, int or str.")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"{name} is not a number: {value}") from exc


def _check_uint256(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > UINT256_MAX:
        raise ValueError(f"{name} exceeds uint256 range")
    return value


def to_base_units(value: Any, name: str = "amount") -> int:
    """Convert an integral base-unit amount to int, rejecting fractions."""
    amount = _as_decimal(value, name)
    if not amount.is_finite() or amount != int(amount):
        raise ValueError(f"{name} must be an integral number of base units, got {amount}")
    return _check_uint256(int(amount), name)


def to_fixed_point(value: Any, name: str = "value") -> int:
    """Convert a decimal to unsigned 18-decimal fixed point."""
    quantized = normalize_decimal(_as_decimal(value, name))
    with localcontext() as ctx:
        ctx.prec = UINT256_PRECISION
        scaled = int(quantized * FIXED_POINT_SCALE)
    return _check_uint256(scaled, name)


def normalize_token(value: Any) -> str:
    """Serialize primitive values deterministically for hashing."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return "0x" + value.hex()
    if isinstance(value, Decimal):
        return format(normalize_decimal(value), "f")
    return str(value)


def stable_hash(tokens: Iterable[Any]) -> str:
    """Compute a stable SHA256 hash over canonical token serialization."""
    preimage = "|".join(normalize_token(token) for token in tokens)
    return sha256(preimage.encode("utf-8")).hexdigest()
