"""ABI encoders producing the opaque per-leg trade data blobs."""

from __future__ import annotations

from decimal import Decimal
import logging

from eth_abi import encode
from eth_utils import decode_hex, is_address

from trade_batch.numeric import UINT256_MAX, to_base_units, to_fixed_point
from trade_batch.types import SignedOrder

logger = logging.getLogger(__name__)

IS_BUY_FLAG = 1
IS_DECREASE_ONLY_FLAG = 2
IS_NEGATIVE_LIMIT_FEE_FLAG = 4

ORDER_TYPE = "(bytes32,uint256,uint256,uint256,uint256,address,address,uint256)"
FILL_TYPE = "(uint256,uint256,uint256,bool)"
SIGNATURE_TYPE = "(bytes32,bytes32,bytes2)"
TYPED_SIGNATURE_BYTES = 66


def _amount_trade_data(amount: Decimal, all_or_nothing: bool) -> bytes:
    return encode(["uint256", "bool"], [to_base_units(amount), bool(all_or_nothing)])


def make_liquidate_trade_data(amount: Decimal, all_or_nothing: bool) -> bytes:
    """Encode liquidation trade data as (uint256 amount, bool allOrNothing)."""
    return _amount_trade_data(amount, all_or_nothing)


def make_deleverage_trade_data(amount: Decimal, all_or_nothing: bool) -> bytes:
    """Encode deleverage trade data as (uint256 amount, bool allOrNothing)."""
    return _amount_trade_data(amount, all_or_nothing)


def order_flags(order: SignedOrder) -> bytes:
    """Pack salt and boolean order flags into a bytes32 word.

    The salt occupies the high 252 bits and the low nibble carries
    ``isBuy``, ``isDecreaseOnly`` and ``isNegativeLimitFee``.
    """
    if order.salt < 0:
        raise ValueError("Order salt must be non-negative.")
    boolean_flags = 0
    if order.is_buy:
        boolean_flags |= IS_BUY_FLAG
    if order.is_decrease_only:
        boolean_flags |= IS_DECREASE_ONLY_FLAG
    if order.limit_fee < 0:
        boolean_flags |= IS_NEGATIVE_LIMIT_FEE_FLAG
    word = ((order.salt << 4) | boolean_flags) & UINT256_MAX
    return word.to_bytes(32, "big")


def _abi_address(value: str, name: str) -> str:
    if not is_address(value.lower()):
        raise ValueError(f"Order {name} is not a valid address: {value}")
    return value.lower()


def split_typed_signature(typed_signature: str) -> tuple[bytes, bytes, bytes]:
    raw = decode_hex(typed_signature)
    if len(raw) != TYPED_SIGNATURE_BYTES:
        raise ValueError(
            f"Typed signature must be {TYPED_SIGNATURE_BYTES} bytes, got {len(raw)}"
        )
    return raw[:32], raw[32:64], raw[64:66]


def order_to_solidity(order: SignedOrder) -> tuple:
    return (
        order_flags(order),
        to_base_units(order.amount, "order amount"),
        to_fixed_point(order.limit_price, "limit price"),
        to_fixed_point(order.trigger_price, "trigger price"),
        to_fixed_point(abs(order.limit_fee), "limit fee"),
        _abi_address(order.maker, "maker"),
        _abi_address(order.taker, "taker"),
        order.expiration,
    )


def fill_to_trade_data(
    order: SignedOrder,
    amount: Decimal,
    price: Decimal,
    fee: Decimal,
) -> bytes:
    """Encode an order fill as (Order, Fill, TypedSignature)."""
    fill = (
        to_base_units(amount, "fill amount"),
        to_fixed_point(price, "fill price"),
        to_fixed_point(abs(fee), "fill fee"),
        fee < 0,
    )
    data = encode(
        [ORDER_TYPE, FILL_TYPE, SIGNATURE_TYPE],
        [order_to_solidity(order), fill, split_typed_signature(order.typed_signature)],
    )
    logger.debug("Encoded fill trade data maker=%s bytes=%d", order.maker, len(data))
    return data
