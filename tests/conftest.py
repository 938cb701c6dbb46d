"""Pytest fixtures shared across trade batch tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from trade_batch.contracts import ContractAddresses
from trade_batch.types import SignedOrder

ORDERS_ADDRESS = "0x" + "01" * 20
LIQUIDATION_ADDRESS = "0x" + "02" * 20
DELEVERAGING_ADDRESS = "0x" + "03" * 20

TYPED_SIGNATURE = "0x" + "11" * 32 + "22" * 32 + "1b" + "01"


@pytest.fixture
def contracts() -> ContractAddresses:
    """Counterparty contract table used by builder tests."""
    return ContractAddresses(
        orders=ORDERS_ADDRESS,
        liquidation=LIQUIDATION_ADDRESS,
        deleveraging=DELEVERAGING_ADDRESS,
    )


@pytest.fixture
def signed_order() -> SignedOrder:
    """Valid signed order with mixed-case maker/taker addresses."""
    return SignedOrder(
        is_buy=True,
        is_decrease_only=False,
        amount=Decimal("1000"),
        limit_price=Decimal("1.5"),
        trigger_price=Decimal("0"),
        limit_fee=Decimal("-0.001"),
        maker="0x" + "AA" * 20,
        taker="0x" + "BB" * 20,
        expiration=1_900_000_000,
        salt=7,
        typed_signature=TYPED_SIGNATURE,
    )
