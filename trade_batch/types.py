"""Trade leg, order and settlement contracts for batch trade construction."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence


def normalize_address(value: str) -> str:
    """Case-normalize an account address."""
    return value.lower()


class LegKind(Enum):
    FILL = "FILL"
    LIQUIDATE = "LIQUIDATE"
    DELEVERAGE = "DELEVERAGE"


class ConfirmationType(Enum):
    """How far a submitter waits before returning its result."""

    HASH = "HASH"
    CONFIRMED = "CONFIRMED"
    BOTH = "BOTH"
    SIMULATE = "SIMULATE"


@dataclass(frozen=True)
class SubmitOptions:
    """Settlement submission options; only confirmation_type is read by the builder."""

    confirmation_type: ConfirmationType = ConfirmationType.CONFIRMED
    sender: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    nonce: Optional[int] = None

    @property
    def is_simulation(self) -> bool:
        return self.confirmation_type is ConfirmationType.SIMULATE


@dataclass(frozen=True)
class SignedOrder:
    """Signed maker order as accepted by the orders contract."""

    is_buy: bool
    is_decrease_only: bool
    amount: Decimal
    limit_price: Decimal
    trigger_price: Decimal
    limit_fee: Decimal
    maker: str
    taker: str
    expiration: int
    salt: int
    typed_signature: str


@dataclass(frozen=True)
class TradeLeg:
    """One accumulated leg prior to account indexing."""

    maker: str
    taker: str
    trader: str
    data: bytes


@dataclass(frozen=True)
class IndexedTradeLeg:
    """Trade leg with maker/taker resolved to canonical account positions."""

    maker_index: int
    taker_index: int
    trader: str
    data: bytes


@dataclass(frozen=True)
class SettlementResult:
    """Result payload returned by the deterministic settlement simulator."""

    transaction_hash: str
    accounts: tuple[str, ...]
    trade_args: tuple[IndexedTradeLeg, ...]
    simulated: bool


FillEncoder = Callable[[SignedOrder, Decimal, Decimal, Decimal], bytes]
AmountEncoder = Callable[[Decimal, bool], bytes]


class SettlementSubmitter(Protocol):
    """Protocol for submitting one multi-party trade settlement."""

    async def submit(
        self,
        accounts: Sequence[str],
        trade_args: Sequence[IndexedTradeLeg],
        options: Optional[SubmitOptions],
    ) -> Any:
        """Submit the settlement and return the submitter-specific result."""
