"""Stateful builder composing trade legs into one atomic settlement call."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Any, Optional, Sequence

from trade_batch.contracts import ContractAddresses
from trade_batch.errors import (
    AlreadyCommittedError,
    EmptyBatchError,
    SubmissionOutcomeUnknownError,
)
from trade_batch.trade_data import (
    fill_to_trade_data,
    make_deleverage_trade_data,
    make_liquidate_trade_data,
)
from trade_batch.types import (
    AmountEncoder,
    FillEncoder,
    IndexedTradeLeg,
    LegKind,
    SettlementSubmitter,
    SignedOrder,
    SubmitOptions,
    TradeLeg,
    normalize_address,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegEncoders:
    """Per-leg-kind trade data encoders."""

    fill: FillEncoder = fill_to_trade_data
    liquidate: AmountEncoder = make_liquidate_trade_data
    deleverage: AmountEncoder = make_deleverage_trade_data


@dataclass(frozen=True)
class TradeOperationSnapshot:
    """Read-only view of builder state."""

    legs: tuple[TradeLeg, ...]
    committed: bool


def canonical_accounts(legs: Sequence[TradeLeg]) -> tuple[str, ...]:
    """Return distinct maker/taker addresses sorted ascending."""
    accounts: set[str] = set()
    for leg in legs:
        accounts.add(leg.maker)
        accounts.add(leg.taker)
    return tuple(sorted(accounts))


def index_trade_legs(
    legs: Sequence[TradeLeg],
    accounts: tuple[str, ...],
) -> tuple[IndexedTradeLeg, ...]:
    """Resolve maker/taker to positions in ``accounts``, keeping append order."""
    positions = {account: idx for idx, account in enumerate(accounts)}
    return tuple(
        IndexedTradeLeg(
            maker_index=positions[leg.maker],
            taker_index=positions[leg.taker],
            trader=leg.trader,
            data=leg.data,
        )
        for leg in legs
    )


class TradeOperation:
    """Accumulates trade legs and commits them once as a single settlement.

    Append methods return the builder so legs can be chained. ``commit`` locks
    the builder before submitting when real (non-simulated) options are given,
    and releases the lock again if submission fails with a known-unapplied
    outcome.
    """

    def __init__(
        self,
        contracts: ContractAddresses,
        submitter: SettlementSubmitter,
        encoders: Optional[LegEncoders] = None,
    ) -> None:
        self._contracts = contracts
        self._submitter = submitter
        self._encoders = encoders or LegEncoders()

        self._legs: list[TradeLeg] = []
        self._committed = False

    @property
    def committed(self) -> bool:
        return self._committed

    def snapshot(self) -> TradeOperationSnapshot:
        return TradeOperationSnapshot(legs=tuple(self._legs), committed=self._committed)

    # Append operations

    def fill_signed_order(
        self,
        order: SignedOrder,
        amount: Decimal,
        price: Decimal,
        fee: Decimal,
    ) -> "TradeOperation":
        self._ensure_open()
        data = self._encoders.fill(order, amount, price, fee)
        self._add_leg(order.maker, order.taker, LegKind.FILL, data)
        return self

    def liquidate(
        self,
        maker: str,
        taker: str,
        amount: Decimal,
        all_or_nothing: bool = False,
    ) -> "TradeOperation":
        self._ensure_open()
        data = self._encoders.liquidate(amount, all_or_nothing)
        self._add_leg(maker, taker, LegKind.LIQUIDATE, data)
        return self

    def deleverage(
        self,
        maker: str,
        taker: str,
        amount: Decimal,
        all_or_nothing: bool = False,
    ) -> "TradeOperation":
        self._ensure_open()
        data = self._encoders.deleverage(amount, all_or_nothing)
        self._add_leg(maker, taker, LegKind.DELEVERAGE, data)
        return self

    # Commit

    async def commit(self, options: Optional[SubmitOptions] = None) -> Any:
        """Submit all accumulated legs as one settlement call."""
        self._ensure_open()
        if not self._legs:
            raise EmptyBatchError()

        # Lock before the first await so a second commit fails fast.
        locked = options is not None and not options.is_simulation
        if locked:
            self._committed = True

        accounts = canonical_accounts(self._legs)
        trade_args = index_trade_legs(self._legs, accounts)
        logger.info(
            "Committing trade operation legs=%d accounts=%d simulate=%s",
            len(trade_args),
            len(accounts),
            options.is_simulation if options is not None else None,
        )

        try:
            result = await self._submitter.submit(accounts, trade_args, options)
        except SubmissionOutcomeUnknownError:
            if locked:
                logger.error("Settlement outcome unknown; keeping trade operation locked.")
            raise
        except Exception:
            if locked:
                logger.warning("Settlement submission failed; releasing trade operation lock.")
                self._committed = False
            raise

        logger.info("Trade operation submitted legs=%d locked=%s", len(trade_args), self._committed)
        return result

    # Helpers

    def _ensure_open(self) -> None:
        if self._committed:
            raise AlreadyCommittedError()

    def _add_leg(self, maker: str, taker: str, kind: LegKind, data: bytes) -> None:
        leg = TradeLeg(
            maker=normalize_address(maker),
            taker=normalize_address(taker),
            trader=self._contracts.for_leg(kind),
            data=data,
        )
        self._legs.append(leg)
        logger.debug("Appended %s leg maker=%s taker=%s", kind.value, leg.maker, leg.taker)
