"""Deterministic in-process settlement submitter for dry runs."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from trade_batch.errors import SubmissionFailure
from trade_batch.numeric import stable_hash
from trade_batch.types import (
    ConfirmationType,
    IndexedTradeLeg,
    SettlementResult,
    SettlementSubmitter,
    SubmitOptions,
)

logger = logging.getLogger(__name__)


def _validate_payload(accounts: Sequence[str], trade_args: Sequence[IndexedTradeLeg]) -> None:
    if not accounts:
        raise SubmissionFailure("Settlement requires at least one account.")
    if not trade_args:
        raise SubmissionFailure("Settlement requires at least one trade.")
    for account in accounts:
        if account != account.lower():
            raise SubmissionFailure(f"Account is not normalized: {account}")
    for previous, current in zip(accounts, accounts[1:]):
        if previous >= current:
            raise SubmissionFailure("Accounts must be unique and sorted ascending.")
    for position, trade in enumerate(trade_args):
        for index in (trade.maker_index, trade.taker_index):
            if index < 0 or index >= len(accounts):
                raise SubmissionFailure(f"Trade {position} references account index {index} out of range.")


class DeterministicSettlementSimulator(SettlementSubmitter):
    """Validates the settlement payload and returns a deterministic result."""

    def __init__(self) -> None:
        self.submission_count = 0

    async def submit(
        self,
        accounts: Sequence[str],
        trade_args: Sequence[IndexedTradeLeg],
        options: Optional[SubmitOptions],
    ) -> SettlementResult:
        _validate_payload(accounts, trade_args)

        confirmation = options.confirmation_type if options is not None else ConfirmationType.CONFIRMED
        tokens: list[object] = ["trade_settlement_v1", *accounts]
        for trade in trade_args:
            tokens.extend((trade.maker_index, trade.taker_index, trade.trader, trade.data))
        transaction_hash = "0x" + stable_hash(tokens)

        self.submission_count += 1
        logger.info(
            "Simulated settlement tx=%s accounts=%d trades=%d confirmation=%s",
            transaction_hash,
            len(accounts),
            len(trade_args),
            confirmation.value,
        )
        return SettlementResult(
            transaction_hash=transaction_hash,
            accounts=tuple(accounts),
            trade_args=tuple(trade_args),
            simulated=confirmation is ConfirmationType.SIMULATE,
        )
