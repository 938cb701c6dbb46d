"""Unit tests for the deterministic settlement simulator."""

from __future__ import annotations

import pytest

from trade_batch.errors import SubmissionFailure
from trade_batch.settlement_simulator import DeterministicSettlementSimulator
from trade_batch.types import ConfirmationType, IndexedTradeLeg, SubmitOptions

_TRADER = "0x" + "01" * 20
_ACCOUNTS = ("0x" + "aa" * 20, "0x" + "bb" * 20)
_TRADES = (IndexedTradeLeg(maker_index=0, taker_index=1, trader=_TRADER, data=b"\x01"),)


@pytest.mark.asyncio
async def test_simulator_hash_is_deterministic_and_counts_submissions() -> None:
    simulator = DeterministicSettlementSimulator()

    first = await simulator.submit(_ACCOUNTS, _TRADES, SubmitOptions())
    second = await simulator.submit(_ACCOUNTS, _TRADES, None)

    assert first.transaction_hash == second.transaction_hash
    assert first.transaction_hash.startswith("0x")
    assert len(first.transaction_hash) == 66
    assert first.accounts == _ACCOUNTS
    assert first.trade_args == _TRADES
    assert first.simulated is False
    assert simulator.submission_count == 2


@pytest.mark.asyncio
async def test_simulator_marks_simulated_results() -> None:
    simulator = DeterministicSettlementSimulator()
    result = await simulator.submit(
        _ACCOUNTS,
        _TRADES,
        SubmitOptions(confirmation_type=ConfirmationType.SIMULATE),
    )
    assert result.simulated is True


@pytest.mark.asyncio
async def test_simulator_hash_changes_with_payload() -> None:
    simulator = DeterministicSettlementSimulator()
    swapped = (IndexedTradeLeg(maker_index=1, taker_index=0, trader=_TRADER, data=b"\x01"),)

    base = await simulator.submit(_ACCOUNTS, _TRADES, None)
    other = await simulator.submit(_ACCOUNTS, swapped, None)
    assert base.transaction_hash != other.transaction_hash


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("accounts", "trades"),
    [
        ((), _TRADES),
        (_ACCOUNTS, ()),
        (tuple(reversed(_ACCOUNTS)), _TRADES),
        ((_ACCOUNTS[0], _ACCOUNTS[0]), _TRADES),
        (("0x" + "AA" * 20, _ACCOUNTS[1]), _TRADES),
        (_ACCOUNTS, (IndexedTradeLeg(maker_index=0, taker_index=2, trader=_TRADER, data=b""),)),
    ],
)
async def test_simulator_rejects_malformed_payloads(accounts: tuple, trades: tuple) -> None:
    simulator = DeterministicSettlementSimulator()
    with pytest.raises(SubmissionFailure):
        await simulator.submit(accounts, trades, None)
    assert simulator.submission_count == 0
