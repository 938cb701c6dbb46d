"""Batch trade construction and atomic multi-party settlement package."""

from trade_batch.contracts import ContractAddresses, load_contract_addresses
from trade_batch.errors import (
    AlreadyCommittedError,
    EmptyBatchError,
    SubmissionFailure,
    SubmissionOutcomeUnknownError,
    TradeOperationError,
)
from trade_batch.settlement_simulator import DeterministicSettlementSimulator
from trade_batch.trade_data import (
    fill_to_trade_data,
    make_deleverage_trade_data,
    make_liquidate_trade_data,
)
from trade_batch.trade_operation import LegEncoders, TradeOperation, TradeOperationSnapshot
from trade_batch.types import (
    ConfirmationType,
    IndexedTradeLeg,
    LegKind,
    SettlementResult,
    SettlementSubmitter,
    SignedOrder,
    SubmitOptions,
    TradeLeg,
)

__all__ = [
    "AlreadyCommittedError",
    "ConfirmationType",
    "ContractAddresses",
    "DeterministicSettlementSimulator",
    "EmptyBatchError",
    "IndexedTradeLeg",
    "LegEncoders",
    "LegKind",
    "SettlementResult",
    "SettlementSubmitter",
    "SignedOrder",
    "SubmissionFailure",
    "SubmissionOutcomeUnknownError",
    "SubmitOptions",
    "TradeLeg",
    "TradeOperation",
    "TradeOperationError",
    "TradeOperationSnapshot",
    "fill_to_trade_data",
    "load_contract_addresses",
    "make_deleverage_trade_data",
    "make_liquidate_trade_data",
]
