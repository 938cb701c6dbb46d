"""Counterparty contract address table and environment-backed loader."""

from __future__ import annotations

from dataclasses import dataclass
import os

from eth_utils import is_address

from trade_batch.types import LegKind, normalize_address


class InvalidContractAddressError(ValueError):
    """Raised when a counterparty contract address is malformed."""

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"Invalid contract address for {field_name}: {value}")
        self.field_name = field_name
        self.value = value


def _validated(value: str, name: str) -> str:
    normalized = normalize_address(value.strip())
    if not is_address(normalized):
        raise InvalidContractAddressError(name, value)
    return normalized


@dataclass(frozen=True)
class ContractAddresses:
    """Fixed counterparty contract per leg kind."""

    orders: str
    liquidation: str
    deleveraging: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "orders", _validated(self.orders, "orders"))
        object.__setattr__(self, "liquidation", _validated(self.liquidation, "liquidation"))
        object.__setattr__(self, "deleveraging", _validated(self.deleveraging, "deleveraging"))

    def for_leg(self, kind: LegKind) -> str:
        if kind is LegKind.FILL:
            return self.orders
        if kind is LegKind.LIQUIDATE:
            return self.liquidation
        if kind is LegKind.DELEVERAGE:
            return self.deleveraging
        raise ValueError(f"Unsupported leg kind: {kind}")


_ENV_KEYS: dict[str, str] = {
    "orders": "TRADE_BATCH_ORDERS_ADDRESS",
    "liquidation": "TRADE_BATCH_LIQUIDATION_ADDRESS",
    "deleveraging": "TRADE_BATCH_DELEVERAGING_ADDRESS",
}


def _read_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def load_contract_addresses() -> ContractAddresses:
    """Load and validate the counterparty contract table from environment."""
    values = {field_name: _read_env(env_key) for field_name, env_key in _ENV_KEYS.items()}
    try:
        return ContractAddresses(**values)
    except InvalidContractAddressError as exc:
        env_key = _ENV_KEYS[exc.field_name]
        raise RuntimeError(f"Invalid address value for {env_key}: {exc.value}") from exc
