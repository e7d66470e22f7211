"""Request dispatch and response normalization core."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "API_BASE",
    "APIError",
    "CandleQuery",
    "ClientConfig",
    "Credentials",
    "CredentialsRequiredError",
    "CurrencyNotFoundError",
    "HitBtcError",
    "OrderRequest",
    "RawResponse",
    "RequestExecutor",
    "ResponseFormatError",
    "ResponseShape",
    "TradeQuery",
    "TransactionQuery",
    "TransportError",
    "classify",
    "normalize",
]

_lazy_targets = {
    "API_BASE": ("config", "API_BASE"),
    "ClientConfig": ("config", "ClientConfig"),
    "Credentials": ("config", "Credentials"),
    "APIError": ("errors", "APIError"),
    "CredentialsRequiredError": ("errors", "CredentialsRequiredError"),
    "CurrencyNotFoundError": ("errors", "CurrencyNotFoundError"),
    "HitBtcError": ("errors", "HitBtcError"),
    "ResponseFormatError": ("errors", "ResponseFormatError"),
    "TransportError": ("errors", "TransportError"),
    "ResponseShape": ("normalizer", "ResponseShape"),
    "classify": ("normalizer", "classify"),
    "normalize": ("normalizer", "normalize"),
    "CandleQuery": ("params", "CandleQuery"),
    "OrderRequest": ("params", "OrderRequest"),
    "TradeQuery": ("params", "TradeQuery"),
    "TransactionQuery": ("params", "TransactionQuery"),
    "RawResponse": ("transport", "RawResponse"),
    "RequestExecutor": ("transport", "RequestExecutor"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:
        raise AttributeError(f"module 'hitbtc_client.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
