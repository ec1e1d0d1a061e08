from amm_adapters.core.adapters.BaseAdapter import BaseAdapter
from amm_adapters.core.adapters.errors import (
    AmmAdapterError,
    InvalidPoolError,
    PairMismatchError,
    UnsupportedOperationError,
)
from amm_adapters.core.adapters.models import CalldataPayload, LiquidityRequest

__all__ = [
    "AmmAdapterError",
    "BaseAdapter",
    "CalldataPayload",
    "InvalidPoolError",
    "LiquidityRequest",
    "PairMismatchError",
    "UnsupportedOperationError",
]
