__version__ = "0.1.0"

from amm_adapters.adapters.uniswap_amm_adapter.adapter import UniswapAmmAdapter
from amm_adapters.core import (
    AmmAdapterError,
    BaseAdapter,
    CalldataPayload,
    InvalidPoolError,
    LiquidityRequest,
    PairMismatchError,
    UnsupportedOperationError,
)

__all__ = [
    "__version__",
    "AmmAdapterError",
    "BaseAdapter",
    "CalldataPayload",
    "InvalidPoolError",
    "LiquidityRequest",
    "PairMismatchError",
    "UniswapAmmAdapter",
    "UnsupportedOperationError",
]
