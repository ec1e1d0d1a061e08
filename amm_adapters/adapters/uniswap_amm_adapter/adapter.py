from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address

from amm_adapters.adapters.uniswap_amm_adapter.registry import (
    PoolRegistry,
    UniswapV2PoolRegistry,
)
from amm_adapters.adapters.uniswap_amm_adapter.router import (
    LiquidityRouter,
    UniswapV2LiquidityRouter,
)
from amm_adapters.core.adapters.BaseAdapter import BaseAdapter
from amm_adapters.core.adapters.errors import (
    InvalidPoolError,
    PairMismatchError,
    UnsupportedOperationError,
)
from amm_adapters.core.adapters.models import CalldataPayload, LiquidityRequest
from amm_adapters.core.config import get_adapter_config
from amm_adapters.core.constants.chains import CHAIN_ID_ETHEREUM
from amm_adapters.core.constants.contracts import UNISWAP_V2_FACTORY, UNISWAP_V2_ROUTER


class UniswapAmmAdapter(BaseAdapter):
    """Builds Router02 add/remove liquidity calldata for validated V2 pairs.

    Nothing is signed or sent. Callers submit ``CalldataPayload.to_transaction``
    through their own wallet.
    """

    adapter_type = "UNISWAP_AMM"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        *,
        pool_registry: PoolRegistry | None = None,
        router: LiquidityRouter | None = None,
    ) -> None:
        if config is None:
            config = get_adapter_config("uniswap_amm_adapter")
        super().__init__("uniswap_amm_adapter", config)
        cfg = self.config
        self.chain_id: int = int(cfg.get("chain_id", CHAIN_ID_ETHEREUM))

        router_address = cfg.get("router_address") or UNISWAP_V2_ROUTER.get(
            self.chain_id
        )
        factory_address = cfg.get("factory_address") or UNISWAP_V2_FACTORY.get(
            self.chain_id
        )
        if router is None and not router_address:
            raise ValueError(
                f"Unsupported chain_id {self.chain_id} for Uniswap V2. "
                f"Supported: {sorted(UNISWAP_V2_ROUTER)}"
            )
        if pool_registry is None and not factory_address:
            raise ValueError(
                f"Unsupported chain_id {self.chain_id} for Uniswap V2. "
                f"Supported: {sorted(UNISWAP_V2_FACTORY)}"
            )

        self.router: LiquidityRouter = router or UniswapV2LiquidityRouter(
            router_address
        )
        self.pool_registry: PoolRegistry = pool_registry or UniswapV2PoolRegistry(
            self.chain_id, factory_address
        )
        self.deadline_seconds = int(cfg.get("deadline_seconds", 0))
        if self.deadline_seconds < 0:
            raise ValueError("deadline_seconds must be >= 0")

    def get_spender_address(self, token: str | None = None) -> str:  # noqa: ARG002
        return to_checksum_address(self.router.address)

    async def is_valid_pool(self, pool: str) -> bool:
        try:
            pool = to_checksum_address(pool)
        except (TypeError, ValueError):
            self.logger.debug(f"Malformed pool address: {pool!r}")
            return False
        return await self.pool_registry.is_pool(pool)

    async def get_pool(self, asset_a: str, asset_b: str) -> str | None:
        return await self.pool_registry.get_pool(
            to_checksum_address(asset_a), to_checksum_address(asset_b)
        )

    async def _validate(self, request: LiquidityRequest) -> None:
        if not await self.pool_registry.is_pool(request.pool):
            self.logger.warning(f"Rejected {request.pool}: not a factory pair")
            raise InvalidPoolError(request.pool)

        actual = await self.pool_registry.pool_assets(request.pool)
        if not request.same_pair(actual):
            self.logger.warning(
                f"Rejected {request.pool}: holds {actual}, requested {request.assets}"
            )
            raise PairMismatchError(request.pool, request.assets, actual)

    async def _deadline(self) -> int:
        return await self.pool_registry.block_timestamp() + self.deadline_seconds

    async def get_provide_liquidity_calldata(
        self,
        pool: str,
        assets: list[str] | tuple[str, str],
        amounts: list[int] | tuple[int, int],
        min_liquidity: int,
        *,
        recipient: str | None = None,
        min_amounts: list[int] | tuple[int, int] | None = None,
    ) -> CalldataPayload:
        request = LiquidityRequest(
            pool=pool,
            assets=assets,
            amounts=amounts,
            bound=min_liquidity,
            min_amounts=min_amounts if min_amounts is not None else (0, 0),
        )

        await self._validate(request)
        to = self.resolve_recipient(recipient)
        deadline = await self._deadline()

        data = self.router.encode_add_liquidity(
            request.assets[0],
            request.assets[1],
            request.amounts[0],
            request.amounts[1],
            request.min_amounts[0],
            request.min_amounts[1],
            to,
            deadline,
        )
        self.logger.debug(
            f"addLiquidity calldata for {request.pool} deadline={deadline}"
        )
        return CalldataPayload(
            target=self.get_spender_address(),
            data=data,
            function="addLiquidity",
            chain_id=self.chain_id,
            pool=request.pool,
            bound=request.bound,
        )

    async def get_remove_liquidity_calldata(
        self,
        pool: str,
        assets: list[str] | tuple[str, str],
        amounts: list[int] | tuple[int, int],
        liquidity: int,
        *,
        recipient: str | None = None,
    ) -> CalldataPayload:
        # amounts are the minimum of each asset to receive back.
        request = LiquidityRequest(
            pool=pool, assets=assets, amounts=amounts, bound=liquidity
        )

        await self._validate(request)
        to = self.resolve_recipient(recipient)
        deadline = await self._deadline()

        data = self.router.encode_remove_liquidity(
            request.assets[0],
            request.assets[1],
            request.bound,
            request.amounts[0],
            request.amounts[1],
            to,
            deadline,
        )
        self.logger.debug(
            f"removeLiquidity calldata for {request.pool} deadline={deadline}"
        )
        return CalldataPayload(
            target=self.get_spender_address(),
            data=data,
            function="removeLiquidity",
            chain_id=self.chain_id,
            pool=request.pool,
            bound=request.bound,
        )

    async def get_provide_liquidity_single_asset_calldata(
        self, pool: str, asset: str, amount: int, min_out: int  # noqa: ARG002
    ) -> CalldataPayload:
        self.logger.warning("Single asset provide rejected: V2 pairs take both assets")
        raise UnsupportedOperationError("provide liquidity single asset", pool=pool)

    async def get_remove_liquidity_single_asset_calldata(
        self, pool: str, asset: str, amount: int, min_out: int  # noqa: ARG002
    ) -> CalldataPayload:
        self.logger.warning("Single asset remove rejected: V2 pairs burn to both")
        raise UnsupportedOperationError("remove liquidity single asset", pool=pool)
