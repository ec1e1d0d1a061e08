"""Factory/pair reads for Uniswap V2 style deployments.

``PoolRegistry`` is the capability the adapter validates pools against. The
web3-backed implementation opens a connection per call; tests substitute an
in-memory registry.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from eth_abi.exceptions import InsufficientDataBytes
from eth_utils import to_checksum_address
from loguru import logger
from web3 import AsyncWeb3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from amm_adapters.core.constants import ZERO_ADDRESS
from amm_adapters.core.constants.uniswap_v2_abi import (
    UNISWAP_V2_FACTORY_ABI,
    UNISWAP_V2_PAIR_ABI,
)
from amm_adapters.core.utils.web3 import web3_from_chain_id

# Raised when the address has no code (wallet) or does not implement the pair ABI.
NOT_A_PAIR_ERRORS = (BadFunctionCallOutput, ContractLogicError, InsufficientDataBytes)


@runtime_checkable
class PoolRegistry(Protocol):
    async def is_pool(self, pool: str) -> bool: ...

    async def pool_assets(self, pool: str) -> tuple[str, str]: ...

    async def get_pool(self, asset_a: str, asset_b: str) -> str | None: ...

    async def block_timestamp(self) -> int: ...


class UniswapV2PoolRegistry:
    def __init__(self, chain_id: int, factory_address: str) -> None:
        self.chain_id = int(chain_id)
        self.factory_address = to_checksum_address(factory_address)

    async def _read_tokens(self, web3: AsyncWeb3, pool: str) -> tuple[str, str]:
        pair = web3.eth.contract(address=pool, abi=UNISWAP_V2_PAIR_ABI)
        token0, token1 = await asyncio.gather(
            pair.functions.token0().call(block_identifier="latest"),
            pair.functions.token1().call(block_identifier="latest"),
        )
        return to_checksum_address(token0), to_checksum_address(token1)

    async def _get_pair(
        self, web3: AsyncWeb3, asset_a: str, asset_b: str
    ) -> str | None:
        factory = web3.eth.contract(
            address=self.factory_address, abi=UNISWAP_V2_FACTORY_ABI
        )
        addr = await factory.functions.getPair(
            to_checksum_address(asset_a), to_checksum_address(asset_b)
        ).call(block_identifier="latest")
        if not addr or int(addr, 16) == 0:
            return None
        return to_checksum_address(addr)

    async def is_pool(self, pool: str) -> bool:
        pool = to_checksum_address(pool)
        if pool == ZERO_ADDRESS:
            return False
        async with web3_from_chain_id(self.chain_id) as web3:
            try:
                token0, token1 = await self._read_tokens(web3, pool)
            except NOT_A_PAIR_ERRORS as exc:
                logger.debug(f"{pool} does not implement the pair interface: {exc}")
                return False
            expected = await self._get_pair(web3, token0, token1)
        return expected == pool

    async def pool_assets(self, pool: str) -> tuple[str, str]:
        async with web3_from_chain_id(self.chain_id) as web3:
            return await self._read_tokens(web3, to_checksum_address(pool))

    async def get_pool(self, asset_a: str, asset_b: str) -> str | None:
        async with web3_from_chain_id(self.chain_id) as web3:
            return await self._get_pair(web3, asset_a, asset_b)

    async def block_timestamp(self) -> int:
        async with web3_from_chain_id(self.chain_id) as web3:
            block = await web3.eth.get_block("latest")
        return int(block["timestamp"])
