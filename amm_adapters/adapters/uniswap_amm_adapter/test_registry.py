from __future__ import annotations

import pytest
from eth_abi.exceptions import InsufficientDataBytes

from amm_adapters.adapters.uniswap_amm_adapter.registry import (
    NOT_A_PAIR_ERRORS,
    PoolRegistry,
    UniswapV2PoolRegistry,
)
from amm_adapters.core.constants import ZERO_ADDRESS
from amm_adapters.testing.fakes import (
    FACTORY,
    IMPOSTOR_PAIR,
    INVALID_POOL,
    NON_MATCHING_POOL,
    POOL,
    REVERTING_CONTRACT,
    SHORT_RETURN_CONTRACT,
    UMA,
    WETH,
    YAM,
    InMemoryRegistry,
)


def _make_registry() -> UniswapV2PoolRegistry:
    return UniswapV2PoolRegistry(1, FACTORY.lower())


def test_satisfies_protocol():
    assert isinstance(_make_registry(), PoolRegistry)
    assert isinstance(InMemoryRegistry(), PoolRegistry)


def test_factory_address_is_checksummed():
    assert _make_registry().factory_address == FACTORY


def test_abi_decode_failures_mean_not_a_pair():
    assert InsufficientDataBytes in NOT_A_PAIR_ERRORS


class TestIsPool:
    @pytest.mark.asyncio
    async def test_factory_pair(self, fake_chain):
        assert await _make_registry().is_pool(POOL) is True

    @pytest.mark.asyncio
    async def test_lowercase_pool_address(self, fake_chain):
        assert await _make_registry().is_pool(POOL.lower()) is True

    @pytest.mark.asyncio
    async def test_wallet_address(self, fake_chain):
        assert await _make_registry().is_pool(INVALID_POOL) is False

    @pytest.mark.asyncio
    async def test_reverting_contract(self, fake_chain):
        assert await _make_registry().is_pool(REVERTING_CONTRACT) is False

    @pytest.mark.asyncio
    async def test_short_return_data(self, fake_chain):
        assert await _make_registry().is_pool(SHORT_RETURN_CONTRACT) is False
        assert fake_chain.factory.get_pair_calls == []

    @pytest.mark.asyncio
    async def test_pair_not_deployed_by_factory(self, fake_chain):
        assert await _make_registry().is_pool(IMPOSTOR_PAIR) is False
        assert (YAM, WETH) in fake_chain.factory.get_pair_calls

    @pytest.mark.asyncio
    async def test_zero_address_skips_ledger(self, fake_chain):
        assert await _make_registry().is_pool(ZERO_ADDRESS) is False
        assert fake_chain.factory.get_pair_calls == []


class TestPoolAssets:
    @pytest.mark.asyncio
    async def test_returns_token0_token1(self, fake_chain):
        assert await _make_registry().pool_assets(POOL) == (YAM, WETH)
        assert await _make_registry().pool_assets(NON_MATCHING_POOL) == (UMA, WETH)


class TestGetPool:
    @pytest.mark.asyncio
    async def test_known_pair_any_order(self, fake_chain):
        registry = _make_registry()
        assert await registry.get_pool(WETH, YAM) == POOL
        assert await registry.get_pool(YAM.lower(), WETH.lower()) == POOL

    @pytest.mark.asyncio
    async def test_unknown_pair(self, fake_chain):
        assert await _make_registry().get_pool(YAM, UMA) is None


@pytest.mark.asyncio
async def test_block_timestamp(fake_chain):
    assert await _make_registry().block_timestamp() == fake_chain.timestamp
