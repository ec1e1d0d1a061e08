from __future__ import annotations

import pytest
from eth_abi import decode

from amm_adapters.adapters.uniswap_amm_adapter.router import (
    LiquidityRouter,
    UniswapV2LiquidityRouter,
)
from amm_adapters.core.constants.contracts import UNISWAP_V2_ROUTER
from amm_adapters.testing.fakes import OWNER, WETH, YAM

ROUTER = UNISWAP_V2_ROUTER[1]
ADD_LIQUIDITY_SELECTOR = "0xe8e33700"
REMOVE_LIQUIDITY_SELECTOR = "0xbaa2abde"


def _args(data: str, types: list[str]) -> tuple:
    return decode(types, bytes.fromhex(data[10:]))


def test_address_and_protocol():
    router = UniswapV2LiquidityRouter(ROUTER.lower())
    assert router.address == ROUTER
    assert isinstance(router, LiquidityRouter)


def test_encode_add_liquidity():
    router = UniswapV2LiquidityRouter(ROUTER)
    data = router.encode_add_liquidity(
        WETH, YAM, 10**15, 10**18, 1, 2, OWNER, 1_700_000_600
    )

    assert data.startswith(ADD_LIQUIDITY_SELECTOR)
    args = _args(
        data,
        [
            "address",
            "address",
            "uint256",
            "uint256",
            "uint256",
            "uint256",
            "address",
            "uint256",
        ],
    )
    assert args[0] == WETH.lower()
    assert args[1] == YAM.lower()
    assert args[2:6] == (10**15, 10**18, 1, 2)
    assert args[6] == OWNER.lower()
    assert args[7] == 1_700_000_600


def test_encode_remove_liquidity():
    router = UniswapV2LiquidityRouter(ROUTER)
    data = router.encode_remove_liquidity(
        YAM, WETH, 2 * 10**18, 3, 4, OWNER, 1_700_000_000
    )

    assert data.startswith(REMOVE_LIQUIDITY_SELECTOR)
    args = _args(
        data,
        ["address", "address", "uint256", "uint256", "uint256", "address", "uint256"],
    )
    assert args[0] == YAM.lower()
    assert args[1] == WETH.lower()
    assert args[2:5] == (2 * 10**18, 3, 4)
    assert args[5] == OWNER.lower()


def test_encoding_is_deterministic():
    router = UniswapV2LiquidityRouter(ROUTER)
    first = router.encode_add_liquidity(WETH, YAM, 5, 6, 0, 0, OWNER, 100)
    second = router.encode_add_liquidity(WETH, YAM, 5, 6, 0, 0, OWNER, 100)
    assert first == second


def test_rejects_malformed_address():
    router = UniswapV2LiquidityRouter(ROUTER)
    with pytest.raises(ValueError):
        router.encode_remove_liquidity(WETH, "0x1234", 1, 0, 0, OWNER, 100)
