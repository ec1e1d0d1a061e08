from __future__ import annotations

from typing import Protocol, runtime_checkable

from eth_utils import to_checksum_address
from web3 import Web3

from amm_adapters.core.constants.uniswap_v2_abi import UNISWAP_V2_ROUTER_ABI


@runtime_checkable
class LiquidityRouter(Protocol):
    @property
    def address(self) -> str: ...

    def encode_add_liquidity(
        self,
        asset_a: str,
        asset_b: str,
        amount_a_desired: int,
        amount_b_desired: int,
        amount_a_min: int,
        amount_b_min: int,
        to: str,
        deadline: int,
    ) -> str: ...

    def encode_remove_liquidity(
        self,
        asset_a: str,
        asset_b: str,
        liquidity: int,
        amount_a_min: int,
        amount_b_min: int,
        to: str,
        deadline: int,
    ) -> str: ...


class UniswapV2LiquidityRouter:
    """Encodes Router02 calls locally; no RPC is needed to build calldata."""

    def __init__(self, router_address: str) -> None:
        self._address = to_checksum_address(router_address)
        self._contract = Web3().eth.contract(
            address=self._address, abi=UNISWAP_V2_ROUTER_ABI
        )

    @property
    def address(self) -> str:
        return self._address

    def _encode(self, fn_name: str, args: list) -> str:
        try:
            return self._contract.encode_abi(fn_name, args=args)
        except (ValueError, TypeError) as exc:
            raise ValueError(f"Failed to encode {fn_name}: {exc}") from exc

    def encode_add_liquidity(
        self,
        asset_a: str,
        asset_b: str,
        amount_a_desired: int,
        amount_b_desired: int,
        amount_a_min: int,
        amount_b_min: int,
        to: str,
        deadline: int,
    ) -> str:
        return self._encode(
            "addLiquidity",
            [
                to_checksum_address(asset_a),
                to_checksum_address(asset_b),
                int(amount_a_desired),
                int(amount_b_desired),
                int(amount_a_min),
                int(amount_b_min),
                to_checksum_address(to),
                int(deadline),
            ],
        )

    def encode_remove_liquidity(
        self,
        asset_a: str,
        asset_b: str,
        liquidity: int,
        amount_a_min: int,
        amount_b_min: int,
        to: str,
        deadline: int,
    ) -> str:
        return self._encode(
            "removeLiquidity",
            [
                to_checksum_address(asset_a),
                to_checksum_address(asset_b),
                int(liquidity),
                int(amount_a_min),
                int(amount_b_min),
                to_checksum_address(to),
                int(deadline),
            ],
        )
