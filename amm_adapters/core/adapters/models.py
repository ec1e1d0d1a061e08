from typing import Annotated, Any, Literal

from eth_utils import to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_UINT256 = 2**256 - 1

Uint256 = Annotated[int, Field(ge=0, le=MAX_UINT256)]


class LiquidityRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    pool: str
    assets: tuple[str, str]
    amounts: tuple[Uint256, Uint256]
    # Minimum LP minted (provide) or LP burned (remove).
    bound: Uint256
    min_amounts: tuple[Uint256, Uint256] = (0, 0)

    @field_validator("pool")
    @classmethod
    def _checksum_pool(cls, value: str) -> str:
        return to_checksum_address(value)

    @field_validator("assets")
    @classmethod
    def _checksum_assets(cls, value: tuple[str, str]) -> tuple[str, str]:
        return (to_checksum_address(value[0]), to_checksum_address(value[1]))

    @field_validator("amounts", "bound", "min_amounts", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        items = value if isinstance(value, (list, tuple)) else (value,)
        if any(isinstance(item, bool) for item in items):
            raise ValueError("amounts must be integers, not bool")
        return value

    def same_pair(self, other: tuple[str, str]) -> bool:
        return {a.lower() for a in self.assets} == {a.lower() for a in other}


class CalldataPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str
    value: int = 0
    data: str
    function: Literal["addLiquidity", "removeLiquidity"]
    chain_id: int
    pool: str
    bound: int

    def to_transaction(self, from_address: str) -> dict[str, Any]:
        return {
            "chainId": int(self.chain_id),
            "from": to_checksum_address(from_address),
            "to": self.target,
            "data": self.data,
            "value": int(self.value),
        }
