from __future__ import annotations

from abc import ABC
from typing import Any

from eth_utils import to_checksum_address
from loguru import logger


class BaseAdapter(ABC):
    adapter_type: str | None = None

    def __init__(self, name: str, config: dict[str, Any] | None = None):
        self.name = name
        self.config = config or {}
        self.logger = logger.bind(adapter=self.__class__.__name__)

        wallet = self.config.get("strategy_wallet") or {}
        addr = wallet.get("address")
        self.wallet_address: str | None = (
            to_checksum_address(str(addr)) if addr else None
        )

    def resolve_recipient(self, recipient: str | None = None) -> str:
        """Explicit recipient, else the configured ``strategy_wallet.address``."""
        if recipient:
            return to_checksum_address(recipient)
        if not self.wallet_address:
            raise ValueError(
                f"recipient is required for {self.__class__.__name__} "
                "(pass recipient= or configure strategy_wallet.address)"
            )
        return self.wallet_address
