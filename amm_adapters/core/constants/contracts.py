from eth_utils import to_checksum_address

from amm_adapters.core.constants.chains import (
    CHAIN_ID_ARBITRUM,
    CHAIN_ID_BASE,
    CHAIN_ID_ETHEREUM,
)

# Uniswap V2 deployments
# Source: https://docs.uniswap.org/contracts/v2/reference/smart-contracts/v2-deployments

UNISWAP_V2_ROUTER: dict[int, str] = {
    CHAIN_ID_ETHEREUM: to_checksum_address(
        "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D"
    ),
    CHAIN_ID_BASE: to_checksum_address("0x4752ba5DBc23f44D87826276BF6Fd6b1C372aD24"),
    CHAIN_ID_ARBITRUM: to_checksum_address(
        "0x4752ba5DBc23f44D87826276BF6Fd6b1C372aD24"
    ),
}

UNISWAP_V2_FACTORY: dict[int, str] = {
    CHAIN_ID_ETHEREUM: to_checksum_address(
        "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"
    ),
    CHAIN_ID_BASE: to_checksum_address("0x8909Dc15e40173Ff4699343b6eB8132c65e18eC6"),
    CHAIN_ID_ARBITRUM: to_checksum_address(
        "0xf1D7CC64Fb4452F05c498126312eBE29f30Fbcf9"
    ),
}
