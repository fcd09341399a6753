from loguru import logger

from nodero.config import WalletRpcConfig, load_wallet_config
from nodero.errors import (
    ErrorKind,
    RpcContractError,
    RpcHttpStatusError,
    RpcProtocolError,
    RpcTransportError,
    WalletRpcError,
)
from nodero.methods import WALLET_METHODS
from nodero.rpc import AsyncWalletRpcClient, WalletRpcClient

# Library code stays quiet unless the application opts in with logger.enable("nodero").
logger.disable("nodero")

__version__ = "0.1.0"

__all__ = [
    "AsyncWalletRpcClient",
    "ErrorKind",
    "RpcContractError",
    "RpcHttpStatusError",
    "RpcProtocolError",
    "RpcTransportError",
    "WALLET_METHODS",
    "WalletRpcClient",
    "WalletRpcConfig",
    "WalletRpcError",
    "load_wallet_config",
]
