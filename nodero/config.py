from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nodero.env import load_env_file


DEFAULT_HOST = "127.0.0.1"
# monero-wallet-rpc default on stagenet.
DEFAULT_PORT = 38090
JSON_RPC_PATH = "/json_rpc"


class WalletRpcConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)

    @property
    def url(self) -> str:
        host = self.host
        # Bare IPv6 literals need brackets inside a URL.
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"http://{host}:{self.port}{JSON_RPC_PATH}"


def _env_int(name: str, default: int) -> int:
    env = os.getenv(name)
    if env is None or not env.strip():
        return default
    try:
        return int(env)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {env!r}") from e


def load_wallet_config(env_file: Optional[Path] = None) -> WalletRpcConfig:
    """Connection settings for scripts and the live test suite (`wallet_host`, `wallet_port`)."""
    load_env_file(env_file, override=False)
    return WalletRpcConfig(
        host=os.getenv("wallet_host") or DEFAULT_HOST,
        port=_env_int("wallet_port", DEFAULT_PORT),
    )


def daemon_address(env_file: Optional[Path] = None) -> Optional[str]:
    """URL of the daemon the wallet should talk to, for `set_daemon`. None when unset."""
    load_env_file(env_file, override=False)
    host = os.getenv("daemon_host")
    if not host:
        return None
    port = os.getenv("daemon_port")
    return f"http://{host}:{port}" if port else f"http://{host}"
