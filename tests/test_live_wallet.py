"""Smoke tests against a running monero-wallet-rpc (started with --disable-rpc-login)."""

from __future__ import annotations

import pytest

from nodero import WalletRpcClient
from nodero.config import daemon_address, load_wallet_config


pytestmark = pytest.mark.live


@pytest.fixture(scope="module")
def wallet() -> WalletRpcClient:
    return WalletRpcClient.from_config(load_wallet_config(), timeout=60.0)


def test_set_daemon(wallet: WalletRpcClient) -> None:
    address = daemon_address()
    if address is None:
        pytest.skip("daemon_host not set")
    assert isinstance(wallet.set_daemon(address, True, "disabled"), dict)


def test_get_balance(wallet: WalletRpcClient) -> None:
    result = wallet.get_balance()
    assert isinstance(result["balance"], int)
    assert isinstance(result["multisig_import_needed"], bool)


def test_get_version(wallet: WalletRpcClient) -> None:
    assert isinstance(wallet.get_version()["version"], int)
