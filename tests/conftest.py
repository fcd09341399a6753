"""Pytest hooks and fixtures."""

import json
import os

import httpx
import pytest

from nodero import AsyncWalletRpcClient, WalletRpcClient


def pytest_collection_modifyitems(config, items):
    """Skip live-wallet tests unless a wallet is configured."""
    if os.environ.get("wallet_host"):
        return
    skip = pytest.mark.skip(reason="Set wallet_host (and wallet_port) to run against a live wallet")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip)


class Recorder:
    """Collects requests seen by a MockTransport and answers with a canned response."""

    def __init__(self, status_code=200, body=None, raises=None):
        self.status_code = status_code
        self.body = body
        self.raises = raises
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises(request)
        content = self.body
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        return httpx.Response(self.status_code, content=content or b"")

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client():
    def _make(status_code=200, body=None, raises=None):
        rec = Recorder(status_code, body, raises)
        return WalletRpcClient("127.0.0.1", 38090, transport=httpx.MockTransport(rec)), rec

    return _make


@pytest.fixture
def make_async_client():
    def _make(status_code=200, body=None, raises=None):
        rec = Recorder(status_code, body, raises)
        return AsyncWalletRpcClient("127.0.0.1", 38090, transport=httpx.MockTransport(rec)), rec

    return _make
