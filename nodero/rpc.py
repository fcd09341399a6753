from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from nodero import codec
from nodero.config import WalletRpcConfig
from nodero.errors import (
    RpcContractError,
    RpcHttpStatusError,
    RpcProtocolError,
    RpcTransportError,
)
from nodero.methods import WalletMethods
from nodero.models import RpcRequest, RpcResponse


class _WalletRpcBase(WalletMethods):
    """Envelope building and response handling shared by the sync and async clients."""

    def __init__(
        self,
        host: str,
        port: int,
        *,
        timeout: Optional[float] = None,
        transport: Any = None,
    ):
        self.config = WalletRpcConfig(host=host, port=port)
        # None: no timeout. A hung wallet hangs the call.
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: WalletRpcConfig, **kwargs: Any):
        return cls(config.host, config.port, **kwargs)

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        return self.config.port

    @property
    def url(self) -> str:
        return self.config.url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, port={self.port!r})"

    def _build_body(self, method: str, params: Optional[Mapping[str, Any]]) -> bytes:
        req = RpcRequest(method=method, params=codec.encode_params(params))
        return codec.encode_request(req.model_dump())

    @staticmethod
    def _headers(body: bytes) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }

    def _transport_error(self, method: str, exc: Exception) -> RpcTransportError:
        logger.warning(f"Wallet RPC {method} transport failure against {self.url}: {exc!r}")
        return RpcTransportError(f"Transport error calling {method}: {exc}", method=method)

    def _handle_response(self, method: str, status_code: int, content: bytes) -> Any:
        if status_code < 200 or status_code > 299:
            logger.warning(f"Wallet RPC {method} returned HTTP {status_code}")
            raise RpcHttpStatusError(status_code, method=method)

        try:
            decoded = codec.decode(content)
        except codec.CodecError as e:
            logger.warning(f"Wallet RPC {method} returned a malformed body: {e}")
            raise RpcTransportError(f"Malformed response body for {method}: {e}", method=method) from e

        if not isinstance(decoded, dict):
            raise RpcContractError(
                f"Expected a JSON-RPC object from {method}, got {type(decoded).__name__}",
                method=method,
                data=decoded,
            )
        try:
            resp = RpcResponse.model_validate(decoded)
        except ValidationError as e:
            raise RpcContractError(f"Invalid JSON-RPC envelope from {method}: {e}", method=method, data=decoded) from e

        if resp.has_error:
            err = RpcProtocolError.from_payload(resp.error, method=method)
            logger.debug(f"Wallet RPC {method} error: code={err.code} message={err.message!r}")
            raise err
        if not resp.has_result:
            raise RpcContractError(f"Response to {method} carried neither result nor error", method=method, data=decoded)
        return resp.result


class WalletRpcClient(_WalletRpcBase):
    """Blocking wallet RPC client. Every call opens its own HTTP exchange."""

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout), transport=self._transport)

    def call(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        body = self._build_body(method, params)
        logger.debug(f"Wallet RPC {method} -> {self.url} ({len(body)} bytes)")
        try:
            with self._client() as client:
                resp = client.post(self.url, content=body, headers=self._headers(body))
                content = resp.content
        except httpx.RequestError as e:
            raise self._transport_error(method, e) from e
        return self._handle_response(method, resp.status_code, content)


class AsyncWalletRpcClient(_WalletRpcBase):
    """asyncio wallet RPC client. Concurrent calls share nothing and complete in any order."""

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport)

    async def call(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        body = self._build_body(method, params)
        logger.debug(f"Wallet RPC {method} -> {self.url} ({len(body)} bytes)")
        try:
            async with self._client() as client:
                resp = await client.post(self.url, content=body, headers=self._headers(body))
                content = resp.content
        except httpx.RequestError as e:
            raise self._transport_error(method, e) from e
        return self._handle_response(method, resp.status_code, content)
