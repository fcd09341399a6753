from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


JSONRPC_VERSION = "2.0"
# One request per HTTP exchange, so responses never need matching by id.
REQUEST_ID = "0"


class RpcRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: str = REQUEST_ID
    method: str = Field(min_length=1)
    params: Dict[str, Any] = Field(default_factory=dict)


class RpcResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Optional[str] = None
    id: Optional[Union[str, int]] = None
    result: Any = None
    error: Any = None

    @property
    def has_result(self) -> bool:
        return "result" in self.model_fields_set and self.result is not None

    @property
    def has_error(self) -> bool:
        return self.error is not None
