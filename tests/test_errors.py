"""Tests for error-shape classification and the error hierarchy."""

from __future__ import annotations

import pytest

from nodero.errors import (
    ErrorKind,
    ErrorShape,
    RpcContractError,
    RpcHttpStatusError,
    RpcProtocolError,
    RpcTransportError,
    WalletRpcError,
    classify_error_payload,
)


@pytest.mark.parametrize(
    "payload, shape, description, code, message",
    [
        ("denied", ErrorShape.STRING, "denied", None, "denied"),
        ({"message": "No wallet file"}, ErrorShape.MESSAGE, "No wallet file", None, "No wallet file"),
        ({"code": -13}, ErrorShape.CODE, "Code -13", -13, None),
        ({"code": -1, "message": "denied"}, ErrorShape.CODE_AND_MESSAGE, "denied", -1, "denied"),
        ({}, ErrorShape.UNKNOWN, "Unknown error", None, None),
        (42, ErrorShape.UNKNOWN, "Unknown error", None, None),
        (None, ErrorShape.UNKNOWN, "Unknown error", None, None),
        (["denied"], ErrorShape.UNKNOWN, "Unknown error", None, None),
    ],
)
def test_classify_error_payload(payload, shape, description, code, message) -> None:
    c = classify_error_payload(payload)
    assert c.shape is shape
    assert c.description == description
    assert c.code == code
    assert c.message == message


def test_wrongly_typed_fields_are_ignored() -> None:
    c = classify_error_payload({"code": "-1", "message": 7})
    assert c.shape is ErrorShape.UNKNOWN

    c = classify_error_payload({"code": True, "message": "m"})
    assert c.shape is ErrorShape.MESSAGE
    assert c.code is None


def test_from_payload_builds_structured_error() -> None:
    err = RpcProtocolError.from_payload({"code": -1, "message": "denied"}, method="transfer")
    assert isinstance(err, WalletRpcError)
    assert err.kind is ErrorKind.PROTOCOL
    assert err.code == -1
    assert err.message == "denied"
    assert err.method == "transfer"
    assert err.data == {"code": -1, "message": "denied"}
    assert str(err) == "denied"
    assert err.description == "denied"


def test_description_never_empty() -> None:
    err = RpcProtocolError.from_payload({"message": ""})
    assert err.message == ""
    assert str(err) == "Unknown error"

    err = RpcProtocolError.from_payload({"code": -5, "message": ""})
    assert str(err) == "Code -5"
    assert str(RpcProtocolError.from_payload("")) == "Unknown error"
    assert str(RpcProtocolError.from_payload(object())) == "Unknown error"


def test_http_status_error_mentions_code() -> None:
    err = RpcHttpStatusError(500, method="get_balance")
    assert err.status_code == 500
    assert "500" in str(err)
    assert err.kind is ErrorKind.HTTP_STATUS
    assert err.code is None


@pytest.mark.parametrize(
    "cls, kind",
    [
        (RpcTransportError, ErrorKind.TRANSPORT),
        (RpcProtocolError, ErrorKind.PROTOCOL),
        (RpcContractError, ErrorKind.CONTRACT),
    ],
)
def test_kinds(cls, kind) -> None:
    err = cls("boom")
    assert err.kind is kind
    assert isinstance(err, RuntimeError)
    assert "boom" in repr(err)
