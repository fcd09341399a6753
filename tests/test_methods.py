"""Tests for the method table and the generated facade."""

from __future__ import annotations

import inspect

import pytest

from nodero import WalletRpcClient
from nodero.methods import WALLET_METHODS, Param, WalletMethod, WalletMethods, build_params


def test_table_covers_the_wallet_surface() -> None:
    assert len(WALLET_METHODS) == 86
    for name in (
        "get_balance",
        "transfer",
        "sweep_all",
        "get_reserve_proof",
        "exchange_multisig_keys",
        "add_address_book",
        "restore_deterministic_wallet",
        "scan_tx",
    ):
        assert name in WALLET_METHODS


def test_every_entry_is_a_method_on_the_clients() -> None:
    for name, spec in WALLET_METHODS.items():
        fn = getattr(WalletRpcClient, name)
        assert fn.__name__ == name
        sig = inspect.signature(fn)
        assert list(sig.parameters)[1:] == [p.name for p in spec.params]
        assert all(p.default is None for p in list(sig.parameters.values())[1:])
        assert name in fn.__doc__


def test_param_names_are_unique_per_method() -> None:
    for spec in WALLET_METHODS.values():
        names = [p.name for p in spec.params]
        assert len(names) == len(set(names)), spec.name


class FakeWallet(WalletMethods):
    def __init__(self):
        self.calls = []

    def call(self, method, params=None):
        self.calls.append((method, params))
        return {"ok": True}


def test_positional_and_keyword_arguments() -> None:
    w = FakeWallet()
    w.get_balance(0, [1, 2], strict=True)
    assert w.calls[-1] == ("get_balance", {"account_index": 0, "address_indices": [1, 2], "strict": True})


def test_false_and_zero_are_sent() -> None:
    w = FakeWallet()
    w.get_balance(account_index=0, all_accounts=False)
    assert w.calls[-1][1] == {"account_index": 0, "all_accounts": False}


def test_no_arguments_sends_empty_bag() -> None:
    w = FakeWallet()
    assert w.get_height() == {"ok": True}
    assert w.calls[-1] == ("get_height", {})


def test_keyword_param_is_renamed_on_the_wire() -> None:
    w = FakeWallet()
    w.get_transfers(in_=True, out=False, pool=True)
    assert w.calls[-1] == ("get_transfers", {"in": True, "out": False, "pool": True})


def test_nested_values_pass_through() -> None:
    w = FakeWallet()
    dests = [{"address": "4Abc", "amount": 2**63}, {"address": "8Def", "amount": 1}]
    w.transfer(destinations=dests, priority=1, get_tx_key=True)
    assert w.calls[-1][1] == {"destinations": dests, "priority": 1, "get_tx_key": True}

    w.label_address(index={"major": 0, "minor": 3}, label="savings")
    assert w.calls[-1] == ("label_address", {"index": {"major": 0, "minor": 3}, "label": "savings"})


def test_unknown_keyword_is_a_type_error() -> None:
    w = FakeWallet()
    with pytest.raises(TypeError):
        w.get_balance(acount_index=0)
    with pytest.raises(TypeError):
        w.get_height(1)
    assert w.calls == []


def test_build_params() -> None:
    spec = WalletMethod("x", (Param("in_", bool, "in"), Param("label", str)))
    assert build_params(spec, {"in_": True, "label": None}) == {"in": True}
    assert build_params(spec, {}) == {}


def test_base_call_is_abstract() -> None:
    with pytest.raises(TypeError):
        WalletMethods()  # type: ignore[abstract]
