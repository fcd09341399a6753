"""
The wallet RPC surface as data.

Each `WalletMethod` names the remote procedure, its parameters in call order
and the shape of its result. `WalletMethods` gets one generated method per
entry; a generated method only packs its arguments into a parameter bag and
hands it to `self.call`, so it returns whatever `call` returns (a value for
the blocking client, a coroutine for the asyncio one).
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from nodero import types as t


class Param(NamedTuple):
    name: str
    type: Any = Any
    # Wire key when it differs from the Python name (`in_` -> `in`).
    wire: Optional[str] = None

    @property
    def key(self) -> str:
        return self.wire or self.name


@dataclass(frozen=True)
class WalletMethod:
    name: str
    params: Tuple[Param, ...] = ()
    result: Any = t.EmptyResult
    doc: str = ""


def _p(name: str, type_: Any = str, wire: Optional[str] = None) -> Param:
    return Param(name, type_, wire)


_Ints = List[int]
_Strs = List[str]

_METHODS: List[WalletMethod] = [
    # daemon
    WalletMethod(
        "set_daemon",
        (
            _p("address"),
            _p("trusted", bool),
            _p("ssl_support"),
            _p("ssl_private_key_path"),
            _p("ssl_certificate_path"),
            _p("ssl_ca_file"),
            _p("ssl_allowed_fingerprints", _Strs),
            _p("ssl_allow_any_cert", bool),
            _p("username"),
            _p("password"),
        ),
        doc="Connect the RPC server to a Monero daemon.",
    ),
    # balance, addresses, accounts
    WalletMethod(
        "get_balance",
        (_p("account_index", int), _p("address_indices", _Ints), _p("all_accounts", bool), _p("strict", bool)),
        t.BalanceResult,
        "Return the wallet's balance.",
    ),
    WalletMethod(
        "get_address",
        (_p("account_index", int), _p("address_index", _Ints)),
        t.AddressResult,
        "Return the wallet's addresses for an account, optionally filtered to some subaddresses.",
    ),
    WalletMethod(
        "get_address_index",
        (_p("address"),),
        t.AddressIndexResult,
        "Get account and address indexes from a specific (sub)address.",
    ),
    WalletMethod(
        "create_address",
        (_p("account_index", int), _p("label"), _p("count", int)),
        t.CreateAddressResult,
        "Create new addresses for an account, optionally labelled.",
    ),
    WalletMethod(
        "label_address",
        (_p("index", t.SubaddressIndex), _p("label")),
        doc="Label a subaddress given as {major, minor}.",
    ),
    WalletMethod(
        "validate_address",
        (_p("address"), _p("any_net_type", bool), _p("allow_openalias", bool)),
        t.ValidateAddressResult,
        "Check whether a string is a valid address and describe it.",
    ),
    WalletMethod(
        "get_accounts",
        (_p("tag"), _p("regex", bool), _p("strict_balances", bool)),
        t.AccountsResult,
        "Get all accounts for a wallet, optionally filtered by tag.",
    ),
    WalletMethod("create_account", (_p("label"),), t.CreateAccountResult, "Create a new account with an optional label."),
    WalletMethod("label_account", (_p("account_index", int), _p("label")), doc="Label an account."),
    WalletMethod("get_account_tags", (), t.AccountTagsResult, "Get the list of user-defined account tags."),
    WalletMethod("tag_accounts", (_p("tag"), _p("accounts", _Ints)), doc="Apply a filtering tag to a list of accounts."),
    WalletMethod("untag_accounts", (_p("accounts", _Ints),), doc="Remove the filtering tag from a list of accounts."),
    WalletMethod(
        "set_account_tag_description",
        (_p("tag"), _p("description")),
        doc="Set the description of an account tag.",
    ),
    WalletMethod("get_height", (), t.HeightResult, "Return the wallet's current block height."),
    # transfers
    WalletMethod(
        "transfer",
        (
            _p("destinations", List[t.Destination]),
            _p("account_index", int),
            _p("subaddr_indices", _Ints),
            _p("priority", int),
            _p("mixin", int),
            _p("ring_size", int),
            _p("unlock_time", int),
            _p("get_tx_key", bool),
            _p("do_not_relay", bool),
            _p("get_tx_hex", bool),
            _p("get_tx_metadata", bool),
        ),
        t.TransferResult,
        "Send amounts in atomic units to one or more recipients.",
    ),
    WalletMethod(
        "transfer_split",
        (
            _p("destinations", List[t.Destination]),
            _p("account_index", int),
            _p("subaddr_indices", _Ints),
            _p("ring_size", int),
            _p("unlock_time", int),
            _p("payment_id"),
            _p("get_tx_keys", bool),
            _p("priority", int),
            _p("do_not_relay", bool),
            _p("get_tx_hex", bool),
            _p("get_tx_metadata", bool),
        ),
        t.TransferSplitResult,
        "Like transfer, but the wallet may split the payment over several transactions.",
    ),
    WalletMethod(
        "sign_transfer",
        (_p("unsigned_txset"), _p("export_raw", bool), _p("get_tx_keys", bool)),
        t.SignTransferResult,
        "Sign a transaction created on a read-only wallet (cold signing).",
    ),
    WalletMethod(
        "submit_transfer",
        (_p("tx_data_hex"),),
        t.TxHashListResult,
        "Submit a previously signed transaction on a read-only wallet.",
    ),
    WalletMethod(
        "sweep_dust",
        (_p("get_tx_keys", bool), _p("do_not_relay", bool), _p("get_tx_hex", bool), _p("get_tx_metadata", bool)),
        t.SweepResult,
        "Send all dust outputs back to the wallet to make them spendable.",
    ),
    WalletMethod(
        "sweep_all",
        (
            _p("address"),
            _p("account_index", int),
            _p("outputs", int),
            _p("ring_size", int),
            _p("unlock_time", int),
            _p("subaddr_indices", _Ints),
            _p("subaddr_indices_all", bool),
            _p("priority", int),
            _p("payment_id"),
            _p("get_tx_keys", bool),
            _p("below_amount", int),
            _p("do_not_relay", bool),
            _p("get_tx_hex", bool),
            _p("get_tx_metadata", bool),
        ),
        t.SweepResult,
        "Send all unlocked balance to an address.",
    ),
    WalletMethod(
        "sweep_single",
        (
            _p("address"),
            _p("outputs", int),
            _p("ring_size", int),
            _p("unlock_time", int),
            _p("key_image"),
            _p("priority", int),
            _p("payment_id"),
            _p("get_tx_key", bool),
            _p("do_not_relay", bool),
            _p("get_tx_hex", bool),
            _p("get_tx_metadata", bool),
        ),
        t.SweepSingleResult,
        "Send all of a specific unlocked output to an address.",
    ),
    WalletMethod("relay_tx", (_p("hex"),), t.RelayTxResult, "Relay a transaction previously created with do_not_relay."),
    WalletMethod("store", (), doc="Save the wallet file."),
    WalletMethod("get_payments", (_p("payment_id"),), t.PaymentsResult, "Get a list of incoming payments using a payment id."),
    WalletMethod(
        "get_bulk_payments",
        (_p("payment_ids", _Strs), _p("min_block_height", int)),
        t.PaymentsResult,
        "Get incoming payments for several payment ids from a given height.",
    ),
    WalletMethod(
        "incoming_transfers",
        (_p("transfer_type"), _p("account_index", int), _p("subaddr_indices", _Ints)),
        t.IncomingTransfersResult,
        "Return incoming transfers, filtered by type ('all', 'available', 'unavailable').",
    ),
    # keys and integrated addresses
    WalletMethod("query_key", (_p("key_type"),), t.QueryKeyResult, "Return the spend key, view key or mnemonic seed."),
    WalletMethod(
        "make_integrated_address",
        (_p("standard_address"), _p("payment_id")),
        t.IntegratedAddressResult,
        "Make an integrated address from an address and a payment id.",
    ),
    WalletMethod(
        "split_integrated_address",
        (_p("integrated_address"),),
        t.SplitIntegratedAddressResult,
        "Retrieve the standard address and payment id of an integrated address.",
    ),
    WalletMethod("stop_wallet", (), doc="Store the current state and stop the wallet RPC server."),
    WalletMethod("rescan_blockchain", (), doc="Rescan the blockchain from scratch."),
    # notes and attributes
    WalletMethod("set_tx_notes", (_p("txids", _Strs), _p("notes", _Strs)), doc="Set arbitrary notes for transactions."),
    WalletMethod("get_tx_notes", (_p("txids", _Strs),), t.TxNotesResult, "Get notes for transactions."),
    WalletMethod("set_attribute", (_p("key"), _p("value")), doc="Set an arbitrary attribute."),
    WalletMethod("get_attribute", (_p("key"),), t.AttributeResult, "Get an attribute value by name."),
    # proofs
    WalletMethod("get_tx_key", (_p("txid"),), t.TxKeyResult, "Get the transaction secret key from a transaction id."),
    WalletMethod(
        "check_tx_key",
        (_p("txid"), _p("tx_key"), _p("address")),
        t.CheckTxKeyResult,
        "Check a transaction in the blockchain with its secret key.",
    ),
    WalletMethod(
        "get_tx_proof",
        (_p("txid"), _p("address"), _p("message")),
        t.SignatureResult,
        "Get a transaction signature to prove it.",
    ),
    WalletMethod(
        "check_tx_proof",
        (_p("txid"), _p("address"), _p("signature"), _p("message")),
        t.CheckTxProofResult,
        "Prove a transaction by checking its signature.",
    ),
    WalletMethod(
        "get_spend_proof",
        (_p("txid"), _p("message")),
        t.SignatureResult,
        "Generate a signature to prove a spend.",
    ),
    WalletMethod(
        "check_spend_proof",
        (_p("txid"), _p("signature"), _p("message")),
        t.GoodResult,
        "Prove a spend using a signature.",
    ),
    WalletMethod(
        "get_reserve_proof",
        (_p("all", bool), _p("account_index", int), _p("amount", int), _p("message")),
        t.SignatureResult,
        "Generate a signature to prove an available amount in the wallet.",
    ),
    WalletMethod(
        "check_reserve_proof",
        (_p("address"), _p("signature"), _p("message")),
        t.CheckReserveProofResult,
        "Prove that a wallet has a disposable reserve using a signature.",
    ),
    # history
    WalletMethod(
        "get_transfers",
        (
            _p("in_", bool, "in"),
            _p("out", bool),
            _p("pending", bool),
            _p("failed", bool),
            _p("pool", bool),
            _p("filter_by_height", bool),
            _p("min_height", int),
            _p("max_height", int),
            _p("account_index", int),
            _p("subaddr_indices", _Ints),
            _p("all_accounts", bool),
        ),
        t.TransfersResult,
        "Return a list of transfers, grouped by direction.",
    ),
    WalletMethod(
        "get_transfer_by_txid",
        (_p("txid"), _p("account_index", int)),
        t.TransferByTxidResult,
        "Show information about a transfer to or from this address.",
    ),
    WalletMethod(
        "describe_transfer",
        (_p("unsigned_txset"), _p("multisig_txset")),
        t.DescribeTransferResult,
        "Describe an unsigned or multisig transaction set.",
    ),
    WalletMethod("sign", (_p("data"),), t.SignatureResult, "Sign a string."),
    WalletMethod(
        "verify",
        (_p("data"), _p("address"), _p("signature")),
        t.GoodResult,
        "Verify a signature on a string.",
    ),
    # outputs and key images
    WalletMethod("export_outputs", (_p("all", bool),), t.ExportOutputsResult, "Export outputs in hex format."),
    WalletMethod(
        "import_outputs",
        (_p("outputs_data_hex"),),
        t.ImportOutputsResult,
        "Import outputs in hex format.",
    ),
    WalletMethod(
        "export_key_images",
        (_p("all", bool),),
        t.ExportKeyImagesResult,
        "Export a signed set of key images.",
    ),
    WalletMethod(
        "import_key_images",
        (_p("signed_key_images", List[t.SignedKeyImage]), _p("offset", int)),
        t.ImportKeyImagesResult,
        "Import signed key images and report the spent/unspent balance.",
    ),
    # URIs and address book
    WalletMethod(
        "make_uri",
        (_p("address"), _p("amount", int), _p("payment_id"), _p("recipient_name"), _p("tx_description")),
        t.UriResult,
        "Create a payment URI using the official URI spec.",
    ),
    WalletMethod("parse_uri", (_p("uri"),), t.ParseUriResult, "Parse a payment URI to get payment information."),
    WalletMethod(
        "get_address_book",
        (_p("entries", _Ints),),
        t.AddressBookResult,
        "Retrieve entries from the address book.",
    ),
    WalletMethod(
        "add_address_book",
        (_p("address"), _p("payment_id"), _p("description")),
        t.AddAddressBookResult,
        "Add an entry to the address book.",
    ),
    WalletMethod(
        "edit_address_book",
        (
            _p("index", int),
            _p("set_address", bool),
            _p("set_description", bool),
            _p("set_payment_id", bool),
            _p("address"),
            _p("description"),
            _p("payment_id"),
        ),
        doc="Edit an existing address book entry.",
    ),
    WalletMethod("delete_address_book", (_p("index", int),), doc="Delete an entry from the address book."),
    # refresh and mining
    WalletMethod("refresh", (_p("start_height", int),), t.RefreshResult, "Refresh the wallet after opening it."),
    WalletMethod("auto_refresh", (_p("enable", bool), _p("period", int)), doc="Set whether and how often to refresh automatically."),
    WalletMethod("rescan_spent", (), doc="Rescan the blockchain for spent outputs."),
    WalletMethod(
        "start_mining",
        (_p("threads_count", int), _p("do_background_mining", bool), _p("ignore_battery", bool)),
        doc="Start mining in the daemon.",
    ),
    WalletMethod("stop_mining", (), doc="Stop mining in the daemon."),
    # wallet lifecycle
    WalletMethod("get_languages", (), t.LanguagesResult, "List the languages available for wallet seeds."),
    WalletMethod(
        "create_wallet",
        (_p("filename"), _p("language"), _p("password")),
        doc="Create a new wallet. Wallet RPC must have been started with --wallet-dir.",
    ),
    WalletMethod(
        "generate_from_keys",
        (
            _p("filename"),
            _p("address"),
            _p("viewkey"),
            _p("password"),
            _p("restore_height", int),
            _p("spendkey"),
            _p("autosave_current", bool),
        ),
        t.GenerateFromKeysResult,
        "Restore a wallet from its keys.",
    ),
    WalletMethod("open_wallet", (_p("filename"), _p("password")), doc="Open a wallet."),
    WalletMethod(
        "restore_deterministic_wallet",
        (
            _p("filename"),
            _p("password"),
            _p("seed"),
            _p("restore_height", int),
            _p("language"),
            _p("seed_offset"),
            _p("autosave_current", bool),
        ),
        t.RestoreWalletResult,
        "Restore a wallet from a mnemonic seed.",
    ),
    WalletMethod("close_wallet", (), doc="Close the currently opened wallet after saving it."),
    WalletMethod(
        "change_wallet_password",
        (_p("old_password"), _p("new_password")),
        doc="Change the password of the open wallet.",
    ),
    # multisig
    WalletMethod("is_multisig", (), t.IsMultisigResult, "Check whether the wallet is multisig."),
    WalletMethod("prepare_multisig", (), t.MultisigInfoResult, "Prepare the wallet for multisig by generating its info string."),
    WalletMethod(
        "make_multisig",
        (_p("multisig_info", _Strs), _p("threshold", int), _p("password")),
        t.MakeMultisigResult,
        "Make the wallet multisig by importing peers' multisig strings.",
    ),
    WalletMethod("export_multisig_info", (), t.ExportMultisigInfoResult, "Export multisig info for other participants."),
    WalletMethod(
        "import_multisig_info",
        (_p("info", _Strs),),
        t.ImportMultisigInfoResult,
        "Import multisig info from other participants.",
    ),
    WalletMethod(
        "finalize_multisig",
        (_p("multisig_info", _Strs), _p("password")),
        t.FinalizeMultisigResult,
        "Turn the wallet into a multisig wallet (extra step for N-1/N wallets).",
    ),
    WalletMethod(
        "sign_multisig",
        (_p("tx_data_hex"),),
        t.SignMultisigResult,
        "Sign a transaction in multisig.",
    ),
    WalletMethod(
        "submit_multisig",
        (_p("tx_data_hex"),),
        t.TxHashListResult,
        "Submit a signed multisig transaction.",
    ),
    WalletMethod(
        "exchange_multisig_keys",
        (_p("password"), _p("multisig_info"), _p("force_update_use_with_caution", bool)),
        t.MakeMultisigResult,
        "Run one round of the multisig key exchange.",
    ),
    # misc
    WalletMethod("get_version", (), t.VersionResult, "Get the RPC version (major * 2**16 + minor)."),
    WalletMethod("freeze", (_p("key_image"),), doc="Freeze a single output by key image so it is not used."),
    WalletMethod("frozen", (_p("key_image"),), t.FrozenResult, "Check whether an output is frozen."),
    WalletMethod("thaw", (_p("key_image"),), doc="Thaw a single output by key image so it may be used again."),
    WalletMethod(
        "estimate_tx_size_and_weight",
        (_p("n_inputs", int), _p("n_outputs", int), _p("ring_size", int), _p("rct", bool)),
        t.EstimateTxSizeResult,
        "Estimate the size and weight of a transaction.",
    ),
    WalletMethod("scan_tx", (_p("txids", _Strs),), doc="Scan the given transactions and add them to the wallet."),
]

WALLET_METHODS: Dict[str, WalletMethod] = {m.name: m for m in _METHODS}


def build_params(spec: WalletMethod, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Map Python argument names to wire keys; unset (None) arguments are left out."""
    return {p.key: arguments[p.name] for p in spec.params if arguments.get(p.name) is not None}


def _signature(spec: WalletMethod) -> inspect.Signature:
    params = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for p in spec.params:
        params.append(
            inspect.Parameter(
                p.name,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                default=None,
                annotation=Optional[p.type],
            )
        )
    return inspect.Signature(params, return_annotation=spec.result)


def _docstring(spec: WalletMethod) -> str:
    lines = [spec.doc or f"Call `{spec.name}`.", "", f"Remote method: {spec.name}"]
    if spec.params:
        lines.append("Parameters (all optional, None = wallet default):")
        for p in spec.params:
            suffix = f" (sent as `{p.wire}`)" if p.wire else ""
            lines.append(f"    {p.name}{suffix}")
    return "\n".join(lines)


def _make_method(spec: WalletMethod) -> Callable[..., Any]:
    sig = _signature(spec)

    def method(self, *args: Any, **kwargs: Any) -> Any:
        bound = sig.bind(self, *args, **kwargs)
        return self.call(spec.name, build_params(spec, bound.arguments))

    method.__name__ = spec.name
    method.__qualname__ = f"WalletMethods.{spec.name}"
    method.__doc__ = _docstring(spec)
    method.__signature__ = sig  # type: ignore[attr-defined]
    return method


class WalletMethods(ABC):
    """One method per wallet RPC procedure; subclasses provide `call`."""

    @abstractmethod
    def call(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send one request and return the decoded `result` (or an awaitable of it)."""


for _spec in _METHODS:
    setattr(WalletMethods, _spec.name, _make_method(_spec))
del _spec
