"""
Result and parameter shapes of the wallet RPC.

These are typing-only: responses are returned as plain dicts. Every amount,
height, count, fee, timestamp and index is an `int` of arbitrary size; the
codec guarantees they are never rounded through `float`.
"""

from __future__ import annotations

from typing import Any, Dict, List, TypedDict


EmptyResult = Dict[str, Any]


class SubaddressIndex(TypedDict):
    major: int
    minor: int


class Destination(TypedDict):
    address: str
    amount: int


class KeyImageList(TypedDict):
    key_images: List[str]


class SignedKeyImage(TypedDict):
    key_image: str
    signature: str


class Transfer(TypedDict, total=False):
    address: str
    amount: int
    amounts: List[int]
    confirmations: int
    destinations: List[Destination]
    double_spend_seen: bool
    fee: int
    height: int
    locked: bool
    note: str
    payment_id: str
    subaddr_index: SubaddressIndex
    subaddr_indices: List[SubaddressIndex]
    suggested_confirmations_threshold: int
    timestamp: int
    txid: str
    type: str
    unlock_time: int


# --- balances, addresses, accounts


class SubaddressBalance(TypedDict, total=False):
    account_index: int
    address: str
    address_index: int
    balance: int
    blocks_to_unlock: int
    label: str
    num_unspent_outputs: int
    time_to_unlock: int
    unlocked_balance: int


class BalanceResult(TypedDict, total=False):
    balance: int
    unlocked_balance: int
    multisig_import_needed: bool
    time_to_unlock: int
    blocks_to_unlock: int
    per_subaddress: List[SubaddressBalance]


class AddressEntry(TypedDict, total=False):
    address: str
    address_index: int
    label: str
    used: bool


class AddressResult(TypedDict, total=False):
    address: str
    addresses: List[AddressEntry]


class AddressIndexResult(TypedDict):
    index: SubaddressIndex


class CreateAddressResult(TypedDict, total=False):
    address: str
    address_index: int
    address_indices: List[int]
    addresses: List[str]


class ValidateAddressResult(TypedDict, total=False):
    valid: bool
    integrated: bool
    subaddress: bool
    nettype: str
    openalias_address: str


class SubaddressAccount(TypedDict, total=False):
    account_index: int
    balance: int
    base_address: str
    label: str
    tag: str
    unlocked_balance: int


class AccountsResult(TypedDict, total=False):
    subaddress_accounts: List[SubaddressAccount]
    total_balance: int
    total_unlocked_balance: int


class CreateAccountResult(TypedDict):
    account_index: int
    address: str


class AccountTag(TypedDict, total=False):
    tag: str
    label: str
    accounts: List[int]


class AccountTagsResult(TypedDict):
    account_tags: List[AccountTag]


class HeightResult(TypedDict):
    height: int


# --- transfers and sweeps


class TransferResult(TypedDict, total=False):
    amount: int
    fee: int
    multisig_txset: str
    spent_key_images: KeyImageList
    tx_blob: str
    tx_hash: str
    tx_key: str
    tx_metadata: str
    unsigned_txset: str
    weight: int


class TransferSplitResult(TypedDict, total=False):
    amount_list: List[int]
    fee_list: List[int]
    multisig_txset: str
    spent_key_images_list: List[KeyImageList]
    tx_blob_list: List[str]
    tx_hash_list: List[str]
    tx_key_list: List[str]
    tx_metadata_list: List[str]
    unsigned_txset: str
    weight_list: List[int]


# sweep_dust and sweep_all answer in the transfer_split shape.
SweepResult = TransferSplitResult


class SweepSingleResult(TypedDict, total=False):
    amount: int
    fee: int
    multisig_txset: str
    spent_key_images: KeyImageList
    tx_blob: str
    tx_hash: str
    tx_key: str
    tx_metadata: str
    unsigned_txset: str
    weight: int


class SignTransferResult(TypedDict, total=False):
    signed_txset: str
    tx_hash_list: List[str]
    tx_raw_list: List[str]
    tx_key_list: List[str]


class TxHashListResult(TypedDict):
    tx_hash_list: List[str]


class RelayTxResult(TypedDict):
    tx_hash: str


class Payment(TypedDict, total=False):
    address: str
    amount: int
    block_height: int
    locked: bool
    payment_id: str
    subaddr_index: SubaddressIndex
    tx_hash: str
    unlock_time: int


class PaymentsResult(TypedDict, total=False):
    payments: List[Payment]


class IncomingTransfer(TypedDict, total=False):
    amount: int
    block_height: int
    frozen: bool
    global_index: int
    key_image: str
    pubkey: str
    spent: bool
    subaddr_index: SubaddressIndex
    tx_hash: str
    unlocked: bool


class IncomingTransfersResult(TypedDict, total=False):
    transfers: List[IncomingTransfer]


# "in" is a keyword, so this one needs the functional form.
TransfersResult = TypedDict(
    "TransfersResult",
    {
        "in": List[Transfer],
        "out": List[Transfer],
        "pending": List[Transfer],
        "failed": List[Transfer],
        "pool": List[Transfer],
    },
    total=False,
)


class TransferByTxidResult(TypedDict, total=False):
    transfer: Transfer
    transfers: List[Transfer]


class TransferDescription(TypedDict, total=False):
    amount_in: int
    amount_out: int
    change_address: str
    change_amount: int
    dummy_outputs: int
    extra: str
    fee: int
    payment_id: str
    recipients: List[Destination]
    ring_size: int
    unlock_time: int


class DescribeTransferResult(TypedDict, total=False):
    desc: List[TransferDescription]


# --- keys, proofs, notes


class QueryKeyResult(TypedDict):
    key: str


class IntegratedAddressResult(TypedDict):
    integrated_address: str
    payment_id: str


class SplitIntegratedAddressResult(TypedDict, total=False):
    is_subaddress: bool
    payment_id: str
    standard_address: str


class TxNotesResult(TypedDict):
    notes: List[str]


class AttributeResult(TypedDict):
    value: str


class TxKeyResult(TypedDict):
    tx_key: str


class SignatureResult(TypedDict):
    signature: str


class CheckTxKeyResult(TypedDict, total=False):
    confirmations: int
    in_pool: bool
    received: int


class CheckTxProofResult(TypedDict, total=False):
    confirmations: int
    good: bool
    in_pool: bool
    received: int


class GoodResult(TypedDict):
    good: bool


class CheckReserveProofResult(TypedDict, total=False):
    good: bool
    spent: int
    total: int


class ExportOutputsResult(TypedDict):
    outputs_data_hex: str


class ImportOutputsResult(TypedDict):
    num_imported: int


class ExportKeyImagesResult(TypedDict, total=False):
    offset: int
    signed_key_images: List[SignedKeyImage]


class ImportKeyImagesResult(TypedDict, total=False):
    height: int
    spent: int
    unspent: int


# --- URIs and address book


class UriResult(TypedDict):
    uri: str


class ParsedUri(TypedDict, total=False):
    address: str
    amount: int
    payment_id: str
    recipient_name: str
    tx_description: str


class ParseUriResult(TypedDict):
    uri: ParsedUri


class AddressBookEntry(TypedDict, total=False):
    address: str
    description: str
    index: int
    payment_id: str


class AddressBookResult(TypedDict, total=False):
    entries: List[AddressBookEntry]


class AddAddressBookResult(TypedDict):
    index: int


# --- wallet lifecycle and daemon


class RefreshResult(TypedDict, total=False):
    blocks_fetched: int
    received_money: bool


class LanguagesResult(TypedDict, total=False):
    languages: List[str]
    languages_local: List[str]


class GenerateFromKeysResult(TypedDict, total=False):
    address: str
    info: str


class RestoreWalletResult(TypedDict, total=False):
    address: str
    info: str
    seed: str
    was_deprecated: bool


class VersionResult(TypedDict, total=False):
    version: int
    release: bool


class FrozenResult(TypedDict):
    frozen: bool


class EstimateTxSizeResult(TypedDict):
    size: int
    weight: int


# --- multisig


class IsMultisigResult(TypedDict, total=False):
    multisig: bool
    ready: bool
    threshold: int
    total: int


class MultisigInfoResult(TypedDict):
    multisig_info: str


class MakeMultisigResult(TypedDict, total=False):
    address: str
    multisig_info: str


class ExportMultisigInfoResult(TypedDict):
    info: str


class ImportMultisigInfoResult(TypedDict):
    n_outputs: int


class FinalizeMultisigResult(TypedDict):
    address: str


class SignMultisigResult(TypedDict, total=False):
    tx_data_hex: str
    tx_hash_list: List[str]
