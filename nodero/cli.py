from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from nodero import codec
from nodero.config import load_wallet_config
from nodero.errors import WalletRpcError
from nodero.methods import WALLET_METHODS
from nodero.rpc import WalletRpcClient


def _parse_params(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        value = codec.decode(raw)
    except codec.CodecError as e:
        raise SystemExit(f"--params is not valid JSON: {e}")
    if not isinstance(value, dict):
        raise SystemExit("--params must be a JSON object")
    return value


def _print_methods() -> None:
    width = max(len(name) for name in WALLET_METHODS)
    for name, spec in sorted(WALLET_METHODS.items()):
        print(f"{name:<{width}}  {spec.doc}")


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
    logger.enable("nodero")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodero-rpc",
        description="Issue one JSON-RPC call against a monero-wallet-rpc server and print the result.",
    )
    parser.add_argument("method", nargs="?", help="Remote method name, e.g. get_balance")
    parser.add_argument(
        "--params",
        default=None,
        help='Parameter object as JSON, e.g. \'{"account_index": 0}\'',
    )
    parser.add_argument("--host", default=None, help="Wallet RPC host (default: $wallet_host or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Wallet RPC port (default: $wallet_port or 38090)")
    parser.add_argument(
        "--env-file",
        dest="env_file",
        type=Path,
        default=None,
        help="dotenv file to read connection settings from (default: ./.env)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the wallet (default: wait indefinitely)",
    )
    parser.add_argument("--list", dest="list_methods", action="store_true", help="List known methods and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_methods:
        _print_methods()
        return 0
    if not args.method:
        parser.error("method is required (or use --list)")

    _setup_logging(args.verbose)
    params = _parse_params(args.params)

    cfg = load_wallet_config(args.env_file)
    client = WalletRpcClient(
        args.host or cfg.host,
        args.port if args.port is not None else cfg.port,
        timeout=args.timeout,
    )
    if args.method not in WALLET_METHODS:
        print(f"note: {args.method} is not a known wallet method; sending it anyway", file=sys.stderr)

    try:
        result = client.call(args.method, params)
    except WalletRpcError as e:
        code = f" (code {e.code})" if e.code is not None else ""
        print(f"error [{e.kind.value}]{code}: {e}", file=sys.stderr)
        return 1

    print(codec.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
