from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union


class CodecError(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default; a wallet never sends them.
    raise CodecError(f"Non-standard JSON constant in response: {name}")


def encode_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Build the wire parameter bag.

    - `None` means "unset": such keys are dropped from the top level so the
      wallet applies its own default.
    - Nested values are sent as given.
    """
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise TypeError(f"params must be a mapping, got {type(params).__name__}")
    return {str(k): v for k, v in params.items() if v is not None}


def encode_request(envelope: Mapping[str, Any]) -> bytes:
    # Python ints serialize as bare literals of any size.
    return json.dumps(envelope, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")


def decode(text: Union[str, bytes, bytearray], *, parse_float: Any = None) -> Any:
    """
    Decode a response body.

    Numeric tokens are classified by lexical form while parsing: integer
    literals become `int` (exact, no 2**53 ceiling) and literals with a
    fraction or exponent go through `parse_float` (default `float`).
    String values are never converted.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"Response body is not UTF-8: {e}") from e
    try:
        return json.loads(
            text,
            parse_int=int,
            parse_float=parse_float or float,
            parse_constant=_reject_constant,
        )
    except CodecError:
        raise
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the interpreter's digit limit.
        raise CodecError(f"Malformed JSON: {e}") from e


def dumps(value: Any, *, indent: Optional[int] = None) -> str:
    return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=indent)
