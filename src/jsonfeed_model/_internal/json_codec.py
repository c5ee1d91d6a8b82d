"""JSON encoding and decoding used by the public entrypoints.

Decoding is strict JSON: the non-standard ``NaN``, ``Infinity`` and
``-Infinity`` literals that the ``json`` module accepts by default are
rejected, and so are numbers that overflow a double.
"""

import json
import math
from typing import Any, Union


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def loads(data: Union[str, bytes, bytearray]) -> Any:
    """Decode JSON text or UTF-8 bytes.

    Raises:
        ValueError: On syntax errors, invalid UTF-8, non-standard literals
            or out-of-range numbers (json.JSONDecodeError and
            UnicodeDecodeError are both ValueError).
    """
    return json.loads(data, parse_constant=_reject_constant, parse_float=_parse_float)


def dumps(obj: Any, canonical: bool = False) -> str:
    """
    Serialize a JSON value.

    Canonical rules (``canonical=True``), for byte-stable output:
    - Sorted keys
    - Stable separators (",", ":")
    - UTF-8 (no ASCII escaping)

    Otherwise keys keep their insertion order.

    Args:
        obj: JSON-compatible Python object
        canonical: Whether to emit canonical JSON

    Returns:
        JSON string
    """
    if canonical:
        return json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    return json.dumps(obj, ensure_ascii=False, allow_nan=False)
