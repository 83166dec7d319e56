"""Canonical JSON serialization helpers."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

# Integers beyond this magnitude are not exactly representable as IEEE-754
# doubles; they are rendered through the float path like a JSON.parse consumer would.
_MAX_SAFE_INTEGER = 2**53 - 1
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def dumps_json(payload: Any) -> str:
    return json.dumps(payload, sort_keys=True)


def _escape_lone_surrogates(text: str) -> str:
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def dumps_pretty_array(items: list[str]) -> str:
    """Render ``items`` as a two-space indented JSON array with a trailing newline."""
    return _escape_lone_surrogates(json.dumps(items, indent=2, ensure_ascii=False)) + "\n"


def _encode_string(value: str) -> str:
    return _escape_lone_surrogates(json.dumps(value, ensure_ascii=False))


def _encode_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        return "null"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr() yields the shortest round-tripping digits, same as Number#toString.
    parsed = Decimal(repr(abs(value))).as_tuple()
    digits = list(parsed.digits)
    exponent = int(parsed.exponent)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    k = len(text)
    n = exponent + k
    if k <= n <= 21:
        return sign + text + "0" * (n - k)
    if 0 < n <= 21:
        return sign + text[:n] + "." + text[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + text
    e = n - 1
    mantissa = text if k == 1 else f"{text[0]}.{text[1:]}"
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _encode_number(value: int | float) -> str:
    if isinstance(value, int):
        if abs(value) <= _MAX_SAFE_INTEGER:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            return "null"
    return _encode_float(value)


def canonical_json(value: Any) -> str:
    """Serialize ``value`` compactly, byte-compatible with ECMAScript ``JSON.stringify``.

    Mapping keys keep their insertion order, non-ASCII text is emitted as-is and
    numbers follow ``Number#toString`` formatting (``1.0`` renders as ``1``,
    ``1e-7`` as ``1e-7``). Approval fingerprints depend on this exact output.
    """
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, (int, float)):
        return _encode_number(value)
    if isinstance(value, Mapping):
        members = ",".join(f"{_encode_string(str(key))}:{canonical_json(item)}" for key, item in value.items())
        return "{" + members + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(canonical_json(item) for item in value) + "]"
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")
