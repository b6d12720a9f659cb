"""Small string helpers: case, full-width folding, length and JSON rendering."""

from __future__ import annotations

import base64
import dataclasses
import json
from typing import Any

_SBC_TO_DBC = str.maketrans(
    {
        "＋": "+",
        "－": "-",
        "０": "0",
        "１": "1",
        "２": "2",
        "３": "3",
        "４": "4",
        "５": "5",
        "６": "6",
        "７": "7",
        "８": "8",
        "９": "9",
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "，": ",",
        "。": ".",
        "？": "?",
        "×": "*",
        "／": "/",
        "％": "%",
        "＃": "#",
        "＠": "@",
    }
)

_HTML_SAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def uc_first(text: str) -> str:
    """Upper-case the first character if it is an ASCII lower-case letter."""
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


def sbc_to_dbc(text: str) -> str:
    """Replace common full-width characters with their half-width forms."""
    return text.translate(_SBC_TO_DBC)


def concat(*args: str) -> str:
    """Join all arguments into one string."""
    return "".join(args)


def str_len(text: str) -> int:
    """Number of characters (code points) in the text."""
    return len(text)


def filter_emoji(text: str) -> str:
    """Drop every character that needs four bytes in UTF-8."""
    return "".join(ch for ch in text if ord(ch) < 0x10000)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serialisable")


def any_to_string(value: Any) -> str:
    """Render a value as compact JSON; return an empty string on failure."""
    if value is None:
        return ""
    try:
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            sort_keys=True,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError):
        return ""
    return text.translate(_HTML_SAFE)