"""Escaping helpers shared by the snippet templates.

Each helper returns the *body* of a string literal for one quoting context; the
surrounding quotes stay in the template. Values free of special characters come
back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable

_SHORT_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _hex_escape(code: int) -> str:
    return f"\\x{code:02x}"


def _swift_escape(code: int) -> str:
    return f"\\u{{{code:x}}}"


def _json_escape(code: int) -> str:
    return f"\\u{code:04x}"


def _escape(value: str, specials: str, control: Callable[[int], str]) -> str:
    out: list[str] = []
    for ch in value:
        if ch == "\\" or ch in specials:
            out.append("\\" + ch)
        elif ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(control(ord(ch)))
        else:
            out.append(ch)
    return "".join(out)


def single_quoted(value: str) -> str:
    """Body of a single-quoted Python or JavaScript string."""
    return _escape(value, "'", _hex_escape)


def double_quoted(value: str) -> str:
    """Body of a double-quoted Swift string."""
    return _escape(value, '"', _swift_escape)


def json_string(value: str) -> str:
    """Body of a JSON string."""
    return _escape(value, '"', _json_escape)


def shell_double_quoted(value: str) -> str:
    """Body of a double-quoted POSIX shell word.

    The shell has no escape sequences for control characters inside double
    quotes, so they are spelled out as ``\\xNN`` text.
    """
    return _escape(value, '"$`', _hex_escape)


def shell_json_string(value: str) -> str:
    """Body of a JSON string that sits inside a single-quoted shell argument."""
    return json_string(value).replace("'", "'\\''")


def js_array(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(f"'{single_quoted(v)}'" for v in values) + "]"


def swift_array(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{double_quoted(v)}"' for v in values) + "]"


def shell_json_array(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{shell_json_string(v)}"' for v in values) + "]"
