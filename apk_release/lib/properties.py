"""Reader for Java-style ``.properties`` files (``key.properties``).

Supports the subset of ``java.util.Properties.load`` that signing files use:
``#``/``!`` comments, ``=``/``:``/whitespace separators, backslash line
continuations and the usual escapes (including ``\\uXXXX``).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterator, Tuple

_WS = " \t\f"
_LINE_END = re.compile(r"\r\n|\r|\n")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in _LINE_END.split(text):
        line = raw.lstrip(_WS)
        if pending is None and (not line or line[0] in "#!"):
            continue
        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _split_key_value(line: str) -> Tuple[str, str]:
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in "=:" or c in _WS:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WS)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WS)
    return key, rest


def _unescape(s: str) -> str:
    if "\\" not in s:
        return s

    out: list[str] = []
    i = 0
    while i < len(s):
        c = s[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue

        nxt = s[i + 1 : i + 2]
        if nxt == "u":
            digits = s[i + 2 : i + 6]
            if len(digits) != 4:
                raise ValueError(f"Malformed \\uXXXX escape: \\u{digits}")
            try:
                out.append(chr(int(digits, 16)))
            except ValueError as e:
                raise ValueError(f"Malformed \\uXXXX escape: \\u{digits}") from e
            i += 6
            continue

        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    props: Dict[str, str] = {}
    for logical in _logical_lines(text):
        if not logical:
            continue
        key, value = _split_key_value(logical)
        props[_unescape(key)] = _unescape(value)
    return props


def read_properties(path: str | Path) -> Dict[str, str]:
    """Load a properties file.

    Decoded as ISO-8859-1, the encoding ``Properties.load(InputStream)``
    assumes; non-latin characters must use ``\\uXXXX`` escapes.
    """
    p = Path(path)
    return parse_properties(p.read_text(encoding="latin-1"))
