# clopts — MIT Licensed
"""
Splits raw launch arguments into the structure the resolver binds from.

Any token starting with `-` opens a flag. Bare tokens before the first flag are
entries (positional arguments); bare tokens after a flag belong to that flag
until the next one. A flag given twice keeps a single key and collects the
values of both occurrences.

Example:
    tokenize(["in.txt", "--port", "80", "-v"])
    # TokenizedInput(entries=['in.txt'], options={'--port': ['80'], '-v': []})
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class TokenizedInput:
    """Leading positional tokens and flag tokens with their following values."""

    entries: list[str] = field(default_factory=list)
    options: dict[str, list[str]] = field(default_factory=dict)


def tokenize(argv: Sequence[str] | None = None) -> TokenizedInput:
    """Tokenize `argv`, defaulting to `sys.argv[1:]`."""
    if argv is None:
        argv = sys.argv[1:]

    tokens = TokenizedInput()
    key: str | None = None
    for arg in argv:
        if arg.startswith("-"):
            key = arg
            tokens.options.setdefault(key, [])
        elif key is None:
            tokens.entries.append(arg)
        else:
            tokens.options[key].append(arg)
    return tokens
