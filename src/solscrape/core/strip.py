"""Comment stripper — single-pass state machine over raw source text.

Removes ``//`` line comments and ``/* ... */`` block comments, keeps
single- and double-quoted string literals byte-for-byte, and drops every
line left empty or whitespace-only.

The function is total: an unterminated block comment swallows the rest of
the input and an unterminated string runs to end of input as string
content.  Block comments do not nest; the first ``*/`` closes.
"""

from __future__ import annotations

from enum import Enum


class ParserState(str, Enum):
    """Scanner state; exactly one is active at any position."""

    NORMAL = "normal"
    IN_DOUBLE_STRING = "in_double_string"
    IN_SINGLE_STRING = "in_single_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


_OPENERS = {
    '"': ParserState.IN_DOUBLE_STRING,
    "'": ParserState.IN_SINGLE_STRING,
}
_CLOSERS = {
    ParserState.IN_DOUBLE_STRING: '"',
    ParserState.IN_SINGLE_STRING: "'",
}
_HSPACE = frozenset(" \t")


def _flush(out: list[str], line: list[str], *, newline: bool, trim: bool) -> None:
    """Move the pending logical line into *out* unless it is blank."""
    text = "".join(line)
    line.clear()
    if not text.strip():
        return
    if trim:
        text = text.rstrip()
    out.append(text + "\n" if newline else text)


def strip_comments(raw_text: str) -> str:
    """Return *raw_text* with comments and blank lines removed.

    Lines are buffered while scanning so blank-line elision happens in the
    same pass.  A newline ending a ``//`` comment terminates the current
    line: it survives only when code preceded the comment.  Trailing
    whitespace is trimmed from lines that end outside a string, and the
    whitespace left behind by a block comment that opened a line is
    dropped (indentation before the comment is kept).
    """
    out: list[str] = []
    line: list[str] = []
    state = ParserState.NORMAL
    skip_gap = False
    i = 0
    n = len(raw_text)

    while i < n:
        ch = raw_text[i]
        nxt = raw_text[i + 1] if i + 1 < n else ""

        if state is ParserState.NORMAL:
            if skip_gap:
                if ch in _HSPACE:
                    i += 1
                    continue
                skip_gap = False
            if ch in _OPENERS:
                state = _OPENERS[ch]
                line.append(ch)
            elif ch == "/" and nxt == "/":
                state = ParserState.IN_LINE_COMMENT
                i += 2
                continue
            elif ch == "/" and nxt == "*":
                state = ParserState.IN_BLOCK_COMMENT
                i += 2
                continue
            elif ch == "\n":
                _flush(out, line, newline=True, trim=True)
            else:
                line.append(ch)
            i += 1

        elif state in _CLOSERS:
            line.append(ch)
            if ch == "\\" and nxt:
                # escaped char is content, never a delimiter
                line.append(nxt)
                i += 2
                continue
            if ch == _CLOSERS[state]:
                state = ParserState.NORMAL
            i += 1

        elif state is ParserState.IN_LINE_COMMENT:
            if ch == "\n":
                state = ParserState.NORMAL
                _flush(out, line, newline=True, trim=True)
            i += 1

        else:
            if ch == "*" and nxt == "/":
                state = ParserState.NORMAL
                skip_gap = not "".join(line).strip()
                i += 2
                continue
            i += 1

    _flush(out, line, newline=False, trim=state not in _CLOSERS)
    return "".join(out)
