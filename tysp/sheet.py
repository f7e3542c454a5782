"""Plain-text spreadsheets: cells separated by ``|``, one row per line.

A cell holds a stream of tokens: numbers, quoted strings, cell references
(``@`` for constant and ``$`` for variable references, column letters
followed by a zero-based row number) and single-character operators.  The
first token of a cell decides what the cell shows.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from os import PathLike

__all__ = [
    "MAX_TOKENS",
    "DEFAULT_WIDTH",
    "TokenType",
    "CellType",
    "CellError",
    "Token",
    "Cell",
    "Sheet",
    "sheet_dimensions",
    "parse_sheet",
    "load_sheet",
]

MAX_TOKENS = 64
DEFAULT_WIDTH = 10

_SPACES = frozenset(" \t\v\f\r")
_OPERATORS = frozenset("+*/()=^v<>")
_LONG_MAX = 2**63 - 1

_HEX_NUMBER = re.compile(
    r"-?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DEC_NUMBER = re.compile(r"-?[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")
_DIGITS = re.compile(r"[0-9]+")


class TokenType(IntEnum):
    """Kinds of token; operator kinds carry their character code."""

    UNKNOWN = -1
    NUMBER = 0
    STRING = ord('"')
    CTEREF = ord("@")
    VARREF = ord("$")
    ADD_OP = ord("+")
    SUB_OP = ord("-")
    MUL_OP = ord("*")
    DIV_OP = ord("/")
    LFT_PAR = ord("(")
    RGT_PAR = ord(")")
    EQ_SIGN = ord("=")
    CLONE_UP = ord("^")
    CLONE_DN = ord("v")
    CLONE_LF = ord("<")
    CLONE_RT = ord(">")


class CellType(IntEnum):
    """What a cell shows."""

    EMPTY = 0
    NUMBER = 1
    TEXT = 2
    ERROR = 3


class CellError(Enum):
    """Reasons a cell is marked as faulty, with their labels."""

    BOUNDS = "BOUNDS!"
    INFSTR = "INFSTR!"
    TOOTOK = "TOOTOK!"
    NSENSE = "NSENSE!"


@dataclass
class Token:
    """One token of a cell; ``start`` is its index in the sheet's source."""

    line: int
    offset: int
    start: int
    type: TokenType = TokenType.NUMBER
    length: int = 0
    number: float = 0.0
    row: int = 0
    col: int = 0


@dataclass
class Cell:
    """A cell with its tokens and the value it settled on."""

    tokens: list[Token] = field(default_factory=list)
    type: CellType = CellType.EMPTY
    number: float = 0.0
    text: str = ""
    error: CellError | None = None
    fin_col: bool = False

    def _fail(self, error: CellError) -> None:
        self.error = error
        self.text = error.value
        self.type = CellType.ERROR


@dataclass
class Sheet:
    """A parsed sheet: ``rows`` x ``cols`` cells stored row by row."""

    source: str
    rows: int
    cols: int
    cells: list[Cell]
    widths: list[int]

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, col = position
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the sheet")
        return self.cells[row * self.cols + col]

    def _row_cells(self):
        for row in range(self.rows):
            yield self.cells[row * self.cols:(row + 1) * self.cols]

    def render(self) -> str:
        """Lay the sheet out as a table, one line per row."""
        parts: list[str] = []
        for row in self._row_cells():
            for cell, width in zip(row, self.widths):
                if cell.type is CellType.NUMBER:
                    parts.append(f"{cell.number:>{width}.1f}  ")
                elif cell.type is CellType.TEXT:
                    parts.append(f"{cell.text:<{width}}  ")
                elif cell.type is CellType.EMPTY:
                    parts.append(" " * width + "  ")
                if cell.fin_col:
                    parts.append("\n")
        return "".join(parts)


def sheet_dimensions(text: str) -> tuple[int, int]:
    """Return ``(rows, cols)``: the number of newlines and the most unquoted ``|`` on a line."""
    rows = cols = count = 0
    quoted = False
    for ch in text:
        if ch == '"':
            quoted = not quoted
        elif ch == "|":
            if not quoted:
                count += 1
        elif ch == "\n":
            cols = max(cols, count)
            count = 0
            rows += 1
    return rows, max(cols, count)


def _read_number(text: str, start: int, token: Token) -> int:
    match = _HEX_NUMBER.match(text, start)
    if match:
        literal = match.group()
        try:
            value = float.fromhex(literal)
        except OverflowError:
            value = float("-inf") if literal.startswith("-") else float("inf")
    else:
        match = _DEC_NUMBER.match(text, start)
        literal = match.group()
        value = float(literal)
    token.type = TokenType.NUMBER
    token.number = value
    token.length = len(literal)
    return token.length


def _string_end(text: str, start: int) -> int | None:
    end = text.find('"', start + 1)
    nul = text.find("\0", start + 1)
    if end < 0 or 0 <= nul < end:
        return None
    return end


def _is_letter(ch: str) -> bool:
    return "a" <= ch.lower() <= "z"


def _read_reference(text: str, start: int, token: Token, rows: int, cols: int) -> tuple[int, bool]:
    """Fill ``token`` from a reference; return the characters used and whether it is in bounds."""
    sigil = text[start]
    end = start + 1
    while end < len(text) and _is_letter(text[end]):
        end += 1
    letters = text[start + 1:end]

    if letters:
        values = [ord(ch.lower()) - ord("a") + 1 for ch in reversed(letters)]
        token.col = (values[0] + 26 * sum(values[1:]) - 1) & 0xFFFF

    digits = _DIGITS.match(text, end)
    if digits:
        token.row = min(int(digits.group()), _LONG_MAX) & 0xFFFF
        end = digits.end()

    token.type = TokenType(ord(sigil))
    token.length = end - start
    return token.length, token.row < rows and token.col < cols


def _tokenize(sheet: Sheet) -> None:
    text = sheet.source
    size = len(text)
    index = 0
    line = 1
    offset = 0
    i = 0

    while i < size:
        ch = text[i]
        if ch == "\n":
            index = line * sheet.cols
            line += 1
            offset = 0
            i += 1
            continue
        if ch == "|":
            index += 1
            offset += 1
            i += 1
            continue
        if ch in _SPACES:
            offset += 1
            i += 1
            continue

        cell = sheet.cells[index] if index < len(sheet.cells) else None
        if cell is None or cell.type is CellType.ERROR:
            offset += 1
            i += 1
            continue

        token = Token(line=line, offset=offset, start=i)
        following = text[i + 1] if i + 1 < size else ""

        if ch.isascii() and ch.isdigit() or (ch == "-" and following.isascii() and following.isdigit()):
            used = _read_number(text, i, token)
            i += used
            offset += used
        elif ch == '"':
            end = _string_end(text, i)
            if end is None:
                cell._fail(CellError.INFSTR)
                i += 1
            else:
                token.type = TokenType.STRING
                token.length = end - i + 1
                offset += token.length
                i = end + 1
        elif ch in "@$":
            used, in_bounds = _read_reference(text, i, token, sheet.rows, sheet.cols)
            i += used
            offset += used
            if not in_bounds:
                cell._fail(CellError.BOUNDS)
        elif ch == "-" or ch in _OPERATORS:
            token.type = TokenType(ord(ch))
            token.length = 1
            offset += 1
            i += 1
        else:
            # Unrecognised characters leave a zero-valued, zero-length number token.
            i += 1

        cell.tokens.append(token)
        if len(cell.tokens) == MAX_TOKENS:
            cell._fail(CellError.TOOTOK)


def _settle(sheet: Sheet) -> None:
    for row in sheet._row_cells():
        for col, cell in enumerate(row):
            if not cell.tokens:
                continue
            head = cell.tokens[0]
            width = 0
            if head.type is TokenType.NUMBER:
                cell.number = head.number
                cell.type = CellType.NUMBER
                width = head.length
            elif head.type is TokenType.STRING:
                cell.text = sheet.source[head.start + 1:head.start + head.length - 1]
                cell.type = CellType.TEXT
                width = len(cell.text)
            sheet.widths[col] = max(sheet.widths[col], width)
        if row:
            row[-1].fin_col = True


def parse_sheet(text: str) -> Sheet:
    """Parse the text of a sheet into its cells and column widths."""
    rows, cols = sheet_dimensions(text)
    sheet = Sheet(
        source=text,
        rows=rows,
        cols=cols,
        cells=[Cell() for _ in range(rows * cols)],
        widths=[DEFAULT_WIDTH] * cols,
    )
    _tokenize(sheet)
    _settle(sheet)
    return sheet


def load_sheet(path: str | PathLike[str]) -> Sheet:
    """Read and parse the sheet stored at ``path``; raises ``OSError`` if it cannot be read."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return parse_sheet(handle.read())