"""Small command-line flag parser.

Flags come in a long form (``--name`` or ``--name=value``) and a short form
(``-n``).  A flag may refuse, require or optionally accept an argument.
The argument is given either after ``=`` in the long form or as the next
element of the command line.  Everything after a lone ``--`` is collected
as positional arguments.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum

__all__ = ["ArgMode", "Fatal", "Flag", "Found", "ParseResult", "CxaError", "parse"]


class ArgMode(IntEnum):
    """Whether a flag takes an argument."""

    NON = 0
    YES = 1
    MAY = 2


class Fatal(IntEnum):
    """Reasons a command line cannot be parsed."""

    NONE = 0
    NON_SENSE = 1
    UNDEF_FLAG = 2
    UNNECESSARY_ARG = 3
    ARG_EXPECTED = 4

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Fatal.NONE: "",
    Fatal.NON_SENSE: "element within argv does not make sense",
    Fatal.UNDEF_FLAG: "flag found was not defined as a program's option",
    Fatal.UNNECESSARY_ARG: "giving argument to a flag which already has its own",
    Fatal.ARG_EXPECTED: "flag was expecting an argument but none was given",
}


@dataclass(frozen=True)
class Flag:
    """A flag the program understands: ``--name`` and ``-id``."""

    name: str
    id: str
    mode: ArgMode = ArgMode.NON


@dataclass
class Found:
    """A flag seen on the command line together with its argument, if any."""

    flag: Flag
    argument: str | None = None


@dataclass
class ParseResult:
    """Flags found, in order, and the positional arguments after ``--``."""

    found: list[Found] = field(default_factory=list)
    positional: list[str] = field(default_factory=list)

    @property
    def last(self) -> Found | None:
        """The most recently seen flag."""
        return self.found[-1] if self.found else None


class CxaError(ValueError):
    """Raised when the command line cannot be parsed."""

    def __init__(self, fatal: Fatal, index: int, element: str | None = None) -> None:
        super().__init__(fatal.message)
        self.fatal = fatal
        self.index = index
        self.element = element


class _Kind(Enum):
    NON_SENSE = "non_sense"
    ARGUMENT = "argument"
    LONG_FLAG = "long_flag"
    SHORT_FLAG = "short_flag"
    TERMINATOR = "terminator"


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _classify(element: str) -> _Kind:
    if element.startswith("--"):
        if len(element) == 2:
            return _Kind.TERMINATOR
        return _Kind.LONG_FLAG if _is_alnum(element[2]) else _Kind.NON_SENSE
    if element.startswith("-"):
        return _Kind.SHORT_FLAG if len(element) > 1 and _is_alnum(element[1]) else _Kind.NON_SENSE
    return _Kind.ARGUMENT


def _match_long(text: str, flags: Sequence[Flag]) -> Found | None:
    eq = text.rfind("=")
    name_len = eq if eq > 0 else len(text)
    for flag in flags:
        n = max(len(flag.name), name_len)
        if text[:n] == flag.name[:n]:
            return Found(flag, text[eq + 1:] if eq > 0 else None)
    return None


def _match_short(ident: str, flags: Sequence[Flag]) -> Found | None:
    for flag in flags:
        if flag.id == ident:
            return Found(flag)
    return None


def _awaiting_required(last: Found | None) -> bool:
    return last is not None and last.argument is None and last.flag.mode == ArgMode.YES


def parse(argv: Sequence[str], flags: Sequence[Flag]) -> ParseResult:
    """Parse ``argv`` (whose first element is the program name) against ``flags``.

    Raises :class:`CxaError` with the reason and the index of the element at fault.
    """
    result = ParseResult()
    options_done = False

    for index, element in enumerate(argv[1:], start=1):
        if options_done:
            result.positional.append(element)
            continue

        kind = _classify(element)
        if kind is _Kind.NON_SENSE:
            raise CxaError(Fatal.NON_SENSE, index, element)

        if kind is _Kind.TERMINATOR:
            options_done = True
            continue

        if kind is _Kind.ARGUMENT:
            last = result.last
            if last is not None and last.argument is None and last.flag.mode != ArgMode.NON:
                last.argument = element
                continue
            raise CxaError(Fatal.UNNECESSARY_ARG, index, element)

        if _awaiting_required(result.last):
            raise CxaError(Fatal.ARG_EXPECTED, index, element)

        if kind is _Kind.LONG_FLAG:
            found = _match_long(element[2:], flags)
        else:
            found = _match_short(element[1], flags)
        if found is None:
            raise CxaError(Fatal.UNDEF_FLAG, index, element)
        result.found.append(found)

    if _awaiting_required(result.last):
        index = max(len(argv) - 1, 0)
        raise CxaError(Fatal.ARG_EXPECTED, index, argv[index] if argv else None)

    return result