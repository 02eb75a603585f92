"""A small printf-style formatter with the conversions of a user-mode libc."""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from rvlab.intlimits import wrap_signed, wrap_unsigned

_INT64_SIGN = 1 << 63
_INT64_MIN_TEXT = "-9223372036854775808"


class Syscall(IntEnum):
    """System call numbers used by user programs."""

    WRITE = 64
    GETPID = 172
    CLONE = 220


@dataclass
class Counter:
    """Receives the number of characters written so far at a ``%n`` conversion."""

    value: int = 0


@dataclass
class _Flags:
    longflag: bool = False
    sharpflag: bool = False
    zeroflag: bool = False
    spaceflag: bool = False
    sign: bool = False
    width: int = 0
    prec: int = -1


def isspace(c: Any) -> bool:
    """Whether ``c`` (a one-character string or a character code) is white space."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("isspace expects a single character")
        c = ord(c)
    return c == 0x20 or 0x09 <= c <= 0x0D


def _digit_value(ch: str) -> Optional[int]:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return None


def strtol(text: str, base: int) -> tuple[int, int]:
    """Parse a long integer from the start of ``text``.

    Returns the value and the index just past the characters consumed. Leading
    white space and a sign are skipped; base 0 picks 16, 8 or 10 from the prefix.
    """
    pos = 0
    end = len(text)
    while pos < end and isspace(text[pos]):
        pos += 1

    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    if base == 0:
        if pos < end and text[pos] == "0":
            pos += 1
            if pos < end and text[pos] in "xX":
                base = 16
                pos += 1
            else:
                base = 8
        else:
            base = 10

    value = 0
    while pos < end:
        digit = _digit_value(text[pos])
        if digit is None or digit >= base:
            break
        value = value * base + digit
        pos += 1

    value = wrap_signed(value, 64)
    return (wrap_signed(-value, 64) if negative else value), pos


def _format_decimal(num: int, is_signed: bool, flags: _Flags) -> str:
    if is_signed and num == _INT64_SIGN:
        return _INT64_MIN_TEXT
    if flags.prec == 0 and num == 0:
        return ""

    negative = is_signed and num >= _INT64_SIGN
    if negative:
        num = (1 << 64) - num
    digits = str(num)
    has_sign = is_signed and (negative or flags.sign or flags.spaceflag)

    if flags.prec == -1 and flags.zeroflag:
        flags.prec = flags.width

    padding = flags.width - max(len(digits), flags.prec) - has_sign
    sign = ""
    if has_sign:
        sign = "-" if negative else "+" if flags.sign else " "
    zeros = flags.prec - has_sign - len(digits)
    return " " * max(padding, 0) + sign + "0" * max(zeros, 0) + digits


def _format_hex(num: int, conv: str, flags: _Flags) -> str:
    if flags.prec == 0 and num == 0 and conv != "p":
        return ""

    prefix = conv == "p" or (flags.sharpflag and num != 0)
    prefix_len = 2 if prefix else 0
    digits = format(num, "X" if conv == "X" else "x")

    if flags.prec == -1 and flags.zeroflag:
        flags.prec = flags.width - prefix_len

    padding = flags.width - prefix_len - max(len(digits), flags.prec)
    head = ("0X" if conv == "X" else "0x") if prefix else ""
    zeros = flags.prec - len(digits)
    return " " * max(padding, 0) + head + "0" * max(zeros, 0) + digits


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(args: Iterator[Any]) -> int:
    return operator.index(_next_arg(args))


def _char_arg(args: Iterator[Any]) -> str:
    arg = _next_arg(args)
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c expects a single character")
        return arg
    return chr(wrap_unsigned(operator.index(arg), 8))


def _string_arg(args: Iterator[Any]) -> str:
    arg = _next_arg(args)
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError("%s expects a string or None")
    return arg.split("\0", 1)[0]


def vprintfmt(putch: Callable[[str], Any], fmt: str, args: Iterable[Any]) -> int:
    """Format ``args`` according to ``fmt``, passing each character to ``putch``.

    Returns the number of characters produced.
    """
    arg_iter = iter(args)
    written = 0

    def emit(text: str) -> None:
        nonlocal written
        for ch in text:
            putch(ch)
        written += len(text)

    flags: Optional[_Flags] = None
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if flags is None:
            if ch == "%":
                flags = _Flags()
            else:
                emit(ch)
        elif ch == "#":
            flags.sharpflag = True
        elif ch == "0":
            flags.zeroflag = True
        elif ch in "lztj":
            flags.longflag = True
        elif ch == "+":
            flags.sign = True
        elif ch == " ":
            flags.spaceflag = True
        elif ch == "*":
            flags.width = wrap_signed(_int_arg(arg_iter), 32)
        elif ch in "123456789":
            width, consumed = strtol(fmt[pos:], 10)
            flags.width = wrap_signed(width, 32)
            pos += consumed - 1
        elif ch == ".":
            pos += 1
            if pos < length and fmt[pos] == "*":
                flags.prec = wrap_signed(_int_arg(arg_iter), 32)
            else:
                prec, consumed = strtol(fmt[pos:], 10)
                flags.prec = wrap_signed(prec, 32)
                pos += consumed - 1
        elif ch in "xXp":
            bits = 64 if ch == "p" or flags.longflag else 32
            num = wrap_unsigned(_int_arg(arg_iter), bits)
            emit(_format_hex(num, ch, flags))
            flags = None
        elif ch in "diu":
            bits = 64 if flags.longflag else 32
            num = wrap_unsigned(wrap_signed(_int_arg(arg_iter), bits), 64)
            emit(_format_decimal(num, ch != "u", flags))
            flags = None
        elif ch == "n":
            target = _next_arg(arg_iter)
            if not isinstance(target, Counter):
                raise TypeError("%n expects a Counter")
            target.value = written
            flags = None
        elif ch == "s":
            emit(_string_arg(arg_iter))
            flags = None
        elif ch == "c":
            emit(_char_arg(arg_iter))
            flags = None
        else:
            emit(ch)
            flags = None
        pos += 1

    return written


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted with ``args``."""
    parts: list[str] = []
    vprintfmt(parts.append, fmt, args)
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format ``args`` and write the result in one piece to ``stream``.

    The stream defaults to standard output. Returns the number of characters.
    """
    parts: list[str] = []
    count = vprintfmt(parts.append, fmt, args)
    target = sys.stdout if stream is None else stream
    target.write("".join(parts))
    return count