"""
Line classifier for touch.conf.

Every trimmed, non-empty config line maps to exactly one of the variants below;
the parser in ``config.py`` consumes them without looking at raw strings again.
"""
from dataclasses import dataclass
from typing import Union

SET_PREFIX = "SET "
TYPE_PREFIX = "<type "
PREPEND_MARKER = "<prepend>"
APPEND_MARKER = "<append>"
RAW_MARKER = "<raw>"

WHITESPACE = " \t"


@dataclass(frozen=True)
class SetVar:
    name: str
    value: str

    @property
    def key(self) -> str:
        return f"<{self.name}>"


@dataclass(frozen=True)
class MalformedSet:
    text: str


@dataclass(frozen=True)
class OpenType:
    name: str


@dataclass(frozen=True)
class SetPrepend:
    pass


@dataclass(frozen=True)
class SetAppend:
    pass


@dataclass(frozen=True)
class SetRaw:
    pass


@dataclass(frozen=True)
class OptionOrRawLine:
    text: str


ConfigLine = Union[SetVar, MalformedSet, OpenType, SetPrepend, SetAppend, SetRaw, OptionOrRawLine]


def strip_quotes(value: str, quotes: str = '"') -> str:
    """Drop one layer of matching surrounding quotes. Shorter than 2 chars is left alone."""
    if len(value) >= 2 and value[0] in quotes and value[-1] == value[0]:
        return value[1:-1]
    return value


def classify_line(line: str) -> ConfigLine:
    """Classify an already trimmed, non-empty line."""
    if line.startswith(SET_PREFIX):
        body = line[len(SET_PREFIX):]
        name, sep, value = body.partition("=")
        if not sep:
            return MalformedSet(line)
        return SetVar(name.strip(WHITESPACE), strip_quotes(value.strip(WHITESPACE)))
    if line.startswith(TYPE_PREFIX):
        name = line[len(TYPE_PREFIX):]
        if name.endswith(">"):
            name = name[:-1]
        return OpenType(name.strip(WHITESPACE))
    if line.startswith(PREPEND_MARKER):
        return SetPrepend()
    if line.startswith(APPEND_MARKER):
        return SetAppend()
    if line.startswith(RAW_MARKER):
        return SetRaw()
    return OptionOrRawLine(line)
