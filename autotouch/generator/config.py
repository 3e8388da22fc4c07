"""
touch.conf parser.

Format (one directive per line, surrounding whitespace ignored)::

    SET name = "Author: Jane"
    <type .py>
    <prepend>
    #!/usr/bin/env python3
    <append>
    <name>
    <raw>
    import sys

Options under ``<type .all>`` are added to every rendered file.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..utils import log
from .lines import (
    WHITESPACE,
    MalformedSet,
    OpenType,
    OptionOrRawLine,
    SetAppend,
    SetPrepend,
    SetRaw,
    SetVar,
    classify_line,
)

ALL_TYPES = ".all"

# Undecodable config bytes round-trip to the output file untouched.
CONFIG_ERRORS = "surrogateescape"

Reporter = Callable[[str], None]


@dataclass(frozen=True)
class Option:
    identifier: str
    is_prepend: bool = False


@dataclass(frozen=True)
class ConfigIssue:
    kind: str  # "read" or "syntax"
    message: str
    line_no: Optional[int] = None

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


@dataclass(frozen=True)
class ParsedConfig:
    variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    type_groups: Mapping[str, Tuple[Option, ...]] = field(default_factory=lambda: MappingProxyType({}))
    raw_block: Tuple[str, ...] = ()
    issues: Tuple[ConfigIssue, ...] = ()

    def options_for(self, type_name: str) -> Tuple[Option, ...]:
        return self.type_groups.get(type_name, ())


def parse_lines(lines: Iterable[str], target_extension: str, report: Reporter = log.error) -> ParsedConfig:
    """Run the directive loop over ``lines`` for a file ending in ``target_extension``.

    Raw lines are only captured for the group matching ``target_extension``; in any
    other group they are kept as ordinary options. Bad lines are reported through
    ``report`` and skipped.
    """
    variables: Dict[str, str] = {}
    groups: Dict[str, List[Option]] = {}
    raw_block: List[str] = []
    issues: List[ConfigIssue] = []

    current_type: Optional[str] = None
    is_prepend = False
    is_raw = False

    def syntax_error(line_no: int, message: str) -> None:
        issue = ConfigIssue("syntax", log.display_text(message), line_no)
        issues.append(issue)
        report(str(issue))

    for line_no, line in enumerate(lines, start=1):
        line = line.strip(WHITESPACE + "\r\n")
        if not line:
            continue

        entry = classify_line(line)
        if isinstance(entry, SetVar):
            variables[entry.key] = entry.value
        elif isinstance(entry, MalformedSet):
            syntax_error(line_no, f"Invalid SET command syntax: {entry.text}")
        elif isinstance(entry, OpenType):
            # `<type >` closes the current block; following options are errors.
            current_type = entry.name or None
            is_prepend = False
            is_raw = False
            if current_type is not None:
                groups.setdefault(current_type, [])
            log.debug(f"Found type: {current_type}")
        elif isinstance(entry, SetPrepend):
            is_prepend = True
        elif isinstance(entry, SetAppend):
            is_prepend = False
        elif isinstance(entry, SetRaw):
            is_raw = True
        elif isinstance(entry, OptionOrRawLine):
            if current_type is None:
                syntax_error(line_no, f"Option {entry.text} is not inside a type block")
            elif is_raw and current_type == target_extension:
                log.debug(f"Found raw line: {entry.text}")
                raw_block.append(entry.text)
            else:
                log.debug(f"Found option: {entry.text}")
                groups[current_type].append(Option(entry.text, is_prepend))

    return ParsedConfig(
        variables=MappingProxyType(variables),
        type_groups=MappingProxyType({name: tuple(opts) for name, opts in groups.items()}),
        raw_block=tuple(raw_block),
        issues=tuple(issues),
    )


def parse_config_text(text: str, target_extension: str, report: Reporter = log.error) -> ParsedConfig:
    return parse_lines(text.split("\n"), target_extension, report)


def parse_config(path: Path, target_extension: str, report: Reporter = log.error) -> ParsedConfig:
    """Parse the config file at ``path``.

    An unreadable file is reported once and gives an empty config, so the caller
    still renders (an empty template). Bytes that are not UTF-8 are kept as
    surrogates (``CONFIG_ERRORS``) and written back out unchanged.
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors=CONFIG_ERRORS)
    except OSError:
        issue = ConfigIssue("read", f"Could not open configuration file {path}")
        report(str(issue))
        return ParsedConfig(issues=(issue,))
    return parse_config_text(text, target_extension, report)
