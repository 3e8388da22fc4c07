from datetime import date
from typing import Callable, List, Mapping, Optional
from jinja2 import Environment, StrictUndefined

from ..utils import log
from .comments import COMMENT_STYLES, comment_prefix
from .config import ALL_TYPES, ParsedConfig

DATE_TOKEN = "<date>"
FILE_TOKEN = "<file>"
NEWLINE_ESCAPE = "\\n"

# Lines are passed in as data, never as template source.
STAMP_TEMPLATE = (
    "{% for line in header %}{{ prefix }}{{ line }}\n{% endfor %}"
    "{% if raw_lines %}\n{% for line in raw_lines %}{{ line }}\n{% endfor %}{% endif %}"
)


def is_newline_escape(line: str) -> bool:
    """True for a raw line spelling ``\\n``, optionally wrapped in ' or " quotes."""
    if line[:1] in ("'", '"'):
        line = line[1:]
        if line[-1:] in ("'", '"'):
            line = line[:-1]
    return line == NEWLINE_ESCAPE


class TemplateRenderer:
    def __init__(
        self,
        config: ParsedConfig,
        comment_styles: Optional[Mapping[str, str]] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.config = config
        self.comment_styles = COMMENT_STYLES if comment_styles is None else comment_styles
        self.today = today
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.template = self.env.from_string(STAMP_TEMPLATE)

    def resolve_option(self, identifier: str, filename: str) -> str:
        if identifier == DATE_TOKEN:
            return "DATE: " + self.today().strftime("%Y-%m-%d")
        if identifier == FILE_TOKEN:
            return "FILE: " + filename
        # Unknown identifiers are literal header text.
        return self.config.variables.get(identifier, identifier)

    def merged_options(self, target_extension: str) -> List[str]:
        """Type prepend options, then ``.all`` defaults, then type append options."""
        prepend: List[str] = []
        append: List[str] = []
        for opt in self.config.options_for(target_extension):
            (prepend if opt.is_prepend else append).append(opt.identifier)
        defaults = [opt.identifier for opt in self.config.options_for(ALL_TYPES)]
        return prepend + defaults + append

    def render(self, target_extension: str, filename: str) -> str:
        if target_extension not in self.config.type_groups:
            log.debug(f"No configuration found for file type {target_extension!r}")

        header = [self.resolve_option(opt, filename) for opt in self.merged_options(target_extension)]
        raw_lines = ["" if is_newline_escape(line) else line for line in self.config.raw_block]
        prefix = comment_prefix(target_extension, self.comment_styles)
        for line in header:
            log.debug(prefix + line)

        return self.template.render(header=header, prefix=prefix, raw_lines=raw_lines)
