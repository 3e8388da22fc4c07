from pathlib import Path
from typing import Dict, Mapping, Optional

DEFAULT_COMMENT_PREFIX = "// "

# Single-line comment prefix per file extension. Only header options use it;
# raw lines are written as-is.
COMMENT_STYLES: Dict[str, str] = {
    ".c": "// ",
    ".cpp": "// ",
    ".h": "// ",
    ".hpp": "// ",
    ".py": "# ",
    ".java": "// ",
    ".js": "// ",
    ".ts": "// ",
    ".rb": "# ",
    ".go": "// ",
    ".rs": "// ",
    ".cs": "// ",
    ".php": "// ",
    ".swift": "// ",
    ".kt": "// ",
    ".scala": "// ",
    ".sh": "# ",
    ".pl": "# ",
    ".r": "# ",
    ".lua": "-- ",
    ".sql": "-- ",
    ".asm": "; ",
    ".s": "; ",
    ".vb": "' ",
    ".vba": "' ",
    ".m": "// ",  # Objective-C, not MATLAB
    ".mm": "// ",
    ".erl": "% ",
    ".ex": "# ",
    ".exs": "# ",
    ".hs": "-- ",
    ".lisp": ";; ",
    ".clj": ";; ",
    ".scm": ";; ",
    ".f90": "!",
    ".f95": "!",
    ".f03": "!",
    ".ada": "-- ",
    ".pas": "// ",
    ".dart": "// ",
    ".coffee": "# ",
    ".groovy": "// ",
    ".nim": "# ",
    ".rkt": "; ",
    ".vhd": "-- ",
    ".vhdl": "-- ",
    ".pro": "% ",
    ".sml": "(* ",
    ".ml": "(* ",
    ".bat": "REM ",
    ".ps1": "# ",
}


def comment_styles(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Built-in table with ``overrides`` applied on top."""
    styles = dict(COMMENT_STYLES)
    if overrides:
        styles.update(overrides)
    return styles


def comment_prefix(extension: str, styles: Mapping[str, str] = COMMENT_STYLES) -> str:
    return styles.get(extension, DEFAULT_COMMENT_PREFIX)


def extension_of(filename: str) -> str:
    """Everything from the last dot of the base name, or "" when there is none.

    ``.bashrc`` -> ``.bashrc``, ``archive.tar.gz`` -> ``.gz``, ``Makefile`` -> "".
    """
    name = Path(filename).name
    pos = name.rfind(".")
    return name[pos:] if pos != -1 else ""
