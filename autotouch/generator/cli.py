import argparse
import sys
from pathlib import Path
from rich import print
from rich.markup import escape

from ..utils import log
from ..utils.settings import APP_VERSION, SettingsError, load_settings, resolve_config_path
from .comments import comment_styles, extension_of
from .config import CONFIG_ERRORS, parse_config
from .renderer import TemplateRenderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="autotouch",
        description="Create files stamped with a header and boilerplate from touch.conf.",
    )
    p.add_argument("files", nargs="+", metavar="FILE", help="File(s) to create")
    p.add_argument("--config", "-c", type=Path, help="touch.conf to use (default: $AUTOTOUCH_CONFIG, settings, bundled)")
    p.add_argument("--settings", type=Path, help="YAML settings file (default: ~/.autotouch.yml)")
    p.add_argument("--force", "-f", action="store_true", help="Overwrite files that already exist")
    p.add_argument("--stdout", action="store_true", help="Print the rendered text instead of writing files")
    p.add_argument("--version", action="version", version=f"autotouch {APP_VERSION}")
    return p


def _quiet(message: str) -> None:
    pass


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        log.error(str(e))
        return 2
    if settings.debug:
        log.set_debug(True)

    config_path = resolve_config_path(args.config, settings)
    styles = comment_styles(settings.comment_styles)
    log.debug(f"Using configuration file {config_path}")

    status = 0
    # Config problems are reported for the first parse only; later files re-parse quietly.
    report = log.error
    for filename in args.files:
        target = Path(filename)
        if not args.stdout and target.exists() and not args.force:
            log.error(f"File {filename} already exists (use --force to overwrite)")
            status = 1
            continue

        extension = extension_of(filename)
        config = parse_config(config_path, extension, report)
        report = _quiet
        content = TemplateRenderer(config, styles).render(extension, filename)

        if args.stdout:
            sys.stdout.write(log.display_text(content))
            continue
        try:
            target.write_text(content, encoding="utf-8", errors=CONFIG_ERRORS)
        except OSError as e:
            log.error(f"Could not create file {filename}: {e}")
            status = 1
            continue
        print(f"✅ Created {escape(filename)}")
    return status
