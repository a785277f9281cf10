"""Command-line entry point for tutorial-helplines."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Settings
from .errors import HelpLinesError
from .tools.generate import generate_help

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate modDesc.xml <helpLines> and l10n entries from Markdown tutorials",
    )
    parser.add_argument("--tutorials-dir", default=None, help="Tutorials root (default: ./tutorials)")
    parser.add_argument("--mod-desc", default=None, help="modDesc.xml to patch (default: ./modDesc.xml)")
    parser.add_argument("--l10n-output", default=None, help="Localization file (default: ./translations/l10n_en.xml)")
    parser.add_argument("--strict", action="store_true", help="Fail if modDesc.xml has no <helpLines> block")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Layer command-line overrides on top of environment settings."""
    settings = Settings.from_env()
    if args.tutorials_dir:
        settings.tutorials_dir = Path(args.tutorials_dir)
    if args.mod_desc:
        settings.mod_desc_path = Path(args.mod_desc)
    if args.l10n_output:
        settings.l10n_path = Path(args.l10n_output)
    if args.strict:
        settings.strict = True
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    """Run the generator. Returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = resolve_settings(args)

    try:
        result = generate_help(
            settings.tutorials_dir,
            settings.mod_desc_path,
            settings.l10n_path,
            strict=settings.strict,
        )
    except (OSError, HelpLinesError) as e:
        logger.error("Error: %s", e)
        return 1

    logger.info(
        "Generated %d categories, %d pages, %d translations",
        result["category_count"], result["page_count"], result["translation_count"],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
