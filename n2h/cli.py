"""Command-line interface for the N2H exporter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __title__, __version__
from .config import ConfigurationError, config_path, load_config
from .converter import ExportError, NoteExporter
from .logger import setup_logger
from .models import ExportResult


def default_notes_dir() -> Path:
    """Directory of the running executable."""
    return Path(sys.argv[0]).resolve().parent


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    description = f"""{__title__} ver {__version__}

Export tagged notes to a Hugo website.

Notes are Markdown files named "<YYYYMMDDHHMM>[title].md". A note is exported
when its "Tags: " line carries one of the publish tags listed in
<notes>/sites/<config>.yaml.

Examples:
  n2h --notes ~/notes --to ~/sites/blog --config blog
  n2h --to ~/sites/blog --config blog --verbose
"""

    parser = argparse.ArgumentParser(
        prog=__title__.lower(),
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--notes",
        help="Notes directory (default: directory of the executable)",
        type=str,
        default=None,
        metavar="DIR",
    )

    parser.add_argument(
        "--to",
        dest="site_dir",
        help="Hugo website root directory (required)",
        type=str,
        default=None,
        metavar="DIR",
    )

    parser.add_argument(
        "--config",
        dest="config_name",
        help="Config name for website export, read from <notes>/sites/<name>.yaml (required)",
        type=str,
        default=None,
        metavar="NAME",
    )

    parser.add_argument(
        "--verbose", "-v",
        help="Enable verbose logging",
        action="store_true",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{__title__} {__version__}"
    )

    return parser


def print_summary(result: ExportResult) -> None:
    print("\n✅ Export completed")
    print(f"   📋 {result.scanned_notes} notes scanned")
    print(f"   📝 {result.exported_notes} pages exported")
    print(f"   📎 {result.copied_attachments} attachments copied")

    if result.warnings:
        print(f"\n⚠️  {len(result.warnings)} warnings:")
        for warning in result.warnings:
            print(f"   • {warning}")

    if result.errors:
        print(f"\n❌ {len(result.errors)} notes or files could not be exported:")
        for error in result.errors:
            print(f"   • {error}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.site_dir or not args.config_name:
        parser.print_help(sys.stderr)
        sys.exit(1)

    logger = setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    notes_dir = Path(args.notes) if args.notes else default_notes_dir()
    site_dir = Path(args.site_dir)

    try:
        config = load_config(config_path(notes_dir, args.config_name))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # TODO: export config.pages once page ids have a target layout.
    if config.pages:
        logger.debug(f"Ignoring {len(config.pages)} configured pages")

    try:
        result = NoteExporter(config, notes_dir, site_dir).export()
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\n⏹️  Export interrupted by user")
        sys.exit(1)

    print_summary(result)


if __name__ == "__main__":
    main()
