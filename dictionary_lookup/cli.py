"""Command line interface for the dictionary lookup tool"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.settings import settings
from .core.factory import create_dictionary_client, create_renderer
from .exceptions import DictionaryLookupError
from .logging_config import get_logger, resolve_level, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Application to look up the meaning of a word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dictl hello                 # Look up a word
  dictl --no-color hello      # Plain output
  dictl --timeout 3 hello     # Give up on the request after 3 seconds
        """,
    )

    parser.add_argument("word", help="Word to define")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Output options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colors and text styles"
    )

    # Request options
    request_group = parser.add_argument_group("request options")
    request_group.add_argument(
        "--timeout",
        type=float,
        default=settings.api.request_timeout,
        help=f"Request timeout in seconds (default: {settings.api.request_timeout})",
    )

    # Logging options
    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument(
        "--log-file",
        type=Path,
        default=settings.logging.file,
        help="Write logs to file",
    )

    return parser


def lookup_main(args: argparse.Namespace) -> None:
    """Look up the word and print every entry"""
    client = create_dictionary_client(timeout=args.timeout)
    renderer = create_renderer(no_color=args.no_color)

    entries = client.lookup(args.word)
    logger.info(f"Found {len(entries)} entries for '{args.word.strip()}'")
    renderer.render(entries)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = resolve_level(args.debug, args.verbose, settings.logging.level)
    log_file = str(args.log_file) if args.log_file else None
    setup_logging(log_level, log_file)

    try:
        logger.debug(f"🚀 dictl {__version__} started")
        lookup_main(args)

    except DictionaryLookupError as e:
        logger.error(f"❌ {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
