"""Command-line interface for codeview."""

import argparse
import logging
import sys

from .classifier import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, ClassifierError, CodeProcessor
from .config import CodeViewConfig
from .listing import CodeListing

# Configure logging - default to WARNING to reduce verbosity
logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


def read_source(source: str) -> str:
    """Read code from a file path, or from stdin when the path is '-'."""
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def classify_command(args: argparse.Namespace, config: CodeViewConfig) -> int:
    processor = CodeProcessor(cache_size=config.classifier.cache_size)
    model = processor.train()
    code = read_source(args.source)

    if args.top:
        for language, score in model.rank(code)[: args.top]:
            print(f"{language}\t{score}")
    else:
        print(processor.classify(code))
    return 0


def show_command(args: argparse.Namespace, config: CodeViewConfig) -> int:
    code = read_source(args.source)
    processor = CodeProcessor(cache_size=config.classifier.cache_size)
    processor.train()

    listing = CodeListing(
        code,
        show_full=args.max_lines is None,
        max_lines=config.listing.max_lines if args.max_lines is None else args.max_lines,
        shortcut_note=config.listing.shortcut_note,
        processor=processor,
    )
    if args.html:
        language = listing.highlight_code(args.language)
        logger.info(f"Highlighted listing as '{language}'")

    width = len(str(len(listing)))
    for number, text in listing.numbered_lines():
        label = "..." if number is None else str(number)
        print(f"{label:>{width}} | {text}")
    return 0


def languages_command(args: argparse.Namespace, config: CodeViewConfig) -> int:
    for language in SUPPORTED_LANGUAGES:
        marker = " (default)" if language == DEFAULT_LANGUAGE else ""
        print(f"{language}{marker}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeview",
        description="codeview - classify and display code listings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Guess the language of a file
  codeview classify snippet.txt

  # Show the three best candidates with their scores
  cat snippet.txt | codeview classify --top 3

  # Print a numbered, highlighted preview of the first 6 lines
  codeview show Main.java --html --max-lines 6

Environment:
  CODEVIEW_CACHE_SIZE, CODEVIEW_MAX_LINES, CODEVIEW_SHORTCUT_NOTE, CODEVIEW_LOG_LEVEL
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Detect the language of a snippet")
    classify_parser.add_argument("source", nargs="?", default="-", help="File to read (default: stdin)")
    classify_parser.add_argument("--top", type=non_negative_int, default=0, help="Show the N best candidates with scores")
    classify_parser.set_defaults(handler=classify_command)

    show_parser = subparsers.add_parser("show", help="Print a numbered listing")
    show_parser.add_argument("source", nargs="?", default="-", help="File to read (default: stdin)")
    show_parser.add_argument("--language", "-l", default=None, help="Language tag (default: classify)")
    show_parser.add_argument("--max-lines", "-n", type=int, default=None, help="Shorten the listing to N lines")
    show_parser.add_argument("--html", action="store_true", help="Print highlighted HTML lines")
    show_parser.set_defaults(handler=show_command)

    languages_parser = subparsers.add_parser("languages", help="List supported language tags")
    languages_parser.set_defaults(handler=languages_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line.

    Returns:
        Exit code: 0 for success, 1 for failure
    """
    args = build_parser().parse_args(argv)

    try:
        config = CodeViewConfig.from_env()
        logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)
        return args.handler(args, config)
    except (ClassifierError, OSError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
