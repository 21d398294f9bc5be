import argparse
import sys
from typing import IO, List, Optional
from dotenv import load_dotenv

from fsview.config.loader import AppConfig
from fsview.predicates.factory import PredicateFactory
from fsview.utils.exceptions import FilteredStringViewError
from fsview.utils.logger import Logger, logger
from fsview.views.base import FilteredStringView
from fsview.views.operations import compose, split, substr


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsview", description="Print filtered views of a piece of text."
    )
    parser.add_argument(
        "--keep",
        action="append",
        metavar="NAME",
        help="Named predicate a character must satisfy (repeatable)",
    )
    parser.add_argument("--exclude", metavar="CHARS", help="Characters to filter out")
    parser.add_argument("--log-level", help="Logging level, overrides LOG_LEVEL")

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print the filtered text")
    show.add_argument("text")

    sub = commands.add_parser("substr", help="Print a substring of the filtered text")
    sub.add_argument("text")
    sub.add_argument("pos", type=int)
    sub.add_argument("count", type=int, nargs="?")

    spl = commands.add_parser("split", help="Print the filtered text split on a token, one segment per line")
    spl.add_argument("text")
    spl.add_argument("token")

    return parser


def build_view(text: str, keep: List[str], exclude: str) -> FilteredStringView:
    """
    Create the view the command operates on.

    Args:
        text (str): The text to view.
        keep (List[str]): Names of predicates every selected character must satisfy.
        exclude (str): Characters to filter out.

    Returns:
        FilteredStringView: A view over text selecting what every predicate accepts.
    """
    predicates = [PredicateFactory.create(name) for name in keep]
    if exclude:
        predicates.append(PredicateFactory.excluding(exclude))
    return compose(FilteredStringView(text), predicates)


def run(args: argparse.Namespace, app_config: AppConfig, out: IO[str]) -> None:
    keep = args.keep or [app_config.predicate]
    exclude = app_config.exclude if args.exclude is None else args.exclude
    view = build_view(args.text, keep, exclude)

    if args.command == "show":
        results = [view]
    elif args.command == "substr":
        results = [substr(view, args.pos, args.count)]
    else:
        results = split(view, args.token)

    for result in results:
        result.write(out)
        out.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the fsview command.

    Loads configuration from the environment (and a .env file when present),
    applies the requested operation and prints the resulting views.

    Returns:
        int: The process exit status.
    """
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        app_config = AppConfig.load()
    except FilteredStringViewError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    Logger.configure(args.log_level or app_config.log_level, app_config.log_format)

    try:
        run(args, app_config, sys.stdout)
    except FilteredStringViewError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
