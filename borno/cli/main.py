"""Main CLI entry point for borno."""

import argparse
import logging
import sys

from borno import __version__
from borno.cli.commands import admin, lookup


def _add_word_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("word", help="Headword (English or Bengali)")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="borno",
        description="Bilingual Bengali/English student dictionary",
        epilog="Use 'borno <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", help="Directory for dictionary data (default: ~/.borno)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # borno search [query...]
    search_parser = subparsers.add_parser(
        "search",
        help="Search words",
        description="Search headwords, translations, meanings and sources",
    )
    search_parser.add_argument("query", nargs="*", help="Search text (omit to list all words)")
    search_parser.add_argument("--topic", help="Run a study topic search (see 'topics')")

    # borno show <word>
    show_parser = subparsers.add_parser("show", help="Show a word's full entry")
    _add_word_argument(show_parser)

    # borno favorite <word>
    favorite_parser = subparsers.add_parser("favorite", help="Toggle a word as favorite")
    _add_word_argument(favorite_parser)

    subparsers.add_parser("favorites", help="List favorite words")
    subparsers.add_parser("topics", help="List study topics")

    # borno history [--clear]
    history_parser = subparsers.add_parser("history", help="Show recent searches")
    history_parser.add_argument("--clear", action="store_true", help="Clear the history")

    # borno add <word> ...
    add_parser = subparsers.add_parser(
        "add",
        help="Add or update a word",
        description="Create a new entry (or update an existing one), optionally using AI",
    )
    _add_word_argument(add_parser)
    add_parser.add_argument("--translation", help="Cross-language equivalent")
    add_parser.add_argument("--meaning", help="Short primary definition")
    add_parser.add_argument("--description", help="Extended definition")
    add_parser.add_argument("--pos", help="Part of speech")
    add_parser.add_argument("--synonym", action="append", help="Synonym (repeatable)")
    add_parser.add_argument("--example", action="append", help="Example sentence (repeatable)")
    add_parser.add_argument("--language", choices=["bn", "en"], help="Entry language")
    add_parser.add_argument(
        "--enrich",
        action="store_true",
        help="Fill empty fields with AI-generated content (needs GEMINI_API_KEY)",
    )
    add_parser.add_argument(
        "--overwrite",
        action="store_true",
        help="With --enrich, also replace existing values not given on the command line",
    )
    add_parser.add_argument(
        "--save-anyway",
        action="store_true",
        help="Save the manual fields even if AI generation fails",
    )

    # borno delete <word>
    delete_parser = subparsers.add_parser("delete", help="Delete a word")
    _add_word_argument(delete_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    commands = {
        "search": lookup.search_command,
        "show": lookup.show_command,
        "favorite": lookup.favorite_command,
        "favorites": lookup.favorites_command,
        "history": lookup.history_command,
        "topics": lookup.topics_command,
        "add": admin.add_command,
        "delete": admin.delete_command,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 1
    return command(args)


if __name__ == "__main__":
    sys.exit(main())
