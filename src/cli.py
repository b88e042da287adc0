"""Command-line interface for userdir."""

import argparse
import sys
from dataclasses import dataclass

from app import UserDirectoryApp
from config import ConfigError, DirectoryConfig, load_config
from constants import API_URL, PAGE_SIZES, USERDIR_VERSION
from loader import FetchError, load_users
from model import SortColumn, SortDirection, ViewState
from projection import filter_records, sort_records


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config: DirectoryConfig
    list_only: bool
    search: str
    sort: SortColumn | None
    descending: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class UserdirHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        sizes = "/".join(str(n) for n in PAGE_SIZES)
        columns = ", ".join(c.value for c in SortColumn)
        lines = [
            "User Directory - browse, search, sort and edit a user list in the terminal.",
            f"Version: {USERDIR_VERSION}",
            "",
            "Core:",
            "  userdir                               Open the directory TUI",
            "",
            "Data Source:",
            f"  userdir --url <url>                   Fetch users from <url> (default: {API_URL})",
            "  userdir --file <path>                 Load users from a local JSON file",
            "  userdir --timeout <seconds>           Network timeout for the fetch",
            "",
            "Display:",
            f"  userdir --page-size <n>               Rows per page ({sizes})",
            "  userdir --sort <column> [--desc]      Initial sort column",
            f"                                        One of: {columns}",
            "",
            "Non-interactive:",
            "  userdir --list                        Print users to stdout and exit",
            "  userdir --list --search <term>        Only users matching <term>",
            "  userdir --list --sort <column> [--desc]",
            "                                        Sorted listing",
            "",
            "Environment:",
            "  USERDIR_API_URL, USERDIR_PAGE_SIZE, USERDIR_TIMEOUT override the defaults.",
            "",
            "Edits made in the TUI are kept in memory only; nothing is written back.",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for userdir CLI."""
    parser = argparse.ArgumentParser(
        prog="userdir",
        formatter_class=UserdirHelpFormatter,
        add_help=True,
    )

    # Data source
    parser.add_argument("--url", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--file", metavar="PATH", help=argparse.SUPPRESS)
    parser.add_argument("--timeout", metavar="SECONDS", help=argparse.SUPPRESS)

    # Display
    parser.add_argument("--page-size", metavar="N", help=argparse.SUPPRESS)

    # Non-interactive listing
    parser.add_argument("--list", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--search", metavar="TERM", default="", help=argparse.SUPPRESS)
    parser.add_argument(
        "--sort",
        metavar="COLUMN",
        choices=[c.value for c in SortColumn],
        help=argparse.SUPPRESS,
    )
    parser.add_argument("--desc", action="store_true", help=argparse.SUPPRESS)

    parser.add_argument("--version", action="version", version=f"userdir {USERDIR_VERSION}")

    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Exits with status 1 if the resulting configuration is invalid.
    """
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = load_config(
            api_url=args.url,
            data_file=args.file,
            page_size=args.page_size,
            timeout=args.timeout,
        )
    except ConfigError as e:
        print_error_box("Invalid configuration", str(e))
        sys.exit(1)

    return ParsedArgs(
        config=config,
        list_only=args.list,
        search=args.search,
        sort=SortColumn(args.sort) if args.sort else None,
        descending=args.desc,
    )


def format_user_table(rows: list[tuple[str, ...]]) -> list[str]:
    """Lay out rows (header first) as padded text columns."""
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    return ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]


def list_users(args: ParsedArgs) -> int:
    """Print matching users to stdout. Returns the process exit code."""
    try:
        records = load_users(args.config)
    except FetchError as e:
        print_error_box("Failed to load users", str(e))
        return 1

    direction = SortDirection.DESC if args.descending else SortDirection.ASC
    matched = sort_records(filter_records(records, args.search), args.sort, direction)

    if not matched:
        print("No matching users" if args.search else "No users found")
        return 0

    rows = [tuple(c.label for c in SortColumn)]
    rows += [
        (str(r.id), r.first_name, r.last_name, r.email, r.department)
        for r in matched
    ]
    for line in format_user_table(rows):
        print(line)
    print(f"\n{len(matched)} of {len(records)} users")
    return 0


def main() -> None:
    """Main entry point."""
    args = parse_args()

    if args.list_only:
        sys.exit(list_users(args))

    view = ViewState(
        sort_column=args.sort,
        sort_direction=SortDirection.DESC if args.descending else SortDirection.ASC,
        rows_per_page=args.config.page_size,
    )
    app = UserDirectoryApp(args.config, view=view)
    app.run()


if __name__ == "__main__":
    main()
