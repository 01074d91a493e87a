"""Command-line interface for bgp-query."""

import argparse
import sys

from pydantic import ValidationError

from bgp_query.client import BGPClient
from bgp_query.config.settings import get_settings
from bgp_query.errors import SerializationError
from bgp_query.queries import QueryKind
from bgp_query.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

# Queries always run in this order, whatever the order of the flags.
QUERY_ORDER = (QueryKind.ASN, QueryKind.IP, QueryKind.NET, QueryKind.ORG)

QUERY_HELP = {
    QueryKind.ASN: "Query for ASN",
    QueryKind.IP: "Query for IP",
    QueryKind.NET: "Query for network block",
    QueryKind.ORG: "Query for organization",
}

EXAMPLES = {
    QueryKind.ASN: "AS63293",
    QueryKind.IP: "1.1.1.1",
    QueryKind.NET: "41.223.111.0/22",
    QueryKind.ORG: "facebook",
}


def build_parser(prog: str = "bgp-query") -> argparse.ArgumentParser:
    """Build the argument parser; each query flag takes one or two leading dashes (-asn or --asn)."""
    examples = "\n".join(
        f"  {prog} -{kind.value} {EXAMPLES[kind]}" for kind in QUERY_ORDER
    )
    parser = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s [OPTIONS]",
        description="Query bgp.he.net for ASN, IP, network block and organization data.",
        epilog=f"Examples:\n{examples}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    for kind in QUERY_ORDER:
        parser.add_argument(
            f"-{kind.value}",
            f"--{kind.value}",
            dest=kind.value,
            default="",
            metavar="VALUE",
            help=QUERY_HELP[kind],
        )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show help message",
    )
    return parser


def collect_queries(args: argparse.Namespace) -> list[tuple[QueryKind, str]]:
    """Return the (kind, value) pairs requested, in execution order."""
    return [
        (kind, getattr(args, kind.value))
        for kind in QUERY_ORDER
        if getattr(args, kind.value)
    ]


def main(argv: list[str] | None = None) -> int:
    """
    Run the requested queries and print one JSON line per query.

    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    if args.help:
        parser.print_help()
        return 0

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.logging)

    queries = collect_queries(args)
    if not queries:
        logger.warning("no_queries_requested")
        return 0

    with BGPClient(settings=settings.bgp) as client:
        for result in client.iter_results(queries):
            if not result.success:
                return 1
            try:
                output = result.to_json()
            except SerializationError as e:
                logger.error("serialization_failed", kind=result.kind.value, error=str(e))
                return 1
            print(output, flush=True)

    return 0


def run() -> None:
    """Entry point for console_scripts."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("Interrupted by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
