"""
Query kinds and their extraction descriptors.

Each kind maps to a URL template, the CSS selector of the table rows that hold
its results, and the ordered cell columns that populate its record type.
"""

from dataclasses import dataclass
from enum import Enum

from bgp_query.models import AsnRecord, IPRecord, NetRecord, OrgRecord, Record


class QueryKind(Enum):
    """Supported lookups."""

    ASN = "asn"
    IP = "ip"
    NET = "net"
    ORG = "org"


@dataclass(frozen=True)
class Column:
    """A record field read from the cell at ``index`` (0-based)."""

    field_name: str
    index: int


@dataclass(frozen=True)
class QueryDescriptor:
    """How to build, fetch and extract one kind of query."""

    kind: QueryKind
    path_template: str
    row_selector: str
    implied_row_selector: str
    record_type: type[Record]
    columns: tuple[Column, ...]

    @property
    def rows_selector(self) -> str:
        """Rows inside a tbody plus rows placed directly in a table, whose tbody is implied."""
        return f"{self.row_selector}, {self.implied_row_selector}"

    def build_record(self, values: dict[str, str]) -> Record:
        return self.record_type(**values)


ALL_TABLE_ROWS = "tbody tr"
ALL_BARE_TABLE_ROWS = "table > tr"

DESCRIPTORS: dict[QueryKind, QueryDescriptor] = {
    QueryKind.ASN: QueryDescriptor(
        kind=QueryKind.ASN,
        path_template="/{value}",
        row_selector="#table_prefixes4 tbody tr",
        implied_row_selector="#table_prefixes4 > tr, #table_prefixes4 table > tr",
        record_type=AsnRecord,
        columns=(Column("prefix", 0), Column("description", 1)),
    ),
    QueryKind.IP: QueryDescriptor(
        kind=QueryKind.IP,
        path_template="/ip/{value}",
        row_selector=ALL_TABLE_ROWS,
        implied_row_selector=ALL_BARE_TABLE_ROWS,
        record_type=IPRecord,
        columns=(Column("asn", 0), Column("network", 1), Column("description", 2)),
    ),
    QueryKind.NET: QueryDescriptor(
        kind=QueryKind.NET,
        path_template="/net/{value}",
        row_selector="#netinfo tbody tr",
        implied_row_selector="#netinfo > tr, #netinfo table > tr",
        record_type=NetRecord,
        columns=(Column("asn", 0), Column("network", 1), Column("description", 2)),
    ),
    QueryKind.ORG: QueryDescriptor(
        kind=QueryKind.ORG,
        path_template="/search?search[search]={value}&commit=Search",
        row_selector=ALL_TABLE_ROWS,
        implied_row_selector=ALL_BARE_TABLE_ROWS,
        record_type=OrgRecord,
        columns=(Column("result", 0), Column("kind", 1), Column("description", 2)),
    ),
}


def get_descriptor(kind: QueryKind) -> QueryDescriptor:
    """Get the descriptor for a query kind."""
    return DESCRIPTORS[kind]


def build_url(kind: QueryKind, value: str, base_url: str) -> str:
    """
    Build the request URL for a query.

    The value is interpolated as-is; malformed input yields a malformed URL
    that is still requested.

    Args:
        kind: Query kind
        value: User-supplied argument (ASN, IP, network block, or search term)
        base_url: Base address of the BGP toolkit

    Returns:
        Fully qualified URL
    """
    template = DESCRIPTORS[kind].path_template
    return base_url.rstrip("/") + template.format(value=value)
