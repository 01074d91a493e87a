"""
Table extractor for BGP toolkit pages.

One routine serves every query kind: the descriptor supplies the row selector
and the ordered columns, and each row becomes one record.
"""

from bs4 import BeautifulSoup, Tag

from bgp_query.models import Record
from bgp_query.queries import QueryDescriptor
from bgp_query.utils.logger import get_logger

logger = get_logger(__name__)


class TableExtractor:
    """
    Extracts records from HTML table rows selected by CSS.
    """

    def __init__(self, parser: str = "lxml"):
        self.parser = parser

    def extract(self, document: BeautifulSoup, descriptor: QueryDescriptor) -> list[Record]:
        """
        Extract one record per row matched by the descriptor's selector.

        Rows written directly inside a table count as tbody rows, so a table
        without an explicit tbody yields the same records as one with it.

        Args:
            document: Parsed page
            descriptor: Query descriptor (row selector + columns)

        Returns:
            Records in document order; empty if no rows match
        """
        rows = document.select(descriptor.rows_selector)
        records = [self._extract_row(row, descriptor) for row in rows]

        logger.debug(
            "rows_extracted",
            kind=descriptor.kind.value,
            selector=descriptor.rows_selector,
            count=len(records),
        )
        return records

    def extract_html(self, html: bytes | str, descriptor: QueryDescriptor) -> list[Record]:
        """Parse HTML and extract records from it."""
        return self.extract(BeautifulSoup(html, self.parser), descriptor)

    def _extract_row(self, row: Tag, descriptor: QueryDescriptor) -> Record:
        cells = row.find_all("td")
        values = {
            column.field_name: self._cell_text(cells, column.index)
            for column in descriptor.columns
        }
        return descriptor.build_record(values)

    def _cell_text(self, cells: list[Tag], index: int) -> str:
        """Trimmed text of the cell at index, or "" when the row is too short."""
        if index >= len(cells):
            return ""
        return cells[index].get_text().strip()
