"""
Client that runs BGP toolkit queries end to end.

Fatal failures are raised by the fetcher and serializer; ``run`` turns them
into QueryResult values so callers decide how to react.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from bgp_query.config.settings import BGPSettings
from bgp_query.errors import BGPQueryError
from bgp_query.extractor import TableExtractor
from bgp_query.fetcher import Fetcher
from bgp_query.models import Record
from bgp_query.queries import QueryKind, build_url, get_descriptor
from bgp_query.serializer import to_json
from bgp_query.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """Outcome of a single query."""
    kind: QueryKind
    value: str
    url: str
    records: list[Record] = field(default_factory=list)
    error: BGPQueryError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_json(self) -> str:
        return to_json(self.records)


class BGPClient:
    """
    Queries the BGP toolkit for ASN, IP, network block and organization data.
    """

    def __init__(
        self,
        settings: BGPSettings | None = None,
        fetcher: Fetcher | None = None,
        extractor: TableExtractor | None = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Upstream settings; base_url is taken from here
            fetcher: Optional fetcher (built from settings if not provided)
            extractor: Optional table extractor
        """
        self.settings = settings or BGPSettings()
        self.base_url = self.settings.base_url
        self.fetcher = fetcher or Fetcher(settings=self.settings)
        self.extractor = extractor or TableExtractor(parser=self.settings.parser)

    def url_for(self, kind: QueryKind, value: str) -> str:
        return build_url(kind, value, self.base_url)

    def query(self, kind: QueryKind, value: str) -> list[Record]:
        """
        Run one query.

        Args:
            kind: Query kind
            value: Query argument

        Returns:
            Extracted records in page order

        Raises:
            BGPQueryError: On transport or parse failure
        """
        url = self.url_for(kind, value)
        logger.info("query_started", kind=kind.value, value=value, url=url)

        document = self.fetcher.fetch_document(url)
        records = self.extractor.extract(document, get_descriptor(kind))

        logger.info("query_finished", kind=kind.value, value=value, records=len(records))
        return records

    def run(self, queries: Iterable[tuple[QueryKind, str]]) -> list[QueryResult]:
        """
        Run queries in order, stopping at the first failure.

        Args:
            queries: (kind, value) pairs

        Returns:
            One QueryResult per query attempted; only the last may have failed
        """
        return list(self.iter_results(queries))

    def iter_results(self, queries: Iterable[tuple[QueryKind, str]]):
        """Yield a QueryResult per query as it completes, stopping after a failure."""
        for kind, value in queries:
            result = QueryResult(kind=kind, value=value, url=self.url_for(kind, value))
            try:
                result.records = self.query(kind, value)
            except BGPQueryError as e:
                logger.error(
                    "query_failed",
                    kind=kind.value,
                    value=value,
                    url=result.url,
                    error_type=e.error_type.value,
                    error=str(e),
                )
                result.error = e
                yield result
                return
            yield result

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "BGPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
