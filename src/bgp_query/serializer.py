"""JSON serialization of extracted records."""

import json
from collections.abc import Iterable

from bgp_query.errors import SerializationError
from bgp_query.models import Record


def to_json(records: Iterable[Record]) -> str:
    """
    Serialize records as a compact JSON array.

    An empty input yields "[]".

    Raises:
        SerializationError: If a record cannot be encoded
    """
    try:
        return json.dumps(
            [record.to_dict() for record in records],
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Could not encode records as JSON: {e}") from e
