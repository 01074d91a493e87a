"""Record types extracted from BGP toolkit tables."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class IPRecord:
    """One route announcing an IP address."""

    asn: str = ""
    network: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NetRecord:
    """One row of a network block lookup."""

    asn: str = ""
    network: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AsnRecord:
    """One IPv4 prefix announced by an ASN."""

    prefix: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OrgRecord:
    """One entity matching an organization search."""

    result: str = ""
    kind: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, exposing ``kind`` under the ``type`` key."""
        return {
            "result": self.result,
            "type": self.kind,
            "description": self.description,
        }


Record = IPRecord | NetRecord | AsnRecord | OrgRecord
