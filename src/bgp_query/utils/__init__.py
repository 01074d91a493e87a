"""Shared helpers."""

from bgp_query.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
