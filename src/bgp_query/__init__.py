"""Query the Hurricane Electric BGP toolkit and emit table rows as JSON."""

__version__ = "0.1.0"
