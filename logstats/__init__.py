"""Per-type record counts and byte totals for NDJSON log files."""

__version__ = "0.1.0"
