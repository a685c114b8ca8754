"""Data access for the scheduling application: one query module per table."""

from .results import QueryResult, Status

__all__ = ["QueryResult", "Status"]
