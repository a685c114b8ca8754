# /scheduling_db/results.py

"""Tagged result returned by every gateway operation."""

from enum import Enum


class Status(Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class QueryResult:
    """
    Outcome of a single database operation.

    OK carries a value (rows, a record, a new id or an affected-row count).
    EMPTY means the statement ran but matched or changed nothing.
    FAILED means the database raised; the exception is kept in ``error``.
    """

    __slots__ = ("status", "value", "error")

    def __init__(self, status, value=None, error=None):
        self.status = status
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value=None):
        return cls(Status.OK, value)

    @classmethod
    def empty(cls, value=None):
        return cls(Status.EMPTY, value)

    @classmethod
    def failed(cls, error):
        return cls(Status.FAILED, error=error)

    @classmethod
    def from_rows(cls, rows):
        """OK with the list when it has rows, EMPTY with an empty list otherwise."""
        return cls.ok(rows) if rows else cls.empty([])

    @property
    def is_ok(self):
        return self.status is Status.OK

    @property
    def is_empty(self):
        return self.status is Status.EMPTY

    @property
    def is_failed(self):
        return self.status is Status.FAILED

    def __bool__(self):
        return self.is_ok

    def unwrap(self):
        """Returns the value, re-raising the stored error for a failed result."""
        if self.is_failed:
            raise self.error
        return self.value

    def __repr__(self):
        if self.is_failed:
            return f"QueryResult(failed, error={self.error!r})"
        return f"QueryResult({self.status.value}, value={self.value!r})"
