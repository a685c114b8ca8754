from datetime import datetime

import pytest

from scheduling_db import connection


class FakeCursor:
    def __init__(self, db):
        self.db = db
        self.rowcount = -1
        self.lastrowid = None
        self.closed = False
        self._rows = []

    def execute(self, sql, params=None):
        self.db.executed.append((sql, params))
        if self.db.error is not None:
            raise self.db.error
        response = self.db.responses.pop(0) if self.db.responses else {}
        self._rows = response.get('rows', [])
        self.rowcount = response.get('rowcount', len(self._rows))
        self.lastrowid = response.get('lastrowid')

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    """Stands in for a mysql.connector connection and records every statement."""

    def __init__(self):
        self.responses = []
        self.executed = []
        self.cursors = []
        self.commits = 0
        self.rollbacks = 0
        self.error = None
        self.rollback_error = None

    def queue(self, rows=None, rowcount=None, lastrowid=None):
        response = {'rows': rows or []}
        if rowcount is not None:
            response['rowcount'] = rowcount
        if lastrowid is not None:
            response['lastrowid'] = lastrowid
        self.responses.append(response)

    def fail_with(self, error):
        self.error = error

    @property
    def last_sql(self):
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]

    def cursor(self, dictionary=False):
        assert dictionary, "gateways expect dictionary rows"
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.rollback_error is not None:
            raise self.rollback_error

    def is_connected(self):
        return True


@pytest.fixture
def fake_db(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(connection, 'get_connection', lambda: conn)
    return conn


def appointment_row(**overrides):
    row = {
        'Appointment_ID': 1,
        'Title': 'Planning',
        'Description': 'Quarterly planning session',
        'Location': 'Phoenix, Arizona',
        'Type': 'Planning Session',
        'Start': datetime(2024, 3, 15, 10, 0),
        'End': datetime(2024, 3, 15, 11, 0),
        'Customer_ID': 1,
        'User_ID': 1,
        'Contact_ID': 3,
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_appointment_row():
    return appointment_row
