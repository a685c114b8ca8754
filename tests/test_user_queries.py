import mysql.connector
import pytest

from scheduling_db import user_queries
from scheduling_db.models import User

ADMIN_ROW = {'User_ID': 2, 'User_Name': 'admin', 'Password': 'admin'}


def test_check_credentials_matches_stored_user(fake_db) -> None:
    fake_db.queue(rows=[ADMIN_ROW])

    result = user_queries.check_credentials('admin', 'admin')

    assert result
    assert result.value == User(2, 'admin', 'admin')
    assert fake_db.last_params == {'username': 'admin', 'password': 'admin'}


@pytest.mark.parametrize(('username', 'password'), [('admin', 'wrong'), ('nobody', 'admin'), ('Admin', 'admin')])
def test_check_credentials_rejects_any_mismatch(fake_db, username: str, password: str) -> None:
    fake_db.queue(rows=[])

    result = user_queries.check_credentials(username, password)

    assert not result
    assert result.is_empty


def test_check_credentials_compares_case_sensitively(fake_db) -> None:
    fake_db.queue(rows=[])

    user_queries.check_credentials('ADMIN', 'admin')

    assert 'User_Name = %(username)s COLLATE utf8mb4_bin' in fake_db.last_sql
    assert 'Password = %(password)s COLLATE utf8mb4_bin' in fake_db.last_sql
    assert 'BINARY ' not in fake_db.last_sql


def test_check_credentials_failure_is_not_a_mismatch(fake_db) -> None:
    fake_db.fail_with(mysql.connector.errors.InterfaceError(msg='2003: Can\'t connect'))

    result = user_queries.check_credentials('admin', 'admin')

    assert not result
    assert result.is_failed


def test_list_all_returns_users(fake_db) -> None:
    fake_db.queue(rows=[{'User_ID': 1, 'User_Name': 'test', 'Password': 'test'}, ADMIN_ROW])

    result = user_queries.list_all()

    assert [user.user_name for user in result.value] == ['test', 'admin']


def test_get_by_username(fake_db) -> None:
    fake_db.queue(rows=[ADMIN_ROW])

    result = user_queries.get_by_username('admin')

    assert result.value.user_id == 2
