# /scheduling_db/user_queries.py

from .models import User
from .query_helpers import fetch_all, fetch_one


# --- AUTH ---
def check_credentials(username, password):
    """
    Verifies a user's credentials against the users table.
    Both values must match exactly, case included. The result is OK with the
    matching User, or EMPTY when nothing matches.
    """
    sql = ("SELECT User_ID, User_Name, Password FROM users "
           "WHERE User_Name = %(username)s COLLATE utf8mb4_bin AND Password = %(password)s COLLATE utf8mb4_bin")
    return fetch_one(sql, {'username': username, 'password': password}, User.from_row)


# --- USER LOOKUPS ---
def get_by_username(username):
    """Finds a user by name."""
    sql = "SELECT User_ID, User_Name, Password FROM users WHERE User_Name = %(username)s"
    return fetch_one(sql, {'username': username}, User.from_row)


def list_all():
    """Fetches all users."""
    return fetch_all("SELECT User_ID, User_Name, Password FROM users", mapper=User.from_row)
