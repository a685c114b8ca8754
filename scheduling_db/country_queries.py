# /scheduling_db/country_queries.py

from .models import Country
from .query_helpers import fetch_all, fetch_one


def get_by_name(country):
    sql = "SELECT Country_ID, Country FROM countries WHERE Country = %(country)s"
    return fetch_one(sql, {'country': country}, Country.from_row)


def list_all():
    """Fetches every country."""
    return fetch_all("SELECT Country_ID, Country FROM countries", mapper=Country.from_row)
