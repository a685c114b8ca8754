# /scheduling_db/contact_queries.py

from .models import Contact
from .query_helpers import fetch_all, fetch_one


def get_by_name(contact_name):
    """Finds a contact by its exact name."""
    sql = "SELECT * FROM contacts WHERE Contact_Name = %(contact_name)s"
    return fetch_one(sql, {'contact_name': contact_name}, Contact.from_row)


def get_by_id(contact_id):
    """Finds a contact by its ID."""
    sql = "SELECT * FROM contacts WHERE Contact_ID = %(contact_id)s"
    return fetch_one(sql, {'contact_id': contact_id}, Contact.from_row)


def list_all():
    """Fetches every contact."""
    return fetch_all("SELECT * FROM contacts ORDER BY Contact_ID", mapper=Contact.from_row)
