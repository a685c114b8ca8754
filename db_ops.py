# db_ops.py

"""
This module serves as a single, convenient entry point for the UI to access
all database operations. It exposes one gateway per table from the
'scheduling_db' package, plus the report texts shown on the reports screen.

The UI layer should only need to import this file to get access to any
database-related function it needs, e.g. ``db_ops.appointments.list_all()``.
"""

from scheduling_db import appointment_queries as appointments
from scheduling_db import contact_queries as contacts
from scheduling_db import country_queries as countries
from scheduling_db import user_queries as users
from scheduling_db.connection import close_connection, get_connection
from scheduling_db.logging_setup import configure_logging
from scheduling_db.reports import (
    render_contact_schedule,
    render_customer_types,
    render_report,
    render_type_month,
)
from scheduling_db.results import QueryResult, Status

configure_logging()


# --- REPORT TEXTS ---
def type_month_report_text():
    return render_report(appointments.report_by_type_and_month(), render_type_month)


def contact_schedule_report_text():
    return render_report(appointments.report_by_contact(), render_contact_schedule)


def customer_report_text():
    return render_report(appointments.report_by_customer(), render_customer_types)


__all__ = [
    "appointments",
    "contacts",
    "countries",
    "users",
    "get_connection",
    "close_connection",
    "QueryResult",
    "Status",
    "type_month_report_text",
    "contact_schedule_report_text",
    "customer_report_text",
]
