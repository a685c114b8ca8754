# /scheduling_db/appointment_queries.py

from datetime import datetime, time, timedelta

from . import contact_queries
from .models import Appointment, ContactScheduleEntry, CustomerTypeCount, TypeMonthCount
from .query_helpers import execute_insert, execute_write, fetch_all, fetch_one

APPOINTMENT_COLUMNS = ("a.Appointment_ID, a.Title, a.Description, a.Location, a.Type, a.Start, a.End, "
                       "a.Customer_ID, a.User_ID, a.Contact_ID")


# --- DATE WINDOWS ---
def month_window(today):
    """Returns [first day of this month, first day of next month) as datetimes."""
    first = today.replace(day=1)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    return datetime.combine(first, time.min), datetime.combine(next_first, time.min)


def week_window(today):
    """Returns the ISO-8601 week containing today: Monday 00:00 up to the next Monday."""
    monday = today - timedelta(days=today.isoweekday() - 1)
    start = datetime.combine(monday, time.min)
    return start, start + timedelta(days=7)


# --- LISTING ---
def list_all():
    """Fetches every appointment."""
    sql = f"SELECT {APPOINTMENT_COLUMNS} FROM appointments AS a"
    return fetch_all(sql, mapper=Appointment.from_row)


def _list_between(window_start, window_end):
    sql = (f"SELECT {APPOINTMENT_COLUMNS} FROM appointments AS a "
           "WHERE a.Start >= %(window_start)s AND a.Start < %(window_end)s")
    params = {'window_start': window_start, 'window_end': window_end}
    return fetch_all(sql, params, Appointment.from_row)


def server_date():
    """Asks the database for its current date."""
    return fetch_one("SELECT CURRENT_DATE AS today", mapper=lambda row: row['today'])


def _list_in_window(window, today):
    if today is None:
        result = server_date()
        if not result:
            return result
        today = result.value
    return _list_between(*window(today))


def list_current_month(today=None):
    """Fetches appointments starting in the calendar month of today, the server's date by default."""
    return _list_in_window(month_window, today)


def list_current_week(today=None):
    """Fetches appointments starting in the ISO week of today, the server's date by default."""
    return _list_in_window(week_window, today)


def list_by_customer(customer_id):
    """Fetches a customer's appointments together with their contact names."""
    sql = (f"SELECT {APPOINTMENT_COLUMNS}, c.Contact_Name FROM appointments AS a "
           "INNER JOIN contacts AS c ON a.Contact_ID = c.Contact_ID "
           "WHERE a.Customer_ID = %(customer_id)s")
    return fetch_all(sql, {'customer_id': customer_id}, Appointment.from_row)


def get_by_appointment_id(appointment_id):
    """Fetches a single appointment with its contact name."""
    sql = (f"SELECT {APPOINTMENT_COLUMNS}, c.Contact_Name FROM appointments AS a "
           "INNER JOIN contacts AS c ON a.Contact_ID = c.Contact_ID "
           "WHERE a.Appointment_ID = %(appointment_id)s")
    return fetch_one(sql, {'appointment_id': appointment_id}, Appointment.from_row)


# --- CRUD ---
def _appointment_params(contact_id, title, description, location, appointment_type, start, end,
                        customer_id, user_id):
    return {
        'title': title,
        'description': description,
        'location': location,
        'type': appointment_type,
        'start': start,
        'end': end,
        'customer_id': customer_id,
        'contact_id': contact_id,
        'user_id': user_id,
    }


def create(contact_name, title, description, location, appointment_type, start, end, customer_id, user_id):
    """
    Inserts a new appointment for the named contact.
    Returns OK with the new Appointment_ID. When the contact lookup does not
    succeed its result is returned as is and nothing is written.
    """
    contact = contact_queries.get_by_name(contact_name)
    if not contact:
        return contact
    sql = ("INSERT INTO appointments (Title, Description, Location, Type, Start, End, Customer_ID, Contact_ID, User_ID) "
           "VALUES (%(title)s, %(description)s, %(location)s, %(type)s, %(start)s, %(end)s, "
           "%(customer_id)s, %(contact_id)s, %(user_id)s)")
    params = _appointment_params(contact.value.contact_id, title, description, location, appointment_type,
                                 start, end, customer_id, user_id)
    return execute_insert(sql, params)


def update(contact_name, title, description, location, appointment_type, start, end, customer_id, user_id,
           appointment_id):
    """Overwrites every field of an existing appointment."""
    contact = contact_queries.get_by_name(contact_name)
    if not contact:
        return contact
    sql = ("UPDATE appointments SET Title=%(title)s, Description=%(description)s, Location=%(location)s, "
           "Type=%(type)s, Start=%(start)s, End=%(end)s, Customer_ID=%(customer_id)s, "
           "Contact_ID=%(contact_id)s, User_ID=%(user_id)s WHERE Appointment_ID=%(appointment_id)s")
    params = _appointment_params(contact.value.contact_id, title, description, location, appointment_type,
                                 start, end, customer_id, user_id)
    params['appointment_id'] = appointment_id
    return execute_write(sql, params)


def delete(appointment_id):
    """Deletes an appointment by ID."""
    sql = "DELETE FROM appointments WHERE Appointment_ID = %(appointment_id)s"
    return execute_write(sql, {'appointment_id': appointment_id})


# --- REPORTS ---
def report_by_type_and_month():
    """Counts appointments grouped by calendar month and type."""
    sql = ("SELECT MONTHNAME(Start) AS Month, Type, COUNT(*) AS Amount FROM appointments "
           "GROUP BY MONTH(Start), MONTHNAME(Start), Type ORDER BY MONTH(Start), Type")
    return fetch_all(sql, mapper=TypeMonthCount.from_row)


def report_by_contact():
    """Lists each contact's schedule."""
    sql = ("SELECT Contact_ID, Appointment_ID, Customer_ID, Title, Type, Description, Start, End "
           "FROM appointments ORDER BY Contact_ID, Start")
    return fetch_all(sql, mapper=ContactScheduleEntry.from_row)


def report_by_customer():
    """Counts appointments grouped by customer and type."""
    sql = ("SELECT Customer_ID, Type, COUNT(*) AS Amount FROM appointments "
           "GROUP BY Customer_ID, Type ORDER BY Customer_ID, Type")
    return fetch_all(sql, mapper=CustomerTypeCount.from_row)
