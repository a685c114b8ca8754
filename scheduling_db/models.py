# /scheduling_db/models.py

"""
Record types for the scheduling tables and the rows of the aggregate reports.
Each one is built from a dictionary-cursor row with ``from_row``.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class Appointment:
    """One row of the appointments table."""
    appointment_id: int
    title: str
    description: str
    location: str
    type: str
    start: datetime
    end: datetime
    customer_id: int
    user_id: int
    contact_id: int
    contact_name: Optional[str] = None

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @classmethod
    def from_row(cls, row):
        return cls(
            appointment_id=row['Appointment_ID'],
            title=row['Title'],
            description=row['Description'],
            location=row['Location'],
            type=row['Type'],
            start=row['Start'],
            end=row['End'],
            customer_id=row['Customer_ID'],
            user_id=row['User_ID'],
            contact_id=row['Contact_ID'],
            # Only present when the query joined contacts
            contact_name=row.get('Contact_Name'),
        )


@dataclass
class Contact:
    contact_id: int
    contact_name: str
    email: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        return cls(row['Contact_ID'], row['Contact_Name'], row.get('Email'))


@dataclass
class User:
    user_id: int
    user_name: str
    password: str

    @classmethod
    def from_row(cls, row):
        return cls(row['User_ID'], row['User_Name'], row['Password'])


@dataclass
class Country:
    country_id: int
    country: str

    @classmethod
    def from_row(cls, row):
        return cls(row['Country_ID'], row['Country'])


# --- Report rows ---
@dataclass
class TypeMonthCount:
    """Number of appointments of one type in one calendar month."""
    month: str
    type: str
    amount: int

    @classmethod
    def from_row(cls, row):
        return cls(row['Month'], row['Type'], row['Amount'])


@dataclass
class ContactScheduleEntry:
    """One appointment on a contact's schedule."""
    contact_id: int
    appointment_id: int
    customer_id: int
    title: str
    type: str
    description: str
    start: datetime
    end: datetime

    @classmethod
    def from_row(cls, row):
        return cls(
            contact_id=row['Contact_ID'],
            appointment_id=row['Appointment_ID'],
            customer_id=row['Customer_ID'],
            title=row['Title'],
            type=row['Type'],
            description=row['Description'],
            start=row['Start'],
            end=row['End'],
        )


@dataclass
class CustomerTypeCount:
    customer_id: int
    type: str
    amount: int

    @classmethod
    def from_row(cls, row):
        return cls(row['Customer_ID'], row['Type'], row['Amount'])
