# /scheduling_db/reports.py

"""
Text rendering for the appointment reports.

The layouts are fixed: screens that show the reports rely on the literal
headers and the tab separators below.
"""

REPORT_FAILED_TEXT = "Try again"

TYPE_MONTH_HEADER = "Month          |      Type         |           Total            "
CONTACT_HEADER = "Contact ID | Appointment ID | Customer ID | Title | Type | Description | Start | End\n"
CUSTOMER_HEADER = "Customer ID     |     Total     |    Type   \n"


def _iso_minutes(value):
    # 2024-03-15T10:00, seconds only when non-zero
    return value.isoformat(timespec='seconds' if value.second else 'minutes')


def render_type_month(rows):
    lines = [TYPE_MONTH_HEADER, "\n"]
    for row in rows:
        lines.append(f"{row.month}\t\t\t{row.type}\t\t\t{row.amount}\n")
    return "".join(lines)


def render_contact_schedule(rows):
    lines = [CONTACT_HEADER]
    for row in rows:
        fields = (row.contact_id, row.appointment_id, row.customer_id, row.title, row.type,
                  row.description, _iso_minutes(row.start), _iso_minutes(row.end))
        lines.append("\n\n" + "\t".join(str(field) for field in fields) + "\n")
    return "".join(lines)


def render_customer_types(rows):
    lines = [CUSTOMER_HEADER, "\n"]
    for row in rows:
        lines.append(f"{row.customer_id}\t\t\t\t{row.amount}\t\t{row.type}\n")
    return "".join(lines)


def render_report(result, renderer):
    """Renders a report QueryResult; a failed query renders as a retry prompt."""
    if result.is_failed:
        return REPORT_FAILED_TEXT
    return renderer(result.value or [])
