"""
Reminder Selection Module.

Picks at most one appointment reminder and one low-stock reminder for
the day. How the reminder reaches the user (speech, banner, push) is
up to the caller.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from .refill import Medication, is_low_stock


@dataclass(frozen=True)
class Appointment:
    """A scheduled appointment."""

    title: str
    scheduled_at: datetime
    attended: bool = False
    doctor: Optional[str] = None


@dataclass(frozen=True)
class ReminderSelection:
    """Reminders to surface today; either field may be absent."""

    appointment_reminder: Optional[Appointment] = None
    low_stock_reminder: Optional[Medication] = None

    @property
    def is_empty(self) -> bool:
        return self.appointment_reminder is None and self.low_stock_reminder is None


def select_reminders(
    medications: Iterable[Medication],
    appointments: Iterable[Appointment],
    today: date,
) -> ReminderSelection:
    """
    Select today's reminders.

    The first unattended appointment dated today and the first medication
    at or below its refill threshold are chosen; input order breaks ties.
    """
    appointment = next(
        (a for a in appointments if not a.attended and a.scheduled_at.date() == today),
        None,
    )
    low_stock = next((m for m in medications if is_low_stock(m)), None)
    return ReminderSelection(appointment_reminder=appointment, low_stock_reminder=low_stock)


def next_appointment(appointments: Sequence[Appointment], today: date) -> Optional[Appointment]:
    """First unattended appointment dated on or before today."""
    for appointment in appointments:
        if not appointment.attended and appointment.scheduled_at.date() <= today:
            return appointment
    return None


def appointment_message(appointment: Appointment) -> str:
    return (
        f"You have an appointment today: {appointment.title} "
        f"at {appointment.scheduled_at.strftime('%H:%M')}"
    )


def low_stock_message(medication: Medication) -> str:
    return f"Reminder: Your medicine {medication.name} is running low. Please refill soon."


def reminder_messages(selection: ReminderSelection) -> List[str]:
    """Render the selection as spoken sentences, appointment first."""
    messages = []
    if selection.appointment_reminder is not None:
        messages.append(appointment_message(selection.appointment_reminder))
    if selection.low_stock_reminder is not None:
        messages.append(low_stock_message(selection.low_stock_reminder))
    return messages
