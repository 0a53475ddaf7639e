"""
Renders the session context block that is embedded in the system prompt.

Each present field contributes one line, always in the same order, after the
current date and time. Empty fields are skipped without a placeholder.
"""
from datetime import datetime
from typing import List, Optional

from senior_care.api.models.chat import UserData


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_clock(now: datetime) -> str:
    """'Monday, October 19, 2026 at 3:05 PM' without locale-dependent strftime flags."""
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    date_part = f"{now:%A}, {now:%B} {now.day}, {now.year}"
    return f"{date_part} at {hour}:{now.minute:02d} {meridiem}"


def build_user_context(user_data: Optional[UserData] = None, now: Optional[datetime] = None) -> str:
    """
    Build the newline-joined block of user facts.

    Args:
        user_data: Coerced session context; None renders only the clock line
        now: Clock override, defaults to the server's local time

    Returns:
        Context text to splice into the system prompt verbatim
    """
    user_data = user_data or UserData()
    now = now or datetime.now()

    lines: List[str] = [f"Current date and time: {format_clock(now)}"]

    if user_data.location:
        lines.append(f"User's location: {user_data.location}")

    if user_data.medications:
        meds = ", ".join(
            f"{med.name} at {med.time} ({'taken' if med.taken else 'not taken yet'} today)"
            for med in user_data.medications
        )
        lines.append(f"Current medications: {meds}")

    if user_data.item_locations:
        items = ", ".join(f"{item}: {place}" for item, place in user_data.item_locations.items())
        lines.append(f"Item locations: {items}")

    if user_data.water_intake is not None:
        lines.append(
            f"Water intake today: {_format_number(user_data.water_intake)} cups out of "
            f"{_format_number(user_data.effective_water_goal)} cup daily goal"
        )

    if user_data.emergency_contacts:
        contacts = ", ".join(
            f"{contact.name}: {contact.phone}" for contact in user_data.emergency_contacts
        )
        lines.append(f"Emergency contacts: {contacts}")

    return "\n".join(lines)
