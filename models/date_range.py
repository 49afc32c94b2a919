"""
Date range helpers for reservation stays.

A stay covers the half-open range [start, start + number_of_days): the
check-out day is not a night of the stay.
"""

from datetime import date, datetime, timedelta


def parse_date(value) -> date:
    """
    Normalize a date value to a calendar date.

    Only the calendar part of an ISO string is used, so '2024-06-01' and
    '2024-06-01T00:00:00Z' both give 2024-06-01 whatever the server timezone.

    Args:
        value: date, datetime or ISO string

    Returns:
        date

    Raises:
        ValueError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f'Fecha no válida: {value!r}')

    text = value.strip()
    # Anything after the date must be a time part
    if len(text) > 10 and text[10] not in 'T ':
        raise ValueError(f'Fecha no válida: {value!r}')
    return datetime.strptime(text[:10], '%Y-%m-%d').date()


class NightRange:
    """
    Consecutive nights of a stay.

    Iterating yields the dates lazily and can be repeated any number of times.
    """

    def __init__(self, start, number_of_days: int):
        self.start = parse_date(start)
        self.number_of_days = int(number_of_days)

    @property
    def end(self) -> date:
        """Check-out date (first day after the last night)."""
        return self.start + timedelta(days=self.number_of_days)

    def __iter__(self):
        for offset in range(self.number_of_days):
            yield self.start + timedelta(days=offset)

    def __len__(self):
        return max(self.number_of_days, 0)

    def __contains__(self, night) -> bool:
        night = parse_date(night)
        return self.start <= night < self.end

    def __repr__(self):
        return f'NightRange({self.start.isoformat()}, {self.number_of_days})'


def nights_of(start_date, number_of_days: int) -> NightRange:
    """Nights of a stay starting at start_date."""
    return NightRange(start_date, number_of_days)


def overlaps(nights, other_start, other_days: int) -> bool:
    """
    Check whether any night falls inside another stay.

    Args:
        nights: Iterable of dates (e.g. a NightRange)
        other_start: Start date of the other stay
        other_days: Number of nights of the other stay

    Returns:
        True if any night is in [other_start, other_start + other_days)
    """
    other = NightRange(other_start, other_days)
    return any(night in other for night in nights)
