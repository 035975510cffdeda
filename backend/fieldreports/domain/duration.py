"""Work duration arithmetic for report detail views."""


def to_minutes(time_of_day: str) -> int:
    """Convert an ``HH:MM`` string to minutes since midnight."""
    hours, minutes = time_of_day.split(":")
    return int(hours) * 60 + int(minutes)


def compute_minutes(start_time: str, end_time: str, break_minutes: int) -> int:
    """Net worked minutes: (end - start) - break.

    Ordering is not re-checked here; callers pass validated times. A start
    later than the end yields a negative result.
    """
    return to_minutes(end_time) - to_minutes(start_time) - break_minutes


def format_duration(minutes: int) -> str:
    """Render minutes as ``{hours}時間{minutes:02}分`` (e.g. 420 → 7時間00分).

    A negative total keeps a single leading sign: -30 → -0時間30分.
    """
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}時間{mins:02d}分"
