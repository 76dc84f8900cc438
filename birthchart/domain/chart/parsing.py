import re
from datetime import date, time
from typing import Union

from birthchart.domain.chart.errors import InvalidBirthDataError


DEFAULT_BIRTH_TIME = time(12, 0)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_birth_time(value: Union[str, time, None]) -> time:
    """
    Parse "HH:MM" or "HH:MM:SS"; empty input means noon.
    """
    if value is None:
        return DEFAULT_BIRTH_TIME
    if isinstance(value, time):
        return value

    text = value.strip()
    if not text:
        return DEFAULT_BIRTH_TIME

    match = _TIME_PATTERN.match(text)
    if not match:
        raise InvalidBirthDataError(f"Invalid time of birth '{value}'. Use HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidBirthDataError(f"Time of birth '{value}' is out of range")
    return time(hour, minute)


def parse_birth_date(value: Union[str, date]) -> date:
    """
    Parse a strict "YYYY-MM-DD" date. Trailing text is rejected.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
        raise InvalidBirthDataError(f"Invalid date of birth '{value}'. Use YYYY-MM-DD")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidBirthDataError(f"Invalid date of birth '{value}': {e}") from e
