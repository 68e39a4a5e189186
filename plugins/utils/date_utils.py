import re
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

# Day may omit its leading zero, month and year may not. ASCII digits only.
STRICT_DATE_PATTERNS = {
    'D/MM/YYYY': re.compile(r'(?P<day>[0-9]{1,2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})'),
    'DD/MM/YYYY': re.compile(r'(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})'),
}


def parse_strict_date(text: str, pattern: str = 'D/MM/YYYY') -> Optional[date]:
    """
    Parse a date string that must match the pattern exactly.
    :param text: the date text, e.g. "3/04/2019".
    :param pattern: one of the keys of STRICT_DATE_PATTERNS.
    :return: a date, or None if the text does not match or is not a real calendar date.
    """
    if not isinstance(text, str):
        return None

    match = STRICT_DATE_PATTERNS[pattern].fullmatch(text)
    if not match:
        return None

    try:
        return date(int(match.group('year')), int(match.group('month')), int(match.group('day')))
    except ValueError:
        return None


def format_iso_date(value: Optional[date]) -> str:
    if value is None:
        return ''

    return value.strftime('%Y-%m-%d')


def format_search_date(value: date) -> str:
    return value.strftime('%d/%m/%Y')


def subtract_months(value: date, months: int) -> date:
    """
    Subtract calendar months, clamping the day to the end of the target month.
    :param value: the date to subtract from.
    :param months: the number of months to go back.
    :return: the resulting date.
    """
    if isinstance(value, datetime):
        value = value.date()

    return value - relativedelta(months=months)
