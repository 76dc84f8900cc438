"""
Calendar-based sun sign classification.

This is the ephemeris-free path used whenever full chart computation
is unavailable. It only looks at the month and day.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Tuple, Union

from birthchart.domain.chart.parsing import parse_birth_date
from birthchart.domain.zodiac.signs import ZodiacSign


NOON = time(12, 0)


@dataclass(frozen=True)
class SignDateRange:
    """
    Inclusive calendar range for one sign.
    """
    sign: ZodiacSign
    start_month: int
    start_day: int
    end_month: int
    end_day: int

    def contains(self, month: int, day: int) -> bool:
        if self.start_month == self.end_month:
            return month == self.start_month and self.start_day <= day <= self.end_day

        # Both the year-wrap (Dec -> Jan) and the plain cross-month case
        # reduce to "tail of the start month or head of the end month".
        return (
            (month == self.start_month and day >= self.start_day)
            or (month == self.end_month and day <= self.end_day)
        )


ZODIAC_DATE_RANGES: Tuple[SignDateRange, ...] = (
    SignDateRange(ZodiacSign.ARIES, 3, 21, 4, 19),
    SignDateRange(ZodiacSign.TAURUS, 4, 20, 5, 20),
    SignDateRange(ZodiacSign.GEMINI, 5, 21, 6, 20),
    SignDateRange(ZodiacSign.CANCER, 6, 21, 7, 22),
    SignDateRange(ZodiacSign.LEO, 7, 23, 8, 22),
    SignDateRange(ZodiacSign.VIRGO, 8, 23, 9, 22),
    SignDateRange(ZodiacSign.LIBRA, 9, 23, 10, 22),
    SignDateRange(ZodiacSign.SCORPIO, 10, 23, 11, 21),
    SignDateRange(ZodiacSign.SAGITTARIUS, 11, 22, 12, 21),
    SignDateRange(ZodiacSign.CAPRICORN, 12, 22, 1, 19),
    SignDateRange(ZodiacSign.AQUARIUS, 1, 20, 2, 18),
    SignDateRange(ZodiacSign.PISCES, 2, 19, 3, 20),
)


class ZodiacClassifier:
    """
    Maps a calendar day onto its sun sign using fixed date ranges.

    Pure and total: every (month, day) pair yields a sign.
    """

    def __init__(self, ranges: Tuple[SignDateRange, ...] = ZODIAC_DATE_RANGES):
        self.ranges = ranges

    def classify(self, month: int, day: int) -> ZodiacSign:
        for entry in self.ranges:
            if entry.contains(month, day):
                return entry.sign

        # Unreachable for the built-in table, see the partition tests.
        return ZodiacSign.ARIES

    def classify_date(self, value: Union[date, datetime, str]) -> ZodiacSign:
        """
        Classify a birth date.

        The date is anchored to local noon before month/day are read so a
        midnight timestamp never slips onto the neighbouring day.
        """
        anchored = anchor_to_noon(value)
        return self.classify(anchored.month, anchored.day)


def anchor_to_noon(value: Union[date, datetime, str]) -> datetime:
    """
    Raises InvalidBirthDataError for strings that are not YYYY-MM-DD.
    """
    if isinstance(value, str):
        value = parse_birth_date(value)
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, NOON)


default_classifier = ZodiacClassifier()


def sun_sign_for_date(value: Union[date, datetime, str]) -> ZodiacSign:
    return default_classifier.classify_date(value)
