from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ZodiacSign(str, Enum):
    """
    The 12 canonical tropical signs, in zodiacal order.
    """
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


class Element(str, Enum):
    FIRE = "fire"
    EARTH = "earth"
    AIR = "air"
    WATER = "water"


ZODIAC_SIGNS = tuple(ZodiacSign)


# ─────────────────────────────────────────────
# Lookup Tables
# ─────────────────────────────────────────────

_SIGNS_BY_NAME: Mapping[str, ZodiacSign] = MappingProxyType(
    {sign.value.lower(): sign for sign in ZodiacSign}
)

OPPOSITE_SIGNS: Mapping[ZodiacSign, ZodiacSign] = MappingProxyType({
    ZodiacSign.ARIES: ZodiacSign.LIBRA,
    ZodiacSign.TAURUS: ZodiacSign.SCORPIO,
    ZodiacSign.GEMINI: ZodiacSign.SAGITTARIUS,
    ZodiacSign.CANCER: ZodiacSign.CAPRICORN,
    ZodiacSign.LEO: ZodiacSign.AQUARIUS,
    ZodiacSign.VIRGO: ZodiacSign.PISCES,
    ZodiacSign.LIBRA: ZodiacSign.ARIES,
    ZodiacSign.SCORPIO: ZodiacSign.TAURUS,
    ZodiacSign.SAGITTARIUS: ZodiacSign.GEMINI,
    ZodiacSign.CAPRICORN: ZodiacSign.CANCER,
    ZodiacSign.AQUARIUS: ZodiacSign.LEO,
    ZodiacSign.PISCES: ZodiacSign.VIRGO,
})

SIGN_ELEMENTS: Mapping[ZodiacSign, Element] = MappingProxyType({
    ZodiacSign.ARIES: Element.FIRE,
    ZodiacSign.LEO: Element.FIRE,
    ZodiacSign.SAGITTARIUS: Element.FIRE,
    ZodiacSign.TAURUS: Element.EARTH,
    ZodiacSign.VIRGO: Element.EARTH,
    ZodiacSign.CAPRICORN: Element.EARTH,
    ZodiacSign.GEMINI: Element.AIR,
    ZodiacSign.LIBRA: Element.AIR,
    ZodiacSign.AQUARIUS: Element.AIR,
    ZodiacSign.CANCER: Element.WATER,
    ZodiacSign.SCORPIO: Element.WATER,
    ZodiacSign.PISCES: Element.WATER,
})


# ─────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────

def normalize_sign_label(label: Optional[str]) -> Optional[ZodiacSign]:
    """
    Map a provider sign label onto a canonical sign.

    Matching is case-insensitive and ignores surrounding whitespace.
    Returns None for empty or unknown labels.
    """
    if not label or not isinstance(label, str):
        return None
    return _SIGNS_BY_NAME.get(label.strip().lower())


def opposite_sign(sign: ZodiacSign) -> ZodiacSign:
    """
    Return the sign 180 degrees away.
    """
    return OPPOSITE_SIGNS[ZodiacSign(sign)]


def element_of(sign: ZodiacSign) -> Element:
    return SIGN_ELEMENTS[ZodiacSign(sign)]
