"""
Place names — clean reverse-geocoded addresses and name postal regions.
Version: 1.0.0
"""
import re

from app.core.constants.geo import (
    ADMIN_KEYWORDS,
    COUNTRY_NAMES,
    DEFAULT_PLACE_NAME,
    EXACT_PLACE_NAMES,
    KNOWN_CITIES,
    MIN_PLACE_NAME_LENGTH,
    POSTAL_REGIONS,
)

_POSTAL_CODE = re.compile(r"^\d{5}$")


def _is_skippable(segment: str) -> bool:
    if _POSTAL_CODE.match(segment):
        return True
    if segment in COUNTRY_NAMES:
        return True
    return any(keyword in segment for keyword in ADMIN_KEYWORDS)


def extract_city_name(display_name: str) -> str:
    """
    Pick the city out of a comma separated geocoder address.

    Known major cities win outright. Otherwise the first segment that is
    not a postal code, country or administrative division is returned
    with any hyphenated district suffix removed.
    """
    if not display_name:
        return DEFAULT_PLACE_NAME

    segments = [part.strip() for part in display_name.split(",")]

    for segment in segments:
        for city in KNOWN_CITIES:
            if city in segment:
                return city

    for segment in segments:
        if _is_skippable(segment):
            continue
        if len(segment) >= MIN_PLACE_NAME_LENGTH:
            if "-" in segment:
                main_part = segment.split("-")[0]
                if len(main_part) >= MIN_PLACE_NAME_LENGTH:
                    return main_part
            return segment

    return segments[0] or DEFAULT_PLACE_NAME


def region_place_name(postal_code: str) -> str:
    """Place name for a postal code without asking a geocoder."""
    exact = EXACT_PLACE_NAMES.get(postal_code)
    if exact:
        return exact

    try:
        code = int(postal_code)
    except (TypeError, ValueError):
        return f"Region {postal_code}"

    for first, last, _lat, _lng, city in POSTAL_REGIONS:
        if first <= code <= last:
            return city
    return f"Region {postal_code}"
