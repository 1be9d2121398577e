"""Country name -> ISO 3166-1 alpha-2 normalisation.

OpenFlights predates several ISO renames and uses colloquial names for a
known set of countries. Those are corrected by a fixed override table. Every
other name goes through a short English alias list, then pycountry's English
names.
"""

from functools import lru_cache
from typing import Dict

import pycountry


COUNTRY_NAME_OVERRIDES: Dict[str, str] = {
    "Burma": "MM",
    "Congo (Brazzaville)": "CG",
    "Congo (Kinshasa)": "CD",
    "Cote d'Ivoire": "CI",
    "East Timor": "TL",
    "Falkland Islands": "FK",
    "Faroe Islands": "FO",
    "French Guiana": "GF",
    "French Polynesia": "PF",
    "Guadeloupe": "GP",
    "Hong Kong": "HK",
    "Iran": "IR",
    "Johnston Atoll": "UM",
    "Korea": "KR",
    "Laos": "LA",
    "Macau": "MO",
    "Martinique": "MQ",
    "Mayotte": "YT",
    "Midway Islands": "UM",
    "Moldova": "MD",
    # Dissolved in 2010, no current alpha-2 exists
    "Netherlands Antilles": "AN",
    "North Korea": "KP",
    "Palestine": "PS",
    "Reunion": "RE",
    "Russia": "RU",
    "Saint Helena": "SH",
    "Saint Kitts and Nevis": "KN",
    "Saint Lucia": "LC",
    "Saint Pierre and Miquelon": "PM",
    "Saint Vincent and the Grenadines": "VC",
    "Sao Tome and Principe": "ST",
    "South Korea": "KR",
    "Syria": "SY",
    "Taiwan": "TW",
    "Tanzania": "TZ",
    "Trinidad and Tobago": "TT",
    "Turks and Caicos Islands": "TC",
    "Venezuela": "VE",
    "Vietnam": "VN",
    "Virgin Islands": "VI",
    "Wake Island": "UM",
    "Wallis and Futuna": "WF",
    "Western Sahara": "EH",
}

# English names OpenFlights uses that pycountry keeps only under a newer or
# longer ISO name. Part of the general resolver, not an override.
ENGLISH_ALIASES: Dict[str, str] = {
    "Brunei": "BN",
    "British Virgin Islands": "VG",
    "Cape Verde": "CV",
    "Curacao": "CW",
    "Czech Republic": "CZ",
    "Ivory Coast": "CI",
    "Macedonia": "MK",
    "Micronesia": "FM",
    "Saint Barthelemy": "BL",
    "Saint Martin": "MF",
    "Sint Maarten": "SX",
    "Svalbard": "SJ",
    "Swaziland": "SZ",
    "Turkey": "TR",
    "Vatican City": "VA",
}

_NAME_FIELDS = ("name", "common_name", "official_name")


def resolve_country_name(name: str) -> str:
    """English-name lookup without the override table. '' when unknown."""
    if not name:
        return ""
    alias = ENGLISH_ALIASES.get(name)
    if alias:
        return alias
    for field in _NAME_FIELDS:
        match = pycountry.countries.get(**{field: name})
        if match is not None:
            return match.alpha_2
    return ""


@lru_cache(maxsize=None)
def country_code(name: str) -> str:
    if not name:
        return ""
    override = COUNTRY_NAME_OVERRIDES.get(name)
    if override:
        return override
    return resolve_country_name(name)


def audit_overrides() -> Dict[str, str]:
    """Overrides that disagree with what pycountry now resolves on its own.

    Maps source name -> the code pycountry would return. Names pycountry cannot
    resolve at all are not reported; the override is the only answer there.
    """
    stale: Dict[str, str] = {}
    for name, code in COUNTRY_NAME_OVERRIDES.items():
        resolved = resolve_country_name(name)
        if resolved and resolved != code:
            stale[name] = resolved
    return stale
