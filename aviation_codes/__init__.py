"""Offline validation and lookup of airport and airline IATA/ICAO codes.

Data comes from OpenFlights and is built ahead of time with
`aviation-codes-build`; nothing here touches the network.
"""

from aviation_codes.airlines import AirlineLookup, airline
from aviation_codes.airports import AirportLookup, airport
from aviation_codes.types import Airline, Airport, Found, NotFound, ParseResult

__version__ = "0.1.0"

__all__ = [
    "airport",
    "airline",
    "Airport",
    "Airline",
    "AirportLookup",
    "AirlineLookup",
    "Found",
    "NotFound",
    "ParseResult",
]
