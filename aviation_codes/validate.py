"""Validation-only entry point.

Import from here when you only need to know whether a code is real. It reads
the small *_codes.json artifacts and never loads record data:

    from aviation_codes.validate import airport, airline

    airport.exists("LAX")        # True
    airline.iata.is_format("2A") # True
"""

from aviation_codes.dataset.store import load_code_sets
from aviation_codes.lookup.codes import AIRLINE_SCHEMES, AIRPORT_SCHEMES, KindValidator


airport = KindValidator(AIRPORT_SCHEMES, lambda: load_code_sets("airports"))
airline = KindValidator(AIRLINE_SCHEMES, lambda: load_code_sets("airlines"))

__all__ = ["airport", "airline"]
