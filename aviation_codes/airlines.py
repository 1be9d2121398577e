"""Airline lookup: full records, search, and IATA (2) / ICAO (3) schemes.

    >>> from aviation_codes import airline
    >>> airline.get("AAL").iata
    'AA'
"""

from typing import Callable, List

from aviation_codes.dataset.store import load_dataset
from aviation_codes.lookup.codes import AIRLINE_SCHEMES, KindLookup
from aviation_codes.lookup.search import DEFAULT_LIMIT, search_airlines
from aviation_codes.types import Airline, Dataset


class AirlineLookup(KindLookup[Airline]):
    def __init__(self, source: Callable[[], Dataset[Airline]]):
        super().__init__(AIRLINE_SCHEMES, source)

    def search(self, query: str, limit: int = DEFAULT_LIMIT, active_only: bool = False) -> List[Airline]:
        """Match on name, callsign or country code, or an exact IATA/ICAO code.

        With active_only, inactive carriers are dropped before the limit applies.
        """
        return search_airlines(self._searchable(), query, limit=limit, active_only=active_only)


airline = AirlineLookup(lambda: load_dataset("airlines"))
