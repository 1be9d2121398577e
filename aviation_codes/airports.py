"""Airport lookup: full records, search, and IATA (3) / ICAO (4) schemes.

    >>> from aviation_codes import airport
    >>> airport.exists("LAX")
    True
    >>> airport.icao.get("KJFK").iata
    'JFK'
"""

from typing import Callable, List

from aviation_codes.dataset.store import load_dataset
from aviation_codes.lookup.codes import AIRPORT_SCHEMES, KindLookup
from aviation_codes.lookup.search import DEFAULT_LIMIT, search_airports
from aviation_codes.types import Airport, Dataset


class AirportLookup(KindLookup[Airport]):
    def __init__(self, source: Callable[[], Dataset[Airport]]):
        super().__init__(AIRPORT_SCHEMES, source)

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> List[Airport]:
        """Match on name, city or country code, or an exact IATA/ICAO code."""
        return search_airports(self._searchable(), query, limit=limit)


airport = AirportLookup(lambda: load_dataset("airports"))
