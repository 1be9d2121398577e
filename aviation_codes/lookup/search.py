from typing import Callable, Iterable, List, Tuple

from aviation_codes.types import Airline, Airport, RecordT

DEFAULT_LIMIT = 10


def _scan(
    records: Iterable[RecordT],
    query: str,
    limit: int,
    text_fields: Callable[[RecordT], Tuple[str, ...]],
    keep: Callable[[RecordT], bool] = lambda r: True,
) -> List[RecordT]:
    """First `limit` matches in iteration order; stops as soon as it has them.

    Text fields match on substring, codes only on equality, both ignoring case.
    """
    if not isinstance(query, str):
        return []
    q = query.lower()
    results: List[RecordT] = []

    for r in records:
        if len(results) >= limit:
            break
        if not keep(r):
            continue
        if (
            any(q in field.lower() for field in text_fields(r))
            or r.iata.lower() == q
            or r.icao.lower() == q
        ):
            results.append(r)

    return results


def search_airports(records: Iterable[Airport], query: str, limit: int = DEFAULT_LIMIT) -> List[Airport]:
    return _scan(records, query, limit, lambda a: (a.name, a.city, a.country))


def search_airlines(
    records: Iterable[Airline],
    query: str,
    limit: int = DEFAULT_LIMIT,
    active_only: bool = False,
) -> List[Airline]:
    keep = (lambda a: a.active) if active_only else (lambda a: True)
    return _scan(records, query, limit, lambda a: (a.name, a.callsign, a.country), keep)
