"""Turn raw OpenFlights documents into frozen, dual-keyed datasets.

Columns are positional. airports.dat:
    id, name, city, country, iata, icao, lat, lon, altitude, utc_offset,
    dst, tz_database, type, source
airlines.dat:
    id, name, alias, iata, icao, callsign, country, active
"""

from typing import Callable, Dict, Iterable, List, Optional

from aviation_codes.obs.logger import log_event
from aviation_codes.obs.metrics import inc_counter
from aviation_codes.parse.countries import country_code
from aviation_codes.parse.records import parse_line, to_float
from aviation_codes.types import Airline, Airport, Dataset, RecordT


AIRPORT_MIN_FIELDS = 14
AIRLINE_MIN_FIELDS = 8

AIRPORT_IATA_LEN = 3
AIRPORT_ICAO_LEN = 4
AIRLINE_IATA_LEN = 2
AIRLINE_ICAO_LEN = 3


def split_lines(text: str) -> List[str]:
    return text.strip().split("\n")


def airport_from_fields(fields: List[str]) -> Optional[Airport]:
    if len(fields) < AIRPORT_MIN_FIELDS:
        return None
    name, city, country, iata, icao = fields[1:6]
    if not iata and not icao:
        return None
    return Airport(
        iata=iata,
        icao=icao,
        name=name,
        city=city,
        country=country_code(country),
        latitude=to_float(fields[6]),
        longitude=to_float(fields[7]),
        elevation=to_float(fields[8]),
        timezone=fields[11],
    )


def airline_from_fields(fields: List[str]) -> Optional[Airline]:
    if len(fields) < AIRLINE_MIN_FIELDS:
        return None
    name = fields[1]
    iata, icao, callsign, country, active = fields[3:8]
    if not iata and not icao:
        return None
    return Airline(
        iata=iata,
        icao=icao,
        name=name,
        callsign=callsign,
        country=country_code(country),
        active=active == "Y",
    )


def _build(
    kind: str,
    lines: Iterable[str],
    min_fields: int,
    to_record: Callable[[List[str]], Optional[RecordT]],
    iata_len: int,
    icao_len: int,
) -> Dataset[RecordT]:
    by_iata: Dict[str, RecordT] = {}
    by_icao: Dict[str, RecordT] = {}
    skipped = 0
    uncoded = 0

    for line in lines:
        fields = parse_line(line)
        if len(fields) < min_fields:
            skipped += 1
            continue
        record = to_record(fields)
        if record is None:
            uncoded += 1
            continue
        if len(record.iata) == iata_len:
            by_iata[record.iata.upper()] = record
        if len(record.icao) == icao_len:
            by_icao[record.icao.upper()] = record

    if skipped:
        inc_counter("records_skipped_total", {"kind": kind, "reason": "short_line"}, skipped)
    if uncoded:
        inc_counter("records_skipped_total", {"kind": kind, "reason": "no_code"}, uncoded)

    dataset = Dataset.freeze(by_iata, by_icao)
    log_event(
        "dataset_built",
        kind=kind,
        iata_codes=len(dataset.iata_codes),
        icao_codes=len(dataset.icao_codes),
        skipped_short=skipped,
        skipped_uncoded=uncoded,
    )
    return dataset


def build_airports(lines: Iterable[str]) -> Dataset[Airport]:
    return _build("airports", lines, AIRPORT_MIN_FIELDS, airport_from_fields,
                  AIRPORT_IATA_LEN, AIRPORT_ICAO_LEN)


def build_airlines(lines: Iterable[str]) -> Dataset[Airline]:
    return _build("airlines", lines, AIRLINE_MIN_FIELDS, airline_from_fields,
                  AIRLINE_IATA_LEN, AIRLINE_ICAO_LEN)
