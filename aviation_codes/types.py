from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Generic, Literal, Mapping, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class Airport(BaseModel):
    model_config = ConfigDict(frozen=True)

    iata: str = Field("", description="IATA 3-letter code, empty for many small fields")
    icao: str = Field("", description="ICAO 4-letter code")
    name: str = ""
    city: str = ""
    country: str = Field("", description="ISO 3166-1 alpha-2, e.g. 'US'")
    latitude: float = 0.0    # decimal degrees, -90..90
    longitude: float = 0.0   # decimal degrees, -180..180
    elevation: float = 0.0   # feet above sea level
    timezone: str = ""       # IANA id, e.g. 'America/Los_Angeles'


class Airline(BaseModel):
    model_config = ConfigDict(frozen=True)

    iata: str = Field("", description="IATA 2-character code (may be empty)")
    icao: str = Field("", description="ICAO 3-letter code (may be empty)")
    name: str = ""
    callsign: str = ""
    country: str = Field("", description="ISO 3166-1 alpha-2, e.g. 'GB'")
    active: bool = False


RecordT = TypeVar("RecordT", Airport, Airline)


class Found(BaseModel, Generic[RecordT]):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    data: RecordT


class NotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False


# Found is left unparametrised here; pydantic returns the bare class for Found[RecordT]
ParseResult = Union[Found, NotFound]


@dataclass(frozen=True)
class CodeSets:
    """Valid codes only; enough for the validation-only profile."""
    iata_codes: FrozenSet[str]
    icao_codes: FrozenSet[str]


@dataclass(frozen=True)
class Dataset(Generic[RecordT]):
    """Both indexes of one record kind. Keys are uppercase, in build order."""
    by_iata: Mapping[str, RecordT]
    by_icao: Mapping[str, RecordT]
    iata_codes: FrozenSet[str]
    icao_codes: FrozenSet[str]

    @classmethod
    def freeze(cls, by_iata: Dict[str, RecordT], by_icao: Dict[str, RecordT]) -> "Dataset[RecordT]":
        return cls(
            by_iata=MappingProxyType(dict(by_iata)),
            by_icao=MappingProxyType(dict(by_icao)),
            iata_codes=frozenset(by_iata),
            icao_codes=frozenset(by_icao),
        )

    def code_sets(self) -> CodeSets:
        return CodeSets(iata_codes=self.iata_codes, icao_codes=self.icao_codes)
