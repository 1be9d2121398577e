"""Format checks, existence checks and record lookup per code scheme.

Two layers:
  * SchemeValidator / KindValidator only need the valid-code sets.
  * SchemeLookup / KindLookup add record retrieval on top of the full dataset.

Data is pulled from a zero-argument `source` callable on first use, so building
a lookup object is free and the artifacts are read once per process.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Mapping, Optional

from aviation_codes.types import CodeSets, Dataset, Found, NotFound, ParseResult, RecordT


@dataclass(frozen=True)
class CodeScheme:
    name: str
    width: int
    pattern: "re.Pattern[str]"


@dataclass(frozen=True)
class CodeKind:
    iata: CodeScheme
    icao: CodeScheme


AIRPORT_SCHEMES = CodeKind(
    iata=CodeScheme("iata", 3, re.compile(r"[A-Z]{3}", re.IGNORECASE | re.ASCII)),
    icao=CodeScheme("icao", 4, re.compile(r"[A-Z]{4}", re.IGNORECASE | re.ASCII)),
)
AIRLINE_SCHEMES = CodeKind(
    iata=CodeScheme("iata", 2, re.compile(r"[A-Z0-9]{2}", re.IGNORECASE | re.ASCII)),
    icao=CodeScheme("icao", 3, re.compile(r"[A-Z]{3}", re.IGNORECASE | re.ASCII)),
)

NOT_FOUND = NotFound()


def _normalise(code: Any) -> str:
    return code.upper() if isinstance(code, str) else ""


class SchemeValidator:
    def __init__(self, scheme: CodeScheme, source: Callable[[], CodeSets]):
        self.scheme = scheme
        self._source = source

    def _codes(self):
        sets = self._source()
        return sets.iata_codes if self.scheme.name == "iata" else sets.icao_codes

    def is_format(self, code: str) -> bool:
        """Shape only; never looks at the data."""
        if not isinstance(code, str):
            return False
        return self.scheme.pattern.fullmatch(code) is not None

    def exists(self, code: str) -> bool:
        return _normalise(code) in self._codes()


class SchemeLookup(SchemeValidator, Generic[RecordT]):
    def __init__(self, scheme: CodeScheme, source: Callable[[], Dataset[RecordT]]):
        super().__init__(scheme, source)

    def _records(self) -> Mapping[str, RecordT]:
        dataset = self._source()
        return dataset.by_iata if self.scheme.name == "iata" else dataset.by_icao

    def get(self, code: str) -> Optional[RecordT]:
        return self._records().get(_normalise(code))

    def parse(self, code: str) -> ParseResult:
        record = self.get(code)
        return Found(data=record) if record is not None else NOT_FOUND

    def codes(self) -> List[str]:
        return list(self._codes())

    def count(self) -> int:
        return len(self._codes())


class KindValidator:
    """Kind level entry point; picks the scheme from the code's length alone."""

    scheme_class = SchemeValidator

    def __init__(self, kind: CodeKind, source: Callable[[], Any]):
        self.kind = kind
        self._source = source
        self.iata = self.scheme_class(kind.iata, source)
        self.icao = self.scheme_class(kind.icao, source)

    def _route(self, code: Any):
        if not isinstance(code, str):
            return None
        if len(code) == self.kind.iata.width:
            return self.iata
        if len(code) == self.kind.icao.width:
            return self.icao
        return None

    def exists(self, code: str) -> bool:
        scheme = self._route(code)
        return scheme.exists(code) if scheme is not None else False


class KindLookup(KindValidator, Generic[RecordT]):
    scheme_class = SchemeLookup

    def get(self, code: str) -> Optional[RecordT]:
        scheme = self._route(code)
        return scheme.get(code) if scheme is not None else None

    def parse(self, code: str) -> ParseResult:
        scheme = self._route(code)
        return scheme.parse(code) if scheme is not None else NOT_FOUND

    def _searchable(self) -> Iterable[RecordT]:
        # Search only sees records with a valid IATA code, in build order
        return self._source().by_iata.values()
