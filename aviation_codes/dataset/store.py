"""Persist built datasets as JSON artifacts and load them back.

Four files per data directory:
    airport_codes.json / airline_codes.json   valid code sets only
    airports.json / airlines.json             full records, keyed both ways

The full files point at their codes file instead of repeating the sets, so a
validation-only consumer never has to read record data.
"""

import json
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Literal, Optional, Type

from aviation_codes.errors import DatasetNotBuiltError
from aviation_codes.types import Airline, Airport, CodeSets, Dataset

Kind = Literal["airports", "airlines"]

PACKAGE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"

CODES_FILES: Dict[str, str] = {
    "airports": "airport_codes.json",
    "airlines": "airline_codes.json",
}
FULL_FILES: Dict[str, str] = {
    "airports": "airports.json",
    "airlines": "airlines.json",
}
RECORD_TYPES: Dict[str, Type] = {
    "airports": Airport,
    "airlines": Airline,
}


def _codes_payload(dataset: Dataset) -> Dict[str, Any]:
    return {"iata": sorted(dataset.iata_codes), "icao": sorted(dataset.icao_codes)}


def _full_payload(kind: str, dataset: Dataset) -> Dict[str, Any]:
    return {
        "codes": CODES_FILES[kind],
        "by_iata": {code: r.model_dump() for code, r in dataset.by_iata.items()},
        "by_icao": {code: r.model_dump() for code, r in dataset.by_icao.items()},
    }


def write_artifacts(airports: Dataset[Airport], airlines: Dataset[Airline], data_dir: Path) -> Dict[str, Path]:
    """Write all four artifacts, or none of them.

    Everything is first written to sibling .tmp files; only when all four exist
    are they renamed over the previous artifacts.
    """
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    payloads: Dict[str, Dict[str, Any]] = {}
    for kind, dataset in (("airports", airports), ("airlines", airlines)):
        payloads[CODES_FILES[kind]] = _codes_payload(dataset)
        payloads[FULL_FILES[kind]] = _full_payload(kind, dataset)

    staged: Dict[Path, Path] = {}
    try:
        for name, payload in payloads.items():
            final = data_dir / name
            tmp = final.with_suffix(".json.tmp")
            staged[tmp] = final
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, separators=(",", ":"))
    except Exception:
        for tmp in staged:
            tmp.unlink(missing_ok=True)
        raise

    for tmp, final in staged.items():
        os.replace(tmp, final)

    load_code_sets.cache_clear()
    load_dataset.cache_clear()
    return {final.name: final for final in staged.values()}


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DatasetNotBuiltError(f"{path} not found; run aviation-codes-build") from e


def _resolve_dir(data_dir: Optional[Path]) -> Path:
    return Path(data_dir) if data_dir is not None else PACKAGE_DATA_DIR


@lru_cache(maxsize=None)
def load_code_sets(kind: Kind, data_dir: Optional[Path] = None) -> CodeSets:
    data = _read_json(_resolve_dir(data_dir) / CODES_FILES[kind])
    return CodeSets(
        iata_codes=frozenset(data.get("iata", [])),
        icao_codes=frozenset(data.get("icao", [])),
    )


@lru_cache(maxsize=None)
def load_dataset(kind: Kind, data_dir: Optional[Path] = None) -> Dataset:
    base = _resolve_dir(data_dir)
    data = _read_json(base / FULL_FILES[kind])
    codes = load_code_sets(kind, data_dir)
    model = RECORD_TYPES[kind]
    return Dataset(
        by_iata=MappingProxyType({k: model.model_validate(v) for k, v in data.get("by_iata", {}).items()}),
        by_icao=MappingProxyType({k: model.model_validate(v) for k, v in data.get("by_icao", {}).items()}),
        iata_codes=codes.iata_codes,
        icao_codes=codes.icao_codes,
    )
