import math
import re
from typing import List


NULL_TOKEN = "\\N"

# Leading decimal number, e.g. "12.5ft" -> 12.5, "-.5" -> -0.5
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _clean_field(field: str) -> str:
    if field == NULL_TOKEN or field == "":
        return ""
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def parse_line(line: str) -> List[str]:
    """Split one OpenFlights .dat line into unquoted, trimmed fields.

    A double quote toggles quoted mode whether or not it is balanced, so a
    comma inside quotes never splits. There is no escaped-quote form: `""`
    just toggles twice. `\\N` and empty fields come back as "".
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())

    return [_clean_field(f) for f in fields]


def to_float(value: str) -> float:
    """Lenient numeric parse: anything unreadable becomes 0.0."""
    if not value:
        return 0.0
    m = _FLOAT_PREFIX.match(value)
    if not m:
        return 0.0
    number = float(m.group(0))
    return number if math.isfinite(number) else 0.0
