"""In-process counters and fetch timings for one build.

The build is a single process; the lock only guards the two concurrent fetch
tasks and whoever reads a snapshot.
"""

from typing import Any, Dict, List, Optional, Tuple
import threading


LabelsKey = Tuple[Tuple[str, str], ...]

_LOCK = threading.Lock()
_COUNTERS: Dict[Tuple[str, LabelsKey], int] = {}
# (name, labels) -> {"count": int, "total_ms": float, "max_ms": float}
_TIMINGS: Dict[Tuple[str, LabelsKey], Dict[str, float]] = {}


def _labels_key(labels: Optional[Dict[str, str]]) -> LabelsKey:
    return tuple(sorted((str(k), str(v)) for k, v in (labels or {}).items()))


def inc_counter(metric: str, labels: Optional[Dict[str, str]] = None, amount: int = 1) -> None:
    key = (metric, _labels_key(labels))
    with _LOCK:
        _COUNTERS[key] = _COUNTERS.get(key, 0) + amount


def get_counter(metric: str, labels: Optional[Dict[str, str]] = None) -> int:
    with _LOCK:
        return _COUNTERS.get((metric, _labels_key(labels)), 0)


def record_timing(metric: str, value_ms: float, labels: Optional[Dict[str, str]] = None) -> None:
    key = (metric, _labels_key(labels))
    with _LOCK:
        entry = _TIMINGS.setdefault(key, {"count": 0, "total_ms": 0.0, "max_ms": 0.0})
        entry["count"] += 1
        entry["total_ms"] += float(value_ms)
        entry["max_ms"] = max(entry["max_ms"], float(value_ms))


def get_metrics_snapshot() -> Dict[str, List[Dict[str, Any]]]:
    """Plain dicts, ready to go into a log event."""
    with _LOCK:
        counters = [
            {"name": name, "labels": dict(labels), "value": value}
            for (name, labels), value in _COUNTERS.items()
        ]
        timings = [
            {"name": name, "labels": dict(labels), "count": int(e["count"]),
             "total_ms": round(e["total_ms"], 1), "max_ms": round(e["max_ms"], 1)}
            for (name, labels), e in _TIMINGS.items()
        ]
    return {"counters": counters, "timings": timings}


def reset_metrics() -> None:
    with _LOCK:
        _COUNTERS.clear()
        _TIMINGS.clear()
