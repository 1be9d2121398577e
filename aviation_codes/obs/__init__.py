"""Observability helpers for the dataset build.

Structured JSON logging, build-scoped context and in-process metrics. Nothing
in here is touched by query-time lookups.
"""

__all__ = [
    "metrics",
    "logger",
    "context",
]
