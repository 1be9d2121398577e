"""Build context helpers using ContextVars.

Each build run gets an id so that the log lines of the two concurrent source
fetches can be told apart and tied back to one run.
"""

from contextvars import ContextVar
from typing import Optional
import uuid


# Public ContextVars (names are stable API)
build_id_var: ContextVar[Optional[str]] = ContextVar("build_id", default=None)
source_var: ContextVar[Optional[str]] = ContextVar("source", default=None)


def new_build_id() -> str:
    build_id = uuid.uuid4().hex[:12]
    build_id_var.set(build_id)
    return build_id


def clear_context() -> None:
    """Reset context variables to defaults."""
    build_id_var.set(None)
    source_var.set(None)
