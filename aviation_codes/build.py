"""Fetch OpenFlights, build both datasets and write the packaged artifacts.

    aviation-codes-build [--out DIR]
    python -m aviation_codes.build

Either all four artifacts are replaced or none are.
"""

import argparse
import asyncio
import time
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from aviation_codes.config import settings
from aviation_codes.dataset.builder import build_airlines, build_airports, split_lines
from aviation_codes.dataset.store import write_artifacts
from aviation_codes.errors import BuildError
from aviation_codes.obs.context import build_id_var, clear_context, new_build_id
from aviation_codes.obs.logger import log_event
from aviation_codes.obs.metrics import get_metrics_snapshot
from aviation_codes.openflights.client import OpenFlightsClient
from aviation_codes.parse.countries import audit_overrides
from aviation_codes.types import Airline, Airport, Dataset


async def build_datasets(client: OpenFlightsClient) -> Tuple[Dataset[Airport], Dataset[Airline]]:
    airports_text, airlines_text = await client.fetch_sources()
    return build_airports(split_lines(airports_text)), build_airlines(split_lines(airlines_text))


async def run_build(out_dir: Path, client: Optional[OpenFlightsClient] = None) -> Dict[str, Path]:
    if build_id_var.get() is None:
        new_build_id()
    started = time.perf_counter()
    log_event("build_started", out_dir=str(out_dir), env=settings.APP_ENV)

    stale = audit_overrides()
    if stale:
        log_event("country_overrides_diverge", level="WARNING", overrides=stale)

    client = client or OpenFlightsClient()
    async with client:
        airports, airlines = await build_datasets(client)

    written = write_artifacts(airports, airlines, out_dir)
    log_event(
        "build_finished",
        files=sorted(written),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        metrics=get_metrics_snapshot(),
    )
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build the aviation code datasets from OpenFlights.")
    parser.add_argument("--out", type=Path, default=settings.data_dir,
                        help="directory for the JSON artifacts (default: %(default)s)")
    args = parser.parse_args(argv)

    new_build_id()
    try:
        asyncio.run(run_build(args.out))
    except BuildError as e:
        log_event("build_failed", level="ERROR", error=str(e), url=e.url)
        return 1
    except OSError as e:
        log_event("build_failed", level="ERROR", error=f"{type(e).__name__}: {e}")
        return 1
    finally:
        clear_context()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
