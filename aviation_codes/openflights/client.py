import asyncio
import time
from typing import Optional, Tuple

import httpx

from aviation_codes.config import settings
from aviation_codes.errors import BuildError
from aviation_codes.obs.context import source_var
from aviation_codes.obs.logger import log_event
from aviation_codes.obs.metrics import inc_counter, record_timing


class OpenFlightsClient:
    """Downloads the raw OpenFlights airports/airlines documents."""

    def __init__(
        self,
        airports_url: Optional[str] = None,
        airlines_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_backoff: Optional[float] = None,
    ):
        self.airports_url = airports_url or settings.AIRPORTS_URL
        self.airlines_url = airlines_url or settings.AIRLINES_URL
        self.retry_backoff = settings.FETCH_RETRY_BACKOFF_SECONDS if retry_backoff is None else retry_backoff
        timeout = httpx.Timeout(
            connect=settings.FETCH_CONNECT_TIMEOUT,
            read=settings.FETCH_READ_TIMEOUT,
            write=settings.FETCH_READ_TIMEOUT,
            pool=settings.FETCH_READ_TIMEOUT,
        )
        if transport is not None:
            self._http = httpx.AsyncClient(transport=transport, timeout=timeout)
        else:
            # GitHub raw serves HTTP/2
            self._http = httpx.AsyncClient(http2=True, timeout=timeout, follow_redirects=True)

    async def __aenter__(self) -> "OpenFlightsClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_text(self, url: str, source: str) -> str:
        """GET one document. Any failure is fatal for the build.

        Retries once, after a short backoff, on 5xx and on connection level
        errors; 4xx fails straight away.
        """
        source_var.set(source)
        log_event("source_fetch_started", url=url)
        attempt = 0
        while True:
            start = time.perf_counter()
            try:
                r = await self._http.get(url)
                r.raise_for_status()
                elapsed_ms = (time.perf_counter() - start) * 1000
                record_timing("source_fetch_ms", elapsed_ms, {"source": source})
                inc_counter("source_fetch_total", {"source": source, "status": str(r.status_code)})
                log_event("source_fetched", url=url, status=r.status_code,
                          bytes=len(r.content), elapsed_ms=round(elapsed_ms, 1))
                return r.text
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                inc_counter("source_fetch_total", {"source": source, "status": str(status)})
                log_event("source_fetch_failed", level="ERROR", url=url, status=status, attempt=attempt)
                if 500 <= status < 600 and attempt == 0:
                    attempt += 1
                    await asyncio.sleep(self.retry_backoff)
                    continue
                raise BuildError(f"Failed to fetch {url}: HTTP {status}", url=url) from e
            except httpx.TransportError as e:
                inc_counter("source_fetch_total", {"source": source, "status": type(e).__name__})
                log_event("source_fetch_failed", level="ERROR", url=url,
                          error=f"{type(e).__name__}: {e}", attempt=attempt)
                if attempt == 0:
                    attempt += 1
                    await asyncio.sleep(self.retry_backoff)
                    continue
                raise BuildError(f"Failed to fetch {url}: {type(e).__name__}", url=url) from e
            except httpx.HTTPError as e:
                # Redirect loops, undecodable bodies: not worth a retry
                inc_counter("source_fetch_total", {"source": source, "status": type(e).__name__})
                log_event("source_fetch_failed", level="ERROR", url=url,
                          error=f"{type(e).__name__}: {e}", attempt=attempt)
                raise BuildError(f"Failed to fetch {url}: {type(e).__name__}", url=url) from e

    async def fetch_sources(self) -> Tuple[str, str]:
        """Both documents, fetched concurrently. Returns (airports, airlines)."""
        tasks = [
            asyncio.ensure_future(self.fetch_text(self.airports_url, "airports")),
            asyncio.ensure_future(self.fetch_text(self.airlines_url, "airlines")),
        ]
        try:
            airports, airlines = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return airports, airlines
