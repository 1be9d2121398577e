import os
import sys
import asyncio
import inspect
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import aviation_codes` works in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from aviation_codes.airlines import AirlineLookup
from aviation_codes.airports import AirportLookup
from aviation_codes.dataset.builder import build_airlines, build_airports, split_lines
from aviation_codes.obs.metrics import reset_metrics

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def pytest_pyfunc_call(pyfuncitem):
    """Allow running async tests without pytest-asyncio.

    If the test function is a coroutine, run it in a fresh event loop.
    """
    testfunction = pyfuncitem.obj
    if inspect.iscoroutinefunction(testfunction):
        funcargs = pyfuncitem.funcargs
        sig = inspect.signature(testfunction)
        # Filter only the parameters that the test function expects
        allowed = {name: funcargs[name] for name in sig.parameters.keys() if name in funcargs}
        asyncio.run(testfunction(**allowed))
        return True
    return None


@pytest.fixture(scope="session")
def airports_dat() -> str:
    return (FIXTURES / "airports.dat").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def airlines_dat() -> str:
    return (FIXTURES / "airlines.dat").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def airports_dataset(airports_dat):
    return build_airports(split_lines(airports_dat))


@pytest.fixture(scope="session")
def airlines_dataset(airlines_dat):
    return build_airlines(split_lines(airlines_dat))


@pytest.fixture
def airport(airports_dataset):
    return AirportLookup(lambda: airports_dataset)


@pytest.fixture
def airline(airlines_dataset):
    return AirlineLookup(lambda: airlines_dataset)


@pytest.fixture
def clean_metrics():
    reset_metrics()
    yield
    reset_metrics()
