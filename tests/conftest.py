"""Root conftest — shared fixtures for all tests."""
from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from cnf.core.types import FactRequestConfig
from cnf.fetchers.http import HttpFactFetcher

GIRAFFE_FACT = (
    "Chuck Norris once kicked a horse in the chin. "
    "Its descendants are known today as the giraffe."
)
FALLBACK = "There is no fact today! Chuck Norris is on Holiday!"
FACTS_URL = "http://facts.test/random"


def make_fetcher(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpFactFetcher:
    """HttpFactFetcher whose client answers through ``handler``."""
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpFactFetcher(client=client)


def text_response(body: str, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with ``body``."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)
    return handler


def unreachable(request: httpx.Request) -> httpx.Response:
    """Handler simulating a refused connection."""
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def step_config() -> FactRequestConfig:
    """Config of the giraffe scenario."""
    return FactRequestConfig(
        facts_url=FACTS_URL,
        regex_pattern=r"^(.+)\.$",
        var_name="CNF",
    )


@pytest.fixture
def build_env() -> dict[str, str]:
    """Variables of a running build."""
    return {
        "JOB_NAME": "nightly",
        "BUILD_NUMBER": "42",
        "WORKSPACE": "/var/builds/nightly",
    }
