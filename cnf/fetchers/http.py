"""
HttpFactFetcher — 對設定的 facts URL 發出單一 GET。

HTTP 行為：
- 一律使用 GET，每次 build 只呼叫一次，不重試
- URL 模板中的 ${NAME} 會從 build variables 帶入（見 template.expand）
- timeout 使用 httpx 預設值
- 追蹤 redirect、proxy 取自環境變數（httpx trust_env）
- 只有 status 200 算成功；其餘狀態碼與連線錯誤都回傳 FetchError

範例::

    模板: http://facts.example.com/random?job=${JOB_NAME}
    env:  {"JOB_NAME": "nightly"}
    → GET http://facts.example.com/random?job=nightly
"""
from __future__ import annotations

import logging

import httpx

from cnf.core.config import settings
from cnf.core.types import EnvironmentContext, FetchedPage, FetchError, FetchOutcome
from cnf.fetchers.base import BaseFetcher
from cnf.fetchers.template import expand

logger = logging.getLogger(__name__)


class HttpFactFetcher(BaseFetcher):
    """
    Fetcher backed by a synchronous ``httpx.Client``.

    A client can be injected (tests pass one built on ``httpx.MockTransport``);
    otherwise a short-lived client is created per fetch and closed afterwards.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def _new_client(self) -> httpx.Client:
        return httpx.Client(
            follow_redirects=settings.http.follow_redirects,
            verify=settings.http.verify,
            headers={"User-Agent": settings.http.user_agent},
        )

    def fetch(
        self,
        url_template: str,
        env: EnvironmentContext,
    ) -> FetchOutcome:
        url = expand(url_template, env)
        logger.debug("Fetching fact from %s", url)

        client = self._client or self._new_client()
        own_client = self._client is None
        try:
            resp = client.get(url)
        except httpx.InvalidURL as e:
            return FetchError(message=f"Invalid facts URL '{url}': {e}")
        except httpx.TimeoutException as e:
            return FetchError(message=f"Timed out fetching {url}: {e}")
        except httpx.RequestError as e:
            # DNS / connection refused / protocol errors
            return FetchError(message=f"Failed to connect to {url}: {e}")
        except Exception as e:
            return FetchError(message=f"{type(e).__name__}: {e}")
        finally:
            if own_client:
                client.close()

        if resp.status_code != 200:
            logger.info("Fact URL %s answered HTTP %d", url, resp.status_code)
            return FetchError(
                message="Unable to retrieve the fact",
                status_code=resp.status_code,
            )

        return FetchedPage(body=resp.text, status_code=resp.status_code)

    def __repr__(self) -> str:
        injected = "injected" if self._client is not None else "per-call"
        return f"<HttpFactFetcher client={injected}>"
