"""
Fetcher base classes.

定義 Fetcher 抽象層：
- BaseFetcher: 所有 Fetcher 的基底類別（HTTP / 測試替身共用介面）

資料流::

    FactRequestConfig.facts_url (含 ${VAR} 模板)
        → BaseFetcher.fetch(url_template, env)
            → FetchedPage(body=...)   交給 Extractor
            → FetchError(message=...) 交給 build step 的 fallback 分支

Fetcher 不拋例外：所有失敗都轉成 FetchError 回傳。
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from cnf.core.types import EnvironmentContext, FetchOutcome


class BaseFetcher(ABC):
    """Fetches the raw fact page for one build step invocation."""

    @abstractmethod
    def fetch(
        self,
        url_template: str,
        env: EnvironmentContext,
    ) -> FetchOutcome:
        """
        Expand ``url_template`` with ``env`` and GET it.

        Args:
            url_template: URL with optional ``${NAME}`` references
            env: Build variables of the running build

        Returns:
            FetchedPage on HTTP 200, FetchError otherwise
        """
        ...
