"""
Extractor protocol — 從 fact 頁面取出 fact 字串的介面。

架構總覽：
    Fetcher (取得原始頁面)
        ↓ body: str
    Extractor (本模組定義的介面)
        ↓ ExtractedFact | ExtractError
    Publisher (寫入 build variable + build log)
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from cnf.core.types import ExtractOutcome


class BaseExtractor(ABC):
    """
    Base class for fact extractors.

    Implementations never raise for bad input: a pattern that does not
    compile or does not match is reported as ExtractError.
    """

    @abstractmethod
    def extract(self, body: str, pattern: str) -> ExtractOutcome:
        """
        Extract the fact from ``body``.

        Args:
            body: Raw response text
            pattern: User-configured pattern

        Returns:
            ExtractedFact or ExtractError
        """
        ...
