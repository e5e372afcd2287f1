"""
Fetchers package.

提供 Fetcher 抽象層，處理「如何取得 fact 頁面」。

核心 API:
    - BaseFetcher: 所有 Fetcher 的基底類別
    - HttpFactFetcher: 以 httpx 發出單一 GET 的實作
    - expand(): build variable 模板展開
"""
from cnf.fetchers.base import BaseFetcher
from cnf.fetchers.http import HttpFactFetcher
from cnf.fetchers.template import expand

__all__ = [
    "BaseFetcher",
    "HttpFactFetcher",
    "expand",
]
