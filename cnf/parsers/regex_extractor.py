"""
Regex extractor — full-match 模式取 capture group 1。

注意：整個 body 必須完全符合 pattern（re.fullmatch），不是 search。
例如 pattern ``(\\w+)`` 對 body ``"hello world"`` 不成立。

Real response (plain-text fact API)::

    Chuck Norris once kicked a horse in the chin. Its descendants are known today as the giraffe.

Pattern ``^(.+)\\.$`` → group 1 為去掉結尾句點的整段文字。
"""
from __future__ import annotations

import logging
import re

from cnf.core.config import settings
from cnf.core.types import ExtractedFact, ExtractError, ExtractOutcome
from cnf.parsers.protocols import BaseExtractor

logger = logging.getLogger(__name__)


def excerpt(body: str, limit: int | None = None) -> str:
    """截斷過長的 body，供錯誤訊息使用。"""
    if limit is None:
        limit = settings.body_excerpt_length
    return body[:limit] + "..." if len(body) > limit else body


class RegexFactExtractor(BaseExtractor):
    """Applies the configured pattern to the whole body and returns group 1."""

    def extract(self, body: str, pattern: str) -> ExtractOutcome:
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            return ExtractError(message=f"Invalid regex pattern '{pattern}': {e}")

        if compiled.groups < 1:
            return ExtractError(
                message=f"Regex pattern '{pattern}' has no capture group",
            )

        match = compiled.fullmatch(body)
        if match is None:
            return ExtractError(
                message=(
                    "Unable to retrieve the fact from the response: "
                    f"{excerpt(body)}"
                ),
            )

        # group 1 may be None when an optional group did not participate
        value = match.group(1)
        if not value:
            logger.debug("Pattern matched but group 1 is empty")
        return ExtractedFact(value=value)
