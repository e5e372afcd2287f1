"""
Chuck Norris Facts build step.

每次 build 執行一次：
    fetch (HttpFactFetcher) → extract (RegexFactExtractor) → publish (FactPublisher)

★ 失敗處理
==========

FetchError 與 ExtractError 都走同一條 fallback 分支：
    1. 把錯誤訊息寫入 build log
    2. fact 改為 settings.fallback_fact
之後照常 publish + 寫入 "Chuck Norris Daily Fact: ..."。

build step 永遠回報成功：取不到 fact 不能讓 build 失敗。

perform() 是純函式 (config, env) → StepOutcome，不直接操作 host；
host adapter（API endpoint / CLI）負責把 outcome.contribution 合併進環境、
把 outcome.log 寫到 build console。
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cnf.core.config import settings
from cnf.core.types import (
    EnvironmentContext,
    ExtractError,
    FactRequestConfig,
    FetchError,
)
from cnf.fetchers.base import BaseFetcher
from cnf.fetchers.http import HttpFactFetcher
from cnf.parsers.protocols import BaseExtractor
from cnf.parsers.regex_extractor import RegexFactExtractor
from cnf.services.publisher import FactPublisher, VariableContribution

logger = logging.getLogger(__name__)


@dataclass
class StepOutcome:
    """
    Result of one build step execution.

    Attributes:
        fact: Final fact value (extracted, fallback, or empty).
        contribution: Variables to merge into the build environment.
        log: Build console lines, in order.
        error: FetchError / ExtractError that triggered the fallback, if any.
        success: Always True.
    """

    fact: str | None
    contribution: VariableContribution = field(default_factory=VariableContribution)
    log: list[str] = field(default_factory=list)
    error: FetchError | ExtractError | None = None
    success: bool = True

    @property
    def used_fallback(self) -> bool:
        return self.error is not None

    @property
    def variables(self) -> dict[str, str]:
        return self.contribution.as_dict()


class ChuckNorrisFactsStep:
    """
    Build step retrieving a fact and exposing it as a build variable.

    Collaborators default to the HTTP fetcher and the regex extractor;
    tests inject fakes.
    """

    def __init__(
        self,
        config: FactRequestConfig,
        fetcher: BaseFetcher | None = None,
        extractor: BaseExtractor | None = None,
        publisher: FactPublisher | None = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or HttpFactFetcher()
        self.extractor = extractor or RegexFactExtractor()
        self.publisher = publisher or FactPublisher()

    def _retrieve(
        self, env: EnvironmentContext,
    ) -> tuple[str | None, FetchError | ExtractError | None]:
        fetched = self.fetcher.fetch(self.config.facts_url, env)
        if isinstance(fetched, FetchError):
            return None, fetched

        extracted = self.extractor.extract(fetched.body, self.config.regex_pattern)
        if isinstance(extracted, ExtractError):
            return None, extracted

        return extracted.value, None

    def perform(self, env: EnvironmentContext) -> StepOutcome:
        """Run the step against the build variables ``env``."""
        log: list[str] = []

        fact, error = self._retrieve(env)
        if error is not None:
            logger.info(
                "No fact for %s (%s): %s",
                self.config.var_name, type(error).__name__, error.message,
            )
            log.append(error.message)
            fact = settings.fallback_fact

        contribution = self.publisher.publish(self.config.var_name, fact)
        log.append(self.publisher.announce(fact))

        return StepOutcome(
            fact=fact,
            contribution=contribution,
            log=log,
            error=error,
        )


def perform(
    config: FactRequestConfig,
    env: EnvironmentContext,
    fetcher: BaseFetcher | None = None,
) -> StepOutcome:
    """Shortcut for ``ChuckNorrisFactsStep(config, fetcher).perform(env)``."""
    return ChuckNorrisFactsStep(config, fetcher=fetcher).perform(env)
