"""
Fact Publisher.

將 fact 轉為 build variable 並產生 build log 行。
實際合併進 build environment 由 host adapter 呼叫
VariableContribution.build_env_vars() 完成。
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field

from cnf.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class VariableContribution:
    """
    Variables a build step contributes to the environment of later steps.

    Entries whose key or value is None are never merged.
    """

    variables: Mapping[str | None, str | None] = field(default_factory=dict)

    def build_env_vars(self, env: MutableMapping[str, str] | None) -> None:
        """Merge the contributed variables into ``env`` in place."""
        if env is None or self.variables is None:
            return

        for key, value in self.variables.items():
            if key is not None and value is not None:
                env[key] = value

    def as_dict(self) -> dict[str, str]:
        """Mergeable entries only."""
        return {
            k: v for k, v in (self.variables or {}).items()
            if k is not None and v is not None
        }

    def __bool__(self) -> bool:
        return bool(self.as_dict())


class FactPublisher:
    """Builds the variable contribution and the build log line for a fact."""

    def __init__(self, log_prefix: str | None = None) -> None:
        self.log_prefix = settings.fact_log_prefix if log_prefix is None else log_prefix

    def publish(self, var_name: str, value: str | None) -> VariableContribution:
        """
        Produce ``{var_name: value}``, or nothing when ``value`` is empty.

        Empty or missing values are the defined degraded case, not an error.
        """
        if not value:
            logger.debug("Empty fact, nothing published for %s", var_name)
            return VariableContribution()
        return VariableContribution(variables={var_name: value})

    def announce(self, value: str | None) -> str:
        """
        Build log line for the fact (real or fallback).

        A missing value (group 1 did not participate) is rendered as an
        empty string, not as "None".
        """
        return f"{self.log_prefix}{value or ''}"
