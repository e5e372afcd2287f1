"""
Build step API endpoints.

Host adapter：讓 build host 透過 HTTP 取得 descriptor、檢查欄位、
執行 build step，並把 build variable 合併進環境。
"""
from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from cnf.core.enums import StepField
from cnf.core.types import FactRequestConfig
from cnf.fetchers.base import BaseFetcher
from cnf.fetchers.http import HttpFactFetcher
from cnf.services.build_step import ChuckNorrisFactsStep
from cnf.services.descriptor import FormValidation, check_field, describe
from cnf.services.publisher import VariableContribution

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/build-step", tags=["Build Step"])


def get_fact_fetcher() -> BaseFetcher:
    """Fetcher dependency (tests override it with a fake transport)."""
    return HttpFactFetcher()


class PerformRequest(BaseModel):
    """執行 build step 的請求：設定 + 目前 build 的環境變數。"""

    config: FactRequestConfig
    env: dict[str, str] = Field(default_factory=dict)


class PerformResponse(BaseModel):
    success: bool
    fact: str | None
    used_fallback: bool
    variables: dict[str, str]
    log: list[str]
    error: str | None = None
    error_type: str | None = None


class EnvMergeRequest(BaseModel):
    """把 build step 產生的變數合併進環境。值為 null 的項目會被略過。"""

    variables: dict[str, str | None] = Field(default_factory=dict)
    env: dict[str, str] = Field(default_factory=dict)


@router.get("/descriptor")
def get_descriptor() -> dict[str, Any]:
    """Display name and configurable fields of the build step."""
    return describe()


@router.get("/check/{field_slug}")
def check(
    field_slug: str,
    value: Annotated[str, Query()] = "",
) -> FormValidation:
    """
    即時檢查單一欄位。

    field_slug: facts-url / regex-pattern / var-name
    """
    try:
        field = StepField.from_slug(field_slug)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return check_field(field, value)


@router.post("/perform")
def perform_step(
    body: PerformRequest,
    fetcher: Annotated[BaseFetcher, Depends(get_fact_fetcher)],
) -> PerformResponse:
    """
    執行一次 build step。

    取不到 fact 時仍回傳 200，success 永遠為 true；
    used_fallback / error 說明發生了什麼。
    """
    outcome = ChuckNorrisFactsStep(body.config, fetcher=fetcher).perform(body.env)
    logger.info(
        "Build step done: var=%s fallback=%s",
        body.config.var_name, outcome.used_fallback,
    )
    return PerformResponse(
        success=outcome.success,
        fact=outcome.fact,
        used_fallback=outcome.used_fallback,
        variables=outcome.variables,
        log=outcome.log,
        error=outcome.error.message if outcome.error else None,
        error_type=type(outcome.error).__name__ if outcome.error else None,
    )


@router.post("/env")
def merge_env(body: EnvMergeRequest) -> dict[str, str]:
    """Return ``env`` with the contributed variables merged in."""
    env = dict(body.env)
    VariableContribution(variables=body.variables).build_env_vars(env)
    return env
