"""
Core type definitions.

Value objects passed between fetcher, extractor, publisher and the build step.

錯誤以「值」表示，而不是拋出例外：
    fetch()   → FetchedPage | FetchError
    extract() → ExtractedFact | ExtractError
兩種錯誤都走同一個 fallback 分支，但型別分開，方便測試辨識。
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

# Build variables supplied by the enclosing build (read-only input)
EnvironmentContext = Mapping[str, str]


class FactRequestConfig(BaseModel):
    """
    User-supplied build step configuration.

    Immutable once constructed; one instance per build step invocation.
    Accepts both snake_case and the host's camelCase field names::

        FactRequestConfig(factsUrl="http://...", regexPattern="^(.+)$", varName="CNF")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    facts_url: str = Field(alias="factsUrl")
    regex_pattern: str = Field(alias="regexPattern")
    var_name: str = Field(alias="varName")


@dataclass(frozen=True)
class FetchedPage:
    """Successful GET (status 200)."""

    body: str
    status_code: int = 200


@dataclass(frozen=True)
class FetchError:
    """
    Transport failure or non-200 response.

    Attributes:
        message: Human-readable description, written to the build log.
        status_code: HTTP status when the server answered, else None.
    """

    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class ExtractedFact:
    """Capture group 1 of a full match. present=False when it is empty."""

    value: str | None

    @property
    def present(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class ExtractError:
    """Pattern invalid, without group 1, or not matching the whole body."""

    message: str


FetchOutcome = FetchedPage | FetchError
ExtractOutcome = ExtractedFact | ExtractError
