"""Core module - contains enums, value types, and configuration."""
from .enums import StepField, ValidationKind
from .config import settings
from .types import (
    EnvironmentContext,
    ExtractError,
    ExtractedFact,
    FactRequestConfig,
    FetchedPage,
    FetchError,
)

__all__ = [
    "StepField",
    "ValidationKind",
    "EnvironmentContext",
    "ExtractError",
    "ExtractedFact",
    "FactRequestConfig",
    "FetchedPage",
    "FetchError",
    "settings",
]
