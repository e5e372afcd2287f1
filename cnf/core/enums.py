"""
Enumeration definitions for the application.

All enums are defined here to maintain consistency and type safety.
"""
from enum import Enum


class ValidationKind(str, Enum):
    """
    Outcome of a form field check.

    - OK: value accepted
    - WARNING: value accepted but looks suspicious
    - ERROR: value rejected（仍可儲存，僅提示使用者）
    """

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class StepField(str, Enum):
    """
    Configurable fields of the build step.

    Values are the host's field names; .slug is the URL form used by the
    check endpoints (facts-url, regex-pattern, var-name).
    """

    FACTS_URL = "factsUrl"
    REGEX_PATTERN = "regexPattern"
    VAR_NAME = "varName"

    @property
    def slug(self) -> str:
        """Kebab-case name for URL paths."""
        return {
            "factsUrl": "facts-url",
            "regexPattern": "regex-pattern",
            "varName": "var-name",
        }[self.value]

    @classmethod
    def from_slug(cls, slug: str) -> "StepField":
        """Reverse of .slug; raises ValueError for unknown slugs."""
        for field in cls:
            if field.slug == slug:
                return field
        raise ValueError(f"Unknown build step field '{slug}'")
