"""
Build step descriptor and form validation.

提供 build step 的顯示名稱，以及設定欄位的即時檢查。
檢查結果只是提示：ERROR 也不會阻止設定被儲存。

欄位規則：
    factsUrl      空 → ERROR；長度 < 4 → WARNING
    regexPattern  空 → ERROR；長度 < 4 → WARNING；無法編譯 → ERROR；
                  沒有 capture group → WARNING
    varName       空 → ERROR；長度 < 2 → WARNING
"""
from __future__ import annotations

import re
from collections.abc import Callable

from pydantic import BaseModel

from cnf.core.enums import StepField, ValidationKind

DISPLAY_NAME = "Retrieve Chuck Norris Fact."


class FormValidation(BaseModel):
    """Outcome of a field check, rendered next to the field."""

    kind: ValidationKind
    message: str | None = None

    @classmethod
    def ok(cls) -> FormValidation:
        return cls(kind=ValidationKind.OK)

    @classmethod
    def warning(cls, message: str) -> FormValidation:
        return cls(kind=ValidationKind.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> FormValidation:
        return cls(kind=ValidationKind.ERROR, message=message)


def _check_length(
    value: str | None,
    min_length: int,
    missing: str,
    too_short: str,
) -> FormValidation:
    value = value or ""
    if len(value) == 0:
        return FormValidation.error(missing)
    if len(value) < min_length:
        return FormValidation.warning(too_short)
    return FormValidation.ok()


def check_facts_url(value: str | None) -> FormValidation:
    return _check_length(
        value, 4,
        "Please add URL facts.",
        "Isn't the URL facts too short?",
    )


def check_regex_pattern(value: str | None) -> FormValidation:
    result = _check_length(
        value, 4,
        "Please add regex pattern.",
        "Isn't the regex pattern too short?",
    )
    if result.kind is ValidationKind.ERROR:
        return result

    try:
        compiled = re.compile(value or "")
    except re.error as e:
        return FormValidation.error(f"Invalid regex pattern: {e}")
    if compiled.groups < 1:
        return FormValidation.warning(
            "The regex pattern has no capture group; group 1 is used as the fact.",
        )
    return result


def check_var_name(value: str | None) -> FormValidation:
    return _check_length(
        value, 2,
        "Please add variable name.",
        "Isn't the variable name too short?",
    )


FIELD_CHECKS: dict[StepField, Callable[[str | None], FormValidation]] = {
    StepField.FACTS_URL: check_facts_url,
    StepField.REGEX_PATTERN: check_regex_pattern,
    StepField.VAR_NAME: check_var_name,
}


def check_field(field: StepField, value: str | None) -> FormValidation:
    """Dispatch to the check of ``field``."""
    return FIELD_CHECKS[field](value)


def describe() -> dict[str, object]:
    """Descriptor payload for the host's step picker."""
    return {
        "display_name": DISPLAY_NAME,
        "applicable": is_applicable(),
        "fields": [f.value for f in StepField],
    }


def is_applicable(job_type: str | None = None) -> bool:
    """The step can be added to every job type."""
    return True
