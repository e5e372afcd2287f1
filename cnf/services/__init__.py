"""
Services package.

Business logic of the build step, independent of any host surface.
"""
from cnf.services.build_step import ChuckNorrisFactsStep, StepOutcome, perform
from cnf.services.descriptor import (
    DISPLAY_NAME,
    FormValidation,
    check_facts_url,
    check_field,
    check_regex_pattern,
    check_var_name,
)
from cnf.services.publisher import FactPublisher, VariableContribution

__all__ = [
    "ChuckNorrisFactsStep",
    "StepOutcome",
    "perform",
    "DISPLAY_NAME",
    "FormValidation",
    "check_facts_url",
    "check_field",
    "check_regex_pattern",
    "check_var_name",
    "FactPublisher",
    "VariableContribution",
]
