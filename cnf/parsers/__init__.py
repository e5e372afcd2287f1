"""
Parser package.

Provides the extractor that turns a fact page into a fact string.
"""
from cnf.parsers.protocols import BaseExtractor
from cnf.parsers.regex_extractor import RegexFactExtractor

__all__ = [
    "BaseExtractor",
    "RegexFactExtractor",
]
