"""Tests for RegexFactExtractor (full-match semantics, group 1 only)."""
from cnf.core.types import ExtractedFact, ExtractError
from cnf.parsers.regex_extractor import RegexFactExtractor, excerpt
from tests.conftest import GIRAFFE_FACT


class TestRegexFactExtractor:
    def setup_method(self):
        self.extractor = RegexFactExtractor()

    def test_giraffe_scenario(self):
        result = self.extractor.extract(GIRAFFE_FACT, r"^(.+)\.$")
        assert result == ExtractedFact(value=GIRAFFE_FACT[:-1])
        assert result.present

    def test_returns_group_one_only(self):
        body = '{"id": 7, "joke": "Chuck Norris counted to infinity. Twice."}'
        result = self.extractor.extract(body, r'\{"id": (\d+), "joke": "(.+)"\}')
        assert result == ExtractedFact(value="7")

    def test_partial_match_is_error(self):
        """search() would find 'Chuck'; fullmatch() must not."""
        result = self.extractor.extract(GIRAFFE_FACT, r"(Chuck)")
        assert isinstance(result, ExtractError)
        assert result.message.startswith("Unable to retrieve the fact from the response: ")
        assert GIRAFFE_FACT in result.message

    def test_no_match_is_error(self):
        result = self.extractor.extract("<html>maintenance</html>", r"^(\d+)$")
        assert isinstance(result, ExtractError)

    def test_empty_body_is_error(self):
        result = self.extractor.extract("", r"^(.+)$")
        assert isinstance(result, ExtractError)

    def test_trailing_newline_does_not_fully_match(self):
        result = self.extractor.extract(GIRAFFE_FACT + "\n", r"^(.+)\.$")
        assert isinstance(result, ExtractError)

    def test_invalid_pattern_is_error(self):
        result = self.extractor.extract(GIRAFFE_FACT, r"^(.+$")
        assert isinstance(result, ExtractError)
        assert "Invalid regex pattern" in result.message

    def test_pattern_without_group_is_error(self):
        result = self.extractor.extract(GIRAFFE_FACT, r"^.+$")
        assert isinstance(result, ExtractError)
        assert "no capture group" in result.message

    def test_empty_group_is_not_error(self):
        result = self.extractor.extract("fact:", r"fact:(.*)")
        assert result == ExtractedFact(value="")
        assert not result.present

    def test_optional_group_not_participating(self):
        result = self.extractor.extract("fact", r"fact(:.+)?")
        assert result == ExtractedFact(value=None)
        assert not result.present

    def test_long_body_truncated_in_message(self):
        body = "x" * 2000
        result = self.extractor.extract(body, r"^(\d+)$")
        assert isinstance(result, ExtractError)
        assert len(result.message) < 1000
        assert result.message.endswith("...")


class TestExcerpt:
    def test_short_body_unchanged(self):
        assert excerpt("abc", limit=10) == "abc"

    def test_long_body_cut(self):
        assert excerpt("abcdef", limit=3) == "abc..."

    def test_zero_limit_is_honoured(self):
        assert excerpt("abc", limit=0) == "..."
