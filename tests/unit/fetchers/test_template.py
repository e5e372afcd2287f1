"""Tests for cnf.fetchers.template."""
from cnf.fetchers.template import expand


class TestExpand:
    def test_braced_reference(self):
        env = {"JOB_NAME": "nightly"}
        assert expand("http://facts.test/${JOB_NAME}", env) == "http://facts.test/nightly"

    def test_bare_reference(self):
        env = {"BUILD_NUMBER": "42"}
        assert expand("http://facts.test/$BUILD_NUMBER/fact", env) == "http://facts.test/42/fact"

    def test_multiple_references(self):
        env = {"HOST": "facts.test", "ID": "7"}
        assert expand("http://${HOST}/jokes/${ID}", env) == "http://facts.test/jokes/7"

    def test_unresolved_left_as_is(self):
        assert expand("http://facts.test/${MISSING}", {}) == "http://facts.test/${MISSING}"
        assert expand("http://facts.test/$MISSING", {}) == "http://facts.test/$MISSING"

    def test_mixed_resolved_and_unresolved(self):
        env = {"A": "x"}
        assert expand("${A}-${B}-$A", env) == "x-${B}-x"

    def test_dotted_name_in_braces(self):
        env = {"param.id": "5"}
        assert expand("/fact/${param.id}", env) == "/fact/5"

    def test_double_dollar_escapes(self):
        assert expand("price=$$5", {"5": "five"}) == "price=$5"

    def test_no_reference(self):
        assert expand("http://facts.test/random", {"X": "y"}) == "http://facts.test/random"

    def test_values_are_not_expanded_again(self):
        env = {"A": "${B}", "B": "oops"}
        assert expand("${A}", env) == "${B}"

    def test_empty_value_substituted(self):
        assert expand("/fact/${EMPTY}/x", {"EMPTY": ""}) == "/fact//x"

    def test_lone_dollar_untouched(self):
        assert expand("cost $ 5", {}) == "cost $ 5"
