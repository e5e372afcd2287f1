"""Tests for cnf.services.publisher."""
from cnf.services.publisher import FactPublisher, VariableContribution


class TestFactPublisher:
    def test_publish_single_entry(self):
        contribution = FactPublisher().publish("CNF", "Chuck Norris can divide by zero")
        assert contribution.as_dict() == {"CNF": "Chuck Norris can divide by zero"}
        assert contribution

    def test_publish_empty_value_is_noop(self):
        contribution = FactPublisher().publish("CNF", "")
        assert contribution.as_dict() == {}
        assert not contribution

    def test_publish_none_value_is_noop(self):
        assert FactPublisher().publish("CNF", None).as_dict() == {}

    def test_announce(self):
        line = FactPublisher().announce("Chuck Norris can divide by zero")
        assert line == "Chuck Norris Daily Fact: Chuck Norris can divide by zero"

    def test_announce_empty(self):
        assert FactPublisher().announce(None) == "Chuck Norris Daily Fact: "

    def test_custom_prefix(self):
        assert FactPublisher(log_prefix="Fact> ").announce("x") == "Fact> x"


class TestVariableContribution:
    def test_build_env_vars_merges(self):
        env = {"JOB_NAME": "nightly"}
        VariableContribution(variables={"CNF": "fact"}).build_env_vars(env)
        assert env == {"JOB_NAME": "nightly", "CNF": "fact"}

    def test_build_env_vars_overwrites_existing(self):
        env = {"CNF": "old"}
        VariableContribution(variables={"CNF": "new"}).build_env_vars(env)
        assert env == {"CNF": "new"}

    def test_none_key_or_value_skipped(self):
        env: dict[str, str] = {}
        VariableContribution(
            variables={None: "orphan", "EMPTY": None, "CNF": "fact"},
        ).build_env_vars(env)
        assert env == {"CNF": "fact"}

    def test_none_env_is_noop(self):
        VariableContribution(variables={"CNF": "fact"}).build_env_vars(None)

    def test_none_variables_is_noop(self):
        env = {"A": "1"}
        VariableContribution(variables=None).build_env_vars(env)
        assert env == {"A": "1"}
        assert VariableContribution(variables=None).as_dict() == {}
