"""Unit tests for load_config."""

from __future__ import annotations

import logging

import pytest

from envcast.core.errors import ConfigLoadError, ParseError, SchemaError
from envcast.core.loader import describe_errors, load_config
from envcast.core.types import Field, LoadError


class TestLoadConfig:
    """Test suite for load_config."""

    def test_typed_configs(self):
        """Test a schema loads typed values from one mapping."""
        env = {
            "SERVICE_URL": "http://localhost:9999",
            "RETRY_LIMIT": "8",
            "FEATURE_ENABLED": "true",
        }
        config = load_config(
            {
                "service_url": Field(name="SERVICE_URL", type="string", default_value="none"),
                "retry_limit": Field(name="RETRY_LIMIT", type="number", default_value=0),
                "feature_enabled": Field(name="FEATURE_ENABLED", type="boolean", default_value=False),
            },
            env,
        )
        assert config == {
            "service_url": "http://localhost:9999",
            "retry_limit": 8,
            "feature_enabled": True,
        }

    def test_dict_declarations(self):
        """Test plain dict declarations in a schema."""
        config = load_config({"ports": {"name": "PORTS", "type": "number[]"}}, {"PORTS": "80,443"})
        assert config == {"ports": [80, 443]}

    def test_default_when_absent(self):
        """Test a default applies when the key is absent."""
        config = load_config({"flag": Field(name="FLAG", type="boolean", default_value=True)}, {})
        assert config["flag"] is True

    def test_key_set_matches_schema(self):
        """Test the result has exactly the schema's keys."""
        config = load_config(
            {"a": Field(name="A"), "b": Field(name="B", type="string[]")},
            {"A": "1", "OTHER": "x"},
        )
        assert set(config) == {"a", "b"}
        assert config["b"] == []

    def test_defaults_to_process_environment(self, monkeypatch):
        """Test os.environ is the default source."""
        monkeypatch.setenv("ENVCAST_TEST_PORT", "8080")
        config = load_config({"port": Field(name="ENVCAST_TEST_PORT", type="number")})
        assert config["port"] == 8080

    def test_later_source_wins(self):
        """Test later sources override earlier ones."""
        config = load_config(
            {"a": Field(name="K", type="number")},
            [{"K": "1"}, {"K": "2"}],
        )
        assert config["a"] == 2

    def test_sparse_sources(self):
        """Test a source lacking a key does not overwrite a resolved value."""
        source1 = {"K": "from-one"}
        source2 = {"J": "from-two"}
        config = load_config(
            {"a": Field(name="K"), "b": Field(name="J")},
            [source1, source2],
        )
        assert config == {"a": "from-one", "b": "from-two"}

    def test_none_in_later_source_keeps_value(self):
        """Test a None value in a later source is treated as absent."""
        config = load_config(
            {"n": Field(name="K", type="number"), "a": Field(name="K")},
            [{"K": "5"}, {"K": None}],
        )
        assert config == {"n": 5, "a": 5}

    def test_none_in_every_source_uses_default(self):
        """Test a None-only key still resolves to its default."""
        config = load_config(
            {"n": Field(name="K", type="number", default_value=3)},
            [{"K": None}, {"K": None}],
        )
        assert config == {"n": 3}

    def test_empty_separator_loads(self):
        """Test an empty separator in a declaration loads with the default one."""
        config = load_config({"p": {"name": "P", "type": "number[]", "separator": ""}}, {"P": "80;443"})
        assert config == {"p": [80, 443]}

    def test_later_source_establishes_first_value(self):
        """Test a later source can provide a value missing earlier."""
        config = load_config(
            {"a": Field(name="K", type="string")},
            [{}, {"K": "late"}],
        )
        assert config["a"] == "late"

    def test_aggregate_error(self):
        """Test only the invalid field is reported."""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(
                {
                    "good": Field(name="GOOD", type="number"),
                    "bad": Field(name="BAD", type="number"),
                },
                {"GOOD": "1", "BAD": "Not a number"},
            )
        errors = exc_info.value.errors
        assert len(errors) == 1
        assert errors[0].key == "bad"
        assert errors[0].env_name == "BAD"
        assert errors[0].source_index == 0
        assert isinstance(errors[0].error, ParseError)
        message = str(exc_info.value)
        assert "bad (source #0, BAD)" in message
        assert "good" not in message

    def test_all_errors_collected(self):
        """Test every failing field and source is reported, in order."""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(
                {
                    "n": Field(name="N", type="number"),
                    "b": Field(name="B", type="boolean"),
                },
                [{"N": "x", "B": "89"}, {"N": "y"}],
            )
        records = [(e.key, e.source_index) for e in exc_info.value.errors]
        # b is still unresolved when the second source is tried
        assert records == [("n", 0), ("n", 1), ("b", 0), ("b", 1)]
        assert str(exc_info.value).startswith("Failed to load 4 configuration value(s):")

    def test_merge_target_returned(self):
        """Test the merge target is updated in place and returned."""
        target = {"existing": "kept"}
        result = load_config({"a": Field(name="A", type="number")}, {"A": "1"}, target)
        assert result is target
        assert target == {"existing": "kept", "a": 1}

    def test_repeated_merge(self):
        """Test reusing the result updates only the new schema's keys."""
        first = load_config(
            {"a": Field(name="A", type="number"), "b": Field(name="B")},
            {"A": "1", "B": "x"},
        )
        second = load_config({"b": Field(name="B")}, {"B": "y"}, first)
        assert second is first
        assert first == {"a": 1, "b": "y"}

    def test_merge_target_counts_as_resolved(self):
        """Test existing entries are kept when the source is silent."""
        target = {"a": 5}
        load_config({"a": Field(name="A", type="number")}, {}, target)
        assert target == {"a": 5}

    def test_empty_source_list(self):
        """Test an empty source list still yields every schema key."""
        config = load_config(
            {"a": Field(name="A", type="number[]"), "s": Field(name="S", type="string", default_value="d")},
            [],
        )
        assert config == {"a": [], "s": "d"}

    def test_single_mapping_is_one_source(self):
        """Test a single mapping is treated as a one-item list."""
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config({"n": Field(name="N", type="number")}, {"N": "x"})
        assert exc_info.value.errors[0].source_index == 0

    def test_bad_declaration_raises_immediately(self):
        """Test schema errors are not aggregated."""
        with pytest.raises(SchemaError):
            load_config({"a": {"name": "A", "type": "date"}}, {})

    def test_logs_failures(self, caplog):
        """Test each failure is logged as a warning."""
        with caplog.at_level(logging.WARNING, logger="envcast.core.loader"):
            with pytest.raises(ConfigLoadError):
                load_config({"n": Field(name="N", type="number")}, {"N": "x"})
        assert "Could not load n from N" in caplog.text


class TestDescribeErrors:
    """Test suite for describe_errors."""

    def test_records(self):
        """Test errors flatten into plain dicts."""
        err = ConfigLoadError(
            [LoadError(key="n", env_name="N", source_index=1, error=ParseError("boom"))]
        )
        assert describe_errors(err) == [
            {"key": "n", "name": "N", "source": 1, "message": "boom"}
        ]
