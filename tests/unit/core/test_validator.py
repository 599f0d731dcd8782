from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies:
1. Default injection and type coercion.
2. Pattern name normalization.
3. Strict mode raising instead of coercing.
"""

import pytest

from structural_patterns.core.validator import validate_config
from structural_patterns.domain.constants import PATTERN_NAMES


def test_valid_config_passes_without_warnings(mock_config_dict):
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean["patterns"] == ["composite", "bridge"]
    assert clean["log_level"] == "INFO"


def test_non_dict_returns_defaults():
    clean, warnings = validate_config(["composite"])

    assert clean["patterns"] == PATTERN_NAMES
    assert len(warnings) == 1


def test_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("composite", strict=True)


def test_pattern_names_normalized_and_deduplicated():
    clean, warnings = validate_config({"patterns": ["Composite", "composite", "BRIDGE"]})

    assert clean["patterns"] == ["composite", "bridge"]
    assert warnings == []


def test_unknown_pattern_discarded_with_warning():
    clean, warnings = validate_config({"patterns": ["composite", "singleton"]})

    assert clean["patterns"] == ["composite"]
    assert any("singleton" in w for w in warnings)


def test_unknown_pattern_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"patterns": ["singleton"]}, strict=True)


def test_only_unknown_patterns_fall_back_to_all():
    clean, _ = validate_config({"patterns": ["singleton"]})
    assert clean["patterns"] == PATTERN_NAMES


def test_csv_patterns_string_is_split():
    clean, warnings = validate_config({"patterns": "proxy, facade"})

    assert clean["patterns"] == ["proxy", "facade"]
    assert any("CSV" in w for w in warnings)


def test_bool_coercion_from_string():
    clean, warnings = validate_config({"json_output": "yes"})

    assert clean["json_output"] is True
    assert len(warnings) == 1


def test_invalid_bool_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"json_output": "maybe"}, strict=True)


def test_log_level_upper_cased_and_checked():
    clean, _ = validate_config({"log_level": "debug"})
    assert clean["log_level"] == "DEBUG"

    clean, warnings = validate_config({"log_level": "chatty"})
    assert clean["log_level"] == "WARNING"
    assert warnings


def test_non_string_pattern_entry_discarded():
    clean, warnings = validate_config({"patterns": ["proxy", 3]})

    assert clean["patterns"] == ["proxy"]
    assert len(warnings) == 1


def test_patterns_of_wrong_type_run_everything():
    clean, warnings = validate_config({"patterns": {"proxy": True}})

    assert clean["patterns"] == PATTERN_NAMES
    assert warnings


def test_log_file_must_be_text():
    clean, warnings = validate_config({"log_file": 42})
    assert clean["log_file"] == ""
    assert warnings

    with pytest.raises(TypeError):
        validate_config({"log_file": 42}, strict=True)
