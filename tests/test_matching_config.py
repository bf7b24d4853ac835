"""
Unit tests for matching config loading.
"""
import pytest
from pydantic import ValidationError

from app.core.matching_config import (
    DEFAULT_MATCHING_CONFIG,
    DEFAULT_SCORING_TABLES,
    CompanyTarget,
    load_matching_config,
    matching_config_from_dict,
)


def test_defaults_when_no_path():
    """Test the built-in criteria are used without a config file."""
    matching = load_matching_config(None)
    
    assert matching is DEFAULT_MATCHING_CONFIG
    assert matching.min_score == 5
    assert CompanyTarget(board="lever", slug="clearpath-robotics") in matching.targets
    assert len(matching.scoring.keywords) == 24
    assert matching.scoring.location_preferences == ("montreal", "quebec", "canada", "remote", "hybrid")
    assert [b.points for b in matching.scoring.bonuses] == [2, 2, 3]


def test_load_yaml_overrides(tmp_path):
    """Test a YAML file replaces the keys it sets and keeps the rest."""
    config_file = tmp_path / "matching.yaml"
    config_file.write_text(
        "targets:\n"
        "  - board: greenhouse\n"
        "    slug: Acme\n"
        "scoring:\n"
        "  keywords: [Python, FastAPI]\n"
        "min_score: 3\n"
    )
    
    matching = load_matching_config(str(config_file))
    
    assert matching.targets == (CompanyTarget(board="greenhouse", slug="Acme"),)
    assert matching.scoring.keywords == ("python", "fastapi")
    assert matching.scoring.location_preferences == DEFAULT_SCORING_TABLES.location_preferences
    assert matching.scoring.bonuses == DEFAULT_SCORING_TABLES.bonuses
    assert matching.min_score == 3


def test_load_empty_yaml_uses_defaults(tmp_path):
    """Test an empty file falls back to the built-in criteria."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    
    assert load_matching_config(str(config_file)) == DEFAULT_MATCHING_CONFIG


def test_load_yaml_bonuses(tmp_path):
    """Test bonus groups are read and lower-cased."""
    config_file = tmp_path / "bonus.yaml"
    config_file.write_text(
        "scoring:\n"
        "  bonuses:\n"
        "    - terms: [Series A, Seed]\n"
        "      points: 4\n"
    )
    
    matching = load_matching_config(str(config_file))
    
    assert len(matching.scoring.bonuses) == 1
    assert matching.scoring.bonuses[0].terms == ("series a", "seed")
    assert matching.scoring.bonuses[0].points == 4


def test_load_yaml_rejects_non_mapping(tmp_path):
    """Test a YAML list at the root is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- greenhouse\n- lever\n")
    
    with pytest.raises(ValueError):
        load_matching_config(str(config_file))


def test_missing_file_raises(tmp_path):
    """Test a configured but missing file is an error."""
    with pytest.raises(FileNotFoundError):
        load_matching_config(str(tmp_path / "missing.yaml"))


def test_invalid_target_rejected():
    """Test targets need both board and slug."""
    with pytest.raises(ValidationError):
        matching_config_from_dict({"targets": [{"board": "lever"}]})


def test_config_is_immutable():
    """Test loaded config cannot be changed in place."""
    with pytest.raises(ValidationError):
        DEFAULT_MATCHING_CONFIG.min_score = 1
