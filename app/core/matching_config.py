"""
Matching criteria: which companies to fetch and how postings are scored.

The built-in tables below are used unless MATCHER_CONFIG_PATH points at a YAML
file. Every model is frozen so a loaded config can be shared across requests.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class CompanyTarget(BaseModel):
    """One company's ATS board as addressed by the proxy."""
    board: str = Field(..., min_length=1, description="ATS name, e.g. greenhouse, lever, ashby")
    slug: str = Field(..., min_length=1, description="Company slug on that ATS")

    class Config:
        frozen = True


class BonusGroup(BaseModel):
    """Flat bonus awarded once when any of the terms appears."""
    terms: Tuple[str, ...] = Field(..., min_length=1)
    points: int = Field(..., ge=0)

    @field_validator("terms")
    @classmethod
    def lowercase_terms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(term.lower() for term in v)

    class Config:
        frozen = True


class ScoringTables(BaseModel):
    """Substring tables for the scorer. All terms are stored lower-case."""
    keywords: Tuple[str, ...] = ()
    location_preferences: Tuple[str, ...] = ()
    bonuses: Tuple[BonusGroup, ...] = ()

    @field_validator("keywords", "location_preferences")
    @classmethod
    def lowercase_terms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(term.lower() for term in v)

    class Config:
        frozen = True


class MatchingConfig(BaseModel):
    """Everything the matching endpoint needs besides the proxy location."""
    targets: Tuple[CompanyTarget, ...] = ()
    scoring: ScoringTables = ScoringTables()
    min_score: int = Field(5, ge=0, description="Postings scoring below this are dropped")

    class Config:
        frozen = True


# ============================================
# BUILT-IN CRITERIA
# ============================================

DEFAULT_TARGETS = (
    CompanyTarget(board="greenhouse", slug="limosa"),
    CompanyTarget(board="greenhouse", slug="mda-space"),
    CompanyTarget(board="lever", slug="clearpath-robotics"),
    CompanyTarget(board="ashby", slug="draganfly"),
)

DEFAULT_SCORING_TABLES = ScoringTables(
    keywords=(
        "aerospace",
        "uav",
        "drone",
        "unmanned",
        "air mobility",
        "robotics",
        "embedded",
        "firmware",
        "autonomy",
        "autonomous",
        "flight test",
        "guidance",
        "navigation",
        "control",
        "px4",
        "ros",
        "ros2",
        "rtos",
        "can bus",
        "bvlos",
        "environmental",
        "climate",
        "reforestation",
        "sustainability",
    ),
    location_preferences=(
        "montreal",
        "quebec",
        "canada",
        "remote",
        "hybrid",
    ),
    bonuses=(
        # startup-ish signals
        BonusGroup(terms=("startup", "fast-paced"), points=2),
        # R&D signals
        BonusGroup(terms=("r&d", "research", "prototype"), points=2),
        # mission / climate, overlaps the keyword table on purpose
        BonusGroup(terms=("climate", "sustainab", "reforest"), points=3),
    ),
)

DEFAULT_MIN_SCORE = 5

DEFAULT_MATCHING_CONFIG = MatchingConfig(
    targets=DEFAULT_TARGETS,
    scoring=DEFAULT_SCORING_TABLES,
    min_score=DEFAULT_MIN_SCORE,
)


def matching_config_from_dict(data: Optional[Dict[str, Any]]) -> MatchingConfig:
    """
    Build a MatchingConfig from plain data, falling back to the built-in criteria.

    Top-level keys (targets, scoring, min_score) and the scoring sub-keys
    (keywords, location_preferences, bonuses) are each optional.

    Raises:
        pydantic.ValidationError: if a provided value has the wrong shape
    """
    data = data or {}
    scoring_data = data.get("scoring") or {}
    defaults = DEFAULT_SCORING_TABLES

    scoring = ScoringTables(
        keywords=scoring_data.get("keywords", defaults.keywords),
        location_preferences=scoring_data.get("location_preferences", defaults.location_preferences),
        bonuses=scoring_data.get("bonuses", defaults.bonuses),
    )
    return MatchingConfig(
        targets=data.get("targets", DEFAULT_TARGETS),
        scoring=scoring,
        min_score=data.get("min_score", DEFAULT_MIN_SCORE),
    )


def load_matching_config(path: Optional[str] = None) -> MatchingConfig:
    """
    Load matching criteria from a YAML file, or return the built-in criteria.

    Args:
        path: YAML file path; None or empty uses the defaults

    Raises:
        FileNotFoundError: if path is set but missing
        ValueError: if the YAML root is not a mapping
    """
    if not path:
        return DEFAULT_MATCHING_CONFIG

    config_file = Path(path)
    with config_file.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Matching config {config_file} must contain a mapping")

    matching = matching_config_from_dict(data)
    logger.info(
        f"Matching config loaded: path={config_file}, targets={len(matching.targets)}, "
        f"keywords={len(matching.scoring.keywords)}, min_score={matching.min_score}"
    )
    return matching
