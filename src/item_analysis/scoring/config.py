"""
Configuration for interpreting item analysis results.

The thresholds below only drive the labels attached to a report; they do
not change any computed statistic.
"""

import importlib.metadata
from dataclasses import dataclass

import toml

from item_analysis.core.paths import get_project_root_dir

DISTRIBUTION_NAME = "item-analysis"

# Lower bounds (inclusive) of each alpha band, best first
DEFAULT_ALPHA_EXCELLENT = 0.9
DEFAULT_ALPHA_GOOD = 0.8
DEFAULT_ALPHA_ACCEPTABLE = 0.7
DEFAULT_ALPHA_QUESTIONABLE = 0.6

# Item difficulty is the proportion answering correctly, so high = easy
DEFAULT_DIFFICULTY_EASY = 0.8
DEFAULT_DIFFICULTY_MODERATE = 0.4

DEFAULT_DISCRIMINATION_EXCELLENT = 0.4
DEFAULT_DISCRIMINATION_GOOD = 0.3
DEFAULT_DISCRIMINATION_FAIR = 0.2


def _get_project_version() -> str:
    """Installed distribution version, else [project].version of a checkout."""
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        pass

    root_dir = get_project_root_dir()
    with open(root_dir / "pyproject.toml") as f:
        data = toml.load(f)

    version = data.get("project", {}).get("version")

    if not version:
        raise ValueError("Version not found in pyproject.toml")

    assert isinstance(version, str)
    return version


@dataclass(frozen=True)
class AlphaBands:
    """
    Lower bounds for Cronbach's alpha labels.

    Values below `questionable` are labelled poor.
    """

    excellent: float = DEFAULT_ALPHA_EXCELLENT
    good: float = DEFAULT_ALPHA_GOOD
    acceptable: float = DEFAULT_ALPHA_ACCEPTABLE
    questionable: float = DEFAULT_ALPHA_QUESTIONABLE

    def __post_init__(self) -> None:
        if not (
            self.excellent >= self.good >= self.acceptable >= self.questionable
        ):
            raise ValueError("alpha bands must be in descending order")


@dataclass(frozen=True)
class DifficultyBands:
    """
    Lower bounds for difficulty labels.

    Values below `moderate` are labelled hard.
    """

    easy: float = DEFAULT_DIFFICULTY_EASY
    moderate: float = DEFAULT_DIFFICULTY_MODERATE

    def __post_init__(self) -> None:
        if self.easy < self.moderate:
            raise ValueError("difficulty bands must be in descending order")


@dataclass(frozen=True)
class DiscriminationBands:
    """
    Lower bounds for discrimination labels.

    Values below `fair` are labelled poor and flagged for review.
    """

    excellent: float = DEFAULT_DISCRIMINATION_EXCELLENT
    good: float = DEFAULT_DISCRIMINATION_GOOD
    fair: float = DEFAULT_DISCRIMINATION_FAIR

    def __post_init__(self) -> None:
        if not (self.excellent >= self.good >= self.fair):
            raise ValueError(
                "discrimination bands must be in descending order"
            )


@dataclass(frozen=True)
class InterpretationConfig:
    alpha: AlphaBands = AlphaBands()
    difficulty: DifficultyBands = DifficultyBands()
    discrimination: DiscriminationBands = DiscriminationBands()


def default_config() -> InterpretationConfig:
    """Create a default interpretation configuration."""
    return InterpretationConfig()
