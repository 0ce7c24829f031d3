"""
Qualitative labels for item analysis statistics.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from item_analysis.scoring.config import (
    AlphaBands,
    DifficultyBands,
    DiscriminationBands,
    InterpretationConfig,
    default_config,
)
from item_analysis.scoring.data_models import (
    AggregateStatistics,
    AnalysisResult,
    ItemStatistics,
)


class ReliabilityBand(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    QUESTIONABLE = "questionable"
    POOR = "poor"


class DifficultyBand(StrEnum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class DiscriminationBand(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def classify_alpha(
    alpha: float, bands: AlphaBands = AlphaBands()
) -> ReliabilityBand:
    if alpha >= bands.excellent:
        return ReliabilityBand.EXCELLENT
    if alpha >= bands.good:
        return ReliabilityBand.GOOD
    if alpha >= bands.acceptable:
        return ReliabilityBand.ACCEPTABLE
    if alpha >= bands.questionable:
        return ReliabilityBand.QUESTIONABLE
    return ReliabilityBand.POOR


def classify_difficulty(
    difficulty: float, bands: DifficultyBands = DifficultyBands()
) -> DifficultyBand:
    if difficulty >= bands.easy:
        return DifficultyBand.EASY
    if difficulty >= bands.moderate:
        return DifficultyBand.MODERATE
    return DifficultyBand.HARD


def classify_discrimination(
    discrimination: float, bands: DiscriminationBands = DiscriminationBands()
) -> DiscriminationBand:
    if discrimination >= bands.excellent:
        return DiscriminationBand.EXCELLENT
    if discrimination >= bands.good:
        return DiscriminationBand.GOOD
    if discrimination >= bands.fair:
        return DiscriminationBand.FAIR
    return DiscriminationBand.POOR


class ItemReport(ItemStatistics):
    difficulty_band: DifficultyBand
    discrimination_band: DiscriminationBand


class AnalysisReport(BaseModel):
    """
    An AnalysisResult annotated with qualitative labels.

    Attributes:
        n_students: Number of students analysed.
        n_items: Number of items analysed.
        aggregate: Test-level statistics.
        reliability_band: Label for Cronbach's alpha.
        items: Per-item statistics with their labels.
        flagged_items: Item IDs with poor discrimination, in item order.
        total_scores: Total score of every student, in row order.
    """

    model_config = ConfigDict(frozen=True)

    n_students: int
    n_items: int
    aggregate: AggregateStatistics
    reliability_band: ReliabilityBand
    items: list[ItemReport]
    flagged_items: list[str]
    total_scores: list[float]


def build_report(
    result: AnalysisResult,
    config: InterpretationConfig | None = None,
) -> AnalysisReport:
    """Attach reliability, difficulty and discrimination labels."""
    if config is None:
        config = default_config()

    items = [
        ItemReport(
            **item.model_dump(),
            difficulty_band=classify_difficulty(
                item.difficulty, config.difficulty
            ),
            discrimination_band=classify_discrimination(
                item.discrimination, config.discrimination
            ),
        )
        for item in result.items
    ]

    return AnalysisReport(
        n_students=result.n_students,
        n_items=result.n_items,
        aggregate=result.aggregate,
        reliability_band=classify_alpha(
            result.aggregate.cronbach_alpha, config.alpha
        ),
        items=items,
        flagged_items=[
            item.item_id
            for item in items
            if item.discrimination_band == DiscriminationBand.POOR
        ],
        total_scores=result.total_scores,
    )
