"""
Data models for scoring engine output.

This module defines the data structures for:
- ItemStatistics: per-item difficulty and discrimination
- AggregateStatistics: test-level reliability and score statistics
- AnalysisResult: complete output of one analysis
"""

from pydantic import BaseModel, ConfigDict, Field


class ItemStatistics(BaseModel):
    """
    Classical statistics of a single item.

    Attributes:
        item_index: 0-based column index in the response matrix.
        item_id: Item label taken from the upload header.
        difficulty: Mean response. Lies in [0, 1] for dichotomous items.
        discrimination: Point-biserial style correlation with the total
            score. 0 when the correlation is undefined.
    """

    model_config = ConfigDict(frozen=True)

    item_index: int = Field(ge=0)
    item_id: str
    difficulty: float
    discrimination: float


class AggregateStatistics(BaseModel):
    """
    Test-level statistics computed from total scores.

    Attributes:
        mean: Mean total score.
        standard_deviation: Sample standard deviation (n - 1) of totals.
        cronbach_alpha: Internal consistency, clamped to [0, 1].
        standard_error_of_measurement: SD * sqrt(1 - alpha).
    """

    model_config = ConfigDict(frozen=True)

    mean: float
    standard_deviation: float
    cronbach_alpha: float = Field(ge=0.0, le=1.0)
    standard_error_of_measurement: float


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    n_students: int
    n_items: int
    items: list[ItemStatistics]
    aggregate: AggregateStatistics
    total_scores: list[float]

    @property
    def difficulties(self) -> list[float]:
        return [item.difficulty for item in self.items]

    @property
    def discriminations(self) -> list[float]:
        return [item.discrimination for item in self.items]
