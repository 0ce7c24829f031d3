"""
Classical test theory scoring engine.

All functions operate on a response array of shape (n_students, n_items)
and are free of side effects. Shape and size checks belong to the caller
(see item_analysis.core.data).

Alpha uses sample variances (n - 1) while discrimination uses the
population variance (n) of total scores.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from item_analysis.core.data_models import ResponseMatrix
from item_analysis.scoring.data_models import (
    AggregateStatistics,
    AnalysisResult,
    ItemStatistics,
)

logger = logging.getLogger(__name__)


def item_difficulty(responses: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mean response of each item (column)."""
    result: NDArray[np.float64] = np.mean(responses, axis=0)
    return result


def item_variance(column: NDArray[np.float64]) -> float:
    """Sample variance (n - 1 denominator) of one item's responses."""
    return float(np.var(column, ddof=1))


def total_scores(responses: NDArray[np.float64]) -> NDArray[np.float64]:
    """Sum of item responses for each student (row)."""
    result: NDArray[np.float64] = np.sum(responses, axis=1)
    return result


def cronbach_alpha(responses: NDArray[np.float64]) -> float:
    """
    Compute Cronbach's alpha, clamped to [0, 1].

    alpha = k / (k - 1) * (1 - sum(item variances) / var(total scores))

    Small or degenerate samples can push the raw value outside [0, 1];
    the reported value is clamped. When total scores have no spread the
    ratio is undefined and alpha is reported as 0.

    Args:
        responses: Array of shape (n_students, n_items), n_items >= 2.

    Returns:
        Reliability coefficient in [0, 1].
    """
    n_items = responses.shape[1]
    sum_item_variances = sum(
        item_variance(responses[:, j]) for j in range(n_items)
    )
    total_variance = float(np.var(total_scores(responses), ddof=1))

    if total_variance == 0.0:
        logger.warning(
            "Total scores have zero variance; "
            "reporting Cronbach's alpha as 0"
        )
        return 0.0

    raw_alpha = (n_items / (n_items - 1)) * (
        1.0 - sum_item_variances / total_variance
    )
    return float(np.clip(raw_alpha, 0.0, 1.0))


def item_discrimination(
    responses: NDArray[np.float64],
    difficulties: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Point-biserial style correlation of each item with the total score.

    For item j:
        sum_i (x_ij - p_j)(T_i - mean(T))
        / sqrt(p_j * (1 - p_j) * popvar(T) * n)

    where popvar uses the n denominator. Items whose denominator is not
    positive (constant items, no total-score spread, or polytomous
    difficulties above 1) get a discrimination of 0.

    Args:
        responses: Array of shape (n_students, n_items).
        difficulties: Item difficulties as returned by item_difficulty.

    Returns:
        Array of shape (n_items,).
    """
    n_students = responses.shape[0]
    totals = total_scores(responses)
    centered_totals = totals - np.mean(totals)
    population_variance = float(np.var(totals))

    numerators = np.sum(
        (responses - difficulties) * centered_totals[:, np.newaxis], axis=0
    )
    radicands = (
        difficulties * (1.0 - difficulties) * population_variance * n_students
    )

    discriminations = np.zeros(responses.shape[1], dtype=np.float64)
    defined = radicands > 0.0
    discriminations[defined] = numerators[defined] / np.sqrt(
        radicands[defined]
    )
    return discriminations


def descriptive_stats(responses: NDArray[np.float64]) -> tuple[float, float]:
    """Mean and sample standard deviation (n - 1) of total scores."""
    totals = total_scores(responses)
    return float(np.mean(totals)), float(np.std(totals, ddof=1))


def standard_error_of_measurement(sd: float, alpha: float) -> float:
    """
    SD * sqrt(1 - alpha).

    Alpha must already be clamped to [0, 1]; larger values give NaN.
    """
    return float(sd * np.sqrt(1.0 - alpha))


def analyze(matrix: ResponseMatrix) -> AnalysisResult:
    """
    Run the full item analysis on a response matrix.

    Args:
        matrix: Validated responses (at least 3 students and 2 items).

    Returns:
        AnalysisResult with per-item and aggregate statistics.
    """
    responses = matrix.responses

    difficulties = item_difficulty(responses)
    discriminations = item_discrimination(responses, difficulties)
    alpha = cronbach_alpha(responses)
    mean, sd = descriptive_stats(responses)
    sem = standard_error_of_measurement(sd, alpha)

    items = [
        ItemStatistics(
            item_index=j,
            item_id=matrix.item_ids[j],
            difficulty=float(difficulties[j]),
            discrimination=float(discriminations[j]),
        )
        for j in range(matrix.n_items)
    ]

    logger.debug(
        f"Analyzed {matrix.n_students} students x {matrix.n_items} items: "
        f"alpha={alpha:.4f}, mean={mean:.4f}, sd={sd:.4f}"
    )

    return AnalysisResult(
        n_students=matrix.n_students,
        n_items=matrix.n_items,
        items=items,
        aggregate=AggregateStatistics(
            mean=mean,
            standard_deviation=sd,
            cronbach_alpha=alpha,
            standard_error_of_measurement=sem,
        ),
        total_scores=total_scores(responses).tolist(),
    )
