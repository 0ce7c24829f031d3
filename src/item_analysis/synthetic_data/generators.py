"""
Synthetic dichotomous exam responses from a Rasch model.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.special import expit

from item_analysis.core.data_models import ResponseMatrix
from item_analysis.core.utils import (
    default_item_ids,
    default_student_ids,
    get_rng,
)
from item_analysis.synthetic_data.config import GenerationConfig


@dataclass(frozen=True)
class GeneratedData:
    """
    Output of synthetic data generation.

    Attributes:
        response_matrix: 0/1 responses, shape (n_students, n_items).
        abilities: Sampled student abilities, shape (n_students,).
        item_locations: Sampled item locations, shape (n_items,).
        config: Configuration used to generate the data.
    """

    response_matrix: ResponseMatrix
    abilities: NDArray[np.float64]
    item_locations: NDArray[np.float64]
    config: GenerationConfig


def correct_probabilities(
    abilities: NDArray[np.float64],
    item_locations: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Rasch probability of a correct answer, shape (n_students, n_items)."""
    result: NDArray[np.float64] = expit(
        abilities[:, np.newaxis] - item_locations[np.newaxis, :]
    )
    return result


def generate_rasch_responses(config: GenerationConfig) -> GeneratedData:
    """
    Generate synthetic 0/1 exam responses.

    Steps:
        1. Sample student abilities
        2. Sample item locations
        3. Draw each response as a Bernoulli trial

    Args:
        config: Complete generation configuration.

    Returns:
        GeneratedData with the response matrix and sampled parameters.
    """
    rng = get_rng(config.random_seed)

    abilities = rng.normal(
        config.ability.mean, config.ability.std, size=config.n_students
    )
    item_locations = rng.normal(
        config.item_location.mean,
        config.item_location.std,
        size=config.n_items,
    )

    probabilities = correct_probabilities(abilities, item_locations)
    responses = (rng.random(probabilities.shape) < probabilities).astype(
        np.float64
    )

    return GeneratedData(
        response_matrix=ResponseMatrix(
            responses=responses,
            student_ids=default_student_ids(config.n_students),
            item_ids=default_item_ids(config.n_items),
        ),
        abilities=abilities,
        item_locations=item_locations,
        config=config,
    )
