import numpy as np
import pytest

from item_analysis.synthetic_data.config import GenerationConfig, NormalParams
from item_analysis.synthetic_data.generators import (
    correct_probabilities,
    generate_rasch_responses,
)


@pytest.fixture
def config() -> GenerationConfig:
    return GenerationConfig(n_students=50, n_items=12, random_seed=11)


def test_generate_shapes(config: GenerationConfig) -> None:
    data = generate_rasch_responses(config)
    assert data.response_matrix.n_students == 50
    assert data.response_matrix.n_items == 12
    assert data.abilities.shape == (50,)
    assert data.item_locations.shape == (12,)


def test_responses_are_dichotomous(config: GenerationConfig) -> None:
    data = generate_rasch_responses(config)
    assert set(np.unique(data.response_matrix.responses)) <= {0.0, 1.0}


def test_generate_reproducible(config: GenerationConfig) -> None:
    data1 = generate_rasch_responses(config)
    data2 = generate_rasch_responses(config)
    np.testing.assert_array_equal(
        data1.response_matrix.responses, data2.response_matrix.responses
    )
    np.testing.assert_array_equal(data1.abilities, data2.abilities)


def test_default_ids(config: GenerationConfig) -> None:
    data = generate_rasch_responses(config)
    assert data.response_matrix.student_ids[0] == "Student_1"
    assert data.response_matrix.item_ids[-1] == "Item_12"


def test_correct_probabilities() -> None:
    probs = correct_probabilities(np.array([0.0, 2.0]), np.array([0.0]))
    np.testing.assert_allclose(probs[:, 0], [0.5, 1 / (1 + np.exp(-2.0))])


def test_config_validation() -> None:
    with pytest.raises(ValueError, match="at least 1 student"):
        GenerationConfig(n_students=0, n_items=5)
    with pytest.raises(ValueError, match="std must be positive"):
        NormalParams(mean=0.0, std=0.0)
