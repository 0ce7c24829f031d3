"""
End-to-end checks of the scoring engine on simulated exams.
"""

import numpy as np

from item_analysis.core.data import (
    parse_response_csv,
    response_matrix_to_csv,
)
from item_analysis.scoring import analyze
from item_analysis.synthetic_data import (
    GenerationConfig,
    NormalParams,
    generate_rasch_responses,
    get_preset,
)


def test_unit_exam_is_reliable() -> None:
    data = generate_rasch_responses(get_preset("unit_exam"))
    result = analyze(data.response_matrix)
    # 40 Rasch items with ability sd 1.2 give a high alpha
    assert result.aggregate.cronbach_alpha > 0.8


def test_discrimination_positive_for_rasch_items() -> None:
    data = generate_rasch_responses(get_preset("unit_exam"))
    result = analyze(data.response_matrix)
    assert np.mean(result.discriminations) > 0.2


def test_difficulty_tracks_item_location() -> None:
    config = GenerationConfig(
        n_students=1000,
        n_items=15,
        item_location=NormalParams(mean=0.0, std=1.5),
        random_seed=5,
    )
    data = generate_rasch_responses(config)
    result = analyze(data.response_matrix)
    # Harder items (higher location) have lower proportion correct
    corr = np.corrcoef(data.item_locations, result.difficulties)[0, 1]
    assert corr < -0.9


def test_csv_upload_matches_direct_analysis() -> None:
    data = generate_rasch_responses(get_preset("pilot_quiz"))
    direct = analyze(data.response_matrix)
    uploaded = analyze(
        parse_response_csv(response_matrix_to_csv(data.response_matrix))
    )
    assert uploaded == direct
