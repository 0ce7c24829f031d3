import numpy as np
import pytest
from pydantic import ValidationError

from item_analysis.api.schemas import (
    AnalysisRequest,
    CsvAnalysisRequest,
    HealthResponse,
)


class TestAnalysisRequest:
    def test_to_domain_defaults_ids(self) -> None:
        req = AnalysisRequest(
            response_matrix=[[1, 0], [0, 1], [1, 1]],
        )
        domain = req.to_domain()
        assert domain.n_students == 3
        assert domain.n_items == 2
        assert domain.student_ids == ("Student_1", "Student_2", "Student_3")
        assert domain.item_ids == ("Item_1", "Item_2")
        assert domain.responses.dtype == np.float64

    def test_to_domain_with_ids(self) -> None:
        req = AnalysisRequest(
            response_matrix=[[1, 0], [0, 1], [1, 1]],
            student_ids=["A", "B", "C"],
            item_ids=["Q1", "Q2"],
        )
        domain = req.to_domain()
        assert domain.student_ids == ("A", "B", "C")
        assert domain.item_ids == ("Q1", "Q2")

    def test_too_few_students(self) -> None:
        with pytest.raises(ValidationError, match="at least 3 students"):
            AnalysisRequest(response_matrix=[[1, 0], [0, 1]])

    def test_too_few_items(self) -> None:
        with pytest.raises(ValidationError, match="at least 2 items"):
            AnalysisRequest(response_matrix=[[1], [0], [1]])

    def test_ragged_rows(self) -> None:
        with pytest.raises(ValidationError, match="Inconsistent"):
            AnalysisRequest(response_matrix=[[1, 0], [0, 1, 1], [1, 1]])

    def test_non_finite(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            AnalysisRequest(
                response_matrix=[[1, 0], [0, float("inf")], [1, 1]]
            )

    def test_student_ids_length(self) -> None:
        with pytest.raises(ValidationError, match="student_ids"):
            AnalysisRequest(
                response_matrix=[[1, 0], [0, 1], [1, 1]],
                student_ids=["A", "B"],
            )

    def test_item_ids_length(self) -> None:
        with pytest.raises(ValidationError, match="item_ids"):
            AnalysisRequest(
                response_matrix=[[1, 0], [0, 1], [1, 1]],
                item_ids=["Q1", "Q2", "Q3"],
            )


class TestCsvAnalysisRequest:
    def test_empty_text_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CsvAnalysisRequest(csv_text="")

    def test_file_name_optional(self) -> None:
        req = CsvAnalysisRequest(csv_text="id,Q1\n")
        assert req.file_name is None


def test_health_response_defaults() -> None:
    assert HealthResponse(version="1.0").status == "ok"
