import numpy as np
from pydantic import BaseModel, Field, model_validator

from item_analysis.core.constants import MIN_ITEMS, MIN_STUDENTS
from item_analysis.core.data_models import ResponseMatrix
from item_analysis.core.utils import default_item_ids, default_student_ids

# --- Request schemas ---


class AnalysisRequest(BaseModel):
    response_matrix: list[list[float]]
    student_ids: list[str] | None = None
    item_ids: list[str] | None = None

    @model_validator(mode="after")
    def validate_shape(self) -> "AnalysisRequest":
        n_students = len(self.response_matrix)
        if n_students < MIN_STUDENTS:
            raise ValueError(
                f"Need at least {MIN_STUDENTS} students for reliable "
                f"analysis, got {n_students}"
            )

        lengths = {len(row) for row in self.response_matrix}
        if len(lengths) != 1:
            raise ValueError(
                f"Inconsistent response row lengths: {sorted(lengths)}"
            )
        n_items = lengths.pop()
        if n_items < MIN_ITEMS:
            raise ValueError(
                f"Need at least {MIN_ITEMS} items, got {n_items}"
            )

        if not np.all(np.isfinite(self.response_matrix)):
            raise ValueError("Responses must be finite numbers")

        if (
            self.student_ids is not None
            and len(self.student_ids) != n_students
        ):
            raise ValueError(
                f"Got {len(self.student_ids)} student_ids for "
                f"{n_students} response rows"
            )
        if self.item_ids is not None and len(self.item_ids) != n_items:
            raise ValueError(
                f"Got {len(self.item_ids)} item_ids for {n_items} items"
            )
        return self

    @property
    def n_students(self) -> int:
        return len(self.response_matrix)

    @property
    def n_items(self) -> int:
        return len(self.response_matrix[0])

    def to_domain(self) -> ResponseMatrix:
        student_ids = (
            tuple(self.student_ids)
            if self.student_ids is not None
            else default_student_ids(self.n_students)
        )
        item_ids = (
            tuple(self.item_ids)
            if self.item_ids is not None
            else default_item_ids(self.n_items)
        )
        return ResponseMatrix(
            responses=np.array(self.response_matrix, dtype=np.float64),
            student_ids=student_ids,
            item_ids=item_ids,
        )


class CsvAnalysisRequest(BaseModel):
    csv_text: str = Field(min_length=1)
    file_name: str | None = None


# --- Response schemas ---


class ErrorDetail(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
