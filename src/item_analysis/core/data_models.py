"""
Data model for item analysis input.

This module defines ResponseMatrix, the per-student item responses that
the scoring engine consumes.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ResponseMatrix:
    """
    Item responses for a group of students.

    Attributes:
        responses: Array of shape (n_students, n_items) containing numeric
            item scores. Dichotomous items are scored 0/1; polytomous
            scores are allowed.
        student_ids: Identifier for each row.
        item_ids: Identifier for each column.
    """

    responses: NDArray[np.float64]
    student_ids: tuple[str, ...]
    item_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate response matrix."""
        if self.responses.ndim != 2:
            raise ValueError(
                f"responses must be 2D, got shape {self.responses.shape}"
            )
        if not np.all(np.isfinite(self.responses)):
            raise ValueError("responses must be finite numbers")
        if len(self.student_ids) != self.responses.shape[0]:
            raise ValueError(
                f"# student IDs ({len(self.student_ids)}) inconsistent "
                f"with response matrix shape {self.responses.shape}"
            )
        if len(self.item_ids) != self.responses.shape[1]:
            raise ValueError(
                f"# item IDs ({len(self.item_ids)}) inconsistent "
                f"with response matrix shape {self.responses.shape}"
            )

    @property
    def n_students(self) -> int:
        """Number of students (rows)."""
        return self.responses.shape[0]

    @property
    def n_items(self) -> int:
        """Number of items (columns)."""
        return self.responses.shape[1]

    def item(self, item_idx: int) -> NDArray[np.float64]:
        """Responses of every student to one item."""
        column: NDArray[np.float64] = self.responses[:, item_idx]
        return column
