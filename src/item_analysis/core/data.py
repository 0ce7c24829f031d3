"""
CSV loading utilities for exam response data.

Expected layout: the first line is a header; every following line is one
student, with an optional identifier in the first cell and one numeric
score per item in the remaining cells.
"""

import io
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from item_analysis.core.constants import (
    ITEM_ID_PREFIX,
    MIN_ITEMS,
    MIN_STUDENTS,
    STUDENT_ID_PREFIX,
)
from item_analysis.core.data_models import ResponseMatrix

logger = logging.getLogger(__name__)

STUDENT_ID_COLUMN = "student_id"


class ParseError(ValueError):
    """Uploaded response data is malformed or too small to analyse."""


def _parse_response_cell(
    cell: str, row_number: int, item_number: int
) -> float:
    """Parse one response cell into a finite float."""
    if cell == "":
        raise ParseError(
            f"Student row {row_number} is missing a response for "
            f"item {item_number}"
        )
    try:
        value = float(cell)
    except ValueError as e:
        raise ParseError(
            f"Invalid response '{cell}' in student row {row_number}, "
            f"item {item_number}: responses must be numeric"
        ) from e
    if not np.isfinite(value):
        raise ParseError(
            f"Invalid response '{cell}' in student row {row_number}, "
            f"item {item_number}: responses must be finite"
        )
    return value


def parse_response_csv(text: str) -> ResponseMatrix:
    """Parse comma-separated response text into a ResponseMatrix.

    Blank lines are ignored. The header row is not a student record; its
    cells after the first name the items only when it has exactly one
    cell per data column. Blank identifiers fall back to Item_N /
    Student_N.

    Raises:
        ParseError: If the text is malformed, rows differ in width, a
            response is non-numeric, or there are fewer than MIN_STUDENTS
            students or MIN_ITEMS items.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ParseError(
            "File must contain a header row and at least one student row"
        )

    # A comma count bounds the field count from above. Empty fields and
    # padding both read as NaN, so a row's width ends at its last value.
    max_fields = max(line.count(",") for line in lines) + 1
    try:
        df = pd.read_csv(
            io.StringIO("\n".join(lines)),
            header=None,
            names=range(max_fields),
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
        )
    except pd.errors.ParserError as e:
        raise ParseError(
            "File is not valid comma-separated text "
            "(check for unbalanced quotes)"
        ) from e

    widths = [
        int(np.flatnonzero(present).max()) + 1 if present.any() else 0
        for present in df.notna().to_numpy()
    ]
    df = df.fillna("")

    n_cells = widths[1]
    for row_number, width in enumerate(widths[1:], start=1):
        if width != n_cells:
            comparison = "more" if width > n_cells else "fewer"
            raise ParseError(
                f"Student row {row_number} has {comparison} cells than "
                f"student row 1 ({width} vs {n_cells})"
            )

    n_items = n_cells - 1
    if n_items == 0:
        raise ParseError("Student row 1 has no responses")
    if n_items < MIN_ITEMS:
        raise ParseError(
            f"Need at least {MIN_ITEMS} items for reliability analysis, "
            f"found {n_items}"
        )

    header = [str(cell).strip() for cell in df.iloc[0, :n_cells].tolist()]
    if widths[0] != n_cells:
        logger.debug(
            f"Header has {widths[0]} cells for {n_cells} data columns; "
            "using default item labels"
        )
        header = [""] * n_cells
    item_ids = tuple(
        name or f"{ITEM_ID_PREFIX}{j}"
        for j, name in enumerate(header[1:], start=1)
    )

    student_ids: list[str] = []
    response_rows: list[list[float]] = []
    for row_number, row in enumerate(
        df.iloc[1:, :n_cells].itertuples(index=False, name=None), start=1
    ):
        cells = [str(cell).strip() for cell in row]
        student_ids.append(cells[0] or f"{STUDENT_ID_PREFIX}{row_number}")
        response_rows.append(
            [
                _parse_response_cell(cell, row_number, item_number)
                for item_number, cell in enumerate(cells[1:], start=1)
            ]
        )

    if len(response_rows) < MIN_STUDENTS:
        raise ParseError(
            f"Need at least {MIN_STUDENTS} students for reliable analysis, "
            f"found {len(response_rows)}"
        )

    logger.debug(
        f"Parsed {len(response_rows)} students x {n_items} items from CSV"
    )
    return ResponseMatrix(
        responses=np.array(response_rows, dtype=np.float64),
        student_ids=tuple(student_ids),
        item_ids=item_ids,
    )


def load_csv_to_response_matrix(path: Path) -> ResponseMatrix:
    """Load a CSV file with exam responses into a ResponseMatrix.

    Raises:
        ParseError: If the file content is invalid.
    """
    with open(path, encoding="utf-8-sig") as f:
        text = f.read()
    return parse_response_csv(text)


def response_matrix_to_csv(matrix: ResponseMatrix) -> str:
    """Serialize a ResponseMatrix in the format parse_response_csv reads.

    Integral scores are written without a decimal point.
    """
    responses = matrix.responses
    if np.array_equal(responses, np.round(responses)):
        values = responses.astype(np.int64)
    else:
        values = responses

    df = pd.DataFrame(values, columns=list(matrix.item_ids))
    df.insert(0, STUDENT_ID_COLUMN, list(matrix.student_ids))
    result: str = df.to_csv(index=False, lineterminator="\n")
    return result
