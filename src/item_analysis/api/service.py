import logging

from item_analysis.api.config import ApiSettings
from item_analysis.api.errors import DataSizeExceededError
from item_analysis.api.schemas import AnalysisRequest, CsvAnalysisRequest
from item_analysis.core.data import parse_response_csv
from item_analysis.core.data_models import ResponseMatrix
from item_analysis.scoring.engine import analyze
from item_analysis.scoring.interpretation import AnalysisReport, build_report

logger = logging.getLogger(__name__)


class AnalysisService:
    def __init__(self, settings: ApiSettings) -> None:
        self._settings = settings

    def _validate_data_size(self, n_students: int, n_items: int) -> None:
        if n_students > self._settings.max_students:
            raise DataSizeExceededError(
                f"n_students={n_students} exceeds "
                f"max={self._settings.max_students}"
            )
        if n_items > self._settings.max_items:
            raise DataSizeExceededError(
                f"n_items={n_items} exceeds max={self._settings.max_items}"
            )

    def _run(self, matrix: ResponseMatrix) -> AnalysisReport:
        result = analyze(matrix)
        return build_report(result)

    def analyze_matrix(self, request: AnalysisRequest) -> AnalysisReport:
        self._validate_data_size(request.n_students, request.n_items)
        logger.info(
            f"Analyzing response matrix: {request.n_students} students, "
            f"{request.n_items} items"
        )
        return self._run(request.to_domain())

    def analyze_csv(self, request: CsvAnalysisRequest) -> AnalysisReport:
        n_bytes = len(request.csv_text.encode("utf-8"))
        if n_bytes > self._settings.max_csv_bytes:
            raise DataSizeExceededError(
                f"csv_text is {n_bytes} bytes, "
                f"max={self._settings.max_csv_bytes}"
            )

        matrix = parse_response_csv(request.csv_text)
        self._validate_data_size(matrix.n_students, matrix.n_items)
        logger.info(
            f"Analyzing CSV upload {request.file_name or '<unnamed>'}: "
            f"{matrix.n_students} students, {matrix.n_items} items"
        )
        return self._run(matrix)
