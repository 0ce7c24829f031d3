from functools import lru_cache

from item_analysis.api.config import ApiSettings
from item_analysis.api.service import AnalysisService


@lru_cache(maxsize=1)
def get_settings() -> ApiSettings:
    return ApiSettings()


_analysis_service: AnalysisService | None = None


def init_analysis_service(settings: ApiSettings) -> AnalysisService:
    global _analysis_service  # noqa: PLW0603
    _analysis_service = AnalysisService(settings)
    return _analysis_service


def get_analysis_service() -> AnalysisService:
    assert _analysis_service is not None, "AnalysisService not initialized"
    return _analysis_service


def get_version() -> str:
    from item_analysis.scoring.config import _get_project_version

    return _get_project_version()
