from fastapi import APIRouter, Depends

from item_analysis.api.dependencies import get_analysis_service, get_version
from item_analysis.api.schemas import (
    AnalysisRequest,
    CsvAnalysisRequest,
    HealthResponse,
)
from item_analysis.api.service import AnalysisService
from item_analysis.scoring.interpretation import AnalysisReport

router = APIRouter(prefix="/api/v1")


@router.post("/analysis")
async def run_analysis(
    request: AnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisReport:
    return service.analyze_matrix(request)


@router.post("/analysis/csv")
async def run_csv_analysis(
    request: CsvAnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisReport:
    return service.analyze_csv(request)


@router.get("/health")
async def health_check(
    version: str = Depends(get_version),
) -> HealthResponse:
    return HealthResponse(version=version)
