import logging

from fastapi import APIRouter, Header, HTTPException, Request

from resume_analyzer.core.rate_limit import analysis_rate_limit
from resume_analyzer.core.security import check_api_key
from resume_analyzer.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    SampleJobDescriptionResponse,
)
from resume_analyzer.services.analysis_service import (
    SAMPLE_JOB_DESCRIPTION,
    InvalidInputError,
    run_analysis,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analysis", response_model=AnalysisResponse)
@analysis_rate_limit()
def analyze_resume(
    request: Request,
    payload: AnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    try:
        return run_analysis(payload.resume_text, payload.job_description)
    except InvalidInputError as exc:
        logger.info("resume_analysis_rejected reason=%s", exc)
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.get("/analysis/sample-job-description", response_model=SampleJobDescriptionResponse)
async def sample_job_description():
    return SampleJobDescriptionResponse(job_description=SAMPLE_JOB_DESCRIPTION)
