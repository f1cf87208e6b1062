from fastapi import APIRouter

from resume_analyzer.taxonomy import get_pattern_rules

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the keyword rules compiled and the API is up.")
async def health_check():
    return {"status": "healthy", "keyword_rules": len(get_pattern_rules())}
