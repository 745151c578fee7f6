import time
from fastapi import APIRouter, Depends, HTTPException
from ..codewars import CodewarsClient, get_codewars_client
from ..models.response import HealthResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

# Track application start time
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check(client: CodewarsClient = Depends(get_codewars_client)):
    """Liveness probe; also reports the upstream API this instance talks to"""
    try:
        response = HealthResponse(
            uptime=time.time() - start_time,
            codewars_api=client.base_url
        )
        logger.debug(f"Health check response: {response.model_dump()}")
        return response
    except Exception as e:
        logger.error(f"Health check error: {e}")
        raise HTTPException(status_code=500, detail="Health check failed")
