from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from fixmanufacture.utils.rate_limit import rate_limit_health_info

router = APIRouter(tags=["Health"])

@router.get("/", response_class=PlainTextResponse)
def root():
    return "Server is running"

@router.get("/health")
def health_root():
    return {"ok": True}

@router.get("/health/rate-limit")
def health_rate_limit(request: Request):
    return rate_limit_health_info(request)
