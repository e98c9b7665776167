"""Liveness endpoint shared by both services."""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> Dict[str, str]:
    """Report that the service is up.  Never touches the store."""
    return {"status": "healthy", "service": request.app.state.service_name}
