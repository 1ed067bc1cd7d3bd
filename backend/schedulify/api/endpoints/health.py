# backend/schedulify/api/endpoints/health.py

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request):
    """
    [Ops] Health check
    - Process liveness, whether a generator credential is present, and how many sessions are live.
    - The credential itself is never echoed.
    """
    generator = request.app.state.schedule_generator
    return {
        "status": "ok",
        "generator_configured": generator.configured,
        "active_sessions": len(request.app.state.session_store),
    }
