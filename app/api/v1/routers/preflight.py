# app/api/v1/routers/preflight.py
from fastapi import APIRouter, Depends, Response

from app.core.config import Settings, get_settings

router = APIRouter(tags=["cors"])


@router.options("/{rest_of_path:path}", include_in_schema=False)
async def preflight(rest_of_path: str, settings: Settings = Depends(get_settings)):
    """
    Answer OPTIONS on any path with the CORS policy and an empty JSON-typed body.
    Browser pre-flights carrying Access-Control-Request-Method are answered
    earlier by CORSMiddleware with the same policy.
    """
    return Response(
        content=b"",
        media_type="application/json",
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ", ".join(settings.cors_allowed_methods),
            "Access-Control-Allow-Headers": ", ".join(settings.cors_allowed_headers),
        },
    )
