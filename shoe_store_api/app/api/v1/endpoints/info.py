"""
Information endpoint for API v1.

Returns the service name and version together with the number of
shoes currently stored.  Useful as a health check: a successful
response means the durable map is reachable.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from shoe_store_api.app.core.storage import DurableMap, get_storage

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(request: Request, storage: DurableMap = Depends(get_storage)) -> Dict[str, Any]:
    """Return project name, API version and catalog size."""
    app_settings = request.app.state.settings
    return {
        "project": app_settings.project_name,
        "version": app_settings.api_version,
        "shoes": len(storage),
    }
