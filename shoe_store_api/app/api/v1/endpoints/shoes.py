"""
Shoe endpoints for API v1.

These routes expose the catalog: create, list, retrieve, search,
rate, update and delete shoes.  Handlers call the service layer with
the application's durable map and translate ``Err`` results into HTTP
errors (400 for invalid input, 404 for unknown ids).  No
authentication is required.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from shoe_store_api.app.core.exceptions import NotFoundError, ValidationError
from shoe_store_api.app.core.result import Ok, Result
from shoe_store_api.app.core.storage import DurableMap, get_storage
from shoe_store_api.app.schemas.shoe import RatePayload, Shoe, ShoePayload
from shoe_store_api.app.services.rating_service import RatingService
from shoe_store_api.app.services.search_service import SearchService
from shoe_store_api.app.services.shoe_service import ShoeService

router = APIRouter()


def unwrap(result: Result):
    """Return the value of an ``Ok`` or raise the matching HTTP error."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result.error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(result.error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    raise HTTPException(status_code=status_code, detail=result.message)


@router.get("/", response_model=List[Shoe])
async def list_shoes(storage: DurableMap = Depends(get_storage)) -> List[Shoe]:
    """Return every shoe in the catalog."""
    return unwrap(await ShoeService.list_shoes(storage))


@router.get("/search", response_model=List[Shoe])
async def search_shoes(
    keyword: Optional[str] = Query(None, description="Substring to look for in shoe names"),
    storage: DurableMap = Depends(get_storage),
) -> List[Shoe]:
    """Return shoes whose name contains ``keyword`` (case-sensitive).

    Returns HTTP 400 if the keyword is missing or blank; an empty list
    when nothing matches.
    """
    return unwrap(await SearchService.search_shoes(storage, keyword))


@router.get("/{shoe_id}", response_model=Shoe)
async def get_shoe(shoe_id: str, storage: DurableMap = Depends(get_storage)) -> Shoe:
    """Retrieve a single shoe by id.  Returns HTTP 404 if absent."""
    return unwrap(await ShoeService.get_shoe(storage, shoe_id))


@router.post("/", response_model=Shoe, status_code=status.HTTP_201_CREATED)
async def create_shoe(payload: ShoePayload, storage: DurableMap = Depends(get_storage)) -> Shoe:
    """Create a new shoe with rating 1.0."""
    return unwrap(await ShoeService.create_shoe(storage, payload))


@router.post("/{shoe_id}/rate", response_model=Shoe)
async def rate_shoe(
    shoe_id: str,
    payload: RatePayload,
    storage: DurableMap = Depends(get_storage),
) -> Shoe:
    """Blend a 0–4 rate into the shoe's rating."""
    return unwrap(await RatingService.rate_shoe(storage, shoe_id, payload.rate))


@router.put("/{shoe_id}", response_model=Shoe)
async def update_shoe(
    shoe_id: str,
    payload: ShoePayload,
    storage: DurableMap = Depends(get_storage),
) -> Shoe:
    """Replace the editable fields of an existing shoe."""
    return unwrap(await ShoeService.update_shoe(storage, shoe_id, payload))


@router.delete("/{shoe_id}", response_model=Shoe)
async def delete_shoe(shoe_id: str, storage: DurableMap = Depends(get_storage)) -> Shoe:
    """Delete a shoe and return the removed record."""
    return unwrap(await ShoeService.delete_shoe(storage, shoe_id))
