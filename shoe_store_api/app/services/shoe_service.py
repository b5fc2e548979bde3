"""
Service layer for shoe records.

This module provides CRUD operations over the durable shoe map.  Each
operation receives the map handle explicitly and returns a result
value: ``Ok`` with the record (or list of records) on success, ``Err``
with a :class:`ServiceError` on failure.  Input is validated before
the map is touched, so a failed call never leaves a partial change.
"""

from __future__ import annotations

import logging
from typing import List

from shoe_store_api.app.core import clock as clock_module
from shoe_store_api.app.core.exceptions import NotFoundError, ServiceError
from shoe_store_api.app.core.result import Err, Ok, Result
from shoe_store_api.app.core.storage import DurableMap
from shoe_store_api.app.schemas.shoe import Shoe, ShoePayload
from shoe_store_api.app.services.validation import validate_shoe_payload


DEFAULT_RATING = 1.0


class ShoeService:
    """Service class for managing shoe records."""

    @classmethod
    async def create_shoe(cls, storage: DurableMap, payload: ShoePayload) -> Result[Shoe]:
        """Validate ``payload`` and insert a new record.

        The record gets a fresh id, the current timestamp as
        ``created_at``, the default rating and no ``updated_at``.
        """
        logger = logging.getLogger(__name__)
        try:
            validate_shoe_payload(payload)
            shoe = Shoe(
                id=clock_module.generate_id(),
                created_at=clock_module.clock.now(),
                rating=DEFAULT_RATING,
                updated_at=None,
                **payload.model_dump(),
            )
            storage.insert(shoe.id, shoe)
        except ServiceError as e:
            logger.warning("Rejected shoe creation: %s", e.message)
            return Err(e)
        logger.info("Created shoe %s", shoe.id)
        return Ok(shoe)

    @classmethod
    async def list_shoes(cls, storage: DurableMap) -> Result[List[Shoe]]:
        """Return every stored shoe in the map's native order."""
        return Ok(storage.values())

    @classmethod
    async def get_shoe(cls, storage: DurableMap, shoe_id: str) -> Result[Shoe]:
        """Retrieve a single shoe by its id."""
        shoe = storage.get(shoe_id)
        if shoe is None:
            return Err(NotFoundError(shoe_id))
        return Ok(shoe)

    @classmethod
    async def update_shoe(cls, storage: DurableMap, shoe_id: str, payload: ShoePayload) -> Result[Shoe]:
        """Merge ``payload`` over an existing shoe.

        Name, size, URL, price and quantity are overwritten; id,
        ``created_at`` and rating are kept.  ``updated_at`` is set to
        the current time.  A missing id is reported before the payload
        is validated.
        """
        logger = logging.getLogger(__name__)
        shoe = storage.get(shoe_id)
        if shoe is None:
            return Err(NotFoundError(shoe_id, f"Couldn't update shoe with id={shoe_id}. Shoe not found"))
        try:
            validate_shoe_payload(payload)
            updated = shoe.model_copy(
                update={**payload.model_dump(), "updated_at": clock_module.clock.now()}
            )
            storage.insert(updated.id, updated)
        except ServiceError as e:
            logger.warning("Rejected update of shoe %s: %s", shoe_id, e.message)
            return Err(e)
        logger.info("Updated shoe %s", shoe_id)
        return Ok(updated)

    @classmethod
    async def delete_shoe(cls, storage: DurableMap, shoe_id: str) -> Result[Shoe]:
        """Remove a shoe and return the removed record."""
        logger = logging.getLogger(__name__)
        removed = storage.remove(shoe_id)
        if removed is None:
            return Err(NotFoundError(shoe_id, f"Couldn't delete shoe with id={shoe_id}. Shoe not found."))
        logger.info("Deleted shoe %s", shoe_id)
        return Ok(removed)
