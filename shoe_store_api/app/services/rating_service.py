"""
Rating aggregation for shoes.

A new rating is blended into the stored one as
``(current + rate) / 4``.  This is not a running mean: repeated calls
converge on a value dominated by the latest ``rate``.  The result is
kept at 32-bit float precision, the width of the stored field.
"""

import logging
import struct

from shoe_store_api.app.core.exceptions import NotFoundError, ServiceError
from shoe_store_api.app.core.result import Err, Ok, Result
from shoe_store_api.app.core.storage import DurableMap
from shoe_store_api.app.schemas.shoe import Shoe
from shoe_store_api.app.services.validation import validate_rate


def to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def blend_rating(current: float, rate: float) -> float:
    """Combine the stored rating with a new rate."""
    return to_float32((current + rate) / 4)


class RatingService:
    """Service for rating shoes."""

    @classmethod
    async def rate_shoe(cls, storage: DurableMap, shoe_id: str, rate: float) -> Result[Shoe]:
        """Apply ``rate`` to a shoe's rating.

        Only ``rating`` changes; ``updated_at`` is left as it was.
        """
        logger = logging.getLogger(__name__)
        try:
            validate_rate(rate)
            shoe = storage.get(shoe_id)
            if shoe is None:
                raise NotFoundError(shoe_id, f"Error rating shoe with id={shoe_id}. Shoe not found")
            rated = shoe.model_copy(update={"rating": blend_rating(shoe.rating, rate)})
            storage.insert(rated.id, rated)
        except ServiceError as e:
            logger.warning("Rejected rating of shoe %s: %s", shoe_id, e.message)
            return Err(e)
        logger.info("Rated shoe %s: %s -> %s", shoe_id, shoe.rating, rated.rating)
        return Ok(rated)
