"""
Input checks applied before any mutation.

Each function raises :class:`ValidationError` with the message
returned to the caller.  Nothing here touches storage, so a failed
check always leaves the map unchanged.
"""

from typing import Optional

from shoe_store_api.app.core.exceptions import ValidationError
from shoe_store_api.app.schemas.shoe import ShoePayload


MIN_RATE = 0
MAX_RATE = 4


def validate_shoe_payload(payload: ShoePayload) -> None:
    """Check a create/update payload.

    ``price`` must be positive and ``quantity`` must contain something
    other than whitespace.
    """
    if payload.price <= 0:
        raise ValidationError("Price must be greater than 0")
    if payload.quantity.strip() == "":
        raise ValidationError("Quantity cannot be empty")


def validate_rate(rate: float) -> None:
    # NaN fails both comparisons and is rejected too
    if not MIN_RATE <= rate <= MAX_RATE:
        raise ValidationError(
            "Error rating shoe. Invalid rating value. "
            f"Value should not be more than {MAX_RATE} or less than {MIN_RATE}"
        )


def validate_keyword(keyword: Optional[str]) -> None:
    if not keyword or keyword.strip() == "":
        raise ValidationError("Keyword cannot be empty")
