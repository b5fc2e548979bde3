"""
Keyword search over shoe names.

Search is a linear scan of every stored record; there is no secondary
index.  Matching is a case-sensitive substring test on ``name``.
"""

import logging
from typing import List, Optional

from shoe_store_api.app.core.exceptions import ValidationError
from shoe_store_api.app.core.result import Err, Ok, Result
from shoe_store_api.app.core.storage import DurableMap
from shoe_store_api.app.schemas.shoe import Shoe
from shoe_store_api.app.services.validation import validate_keyword


class SearchService:
    """Service for finding shoes by name."""

    @classmethod
    async def search_shoes(cls, storage: DurableMap, keyword: Optional[str]) -> Result[List[Shoe]]:
        """Return shoes whose name contains ``keyword``.

        A blank or missing keyword is an error; no match is an empty
        list.
        """
        try:
            validate_keyword(keyword)
        except ValidationError as e:
            logging.getLogger(__name__).warning("Rejected search: %s", e.message)
            return Err(e)
        return Ok([shoe for shoe in storage.values() if keyword in shoe.name])
