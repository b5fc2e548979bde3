"""Shoe Store API client.

This module defines a thin client wrapper around the Shoe Store REST
API.  It uses the ``requests`` library internally and exposes one
method per remote operation:

* :meth:`create_shoe` – add a shoe to the catalog.
* :meth:`list_shoes` – return every shoe.
* :meth:`get_shoe` – fetch a single shoe by id.
* :meth:`search_shoes` – find shoes whose name contains a keyword.
* :meth:`rate_shoe` – blend a 0–4 rate into a shoe's rating.
* :meth:`update_shoe` – replace the editable fields of a shoe.
* :meth:`delete_shoe` – remove a shoe.
* :meth:`get_info` – service name, version and catalog size.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON and ``error`` is ``None``; on failure ``data``
is ``None`` and ``error`` is a dictionary with keys ``status_code``
and ``message`` (the server's ``detail`` text when available).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class ShoeStoreAPI:
    """Client for interacting with the Shoe Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the versioned API.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/shoes/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Shoe operations
    # ------------------------------------------------------------------
    def create_shoe(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Create a shoe.

        ``payload`` holds ``name``, ``size``, ``shoeURL``, ``price`` and
        ``quantity``.
        """
        return self._request("POST", "/shoes/", json_body=payload)

    def list_shoes(self) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", "/shoes/")
        return data or [], error

    def get_shoe(self, shoe_id: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/shoes/{shoe_id}")

    def search_shoes(self, keyword: str) -> Tuple[List[Dict[str, Any]], Error]:
        """Return shoes whose name contains ``keyword``."""
        data, error = self._request("GET", "/shoes/search", params={"keyword": keyword})
        return data or [], error

    def rate_shoe(self, shoe_id: str, rate: float) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("POST", f"/shoes/{shoe_id}/rate", json_body={"rate": rate})

    def update_shoe(self, shoe_id: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("PUT", f"/shoes/{shoe_id}", json_body=payload)

    def delete_shoe(self, shoe_id: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Delete a shoe; ``data`` is the removed record."""
        return self._request("DELETE", f"/shoes/{shoe_id}")

    # ------------------------------------------------------------------
    # Service information
    # ------------------------------------------------------------------
    def get_info(self) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", "/info/")
