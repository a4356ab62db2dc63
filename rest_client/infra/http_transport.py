# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""httpx implementation of the Transport port.

No retries are attempted; every failure is raised to the caller.
"""

import logging
from typing import Optional

import httpx

from rest_client.config import ClientSettings
from rest_client.core.mapping import Document
from rest_client.core.transport import ApiRequest, ResponseStatusError, TransportError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Submits API requests over HTTP using a shared httpx client."""

    def __init__(
        self,
        settings: ClientSettings,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            settings: Connection settings.
            client: Optional preconfigured client. Creates one if not provided.
        """
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            verify=settings.verify_tls,
            headers=settings.headers,
        )

    def submit(self, request: ApiRequest) -> Document:
        """Send a request and decode the JSON response.

        Args:
            request: The API request.

        Returns:
            Decoded response document, empty if the response has no body.

        Raises:
            ResponseStatusError: On a 4xx or 5xx response.
            TransportError: On connection failures or undecodable responses.
        """
        logger.debug("%s %s params=%s", request.method, request.endpoint, request.params)
        try:
            response = self._client.request(
                request.method,
                request.endpoint,
                params=request.params or None,
                json=request.body or None,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Request to %s failed with status %d",
                request.endpoint,
                exc.response.status_code,
            )
            raise ResponseStatusError(
                exc.response.status_code, request.endpoint, exc.response.text
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Request to %s could not be delivered", request.endpoint)
            raise TransportError(
                f"Request to {request.endpoint} failed: {exc}",
                endpoint=request.endpoint,
            ) from exc

        if not response.content:
            return {}
        try:
            document = response.json()
        except ValueError as exc:
            raise TransportError(
                f"Response from {request.endpoint} is not valid JSON",
                endpoint=request.endpoint,
            ) from exc
        if not isinstance(document, dict):
            raise TransportError(
                f"Response from {request.endpoint} is not a JSON object",
                endpoint=request.endpoint,
            )
        return document

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
