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

"""Transport port for submitting documents to the remote API.

Infrastructure implementations satisfy the Transport protocol structurally.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from .mapping import Document


@dataclass(frozen=True)
class ApiRequest:
    """A single call to the remote API.

    Attributes:
        method: HTTP method.
        endpoint: Path relative to the base URL, starting with ``/``.
        params: Query parameters sent outside the document body.
        body: Document body; empty means no body is sent.
    """

    method: str
    endpoint: str
    params: Dict[str, str] = field(default_factory=dict)
    body: Document = field(default_factory=dict)


class TransportError(Exception):
    """A request could not be delivered or its response could not be read."""

    def __init__(self, message: str, endpoint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class ResponseStatusError(TransportError):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, endpoint: str, body: str = "") -> None:
        """Initialize response status error.

        Args:
            status_code: HTTP status returned.
            endpoint: Endpoint that was called.
            body: Raw response text, for diagnostics.
        """
        super().__init__(
            f"Request to {endpoint} failed with status {status_code}",
            endpoint=endpoint,
        )
        self.status_code = status_code
        self.body = body


class Transport(Protocol):
    """Port for submitting a request and receiving a document."""

    def submit(self, request: ApiRequest) -> Document:
        """Send a request.

        Args:
            request: Method, endpoint, query parameters and body.

        Returns:
            Decoded response document.

        Raises:
            TransportError: If delivery fails.
            ResponseStatusError: If the server rejects the request.
        """
        ...
