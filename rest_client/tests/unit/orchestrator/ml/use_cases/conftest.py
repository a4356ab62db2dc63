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

"""Shared fixtures for use case tests."""

from typing import List, Optional

import pytest

from rest_client.core.mapping import Document
from rest_client.core.transport import ApiRequest


class FakeTransport:
    """In-memory fake implementation of Transport."""

    def __init__(
        self,
        response: Optional[Document] = None,
        error: Optional[Exception] = None,
    ) -> None:
        """Initialize the fake transport."""
        self._response = response if response is not None else {}
        self._error = error
        self.requests: List[ApiRequest] = []

    def submit(self, request: ApiRequest) -> Document:
        """Record the request and return the canned response."""
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def transport(job_documents):
    """Fake transport answering with two jobs."""
    return FakeTransport(response={"count": 2, "jobs": job_documents})


@pytest.fixture
def make_transport():
    """Factory for fake transports with custom responses or errors."""
    return FakeTransport
