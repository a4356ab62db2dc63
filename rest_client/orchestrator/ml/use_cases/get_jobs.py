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

"""GetJobs use case implementation."""

import logging

from rest_client.core.ml import GetJobQuery, GetJobResponse
from rest_client.core.transport import ApiRequest, Transport

from ..converters import MLRequestConverters

logger = logging.getLogger(__name__)


class GetJobsUseCase:
    """Use case for fetching job configurations.

    Converts the query into an API request, submits it through the
    transport port and parses the response. Errors from either the
    transport or the parser propagate unchanged.

    Attributes:
        transport: Transport port used to reach the server.
    """

    def __init__(self, transport: Transport) -> None:
        """Initialize use case with its transport.

        Args:
            transport: Transport implementation.
        """
        self._transport = transport

    def execute(self, query: GetJobQuery) -> GetJobResponse:
        """Fetch the job configurations selected by a query.

        Args:
            query: Job ids, groups or ``_all``.

        Returns:
            GetJobResponse with the matching configurations.

        Raises:
            TransportError: If the request cannot be delivered.
            MissingFieldError: If the response lacks ``count`` or ``jobs``.
            TypeMismatchError: If a response field has the wrong shape.
        """
        request = self._to_request(query)
        logger.info("Fetching job configurations from %s", request.endpoint)

        document = self._transport.submit(request)
        response = GetJobResponse.from_document(document)

        logger.info("Fetched %d job configurations", response.count)
        return response

    def _to_request(self, query: GetJobQuery) -> ApiRequest:
        """Map the query onto an API request."""
        return MLRequestConverters.get_job(query)
