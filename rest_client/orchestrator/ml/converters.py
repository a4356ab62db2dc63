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

"""Converts machine learning values into API requests."""

from typing import Dict, Iterable, Optional
from urllib.parse import quote

from rest_client.core.ml.get_job_query import EXCLUDE_GENERATED, GetJobQuery
from rest_client.core.transport import ApiRequest

ANOMALY_DETECTORS_PATH = ("_ml", "anomaly_detectors")


def _build_endpoint(*parts: str) -> str:
    """Join path parts, URL-encoding each and skipping empty ones.

    Commas are left intact so comma-separated id lists survive.
    """
    encoded = [quote(part, safe=",") for part in parts if part]
    return "/" + "/".join(encoded)


def _join(values: Iterable[str]) -> str:
    return ",".join(values)


def _bool_param(value: Optional[bool]) -> Optional[str]:
    if value is None:
        return None
    return "true" if value else "false"


class MLRequestConverters:  # pylint: disable=too-few-public-methods
    """Builds ApiRequest objects for machine learning endpoints."""

    @staticmethod
    def get_job(query: GetJobQuery) -> ApiRequest:
        """Convert a GetJobQuery into a GET request.

        Job ids are comma-joined into the path. ``exclude_generated`` is
        sent as a query parameter; the rest travels in the body.

        Args:
            query: The job query.

        Returns:
            ApiRequest for the anomaly detectors endpoint.
        """
        endpoint = _build_endpoint(*ANOMALY_DETECTORS_PATH, _join(query.job_ids))

        params: Dict[str, str] = {}
        exclude_generated = _bool_param(query.exclude_generated)
        if exclude_generated is not None:
            params[EXCLUDE_GENERATED] = exclude_generated

        return ApiRequest(
            method="GET",
            endpoint=endpoint,
            params=params,
            body=query.to_document(),
        )
