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

"""Shared pytest fixtures for REST client tests."""

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rest_client.config import ClientSettings  # noqa: E402


@pytest.fixture
def job_documents() -> List[Dict[str, Any]]:
    """Two job configuration documents as a server would return them."""
    return [
        {
            "job_id": "farequote",
            "job_type": "anomaly_detector",
            "groups": ["travel"],
            "analysis_config": {"bucket_span": "15m"},
        },
        {
            "job_id": "response-times",
            "job_type": "anomaly_detector",
            "groups": ["travel", "latency"],
        },
    ]


@pytest.fixture
def settings() -> ClientSettings:
    """Client settings pointing at a local test server."""
    return ClientSettings(base_url="http://localhost:9200", timeout_seconds=5.0)
