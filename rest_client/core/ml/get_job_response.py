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

"""Response for a get-jobs call."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..mapping import Document, FieldShape, ObjectParser, constructor_arg

COUNT = "count"
JOBS = "jobs"


@dataclass(frozen=True)
class GetJobResponse:
    """Job configurations returned by the server.

    Job configurations are kept as raw documents.

    Attributes:
        count: Total number of matching jobs.
        jobs: One document per job configuration.
    """

    count: int
    jobs: Tuple[Dict[str, Any], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "jobs", tuple(self.jobs))

    @staticmethod
    def from_document(document: Document) -> "GetJobResponse":
        """Parse a response body."""
        return PARSER.parse(document)

    def to_document(self) -> Document:
        return {
            COUNT: self.count,
            JOBS: [dict(job) for job in self.jobs],
        }

    def job_ids(self) -> Tuple[str, ...]:
        """Ids of the returned jobs, skipping configurations without one."""
        return tuple(job["job_id"] for job in self.jobs if "job_id" in job)


PARSER: ObjectParser[GetJobResponse] = ObjectParser(
    name="get_job_response",
    constructor=lambda count, jobs: GetJobResponse(count=count, jobs=jobs),
    bindings=(
        constructor_arg(COUNT, FieldShape.INTEGER),
        constructor_arg(JOBS, FieldShape.OBJECT_ARRAY),
    ),
    ignore_unknown_fields=True,
)
