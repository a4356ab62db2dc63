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

"""Request for anomaly detection job configurations.

``_all`` explicitly selects every job. A query with no job ids selects
every job implicitly; the two forms serialize differently and are not equal.
"""

from typing import Any, Iterable, List, Optional

from ..mapping import (
    Document,
    FieldShape,
    NullValueError,
    ObjectParser,
    optional_constructor_arg,
    optional_field,
)

JOB_IDS = "job_ids"
ALLOW_NO_MATCH = "allow_no_match"
EXCLUDE_GENERATED = "exclude_generated"

ALL_JOBS = "_all"


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
    return value


class GetJobQuery:
    """Selects job configurations by job id, group name or wildcard.

    ``allow_no_match`` and ``exclude_generated`` are tri-state: None means
    unset and the server default applies. ``exclude_generated`` travels as
    a query parameter and is never part of the document body, yet it still
    takes part in equality and hashing.
    """

    def __init__(self, *job_ids: str) -> None:
        """Initialize query.

        Args:
            job_ids: Job ids, group names or wildcard expressions.

        Raises:
            NullValueError: If any job id is None.
        """
        if any(job_id is None for job_id in job_ids):
            raise NullValueError(JOB_IDS)
        self._job_ids: List[str] = list(job_ids)
        self._allow_no_match: Optional[bool] = None
        self._exclude_generated: Optional[bool] = None

    @classmethod
    def of(cls, job_ids: Iterable[str]) -> "GetJobQuery":
        """Build a query from any iterable of job ids."""
        return cls(*job_ids)

    @classmethod
    def get_all_jobs_request(cls) -> "GetJobQuery":
        """Build a query that explicitly selects every job via ``_all``."""
        return cls(ALL_JOBS)

    @classmethod
    def from_document(cls, document: Document) -> "GetJobQuery":
        """Parse a query from its document form."""
        return PARSER.parse(document)

    @property
    def job_ids(self) -> List[str]:
        """Job ids to fetch configuration for."""
        return list(self._job_ids)

    @property
    def allow_no_match(self) -> Optional[bool]:
        """Whether a wildcard or ``_all`` matching no jobs is tolerated.

        When False the server returns an error for an empty match.
        """
        return self._allow_no_match

    @allow_no_match.setter
    def allow_no_match(self, value: bool) -> None:
        """Set allow_no_match; only a bool is accepted."""
        self._allow_no_match = _require_bool(ALLOW_NO_MATCH, value)

    @property
    def exclude_generated(self) -> Optional[bool]:
        """Whether server-generated fields are stripped from the returned configs.

        Useful when copying a configuration into another cluster.
        """
        return self._exclude_generated

    @exclude_generated.setter
    def exclude_generated(self, value: bool) -> None:
        """Set exclude_generated; only a bool is accepted."""
        self._exclude_generated = _require_bool(EXCLUDE_GENERATED, value)

    def to_document(self) -> Document:
        """Serialize the query body.

        ``job_ids`` is emitted only when non-empty and ``allow_no_match`` only
        when set. ``exclude_generated`` is never emitted.
        """
        document: Document = {}
        if self._job_ids:
            document[JOB_IDS] = list(self._job_ids)
        if self._allow_no_match is not None:
            document[ALLOW_NO_MATCH] = self._allow_no_match
        return document

    def __eq__(self, other: Any) -> bool:
        """Compare job ids and both flags, exclude_generated included."""
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return NotImplemented
        return (
            self._job_ids == other._job_ids
            and self._exclude_generated == other._exclude_generated
            and self._allow_no_match == other._allow_no_match
        )

    def __hash__(self) -> int:
        """Hash the same fields __eq__ compares."""
        return hash(
            (tuple(self._job_ids), self._exclude_generated, self._allow_no_match)
        )

    def __repr__(self) -> str:
        """Show job ids and both flags."""
        return (
            f"GetJobQuery(job_ids={self._job_ids!r}, "
            f"allow_no_match={self._allow_no_match!r}, "
            f"exclude_generated={self._exclude_generated!r})"
        )


def _set_allow_no_match(query: GetJobQuery, value: bool) -> None:
    query.allow_no_match = value


PARSER: ObjectParser[GetJobQuery] = ObjectParser(
    name="get_job_request",
    constructor=lambda job_ids: GetJobQuery.of(job_ids or []),
    bindings=(
        optional_constructor_arg(JOB_IDS, FieldShape.STRING_ARRAY),
        optional_field(ALLOW_NO_MATCH, FieldShape.BOOLEAN, _set_allow_no_match),
    ),
    ignore_unknown_fields=True,
)
