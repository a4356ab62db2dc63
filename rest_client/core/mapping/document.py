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

"""Structured document type and rendering helpers."""

import json
from typing import Any, Dict, Optional, Protocol

Document = Dict[str, Any]


class ToDocument(Protocol):
    """Port for values that serialize themselves into a document."""

    def to_document(self) -> Document:
        """Return the value as an ordered document.

        Returns:
            A new dict whose key order is the emission order.
        """
        ...


def to_json(value: ToDocument, indent: Optional[int] = None) -> str:
    """Render a document-mapped value as JSON text.

    Keys keep their emission order so output is deterministic.

    Args:
        value: Any object implementing ``to_document``.
        indent: Optional pretty-print indentation.

    Returns:
        JSON string.
    """
    separators = None if indent is not None else (',', ':')
    return json.dumps(value.to_document(), indent=indent, separators=separators)
