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

"""Field shapes and bindings used to declare document layouts.

All bindings are immutable so a binding table can be built once and
shared by every parse call.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class FieldShape(str, Enum):
    """Value shapes a document field may hold."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING_ARRAY = "string_array"
    OBJECT_ARRAY = "object_array"

    def accepts(self, value: Any) -> bool:
        """Check whether a raw document value satisfies this shape.

        A bare string satisfies STRING_ARRAY; it is wrapped by ``coerce``.
        ``None`` never satisfies any shape.
        """
        if self is FieldShape.STRING:
            return isinstance(value, str)
        if self is FieldShape.BOOLEAN:
            return isinstance(value, bool)
        if self is FieldShape.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is FieldShape.STRING_ARRAY:
            if isinstance(value, str):
                return True
            return isinstance(value, list) and all(isinstance(item, str) for item in value)
        return isinstance(value, list) and all(isinstance(item, Mapping) for item in value)

    def coerce(self, value: Any) -> Any:
        """Convert an accepted raw value into its in-memory form."""
        if self is FieldShape.STRING_ARRAY:
            if isinstance(value, str):
                return [value]
            return list(value)
        if self is FieldShape.OBJECT_ARRAY:
            return [dict(item) for item in value]
        return value


@dataclass(frozen=True)
class FieldBinding:
    """Declares how one document field maps onto a value type.

    Bindings without a setter are constructor arguments; their position is
    their order within the parser's binding table. Bindings with a setter
    are applied to the constructed value, and only when the field is present.

    Attributes:
        name: Document field name.
        shape: Expected value shape.
        required: Whether parsing fails when the field is absent.
        setter: Optional callable ``setter(value, parsed)``.
    """

    name: str
    shape: FieldShape
    required: bool = True
    setter: Optional[Callable[[Any, Any], None]] = None

    def __post_init__(self) -> None:
        """Validate binding declaration."""
        if not self.name:
            raise ValueError("FieldBinding name cannot be empty")
        if self.required and self.setter is not None:
            raise ValueError(
                f"FieldBinding {self.name} cannot be both required and set via setter"
            )

    @property
    def is_constructor_arg(self) -> bool:
        """True if this field feeds the constructor rather than a setter."""
        return self.setter is None


def constructor_arg(name: str, shape: FieldShape) -> FieldBinding:
    """Declare a required constructor argument."""
    return FieldBinding(name=name, shape=shape, required=True)


def optional_constructor_arg(name: str, shape: FieldShape) -> FieldBinding:
    """Declare an optional constructor argument, passed as None when absent."""
    return FieldBinding(name=name, shape=shape, required=False)


def optional_field(
    name: str,
    shape: FieldShape,
    setter: Callable[[Any, Any], None],
) -> FieldBinding:
    """Declare an optional field applied through a setter after construction."""
    return FieldBinding(name=name, shape=shape, required=False, setter=setter)
