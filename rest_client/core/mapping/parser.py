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

"""Declarative parser that builds values from structured documents.

A parser is a binding table: an ordered tuple of FieldBinding entries plus
a constructor. Parsers are frozen and hold no per-call state, so a single
instance is created per value type at import time and reused everywhere,
including from concurrent threads.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Tuple, TypeVar

from .exceptions import (
    MalformedDocumentError,
    MissingFieldError,
    TypeMismatchError,
    UnknownFieldError,
)
from .fields import FieldBinding

logger = logging.getLogger(__name__)

T = TypeVar("T")

ROOT_FIELD = "<root>"


@dataclass(frozen=True)
class ObjectParser(Generic[T]):
    """Immutable field-binding table for one value type.

    Attributes:
        name: Parser name used in error messages.
        constructor: Called with one positional argument per constructor
            binding, in declaration order.
        bindings: Ordered field bindings.
        ignore_unknown_fields: Skip unrecognized fields instead of failing.
    """

    name: str
    constructor: Callable[..., T]
    bindings: Tuple[FieldBinding, ...]
    ignore_unknown_fields: bool = True
    _index: Mapping = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze bindings and build the name index."""
        bindings = tuple(self.bindings)
        index: Dict[str, FieldBinding] = {}
        for binding in bindings:
            if binding.name in index:
                raise ValueError(
                    f"Parser {self.name} declares field {binding.name} more than once"
                )
            index[binding.name] = binding
        object.__setattr__(self, "bindings", bindings)
        object.__setattr__(self, "_index", MappingProxyType(index))

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Declared field names in table order."""
        return tuple(binding.name for binding in self.bindings)

    def parse(self, document: Any) -> T:
        """Build a value from a structured document.

        Args:
            document: Mapping of field name to raw value.

        Returns:
            The constructed value.

        Raises:
            TypeMismatchError: If the document or a field has the wrong shape.
            UnknownFieldError: If strict and an unrecognized field is present.
            MissingFieldError: If required fields are absent.
        """
        if not isinstance(document, Mapping):
            raise TypeMismatchError(
                self.name, ROOT_FIELD, "object", type(document).__name__
            )

        parsed = self._read_fields(document)
        self._check_required(parsed)

        args = [
            parsed.get(binding.name)
            for binding in self.bindings
            if binding.is_constructor_arg
        ]
        value = self.constructor(*args)

        for binding in self.bindings:
            if not binding.is_constructor_arg and binding.name in parsed:
                binding.setter(value, parsed[binding.name])
        return value

    def parse_json(self, text: str) -> T:
        """Decode JSON text and parse the resulting document.

        Raises:
            MalformedDocumentError: If the text is not valid JSON.
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(self.name, str(exc)) from exc
        return self.parse(document)

    def _read_fields(self, document: Mapping) -> Dict[str, Any]:
        """Validate and coerce every recognized field of the document."""
        parsed: Dict[str, Any] = {}
        for key, raw in document.items():
            binding = self._index.get(key)
            if binding is None:
                if not self.ignore_unknown_fields:
                    raise UnknownFieldError(self.name, key)
                logger.debug("Parser %s ignoring unknown field %s", self.name, key)
                continue
            if not binding.shape.accepts(raw):
                raise TypeMismatchError(
                    self.name, key, binding.shape.value, type(raw).__name__
                )
            parsed[key] = binding.shape.coerce(raw)
        return parsed

    def _check_required(self, parsed: Dict[str, Any]) -> None:
        """Raise if any required field was not read."""
        missing: List[str] = [
            binding.name
            for binding in self.bindings
            if binding.required and binding.name not in parsed
        ]
        if missing:
            raise MissingFieldError(self.name, missing[0], missing)
