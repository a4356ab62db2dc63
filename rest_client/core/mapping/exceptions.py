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

"""Exceptions raised while constructing or parsing document-mapped values."""

from typing import Optional, Sequence, Tuple


class DocumentMappingError(Exception):
    """Base exception for all document mapping errors."""

    def __init__(self, message: str, parser_name: Optional[str] = None) -> None:
        """Initialize mapping error.

        Args:
            message: Human-readable error description.
            parser_name: Name of the parser that raised the error, if any.
        """
        super().__init__(message)
        self.message = message
        self.parser_name = parser_name


class NullValueError(DocumentMappingError):
    """A collection argument contained a null element."""

    def __init__(self, argument_name: str) -> None:
        """Initialize null value error.

        Args:
            argument_name: Name of the offending constructor argument.
        """
        super().__init__(f"{argument_name} must not contain null values")
        self.argument_name = argument_name


class MissingFieldError(DocumentMappingError):
    """One or more required document fields were absent."""

    def __init__(
        self,
        parser_name: str,
        field_name: str,
        missing_fields: Sequence[str] = (),
    ) -> None:
        """Initialize missing field error.

        Args:
            parser_name: Name of the parser that ran.
            field_name: First required field that was missing.
            missing_fields: Every required field that was missing.
        """
        missing: Tuple[str, ...] = tuple(missing_fields) or (field_name,)
        super().__init__(
            f"[{parser_name}] failed to parse object: "
            f"required fields missing {list(missing)}",
            parser_name=parser_name,
        )
        self.field_name = field_name
        self.missing_fields = missing


class TypeMismatchError(DocumentMappingError):
    """A document field was present but had the wrong shape."""

    def __init__(
        self,
        parser_name: str,
        field_name: str,
        expected: str,
        actual: str,
    ) -> None:
        """Initialize type mismatch error.

        Args:
            parser_name: Name of the parser that ran.
            field_name: Field whose value had the wrong shape.
            expected: Expected shape name.
            actual: Type name of the value found.
        """
        super().__init__(
            f"[{parser_name}] field [{field_name}] expected {expected}, got {actual}",
            parser_name=parser_name,
        )
        self.field_name = field_name
        self.expected = expected
        self.actual = actual


class UnknownFieldError(DocumentMappingError):
    """A strict parser met a field it has no binding for."""

    def __init__(self, parser_name: str, field_name: str) -> None:
        """Initialize unknown field error.

        Args:
            parser_name: Name of the parser that ran.
            field_name: The unrecognized field.
        """
        super().__init__(
            f"[{parser_name}] unknown field [{field_name}]",
            parser_name=parser_name,
        )
        self.field_name = field_name


class MalformedDocumentError(DocumentMappingError):
    """Raw input could not be decoded into a document at all."""

    def __init__(self, parser_name: str, reason: str) -> None:
        """Initialize malformed document error.

        Args:
            parser_name: Name of the parser that ran.
            reason: Decoder error description.
        """
        super().__init__(
            f"[{parser_name}] malformed document: {reason}",
            parser_name=parser_name,
        )
        self.reason = reason
