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

"""Document mapping module for REST client values."""

from .document import Document, ToDocument, to_json
from .exceptions import (
    DocumentMappingError,
    MalformedDocumentError,
    MissingFieldError,
    NullValueError,
    TypeMismatchError,
    UnknownFieldError,
)
from .fields import (
    FieldBinding,
    FieldShape,
    constructor_arg,
    optional_constructor_arg,
    optional_field,
)
from .parser import ObjectParser

__all__ = [
    "Document",
    "ToDocument",
    "to_json",
    "DocumentMappingError",
    "MalformedDocumentError",
    "MissingFieldError",
    "NullValueError",
    "TypeMismatchError",
    "UnknownFieldError",
    "FieldBinding",
    "FieldShape",
    "constructor_arg",
    "optional_constructor_arg",
    "optional_field",
    "ObjectParser",
]
