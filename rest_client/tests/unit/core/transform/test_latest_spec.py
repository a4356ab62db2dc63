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

"""Unit tests for LatestSpec and its builder."""

import pytest

from rest_client.core.mapping import MissingFieldError, TypeMismatchError
from rest_client.core.transform import LatestSpec, LatestSpecBuilder


class TestLatestSpec:
    """Tests for LatestSpec value object."""

    def test_create(self):
        """Fields are stored as given."""
        spec = LatestSpec(unique_key=["a", "b"], sort="ts")
        assert spec.unique_key == ("a", "b")
        assert spec.sort == "ts"

    def test_immutability(self):
        """LatestSpec should be immutable."""
        spec = LatestSpec(unique_key=["a"], sort="ts")
        with pytest.raises(AttributeError):
            spec.sort = "other"

    def test_unique_key_detached_from_input(self):
        """Mutating the input list does not change the value."""
        keys = ["a"]
        spec = LatestSpec(unique_key=keys, sort="ts")
        keys.append("b")
        assert spec.unique_key == ("a",)

    def test_equality(self):
        """Specs with the same fields are equal and hash alike."""
        first = LatestSpec(unique_key=["a", "b"], sort="ts")
        second = LatestSpec(unique_key=("a", "b"), sort="ts")
        assert first == second
        assert hash(first) == hash(second)

    def test_inequality(self):
        """Key order and sort field take part in equality."""
        spec = LatestSpec(unique_key=["a", "b"], sort="ts")
        assert spec != LatestSpec(unique_key=["b", "a"], sort="ts")
        assert spec != LatestSpec(unique_key=["a", "b"], sort="other")

    def test_to_document(self):
        """Both fields are always emitted, unique_key first."""
        document = LatestSpec(unique_key=["a", "b"], sort="ts").to_document()
        assert document == {"unique_key": ["a", "b"], "sort": "ts"}
        assert list(document) == ["unique_key", "sort"]


class TestLatestSpecParsing:
    """Tests for parsing LatestSpec documents."""

    def test_parse_matches_builder(self):
        """Parsed document equals the builder's result."""
        parsed = LatestSpec.from_document({"unique_key": ["a", "b"], "sort": "ts"})
        built = LatestSpec.builder().set_unique_key("a", "b").set_sort("ts").build()
        assert parsed == built

    def test_round_trip(self):
        """Serialized spec parses back to an equal spec."""
        spec = LatestSpec(unique_key=["event.id", "host"], sort="@timestamp")
        assert LatestSpec.from_document(spec.to_document()) == spec

    def test_missing_sort(self):
        """Missing sort raises MissingFieldError."""
        with pytest.raises(MissingFieldError) as exc_info:
            LatestSpec.from_document({"unique_key": ["a"]})
        assert exc_info.value.field_name == "sort"
        assert exc_info.value.parser_name == "latest_config"

    def test_missing_unique_key(self):
        """Missing unique_key raises MissingFieldError."""
        with pytest.raises(MissingFieldError) as exc_info:
            LatestSpec.from_document({"sort": "ts"})
        assert exc_info.value.field_name == "unique_key"

    def test_unknown_field_ignored(self):
        """Extra fields alongside valid ones are ignored."""
        parsed = LatestSpec.from_document(
            {"unique_key": ["a"], "sort": "ts", "bogus": True}
        )
        assert parsed == LatestSpec(unique_key=["a"], sort="ts")

    def test_sort_must_be_string(self):
        """A list for sort is a shape mismatch."""
        with pytest.raises(TypeMismatchError):
            LatestSpec.from_document({"unique_key": ["a"], "sort": ["ts"]})


class TestLatestSpecBuilder:
    """Tests for LatestSpecBuilder."""

    def test_builder_returns_builder(self):
        """builder() returns a fresh staging object."""
        assert isinstance(LatestSpec.builder(), LatestSpecBuilder)

    def test_set_unique_key_from_list(self):
        """A single list argument is accepted."""
        spec = LatestSpec.builder().set_unique_key(["a", "b"]).set_sort("ts").build()
        assert spec.unique_key == ("a", "b")

    def test_set_unique_key_overwrites(self):
        """A second call replaces the first."""
        spec = (
            LatestSpec.builder()
            .set_unique_key("a", "b")
            .set_unique_key("c")
            .set_sort("ts")
            .build()
        )
        assert spec.unique_key == ("c",)

    def test_set_sort_overwrites(self):
        """Last sort wins."""
        spec = LatestSpec.builder().set_unique_key("a").set_sort("x").set_sort("y").build()
        assert spec.sort == "y"

    def test_build_without_values(self):
        """The builder does not validate; unset fields stay None."""
        spec = LatestSpec.builder().build()
        assert spec.unique_key is None
        assert spec.sort is None

    def test_build_is_repeatable(self):
        """Each build produces an equal, independent value."""
        builder = LatestSpec.builder().set_unique_key("a").set_sort("ts")
        first = builder.build()
        builder.set_sort("other")
        assert first.sort == "ts"
        assert builder.build().sort == "other"
