# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the open-ended PropertyBag."""

from __future__ import annotations

import pytest

from sarifkit.codec import decode, encode, encode_json
from sarifkit.core.exceptions import MalformedValueError
from sarifkit.models import PropertyBag, SarifLog, SarifReportingConfiguration


class TestPropertyBag:
    def test_tags_and_custom_keys(self):
        bag = decode(PropertyBag, {"tags": ["a", "b"], "customX": 42, "customY": "z"})
        assert bag.tags == ["a", "b"]
        assert bag.additional_properties == {"customX": 42, "customY": "z"}

    def test_re_encode_reproduces_all_keys(self):
        payload = {"tags": ["a", "b"], "customX": 42, "customY": "z"}
        assert encode(decode(PropertyBag, payload)) == payload

    def test_round_trip(self):
        bag = decode(PropertyBag, {"tags": ["a"], "customX": 42})
        assert decode(PropertyBag, encode(bag)) == bag

    def test_arbitrary_json_shapes(self):
        payload = {
            "nested": {"a": [1, 2.5, {"b": None}], "c": True},
            "list": [],
            "nothing": None,
        }
        bag = decode(PropertyBag, payload)
        assert bag.additional_properties == payload
        assert bag.tags == []

    def test_empty_bag_emits_tags_only(self):
        assert encode(PropertyBag()) == {"tags": []}

    def test_constructed_with_keywords(self):
        bag = PropertyBag(tags=["security"], precision="high")
        assert encode(bag) == {"tags": ["security"], "precision": "high"}

    def test_tags_must_be_strings(self):
        with pytest.raises(MalformedValueError) as exc_info:
            decode(PropertyBag, {"tags": ["ok", 3]})
        assert exc_info.value.path == ("tags", 1)

    def test_bag_must_be_an_object(self):
        with pytest.raises(MalformedValueError):
            decode(PropertyBag, ["tags"])

    def test_key_named_properties_survives(self):
        bag = decode(PropertyBag, {"properties": None})
        assert encode(bag) == {"tags": [], "properties": None}

    def test_compact_encode_keeps_custom_keys(self):
        bag = decode(PropertyBag, {"customX": 1})
        assert encode(bag, exclude_unset=True) == {"customX": 1}

    def test_root_level_bag(self):
        log = decode(SarifLog, {
            "version": "2.1.0",
            "runs": [],
            "properties": {"tags": ["ci"], "buildNumber": 512},
        })
        assert log.properties.additional_properties["buildNumber"] == 512
        assert '"buildNumber": 512' in encode_json(log)

    def test_parameters_bag(self):
        config = decode(SarifReportingConfiguration, {"parameters": {"maxDepth": 5}})
        assert config.parameters.additional_properties == {"maxDepth": 5}
        assert encode(config)["parameters"] == {"tags": [], "maxDepth": 5}
