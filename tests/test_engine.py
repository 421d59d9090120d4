# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""Tests for the serialization engine (to_value, serialize, serialize_many)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

import pytest

from serializers import (
    MaxDepthExceeded,
    OutputFormat,
    RenderConfig,
    ScalarEncodingError,
    serialize,
    serialize_many,
    to_value,
    to_values,
)


@dataclass
class Country:
    id: int


@dataclass
class User:
    id: int
    name: str = "anon"
    country: Country = field(default_factory=lambda: Country(1))
    friends: list[User] = field(default_factory=list)
    score: float = 0.0


def serialize_country(country, b):
    b.attr("id", country.id)


def serialize_user(user, b):
    b.attr("id", user.id)
    b.attr("name", user.name)
    b.has_one("country", user.country, serialize_country)
    b.has_many("friends", user.friends, serialize_user)


def serialize_friend_ids(user, b):
    b.attr("id", user.id)
    b.has_many("friends", user.friends, serialize_friend_ids)


@dataclass
class Node:
    n: int
    next: Node | None = None


def serialize_node(node, b):
    b.attr("n", node.n)
    if node.next is not None:
        b.has_one("next", node.next, serialize_node)


class CallableSerializer:
    """Serializer implemented as an object with __call__."""

    def __init__(self, key):
        self.key = key

    def __call__(self, user, b):
        b.attr(self.key, user.id)


@pytest.fixture
def bob():
    denmark = Country(id=1)
    return User(
        id=1,
        name="Bob",
        country=denmark,
        friends=[User(id=2, name="Alice", country=denmark)],
    )


# ---------------------------------------------------------------------------
# to_value
# ---------------------------------------------------------------------------

class TestToValue:

    def test_scalar_only_keys_match(self):
        value = to_value(lambda u, b: b.attr("id", u.id).attr("name", u.name), User(id=7, name="Eve"))
        assert value == {"id": 7, "name": "Eve"}

    def test_nested(self, bob):
        assert to_value(serialize_user, bob) == {
            "id": 1,
            "name": "Bob",
            "country": {"id": 1},
            "friends": [
                {"id": 2, "name": "Alice", "country": {"id": 1}, "friends": []},
            ],
        }

    def test_self_reference_matches_manual_nesting(self):
        user = User(id=1, friends=[User(id=2)])
        assert to_value(serialize_friend_ids, user) == {
            "id": 1,
            "friends": [{"id": 2, "friends": []}],
        }

    def test_renamed_key_keeps_value(self):
        value = to_value(lambda u, b: b.attr("identifier", u.id), User(id=1))
        assert value == {"identifier": 1}

    def test_callable_object(self, bob):
        assert to_value(CallableSerializer("uid"), bob) == {"uid": 1}

    def test_bound_method(self, bob):
        class Shapes:
            def short(self, user, b):
                b.attr("id", user.id)

        assert to_value(Shapes().short, bob) == {"id": 1}

    def test_wrapper_overrides_key(self, bob):
        def serialize_user_redacted(user, b):
            serialize_user(user, b)
            b.attr("name", "***")

        value = to_value(serialize_user_redacted, bob)
        assert value["name"] == "***"
        assert value["friends"][0]["name"] == "Alice"

    def test_same_serializer_for_root_and_nested(self, bob):
        assert to_value(serialize_country, bob.country) == to_value(serialize_user, bob)["country"]

    def test_non_callable_rejected(self, bob):
        with pytest.raises(TypeError):
            to_value(None, bob)

    def test_fresh_result_each_call(self, bob):
        first = to_value(serialize_user, bob)
        first["id"] = 100
        assert to_value(serialize_user, bob)["id"] == 1

    @pytest.mark.parametrize("max_depth", [-1, -5])
    def test_negative_max_depth_rejected(self, bob, max_depth):
        with pytest.raises(ValueError, match="max_depth must be >= 0"):
            to_value(serialize_user, bob, max_depth=max_depth)

    def test_deep_acyclic_chain(self):
        # 300 levels of has_one on a linked chain of nodes
        node = None
        for i in range(300):
            node = Node(i, node)
        value = to_value(serialize_node, node)
        depth = 0
        while "next" in value:
            value = value["next"]
            depth += 1
        assert depth == 299
        assert value == {"n": 0}


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------

class TestSerialize:

    def test_keys_sorted(self, bob):
        assert serialize(serialize_user, bob) == (
            '{"country":{"id":1},"friends":[{"country":{"id":1},"friends":[],'
            '"id":2,"name":"Alice"}],"id":1,"name":"Bob"}'
        )

    def test_parses_back(self, bob):
        assert json.loads(serialize(serialize_user, bob)) == to_value(serialize_user, bob)

    def test_pretty(self, bob):
        out = serialize(serialize_country, bob.country, RenderConfig(format=OutputFormat.JSON_PRETTY))
        assert out == '{\n  "id": 1\n}'

    def test_max_depth_from_config(self, bob):
        with pytest.raises(MaxDepthExceeded):
            serialize(serialize_user, bob, RenderConfig(max_depth=1))

    def test_max_depth_allows_shallow_graph(self, bob):
        out = serialize(serialize_user, bob, RenderConfig(max_depth=2))
        assert json.loads(out)["friends"][0]["name"] == "Alice"


# ---------------------------------------------------------------------------
# serialize_many
# ---------------------------------------------------------------------------

class TestSerializeMany:

    def test_single_array(self):
        x, y = User(id=1), User(id=2)
        out = serialize_many(serialize_friend_ids, [x, y])
        data = json.loads(out)
        assert data == [to_value(serialize_friend_ids, x), to_value(serialize_friend_ids, y)]

    def test_not_concatenated_documents(self):
        out = serialize_many(serialize_country, [Country(1), Country(2)])
        assert out == '[{"id":1},{"id":2}]'

    def test_empty(self):
        assert serialize_many(serialize_country, []) == "[]"

    def test_accepts_generator(self):
        out = serialize_many(serialize_country, (Country(i) for i in range(3)))
        assert json.loads(out) == [{"id": 0}, {"id": 1}, {"id": 2}]

    def test_to_values(self):
        assert to_values(serialize_country, [Country(3)]) == [{"id": 3}]

    def test_to_values_negative_max_depth_rejected(self):
        with pytest.raises(ValueError, match="max_depth must be >= 0"):
            to_values(serialize_country, [], max_depth=-1)

    @pytest.mark.parametrize("values", ["ab", b"ab", {"x": 1}])
    def test_rejects_non_sequences(self, values):
        with pytest.raises(TypeError, match="serialize_many expects an iterable of values"):
            serialize_many(lambda v, b: b.attr("v", v), values)


# ---------------------------------------------------------------------------
# Failure behaviour
# ---------------------------------------------------------------------------

def serialize_scored(user, b):
    b.attr("id", user.id)
    b.attr("score", user.score)
    b.has_many("friends", user.friends, serialize_scored)


class TestFailures:

    def test_deep_failure_aborts_whole_call(self):
        user = User(id=1, friends=[User(id=2), User(id=3, score=float("nan"))])
        with pytest.raises(ScalarEncodingError) as info:
            serialize(serialize_scored, user)
        assert info.value.path == ("friends", 1, "score")

    def test_failure_in_serialize_many_reports_root_index(self):
        users = [User(id=1), User(id=2, score=float("inf"))]
        with pytest.raises(ScalarEncodingError) as info:
            serialize_many(serialize_scored, users)
        assert info.value.path == (1, "score")
        assert str(info.value).startswith("[1].score: ")

    def test_unknown_type_fails(self):
        with pytest.raises(ScalarEncodingError, match="not JSON serializable"):
            to_value(lambda v, b: b.attr("thing", object()), None)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_value(lambda v, b: b.attr("x", float("nan")), None)

    def test_serializer_exception_propagates(self):
        def broken(user, b):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            serialize(broken, User(id=1))

    def test_cycle_exhausts_recursion(self):
        a = User(id=1)
        b = User(id=2, friends=[a])
        a.friends.append(b)
        with pytest.raises(RecursionError):
            serialize(serialize_friend_ids, a)

    def test_cycle_with_max_depth(self):
        a = User(id=1)
        a.friends.append(a)
        with pytest.raises(MaxDepthExceeded) as info:
            serialize(serialize_friend_ids, a, RenderConfig(max_depth=5))
        assert info.value.max_depth == 5


class TestLogging:

    def test_debug_record_on_root_call(self, caplog, bob):
        with caplog.at_level(logging.DEBUG, logger="serializers"):
            to_value(serialize_user, bob)
        assert any("serialize_user" in r.getMessage() for r in caplog.records)

    def test_debug_record_on_abort(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="serializers"):
            with pytest.raises(ScalarEncodingError):
                to_value(serialize_scored, User(id=1, score=float("nan")))
        assert any("aborted" in r.getMessage() for r in caplog.records)
