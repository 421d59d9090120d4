# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""Two output shapes for the same User object."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from serializers import SELF, attr, declare, has_many, has_one, serialize


@dataclass
class Country:
    id: int


@dataclass
class User:
    id: int
    name: str
    country: Country
    friends: list[User] = field(default_factory=list)


serialize_country = declare("serialize_country", attr("id"), type=Country)

serialize_user = declare(
    "serialize_user",
    attr("id"),
    attr("name"),
    has_one("country", serialize_country),
    has_many("friends", SELF),
    type=User,
)


# Same type, different shape: renamed keys and no names
def serialize_user_public(user: User, b) -> None:
    b.attr("identifier", user.id)
    b.has_one("homeland", user.country, serialize_country)
    b.has_many("buddies", user.friends, serialize_user_public)


def main() -> None:
    denmark = Country(id=1)
    bob = User(
        id=1,
        name="Bob",
        country=denmark,
        friends=[User(id=2, name="Alice", country=denmark)],
    )

    out = serialize_user.serialize(bob)
    assert out == (
        '{"country":{"id":1},"friends":[{"country":{"id":1},"friends":[],'
        '"id":2,"name":"Alice"}],"id":1,"name":"Bob"}'
    )
    print(out)

    public = json.loads(serialize(serialize_user_public, bob))
    assert public == {
        "buddies": [{"buddies": [], "homeland": {"id": 1}, "identifier": 2}],
        "homeland": {"id": 1},
        "identifier": 1,
    }
    print(json.dumps(public, indent=2))


if __name__ == "__main__":
    main()
