"""Synthetic value records allocated by the demo procedures."""

from __future__ import annotations

from dataclasses import dataclass

from lowperf._api import RandomFactory


@dataclass
class Address:
    street: str
    city: str
    state: str
    zip_code: str


@dataclass
class UserRecord:
    name: str
    age: int
    address: Address
    tags: list[str]


class BoxedInt:
    """Heap wrapper around an int, mirroring a boxed integer."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def unwrap(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"BoxedInt({self.value!r})"


class BoxedFloat:
    """Heap wrapper around a float, mirroring a boxed double."""

    __slots__ = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    def unwrap(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"BoxedFloat({self.value!r})"


def make_address(index: int) -> Address:
    """Derive a fresh Address from an integer index."""
    return Address(
        street=f"Street {index}",
        city=f"City {index % 100}",
        state=f"State {index % 50}",
        zip_code=f"{index % 100_000:05d}",
    )


def make_tags(count: int, rng_factory: RandomFactory) -> list[str]:
    # One generator per tag list, discarded on return.
    rng = rng_factory()
    tags = []
    for _ in range(count):
        tags.append("Tag" + str(rng.randrange(1000)))
    return tags
