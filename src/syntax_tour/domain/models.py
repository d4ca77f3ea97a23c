"""Domain records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

BARK: Final[str] = "bark!"


@dataclass(frozen=True, slots=True)
class Dog:
    """A named-breed dog of a given age.

    Attributes:
        breed: Breed name, stored as given.
        age: Age in years; never negative.

    Example:
        >>> sparky = Dog(breed="Chihuahua", age=4)
        >>> sparky.bark()
        'bark!'
    """

    breed: str
    age: int

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")

    def bark(self) -> str:
        """Return the dog's bark."""
        return BARK


__all__ = ["BARK", "Dog"]
