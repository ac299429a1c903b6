from dataclasses import dataclass

NAME_MAX_LENGTH = 255
COLOR_MAX_LENGTH = 100
# Measurements are stored in 32-bit integer columns.
MEASUREMENT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Dog:
    """A catalog entry. `name` is the natural key."""

    name: str
    color: str
    tail_length: int
    weight: int
