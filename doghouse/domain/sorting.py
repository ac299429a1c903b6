from enum import Enum


class SortAttribute(str, Enum):
    name = "name"
    color = "color"
    tail_length = "tailLength"
    weight = "weight"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"
