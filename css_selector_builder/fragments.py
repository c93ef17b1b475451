from enum import Enum
from dataclasses import dataclass


class FragmentKind(Enum):
    ELEMENT = ("element", 1, "", "")
    ID = ("id", 2, "#", "")
    CLASS = ("class", 3, ".", "")
    ATTRIBUTE = ("attribute", 4, "[", "]")
    PSEUDO_CLASS = ("pseudo-class", 5, ":", "")
    PSEUDO_ELEMENT = ("pseudo-element", 6, "::", "")

    def __init__(self, label: str, rank: int, prefix: str, suffix: str):
        self.label = label
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix

    def format(self, value: str) -> str:
        """Wrap a raw value in this kind's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"


@dataclass(frozen=True)
class SelectorFragment:
    kind: FragmentKind
    text: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    @classmethod
    def from_value(cls, kind: FragmentKind, value: str) -> "SelectorFragment":
        return cls(kind=kind, text=kind.format(value))
