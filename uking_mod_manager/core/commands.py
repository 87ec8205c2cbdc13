"""Intent messages the views send to the state controller."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Toggle:
    mod_hash: str


@dataclass(frozen=True)
class Reorder:
    indices: Tuple[int, ...]
    target: int


@dataclass(frozen=True)
class Select:
    index: Optional[int]


@dataclass(frozen=True)
class SelectAlso:
    index: int


@dataclass(frozen=True)
class Deselect:
    index: int


@dataclass(frozen=True)
class ClearSelection:
    pass


@dataclass(frozen=True)
class MoveSelected:
    target: int


@dataclass(frozen=True)
class SetOptions:
    mod_hash: str
    options: Tuple[str, ...]


@dataclass(frozen=True)
class Apply:
    pass


@dataclass(frozen=True)
class Reload:
    pass


Command = Union[
    Toggle,
    Reorder,
    Select,
    SelectAlso,
    Deselect,
    ClearSelection,
    MoveSelected,
    SetOptions,
    Apply,
    Reload,
]
