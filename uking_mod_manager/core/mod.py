"""Mod data model."""
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


@dataclass(frozen=True)
class ModOption:
    """A single selectable option inside an option group."""

    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModOption":
        return cls(name=data["name"], description=data.get("description", ""))


@dataclass(frozen=True)
class OptionGroup:
    """A named group of mod options."""

    name: str
    description: str = ""
    options: Tuple[ModOption, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OptionGroup":
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            options=tuple(ModOption.from_dict(opt) for opt in data.get("options", [])),
        )


@dataclass(frozen=True)
class ModMeta:
    """Descriptive metadata shipped with a mod."""

    name: str
    version: Union[str, float] = "1.0"
    category: str = "Other"
    author: str = "Unknown"
    description: str = ""
    url: Optional[str] = None
    option_groups: Tuple[OptionGroup, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "option_groups", tuple(self.option_groups))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModMeta":
        return cls(
            name=data["name"],
            version=data.get("version", "1.0"),
            category=data.get("category", "Other"),
            author=data.get("author", "Unknown"),
            description=data.get("description", ""),
            url=data.get("url") or None,
            option_groups=tuple(OptionGroup.from_dict(g) for g in data.get("option_groups", [])),
        )


@dataclass(frozen=True)
class Mod:
    """Represents an installed mod.

    The content hash is the mod's identity. Its position in the load order
    is not stored here; it is the mod's index in the controller's list.
    """

    hash: str
    meta: ModMeta
    enabled: bool = False
    enabled_options: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "enabled_options", tuple(self.enabled_options))

    @property
    def name(self) -> str:
        return self.meta.name

    @property
    def all_options(self) -> List[str]:
        """Names of every option across all groups."""
        return [opt.name for group in self.meta.option_groups for opt in group.options]

    def with_enabled(self, enabled: bool) -> "Mod":
        """Return a copy with the enabled flag set."""
        return replace(self, enabled=enabled)

    def with_options(self, names: Iterable[str]) -> "Mod":
        """Return a copy with a new enabled option list."""
        return replace(self, enabled_options=tuple(names))

    def state_eq(self, other: "Mod") -> bool:
        """Check whether two mods share enabled state and option selection."""
        return (
            self.enabled == other.enabled
            and set(self.enabled_options) == set(other.enabled_options)
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"Mod({self.meta.name}#{self.hash[:8]})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mod":
        """Build a mod from the catalog's JSON shape."""
        return cls(
            hash=str(data["hash"]),
            meta=ModMeta.from_dict(data["meta"]),
            enabled=bool(data.get("enabled", False)),
            enabled_options=tuple(data.get("enabled_options", [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hash": self.hash,
            "enabled": self.enabled,
            "enabled_options": list(self.enabled_options),
            "meta": {
                "name": self.meta.name,
                "version": self.meta.version,
                "category": self.meta.category,
                "author": self.meta.author,
                "description": self.meta.description,
                "url": self.meta.url,
                "option_groups": [
                    {
                        "name": group.name,
                        "description": group.description,
                        "options": [
                            {"name": opt.name, "description": opt.description}
                            for opt in group.options
                        ],
                    }
                    for group in self.meta.option_groups
                ],
            },
        }


@dataclass(frozen=True)
class Profile:
    """A named mod arrangement kept by the catalog host."""

    name: str


@dataclass(frozen=True)
class LogRecord:
    """One entry of the activity log."""

    timestamp: str
    level: str
    message: str

    def __str__(self) -> str:
        return f"[{self.timestamp}] {self.level} {self.message}"
