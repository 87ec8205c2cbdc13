"""In-memory state controller for the mod list."""
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .catalog import CatalogError, ModCatalogAPI
from .commands import (
    Apply,
    ClearSelection,
    Command,
    Deselect,
    MoveSelected,
    Reload,
    Reorder,
    Select,
    SelectAlso,
    SetOptions,
    Toggle,
)
from .log_buffer import ActivityLog
from .mod import Mod, Profile

logger = logging.getLogger(__name__)


class ControllerError(Exception):
    """Base class for rejected controller operations."""


class NotFound(ControllerError, LookupError):
    """The requested mod or option does not exist."""


class InvalidIndex(ControllerError, IndexError):
    """An index or target position is out of range, duplicated or malformed."""


@dataclass(frozen=True)
class ControllerSnapshot:
    """Read-only view of the controller state handed to the views."""

    mods: Tuple[Mod, ...]
    selected_index: Optional[int]
    marked_indices: Tuple[int, ...]
    dirty: bool
    profiles: Tuple[Profile, ...]
    current_profile: str
    log: Tuple[Any, ...]

    @property
    def selected_mod(self) -> Optional[Mod]:
        if self.selected_index is None:
            return None
        return self.mods[self.selected_index]

    @property
    def total(self) -> int:
        return len(self.mods)

    @property
    def active(self) -> int:
        return sum(1 for mod in self.mods if mod.enabled)


ModIdentity = Union[str, Mod]


class ModStateController:
    """Owns the ordered mod list, selection, dirty flag and activity log.

    Every mutation validates its input before touching state, so a rejected
    call leaves the controller exactly as it was.
    """

    def __init__(self, catalog: ModCatalogAPI, log: Optional[ActivityLog] = None):
        """
        Initialize the controller and load the catalog.

        Args:
            catalog: Catalog API providing mods, profiles and apply
            log: Activity log to append host records to

        Raises:
            CatalogError: If the catalog cannot be read or is inconsistent
        """
        self.catalog = catalog
        self.log = log if log is not None else ActivityLog()
        self._lock = threading.RLock()
        self._mods: List[Mod] = []
        self._profiles: List[Profile] = []
        self._current_profile = ""
        self._focus: Optional[str] = None
        self._marked: List[str] = []
        self._dirty = False
        # Bumped on every change apply() has to see
        self._revision = 0

        mods, profiles, current = self._fetch()
        self._install(mods, profiles, current)
        self._focus = mods[0].hash if mods else None
        self._marked = [self._focus] if self._focus is not None else []
        logger.info(f"Loaded {len(mods)} mod(s) for profile {current}")

    # Loading

    def _fetch(self) -> Tuple[List[Mod], List[Profile], str]:
        mods = list(self.catalog.list_mods())
        seen = set()
        for mod in mods:
            if mod.hash in seen:
                raise CatalogError(f"Duplicate mod hash in catalog: {mod.hash}", error_type="invalid")
            seen.add(mod.hash)

        profiles = list(self.catalog.list_profiles())
        current = self.catalog.current_profile_name()
        if current not in {p.name for p in profiles}:
            logger.warning(f"Current profile {current!r} is not in the profile list, adding it")
            profiles.append(Profile(current))
        return mods, profiles, current

    def _install(self, mods: List[Mod], profiles: List[Profile], current: str) -> None:
        self._mods = mods
        self._profiles = profiles
        self._current_profile = current
        self._dirty = False
        self._revision += 1

    def reload(self) -> None:
        """Re-read the catalog and discard unapplied changes."""
        mods, profiles, current = self._fetch()
        with self._lock:
            hashes = {mod.hash for mod in mods}
            self._install(mods, profiles, current)
            self._marked = [h for h in self._marked if h in hashes]
            if self._focus not in hashes:
                self._focus = mods[0].hash if mods else None
                self._marked = [self._focus] if self._focus is not None else []
        logger.info(f"Reloaded {len(mods)} mod(s) for profile {current}")

    # Lookups

    def _position(self, mod_hash: str) -> int:
        for i, mod in enumerate(self._mods):
            if mod.hash == mod_hash:
                return i
        raise NotFound(f"No mod with hash {mod_hash}")

    def _check_index(self, index: Any) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndex(f"Index must be an integer, got {index!r}")
        if not 0 <= index < len(self._mods):
            raise InvalidIndex(f"Index {index} out of range for {len(self._mods)} mod(s)")
        return index

    @staticmethod
    def _identity(identity: ModIdentity) -> str:
        return identity.hash if isinstance(identity, Mod) else identity

    def snapshot(self) -> ControllerSnapshot:
        """Return the current state as an immutable snapshot."""
        with self._lock:
            positions: Dict[str, int] = {mod.hash: i for i, mod in enumerate(self._mods)}
            return ControllerSnapshot(
                mods=tuple(self._mods),
                selected_index=positions.get(self._focus) if self._focus is not None else None,
                marked_indices=tuple(sorted(positions[h] for h in self._marked if h in positions)),
                dirty=self._dirty,
                profiles=tuple(self._profiles),
                current_profile=self._current_profile,
                log=self.log.records(),
            )

    @property
    def dirty(self) -> bool:
        with self._lock:
            return self._dirty

    # Mutations

    def toggle(self, identity: ModIdentity) -> Mod:
        """
        Flip a mod's enabled flag.

        Args:
            identity: Mod hash or a Mod taken from a snapshot

        Returns:
            The updated mod

        Raises:
            NotFound: If no mod has that hash
        """
        with self._lock:
            pos = self._position(self._identity(identity))
            mod = self._mods[pos]
            updated = mod.with_enabled(not mod.enabled)
            self._mods[pos] = updated
            self._dirty = True
            self._revision += 1
        logger.debug(f"{'Enabled' if updated.enabled else 'Disabled'} {updated.name}")
        return updated

    def reorder(self, selected_indices: Iterable[int], target_index: int) -> None:
        """
        Move a block of mods to a new position.

        The moved mods keep their original relative order whatever order the
        indices are given in. `target_index` counts positions among the mods
        left after the block is taken out: 0 is the front and the number of
        remaining mods is the end.

        Raises:
            InvalidIndex: On an empty, out-of-range or duplicated selection,
                or a target outside the remaining list
        """
        with self._lock:
            indices = [self._check_index(i) for i in selected_indices]
            if not indices:
                raise InvalidIndex("No mods selected to move")
            chosen = set(indices)
            if len(chosen) != len(indices):
                raise InvalidIndex(f"Duplicate indices in selection {indices}")
            remaining_count = len(self._mods) - len(chosen)
            if isinstance(target_index, bool) or not isinstance(target_index, int):
                raise InvalidIndex(f"Target must be an integer, got {target_index!r}")
            if not 0 <= target_index <= remaining_count:
                raise InvalidIndex(f"Target {target_index} out of range for {remaining_count} remaining mod(s)")

            block = [mod for i, mod in enumerate(self._mods) if i in chosen]
            remaining = [mod for i, mod in enumerate(self._mods) if i not in chosen]
            self._mods = remaining[:target_index] + block + remaining[target_index:]
            self._dirty = True
            self._revision += 1
        logger.debug(f"Moved {len(block)} mod(s) to position {target_index}")

    def select(self, index: Optional[int]) -> None:
        """
        Focus a single mod, or clear the selection with None.

        Raises:
            InvalidIndex: If the index is out of range
        """
        with self._lock:
            if index is None:
                self._focus = None
                self._marked = []
                return
            mod = self._mods[self._check_index(index)]
            self._focus = mod.hash
            self._marked = [mod.hash]

    def select_also(self, index: int) -> None:
        """Add a mod to the multi-selection."""
        with self._lock:
            mod = self._mods[self._check_index(index)]
            if mod.hash not in self._marked:
                self._marked.append(mod.hash)
            if self._focus is None:
                self._focus = mod.hash

    def deselect(self, index: int) -> None:
        """Remove a mod from the multi-selection."""
        with self._lock:
            mod = self._mods[self._check_index(index)]
            if mod.hash in self._marked:
                self._marked.remove(mod.hash)
            if self._focus == mod.hash:
                self._focus = self._marked[0] if self._marked else None

    def clear_selection(self) -> None:
        with self._lock:
            self._focus = None
            self._marked = []

    def move_selected(self, target_index: int) -> None:
        """
        Move every selected mod as one block.

        Raises:
            InvalidIndex: If nothing is selected or the target is out of range
        """
        with self._lock:
            if not self._marked:
                raise InvalidIndex("No mods selected to move")
            positions = {mod.hash: i for i, mod in enumerate(self._mods)}
            self.reorder([positions[h] for h in self._marked], target_index)

    def set_enabled_options(self, identity: ModIdentity, names: Iterable[str]) -> Mod:
        """
        Replace the enabled options of a mod.

        Raises:
            NotFound: If the mod or one of the option names does not exist
        """
        with self._lock:
            pos = self._position(self._identity(identity))
            mod = self._mods[pos]
            wanted = list(dict.fromkeys(names))
            unknown = [name for name in wanted if name not in mod.all_options]
            if unknown:
                raise NotFound(f"{mod.name} has no option(s) {', '.join(unknown)}")
            updated = mod.with_options(wanted)
            if updated.state_eq(mod):
                return mod
            self._mods[pos] = updated
            self._dirty = True
            self._revision += 1
        logger.debug(f"Updated options on {updated.name}")
        return updated

    def apply(self) -> None:
        """
        Hand the current arrangement to the catalog and clear the dirty flag.

        The flag stays set if the list changed while the catalog was busy.

        Raises:
            CatalogError: If the catalog rejects the arrangement
        """
        with self._lock:
            mods = list(self._mods)
            revision = self._revision
        logger.info("Applying pending changes to mod configuration")
        self.catalog.apply(mods)
        with self._lock:
            if self._revision == revision:
                self._dirty = False
            else:
                logger.info("Mod list changed while applying, changes still pending")
        logger.info("Done")

    def append_log(self, record: Any) -> None:
        """Append a host log record. Never fails."""
        self.log.append(record)

    def dispatch(self, command: Command) -> None:
        """Route a command message to the matching operation."""
        if isinstance(command, Toggle):
            self.toggle(command.mod_hash)
        elif isinstance(command, Reorder):
            self.reorder(command.indices, command.target)
        elif isinstance(command, Select):
            self.select(command.index)
        elif isinstance(command, SelectAlso):
            self.select_also(command.index)
        elif isinstance(command, Deselect):
            self.deselect(command.index)
        elif isinstance(command, ClearSelection):
            self.clear_selection()
        elif isinstance(command, MoveSelected):
            self.move_selected(command.target)
        elif isinstance(command, SetOptions):
            self.set_enabled_options(command.mod_hash, command.options)
        elif isinstance(command, Apply):
            self.apply()
        elif isinstance(command, Reload):
            self.reload()
        else:
            raise TypeError(f"Unknown command: {command!r}")
