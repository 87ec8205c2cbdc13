"""Data presentation for the mod list and info panel - separated from UI logic."""
from typing import Any, Iterable, List, Optional, Tuple

from ..core import ControllerSnapshot, LogRecord, Mod
from ..utils import format_version, strip_markup


class ModListPresenter:
    """Handles formatting and drag-drop arithmetic for display."""

    # Log level colors mapping
    LEVEL_COLORS = {
        "INFO": "#4ec952",
        "WARNING": "#ffad00",
        "WARN": "#ffad00",
        "ERROR": "#d13438",
        "CRITICAL": "#d13438",
        "DEBUG": "#3a96dd",
    }
    OTHER_LEVEL_COLOR = "#e5c07b"

    @staticmethod
    def counter_text(snapshot: ControllerSnapshot) -> str:
        """Toolbar counter, e.g. '12 Mods / 9 Active'."""
        return f"{snapshot.total} Mods / {snapshot.active} Active"

    @staticmethod
    def row_values(mod: Mod) -> Tuple[str, str, str, str]:
        """Columns shown for a mod in the list: check mark, name, category, version."""
        return (
            "☑" if mod.enabled else "☐",
            mod.meta.name,
            mod.meta.category,
            format_version(mod.meta.version),
        )

    @staticmethod
    def info_rows(mod: Optional[Mod]) -> List[Tuple[str, str]]:
        """
        Rows for the info panel.

        Returns:
            List of (label, value) tuples, empty when no mod is selected
        """
        if mod is None:
            return []
        meta = mod.meta
        rows = [
            ("Name", meta.name),
            ("Version", format_version(meta.version)),
            ("Category", meta.category),
            ("Author", meta.author),
        ]
        if meta.url:
            rows.append(("Webpage", meta.url))
        rows.append(("Description", strip_markup(meta.description)))
        return rows

    @staticmethod
    def option_pills(mod: Optional[Mod]) -> List[Tuple[str, bool]]:
        """Every option of a mod with whether it is enabled."""
        if mod is None:
            return []
        enabled = set(mod.enabled_options)
        return [(name, name in enabled) for name in mod.all_options]

    @staticmethod
    def format_log_record(record: Any) -> Tuple[str, str]:
        """
        Format an activity log record for the log pane.

        Records that are not LogRecord instances are shown verbatim.

        Returns:
            Tuple of (text, level)
        """
        if isinstance(record, LogRecord):
            return f"[{record.timestamp}] {record.level} {record.message}", record.level
        return str(record), "OTHER"

    @staticmethod
    def level_color(level: str) -> str:
        return ModListPresenter.LEVEL_COLORS.get(level, ModListPresenter.OTHER_LEVEL_COLOR)

    @staticmethod
    def drop_target(marked: Iterable[int], drop_row: Optional[int], total: int) -> int:
        """
        Convert a drop position into a reorder target.

        Args:
            marked: Indices of the mods being dragged
            drop_row: Row the block is dropped in front of, None for the end
            total: Number of mods in the list

        Returns:
            Target index among the mods left after the dragged ones are removed
        """
        marked = set(marked)
        if drop_row is None or drop_row >= total:
            return total - len(marked)
        return sum(1 for i in range(max(drop_row, 0)) if i not in marked)
