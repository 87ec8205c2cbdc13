"""Mod list widget: load order, enable checkboxes and drag-to-reorder."""
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..core import ControllerSnapshot
from ..core.commands import Command, Deselect, MoveSelected, Select, SelectAlso, Toggle
from .presenter import ModListPresenter


class ModListView:
    """Renders the ordered mod list and emits commands for user actions."""

    COLUMNS = ("enabled", "name", "category", "version")

    def __init__(self, parent: tk.Misc, emit: Callable[[Command], None]):
        """
        Initialize mod list.

        Args:
            parent: Parent widget
            emit: Callback receiving command messages
        """
        self.frame = ttk.Frame(parent, style="Dark.TFrame")
        self.emit = emit
        self.snapshot: Optional[ControllerSnapshot] = None
        self._drag_start: Optional[int] = None
        self._dragging = False

        scrollbar = ttk.Scrollbar(self.frame)
        scrollbar.pack(side="right", fill="y")

        self.tree = ttk.Treeview(
            self.frame,
            columns=self.COLUMNS,
            show="headings",
            selectmode="none",
            style="Dark.Treeview",
            yscrollcommand=scrollbar.set,
        )
        self.tree.heading("enabled", text="")
        self.tree.heading("name", text="Name")
        self.tree.heading("category", text="Category")
        self.tree.heading("version", text="Version")
        self.tree.column("enabled", width=32, stretch=False, anchor="center")
        self.tree.column("name", width=320)
        self.tree.column("category", width=120)
        self.tree.column("version", width=70, stretch=False, anchor="e")
        self.tree.tag_configure("disabled", foreground="#808080")
        self.tree.tag_configure("marked", background="#0078d4")
        self.tree.pack(side="left", fill="both", expand=True)
        scrollbar.config(command=self.tree.yview)

        self.tree.bind("<ButtonPress-1>", self._on_press)
        self.tree.bind("<B1-Motion>", self._on_motion)
        self.tree.bind("<ButtonRelease-1>", self._on_release)
        self.tree.bind("<Control-ButtonPress-1>", self._on_ctrl_press)
        self.tree.bind("<space>", self._on_space)

    def render(self, snapshot: ControllerSnapshot) -> None:
        """Redraw rows from a snapshot."""
        self.snapshot = snapshot
        self.tree.delete(*self.tree.get_children())
        marked = set(snapshot.marked_indices)
        for i, mod in enumerate(snapshot.mods):
            tags = []
            if not mod.enabled:
                tags.append("disabled")
            if i in marked:
                tags.append("marked")
            self.tree.insert("", "end", iid=str(i), values=ModListPresenter.row_values(mod), tags=tags)
        if snapshot.selected_index is not None:
            self.tree.see(str(snapshot.selected_index))

    def _row_at(self, y: int) -> Optional[int]:
        iid = self.tree.identify_row(y)
        return int(iid) if iid else None

    def _on_press(self, event: tk.Event) -> str:
        row = self._row_at(event.y)
        self._drag_start = row
        self._dragging = False
        if row is None:
            self.emit(Select(None))
            return "break"
        if self.tree.identify_column(event.x) == "#1":
            self.emit(Toggle(self.snapshot.mods[row].hash))
            return "break"
        # Pressing inside the current selection keeps it so it can be dragged
        if self.snapshot is None or row not in self.snapshot.marked_indices:
            self.emit(Select(row))
        return "break"

    def _on_ctrl_press(self, event: tk.Event) -> str:
        row = self._row_at(event.y)
        if row is None:
            return "break"
        if self.snapshot is not None and row in self.snapshot.marked_indices:
            self.emit(Deselect(row))
        else:
            self.emit(SelectAlso(row))
        return "break"

    def _on_motion(self, event: tk.Event) -> None:
        if self._drag_start is not None:
            self._dragging = True
            self.tree.configure(cursor="fleur")

    def _on_release(self, event: tk.Event) -> None:
        self.tree.configure(cursor="")
        if not self._dragging or self.snapshot is None:
            if self._drag_start is not None and not self._dragging:
                self.emit(Select(self._drag_start))
            self._drag_start = None
            return
        self._dragging = False
        self._drag_start = None

        row = self._row_at(event.y)
        if row is not None:
            # Drop below the row's midpoint inserts after it
            _, top, _, height = self.tree.bbox(str(row))
            if event.y > top + height / 2:
                row += 1
        target = ModListPresenter.drop_target(self.snapshot.marked_indices, row, self.snapshot.total)
        self.emit(MoveSelected(target))

    def _on_space(self, event: tk.Event) -> str:
        if self.snapshot is not None and self.snapshot.selected_mod is not None:
            self.emit(Toggle(self.snapshot.selected_mod.hash))
        return "break"
