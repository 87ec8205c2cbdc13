"""Mod Info panel showing metadata, preview and options of the selected mod."""
import base64
import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..core import CatalogError, Mod
from .presenter import ModListPresenter

logger = logging.getLogger(__name__)


class ModInfoView:
    """Detail panel for the focused mod."""

    BG_COLOR = "#0e0e0e"
    FG_COLOR = "#e0e0e0"
    SECONDARY_FG = "#b0b0b0"

    def __init__(self, parent: tk.Misc, load_preview: Callable[[str], Optional[bytes]]):
        """
        Initialize info panel.

        Args:
            parent: Parent notebook or frame
            load_preview: Returns preview image data for a mod hash
        """
        self.frame = ttk.Frame(parent, style="Dark.TFrame")
        self.load_preview = load_preview
        self.shown: Optional[Mod] = None
        # Keeps the PhotoImage alive while it is displayed
        self._image: Optional[tk.PhotoImage] = None

        self.body = ttk.Frame(self.frame, style="Dark.TFrame")
        self.body.pack(fill="both", expand=True, padx=10, pady=10)

    def _clear(self) -> None:
        for child in self.body.winfo_children():
            child.destroy()
        self._image = None

    def _preview_image(self, mod: Mod) -> Optional[tk.PhotoImage]:
        try:
            data = self.load_preview(mod.hash)
        except CatalogError as e:
            logger.warning(f"Could not load preview for {mod.name}: {e}")
            return None
        if not data:
            return None
        try:
            return tk.PhotoImage(data=base64.b64encode(data))
        except tk.TclError:
            logger.debug(f"Unsupported preview format for {mod.name}")
            return None

    def render(self, mod: Optional[Mod]) -> None:
        """Show a mod, or a placeholder when nothing is selected."""
        if mod is not None and self.shown is not None and mod == self.shown:
            return
        self.shown = mod
        self._clear()

        if mod is None:
            ttk.Label(self.body, text="No mod selected", style="Small.TLabel").pack(expand=True)
            return

        self._image = self._preview_image(mod)
        if self._image is not None:
            tk.Label(self.body, image=self._image, bg=self.BG_COLOR).pack(anchor="w", pady=(0, 8))

        grid = ttk.Frame(self.body, style="Dark.TFrame")
        grid.pack(fill="x")
        grid.grid_columnconfigure(1, weight=1)
        for row, (label, value) in enumerate(ModListPresenter.info_rows(mod)):
            ttk.Label(grid, text=label, style="Header.TLabel").grid(row=row, column=0, sticky="nw", padx=(0, 10), pady=2)
            ttk.Label(grid, text=value, wraplength=320, justify="left").grid(row=row, column=1, sticky="nw", pady=2)

        pills = ModListPresenter.option_pills(mod)
        if pills:
            ttk.Label(self.body, text="Options", style="Header.TLabel").pack(anchor="w", pady=(10, 4))
            pill_frame = tk.Frame(self.body, bg=self.BG_COLOR)
            pill_frame.pack(fill="x")
            for name, enabled in pills:
                tk.Label(
                    pill_frame,
                    text=name,
                    bg="#0078d4" if enabled else "#1a1a1a",
                    fg=self.FG_COLOR if enabled else self.SECONDARY_FG,
                    padx=8,
                    pady=2,
                ).pack(side="left", padx=2, pady=2)
