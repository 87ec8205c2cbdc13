"""Main application window."""
import logging
import tkinter as tk
from tkinter import ttk, font
from queue import Queue
from threading import Thread
from typing import Optional

from ..core import CatalogError, ControllerError, ModStateController
from ..core.commands import Apply, Command, Reload
from ..utils import Config
from .log_view import LogView
from .mod_info import ModInfoView
from .mod_list import ModListView
from .presenter import ModListPresenter


class MainWindow:
    """Main application window."""

    # Color scheme
    BG_COLOR = "#0e0e0e"
    DARK_BG = "#1a1a1a"
    ACCENT_COLOR = "#0078d4"
    ACCENT_HOVER = "#1084d7"
    FG_COLOR = "#e0e0e0"
    SECONDARY_FG = "#b0b0b0"
    SUCCESS_COLOR = "#4ec952"
    ERROR_COLOR = "#d13438"
    DIRTY_BG = "#3a2f1a"

    def __init__(self, root: tk.Tk, controller: ModStateController, config: Config, log_queue: Queue):
        """
        Initialize main window.

        Args:
            root: Root Tkinter window
            controller: State controller the window renders
            config: Application configuration
            log_queue: Queue for receiving log records
        """
        self.root = root
        self.root.title("U-King Mod Manager")
        self.root.geometry(config.get("geometry", "1100x750"))
        self.root.minsize(900, 600)
        self.controller = controller
        self.config = config
        self.logger = logging.getLogger("uking_mod_manager")
        self.busy = False

        self.root.configure(bg=self.BG_COLOR)
        self._setup_styles()
        self._create_menu()
        self._create_status_bar()

        # Mod list and log on the left, info tabs on the right
        panes = ttk.PanedWindow(self.root, orient="horizontal")
        panes.pack(side="top", fill="both", expand=True, padx=10, pady=10)

        left = ttk.Frame(panes, style="Dark.TFrame")
        self._create_toolbar(left)

        left_panes = ttk.PanedWindow(left, orient="vertical")
        left_panes.pack(fill="both", expand=True)
        list_container = ttk.Frame(left_panes, style="Dark.TFrame")
        self.mod_list = ModListView(list_container, emit=self.emit)
        self.mod_list.frame.pack(fill="both", expand=True)
        self._create_dirty_bar(list_container)
        left_panes.add(list_container, weight=5)

        self.log_view = LogView(
            left_panes,
            controller,
            log_queue,
            poll_interval_ms=int(config.get("log_poll_interval_ms", 100)),
            on_record=self._on_log_record,
        )
        left_panes.add(self.log_view.frame, weight=1)
        panes.add(left, weight=3)

        self.notebook = ttk.Notebook(panes, style="Dark.TNotebook")
        self.mod_info = ModInfoView(self.notebook, load_preview=controller.catalog.preview_artifact)
        self.notebook.add(self.mod_info.frame, text="Mod Info")
        panes.add(self.notebook, weight=2)

        self.refresh()

    def _setup_styles(self) -> None:
        """Setup custom Tkinter styles."""
        style = ttk.Style()
        style.theme_use('clam')

        style.configure("Dark.TFrame", background=self.BG_COLOR)
        style.configure("Dirty.TFrame", background=self.DIRTY_BG)

        style.configure("TLabel", background=self.BG_COLOR, foreground=self.FG_COLOR, font=("Segoe UI", 10))
        style.configure("Header.TLabel", background=self.BG_COLOR, foreground=self.FG_COLOR, font=("Segoe UI", 10, "bold"))
        style.configure("Small.TLabel", background=self.BG_COLOR, foreground=self.SECONDARY_FG, font=("Segoe UI", 9))
        style.configure("Dirty.TLabel", background=self.DIRTY_BG, foreground="#ffad00", font=("Segoe UI", 10))

        style.configure(
            "Accent.TButton",
            background=self.ACCENT_COLOR,
            foreground=self.FG_COLOR,
            borderwidth=0,
            focuscolor='none',
            padding=6
        )
        style.map(
            "Accent.TButton",
            background=[
                ('pressed', '#005a9e'),
                ('active', self.ACCENT_HOVER),
                ('disabled', '#404040')
            ],
            foreground=[('disabled', '#808080')]
        )

        style.configure("Dark.TNotebook", background=self.BG_COLOR, borderwidth=0)
        style.configure(
            "Dark.TNotebook.Tab",
            background=self.DARK_BG,
            foreground=self.FG_COLOR,
            padding=[20, 10],
            borderwidth=0
        )
        style.map(
            "Dark.TNotebook.Tab",
            background=[('selected', self.ACCENT_COLOR), ('active', self.ACCENT_HOVER)],
            foreground=[('selected', '#ffffff')]
        )

        style.configure(
            "Dark.Treeview",
            background=self.DARK_BG,
            foreground=self.FG_COLOR,
            fieldbackground=self.DARK_BG,
            borderwidth=0
        )
        style.configure("Dark.Treeview.Heading", background=self.ACCENT_COLOR, foreground=self.FG_COLOR, borderwidth=0)

    def _create_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Apply Changes", command=lambda: self.emit(Apply()))
        file_menu.add_command(label="Reload", command=lambda: self.emit(Reload()))
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.config(menu=menubar)

    def _create_toolbar(self, parent: ttk.Frame) -> None:
        toolbar = ttk.Frame(parent, style="Dark.TFrame")
        toolbar.pack(side="top", fill="x", pady=(0, 6))

        ttk.Label(toolbar, text="Profile:", style="Small.TLabel").pack(side="left", padx=(0, 6))
        self.profile_var = tk.StringVar()
        self.profile_box = ttk.Combobox(toolbar, textvariable=self.profile_var, state="disabled", width=24)
        self.profile_box.pack(side="left")

        counter_font = font.Font(family="Segoe UI", size=10, weight="bold")
        self.counter_label = tk.Label(toolbar, text="", font=counter_font, bg=self.BG_COLOR, fg=self.FG_COLOR)
        self.counter_label.pack(side="right")

    def _create_dirty_bar(self, parent: ttk.Frame) -> None:
        self.dirty_bar = ttk.Frame(parent, style="Dirty.TFrame")
        ttk.Label(self.dirty_bar, text="You have unapplied changes", style="Dirty.TLabel").pack(side="left", padx=10, pady=6)
        self.apply_button = ttk.Button(self.dirty_bar, text="Apply", style="Accent.TButton", command=lambda: self.emit(Apply()))
        self.apply_button.pack(side="right", padx=6, pady=4)
        self.discard_button = ttk.Button(self.dirty_bar, text="Discard", command=lambda: self.emit(Reload()))
        self.discard_button.pack(side="right", pady=4)

    def _create_status_bar(self) -> None:
        """Create status bar at bottom."""
        separator = tk.Frame(self.root, bg=self.ACCENT_COLOR, height=2)
        separator.pack(side="bottom", fill="x")

        status_frame = tk.Frame(self.root, bg="#1a2a3a", height=32)
        status_frame.pack(side="bottom", fill="x")
        status_frame.pack_propagate(False)

        self.status_icon = tk.Label(status_frame, text="●", bg="#1a2a3a", fg=self.SUCCESS_COLOR, font=("Segoe UI", 11, "bold"))
        self.status_icon.pack(side="left", padx=(12, 8))
        self.status_label = tk.Label(status_frame, text="Ready", bg="#1a2a3a", fg=self.FG_COLOR, font=("Segoe UI", 10), anchor="w")
        self.status_label.pack(side="left", fill="both", expand=True)

    def update_status(self, message: str, status_type: str = "info") -> None:
        """
        Update status bar message.

        Args:
            message: Status message
            status_type: Type of status (info, success, error, working)
        """
        self.status_label.config(text=message)

        if status_type == "success":
            self.status_icon.config(text="✓", fg=self.SUCCESS_COLOR)
        elif status_type == "error":
            self.status_icon.config(text="✗", fg=self.ERROR_COLOR)
        elif status_type == "working":
            self.status_icon.config(text="◌", fg=self.ACCENT_COLOR)
        else:  # info
            self.status_icon.config(text="ℹ", fg=self.ACCENT_COLOR)

    def _on_log_record(self, text: str) -> None:
        if self.busy:
            self.update_status(text, "working")

    def emit(self, command: Command) -> None:
        """Handle a command from a child view."""
        if self.busy:
            return
        if isinstance(command, (Apply, Reload)):
            self._start_task(command)
            return
        try:
            self.controller.dispatch(command)
        except ControllerError as e:
            self.logger.warning(f"Rejected {type(command).__name__}: {e}")
            self.update_status(str(e), "error")
        self.refresh()

    def _start_task(self, command: Command) -> None:
        self.busy = True
        self.update_status("Processing…", "working")
        Thread(target=self._task_thread, args=(command,), daemon=True).start()

    def _task_thread(self, command: Command) -> None:
        try:
            self.controller.dispatch(command)
        except CatalogError as e:
            message = str(e)
            self.logger.error(f"{type(command).__name__} failed: {message}")
            self.root.after(0, lambda: self._finish_task(message, "error"))
        except Exception as e:
            message = f"Unexpected error: {e}"
            self.logger.error(f"{type(command).__name__} failed", exc_info=True)
            self.root.after(0, lambda: self._finish_task(message, "error"))
        else:
            message = "Changes applied" if isinstance(command, Apply) else "Mod list reloaded"
            self.root.after(0, lambda: self._finish_task(message, "success"))

    def _finish_task(self, message: str, status_type: str) -> None:
        self.busy = False
        self.update_status(message, status_type)
        self.refresh()

    def refresh(self) -> None:
        """Re-render every view from a fresh snapshot."""
        snapshot = self.controller.snapshot()
        self.mod_list.render(snapshot)
        self.mod_info.render(snapshot.selected_mod)
        self.counter_label.config(text=ModListPresenter.counter_text(snapshot))
        self.profile_box.config(values=[p.name for p in snapshot.profiles])
        self.profile_var.set(snapshot.current_profile)
        if snapshot.dirty:
            self.dirty_bar.pack(side="bottom", fill="x")
        else:
            self.dirty_bar.pack_forget()

    def run(self) -> None:
        """Run the application."""
        self.root.mainloop()
