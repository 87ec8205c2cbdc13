"""Log pane for displaying the activity log in the UI."""
import tkinter as tk
from tkinter import ttk
from queue import Empty, Queue
from typing import Callable, Optional

from ..core import ModStateController
from .presenter import ModListPresenter


class LogView:
    """Pane that pumps host log records into the controller and shows them."""

    def __init__(
        self,
        parent: tk.Misc,
        controller: ModStateController,
        log_queue: Queue,
        poll_interval_ms: int = 100,
        on_record: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize log pane.

        Args:
            parent: Parent widget
            controller: State controller owning the activity log
            log_queue: Queue to receive log records from
            poll_interval_ms: Delay between queue polls
            on_record: Called with the text of each newly shown record
        """
        self.frame = ttk.Frame(parent, style="Dark.TFrame")
        self.controller = controller
        self.log_queue = log_queue
        self.poll_interval_ms = poll_interval_ms
        self.on_record = on_record
        self.rendered = 0

        # Create text widget with scrollbar
        scrollbar = ttk.Scrollbar(self.frame)
        scrollbar.pack(side="right", fill="y")

        self.log_text = tk.Text(
            self.frame,
            wrap="word",
            yscrollcommand=scrollbar.set,
            bg="#1a1a1a",
            fg="#e0e0e0",
            font=("Courier", 9),
            height=8,
            state="disabled"
        )
        self.log_text.pack(side="left", fill="both", expand=True, padx=5, pady=5)
        scrollbar.config(command=self.log_text.yview)

        self._configure_tags()
        self._poll_logs()

    def _configure_tags(self) -> None:
        """Configure text tags for different log levels."""
        for level, color in ModListPresenter.LEVEL_COLORS.items():
            self.log_text.tag_config(level, foreground=color)
        self.log_text.tag_config("OTHER", foreground=ModListPresenter.OTHER_LEVEL_COLOR)

    def _drain_queue(self) -> None:
        while True:
            try:
                record = self.log_queue.get_nowait()
            except Empty:
                return
            self.controller.append_log(record)

    def _render_new(self) -> None:
        """Show the records appended since the last pass."""
        new_records = self.controller.log.since(self.rendered)
        if not new_records:
            return
        self.log_text.config(state="normal")
        for record in new_records:
            text, level = ModListPresenter.format_log_record(record)
            tag = level if level in ModListPresenter.LEVEL_COLORS else "OTHER"
            self.log_text.insert("end", text + "\n", tag)
            if self.on_record:
                self.on_record(text)
        self.log_text.config(state="disabled")
        self.log_text.see("end")  # Auto-scroll to bottom
        self.rendered += len(new_records)

    def _poll_logs(self) -> None:
        """Poll log queue and update text widget."""
        self._drain_queue()
        self._render_new()
        # Schedule next poll
        self.frame.after(self.poll_interval_ms, self._poll_logs)
