"""Log panel component for displaying studio activity."""

from datetime import datetime

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import RichLog, Static


class LogPanel(Container):
    """Scrollable activity log."""

    def __init__(self, show_timestamps: bool = True) -> None:
        super().__init__()
        self._show_timestamps = show_timestamps
        self.entries: list[str] = []

    def compose(self) -> ComposeResult:
        """Compose the log panel layout."""
        yield Static("📋 Activity", classes="panel-header")
        yield RichLog(id="log", highlight=True, markup=True)

    def _write(self, line: str, plain: str) -> None:
        if self._show_timestamps:
            line = f"[dim]{datetime.now():%H:%M:%S}[/dim] {line}"
        self.entries.append(plain)
        self.query_one("#log", RichLog).write(line)

    def log_info(self, message: str) -> None:
        """Log an info message.

        Args:
            message: Message to log.
        """
        self._write(f"[cyan]ℹ[/cyan] {escape(message)}", message)

    def log_success(self, message: str) -> None:
        """Log a success message."""
        self._write(f"[green]✓[/green] [green]{escape(message)}[/green]", message)

    def log_warning(self, message: str) -> None:
        """Log a warning message."""
        self._write(f"[yellow]⚠[/yellow] [yellow]{escape(message)}[/yellow]", message)

    def log_error(self, message: str) -> None:
        """Log an error message."""
        self._write(f"[red]✗[/red] [red]{escape(message)}[/red]", message)

    def clear(self) -> None:
        """Clear all log messages."""
        self.entries.clear()
        self.query_one("#log", RichLog).clear()
