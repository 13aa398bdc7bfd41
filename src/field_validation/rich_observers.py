"""Rich-based console output for validation.

Provides an observer that writes validation events to a Rich console and a
helper that renders an error store as a Rich table.

Requires the 'rich' package: pip install rich
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from field_validation.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

    from field_validation.errors import ValidationErrors

__all__ = ["ConsoleEventObserver", "render_errors"]


class ConsoleEventObserver(ValidationObserver):
    """Write one console line per completed validation.

    With ``verbose`` enabled, added errors and cleared fields are written
    as well.

    Example:
        from rich.console import Console

        observer = ConsoleEventObserver(Console(stderr=True), verbose=True)
        validator.add_observer(observer)
        validator.validate(form)
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            verbose: Also write ERROR_ADDED and ERRORS_CLEARED events.
        """
        # Import Rich here to keep it optional for callers that never use it
        from rich.console import Console

        self._console = console or Console()
        self._verbose = verbose

    def on_event(self, event: ValidationEvent) -> None:
        """Handle validation events by writing them to the console.

        Args:
            event: The validation event to handle.
        """
        from rich.markup import escape

        data = event.data
        if event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            name = escape(str(data.get("validator_name", "validator")))
            duration = data.get("duration_ms", 0.0)
            if data.get("is_valid"):
                self._console.print(f"[green]✓[/] [bold]{name}[/] passed ({duration:.2f} ms)")
            else:
                self._console.print(
                    f"[red]✗[/] [bold]{name}[/] failed with "
                    f"{data.get('error_count', 0)} error(s) ({duration:.2f} ms)"
                )
            return

        if not self._verbose:
            return

        if event.event_type == ValidationEventType.ERROR_ADDED:
            field = escape(data["field"])
            self._console.print(f"  [cyan]{field}[/]: [yellow]{escape(data['message'])}[/]")
        elif event.event_type == ValidationEventType.ERRORS_CLEARED and data.get("cleared"):
            field = escape(data["field"])
            self._console.print(f"  [dim]cleared {data['cleared']} error(s) for {field}[/]")


def render_errors(errors: ValidationErrors, title: str = "Validation Errors") -> Table:
    """Render an error store as a Rich table.

    Args:
        errors: Error store to render.
        title: Table title.

    Returns:
        Table with one row per message, or a placeholder row when empty.
    """
    from rich.markup import escape
    from rich.table import Table

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Error", style="yellow")

    rows = 0
    for field, messages in errors.items():
        for message in messages:
            table.add_row(escape(field), escape(message))
            rows += 1

    if not rows:
        table.add_row("-", "No errors")

    return table
