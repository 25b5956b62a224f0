"""Terminal picker: filter, then choose by number."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from oklch_names.commands import PickItem


class ConsolePicker:
    """
    Two-step prompt standing in for an editor quick pick.

    The first answer filters items by label or description; an exact label
    match is taken directly. Otherwise matches are listed and chosen by
    number. An empty answer at either step cancels.
    """

    def __init__(self, console: Console | None = None, page_size: int = 20):
        self.console = console or Console(stderr=True)
        self.page_size = page_size

    def pick(self, items: Sequence[PickItem], placeholder: str = "") -> PickItem | None:
        query = Prompt.ask(
            f"[bold]{placeholder or 'Filter'}[/] [dim](empty to cancel)[/]",
            console=self.console,
            default="",
            show_default=False,
        ).strip()
        if not query:
            return None

        needle = query.lower()
        for item in items:
            if item.label.lower() == needle:
                return item

        matches = [
            item for item in items
            if needle in item.label.lower() or needle in item.description.lower()
        ]
        if not matches:
            self.console.print(f"[yellow]Nothing matches {query!r}[/]")
            return None
        if len(matches) == 1:
            return matches[0]

        shown = matches[:self.page_size]
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Value", style="dim")
        for i, item in enumerate(shown, 1):
            table.add_row(str(i), item.label, item.description)
        self.console.print(table)
        if len(matches) > len(shown):
            self.console.print(f"[dim]{len(matches) - len(shown)} more; refine the filter to see them[/]")

        answer = Prompt.ask("Number", console=self.console, default="", show_default=False).strip()
        if not answer:
            return None
        try:
            index = int(answer)
        except ValueError:
            self.console.print(f"[red]Not a number: {answer}[/]")
            return None
        if not 1 <= index <= len(shown):
            self.console.print(f"[red]Choose 1-{len(shown)}[/]")
            return None
        return shown[index - 1]
