from rich.console import Console
from rich.markup import escape

from simple_clangd_gen.models import GenerationResult
from simple_clangd_gen.tui.enums import UIStyle
from simple_clangd_gen.tui.sections import UISection
from simple_clangd_gen.tui.tables import BranchTable, EntryTable, OverviewTable
from simple_clangd_gen.utils import compact_home_path


class GeneratorConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_result(
        self,
        result: GenerationResult,
        output: str,
        dry_run: bool = False,
        verbose: bool = False,
    ) -> None:
        mode = "dry-run" if dry_run else "write"
        self.console.print(
            UISection.wrap(
                "database overview",
                OverviewTable.summary_block(result, mode=mode, output=output),
                style=UIStyle.BLUE.value,
            )
        )

        if result.matches:
            files = sum(len(match.files) for match in result.matches)
            self.console.print(
                UISection.wrap(
                    "matched branches",
                    BranchTable.matches_table(result),
                    style=UIStyle.CYAN.value,
                    subtitle=f"{files} files",
                )
            )
        else:
            self.console.print(
                UISection.note(
                    "branches", "No branch directories matched.", style=UIStyle.DIM.value
                )
            )

        if verbose and result.entries:
            self.console.print(
                UISection.wrap(
                    "entries",
                    EntryTable.entries_table(result.entries),
                    style=UIStyle.MAGENTA.value,
                )
            )

        if result.skipped:
            self.console.print(
                UISection.bullets("skipped", result.skipped, style=UIStyle.YELLOW.value)
            )

    def render_written(self, output: str, count: int) -> None:
        self.console.print(
            UISection.note(
                "written",
                f"Wrote [bold]{count}[/bold] entries to {escape(compact_home_path(output))}",
                style=UIStyle.GREEN.value,
            )
        )
