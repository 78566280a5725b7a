from rich.markup import escape
from rich.table import Column, Table

from simple_clangd_gen.models import CompileEntry, GenerationResult
from simple_clangd_gen.tui.enums import SELECTION_STYLE, UIStyle
from simple_clangd_gen.utils import compact_home_path


class OverviewTable:
    @staticmethod
    def summary_block(result: GenerationResult, mode: str, output: str):
        counts = result.summary()
        chips = [
            f"{key}={counts[key]}" for key in ("mask", "tool") if counts[key] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Output", escape(compact_home_path(output)))
        table.add_row("Branches", str(counts["branches"]))
        table.add_row("Directories", "  ".join([str(counts["directories"]), *chips]))
        table.add_row("Entries", str(counts["entries"]))
        return table


class BranchTable:
    @staticmethod
    def matches_table(result: GenerationResult) -> Table:
        table = Table(
            Column(header="Branch", width=20, overflow="ellipsis"),
            Column(header="Select", width=8),
            Column(header="Directory", overflow="ellipsis"),
            Column(header="Files", width=7, justify="right"),
            expand=True,
            header_style="bold",
        )
        for match in result.matches:
            selection = match.rule.selection
            style = SELECTION_STYLE[selection]
            table.add_row(
                escape(match.rule.branch),
                f"[{style}]{selection.value}[/{style}]",
                escape(compact_home_path(match.directory)),
                str(len(match.files)),
            )
        return table


class EntryTable:
    @staticmethod
    def entries_table(entries: list[CompileEntry]) -> Table:
        table = Table(
            Column(header="File", overflow="fold", max_width=48),
            Column(header="Arguments", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for entry in entries:
            table.add_row(
                escape(compact_home_path(entry.directory / entry.file)),
                escape(entry.command),
            )
        return table
