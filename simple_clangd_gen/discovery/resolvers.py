"""Per-branch file resolvers."""

from __future__ import annotations

import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from simple_clangd_gen.errors import ToolExecutionError
from simple_clangd_gen.models import BranchRule, FileSelection


def _printable(name: str) -> str:
    return name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


class IFileResolver(ABC):
    def __init__(self) -> None:
        self.skipped: list[str] = []

    @abstractmethod
    def resolve(self, directory: Path) -> list[Path]:
        """Return absolute file paths for a matched branch directory."""


class MaskFileResolver(IFileResolver):
    """Select files with glob masks relative to the branch directory."""

    def __init__(self, masks: tuple[str, ...]) -> None:
        super().__init__()
        self._masks = masks

    def resolve(self, directory: Path) -> list[Path]:
        files: list[Path] = []
        seen: set[Path] = set()
        for mask in self._masks:
            for path in sorted(directory.glob(mask)):
                if not path.is_file() or path in seen:
                    continue
                seen.add(path)
                files.append(path)
        return files


class ToolFileResolver(IFileResolver):
    """Run an external command in the branch directory and read file paths
    from its standard output, one per line."""

    def __init__(self, tool: str) -> None:
        super().__init__()
        self._tool = tool

    def _run(self, directory: Path) -> str:
        try:
            argv = shlex.split(self._tool)
        except ValueError as exc:
            raise ToolExecutionError(self._tool, directory, str(exc)) from exc

        try:
            completed = subprocess.run(
                argv,
                cwd=str(directory),
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise ToolExecutionError(self._tool, directory, str(exc)) from exc

        if completed.returncode != 0:
            raise ToolExecutionError(
                self._tool,
                directory,
                f"exit status {completed.returncode}",
                returncode=completed.returncode,
                stdout=_printable(completed.stdout),
                stderr=_printable(completed.stderr),
            )
        return completed.stdout

    def resolve(self, directory: Path) -> list[Path]:
        files: list[Path] = []
        for line in self._run(directory).splitlines():
            name = line.strip()
            if not name:
                continue
            path = Path(name)
            if not path.is_absolute():
                path = directory / path
            if not path.is_file():
                self.skipped.append(
                    f"'{self._tool}' listed a missing file: {_printable(name)} (in {directory})"
                )
                continue
            files.append(path)
        return files


def resolver_for(rule: BranchRule) -> IFileResolver:
    if rule.selection == FileSelection.MASK:
        return MaskFileResolver(rule.mask or ())
    return ToolFileResolver(rule.tool or "")
