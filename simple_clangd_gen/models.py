import shlex
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class FileSelection(str, Enum):
    MASK = "mask"
    TOOL = "tool"


@dataclass(frozen=True)
class BranchRule:
    branch: str
    compile_flags: Optional[str] = None
    include_paths: tuple[str, ...] = ()
    mask: Optional[tuple[str, ...]] = None
    tool: Optional[str] = None
    compiler: Optional[str] = None

    @property
    def selection(self) -> FileSelection:
        if self.mask is not None:
            return FileSelection.MASK
        return FileSelection.TOOL


@dataclass(frozen=True)
class Configuration:
    compile_flags: str = ""
    include_paths: tuple[str, ...] = ()
    branches: tuple[BranchRule, ...] = ()
    compiler: Optional[str] = None
    source_path: Optional[Path] = None


@dataclass
class BranchMatch:
    rule: BranchRule
    directory: Path
    files: list[Path] = field(default_factory=list)


@dataclass(frozen=True)
class CompileEntry:
    directory: Path
    file: str
    arguments: list[str]
    output: Optional[str] = None

    @property
    def command(self) -> str:
        return shlex.join(self.arguments)

    def as_dict(self, use_command: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "directory": str(self.directory),
            "file": self.file,
        }
        if use_command:
            payload["command"] = self.command
        else:
            payload["arguments"] = list(self.arguments)
        if self.output is not None:
            payload["output"] = self.output
        return payload


@dataclass
class GenerationResult:
    entries: list[CompileEntry]
    matches: list[BranchMatch]
    skipped: list[str]

    def summary(self) -> dict[str, int]:
        counts = Counter(match.rule.selection.value for match in self.matches)
        return {
            "branches": len({id(match.rule) for match in self.matches}),
            "directories": len(self.matches),
            "mask": counts.get(FileSelection.MASK.value, 0),
            "tool": counts.get(FileSelection.TOOL.value, 0),
            "entries": len(self.entries),
            "skipped": len(self.skipped),
        }
