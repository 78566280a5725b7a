from pathlib import Path
from typing import Iterable

from simple_clangd_gen.errors import DatabaseWriteError
from simple_clangd_gen.models import CompileEntry
from simple_clangd_gen.utils import write_json_atomic


class DatabaseEmitter:
    def __init__(self, path: Path, use_command: bool = False) -> None:
        self._path = path
        self._use_command = use_command

    @property
    def path(self) -> Path:
        return self._path

    def payload(self, entries: Iterable[CompileEntry]) -> list[dict]:
        return [entry.as_dict(use_command=self._use_command) for entry in entries]

    def write(self, entries: Iterable[CompileEntry]) -> int:
        payload = self.payload(entries)
        if self._path.is_dir():
            raise DatabaseWriteError(self._path, "is a directory")
        try:
            write_json_atomic(self._path, payload)
        except OSError as exc:
            raise DatabaseWriteError(self._path, exc.strerror or str(exc)) from exc
        return len(payload)
