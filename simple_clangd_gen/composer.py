import os
import shlex
import shutil
from pathlib import Path
from typing import Optional

from simple_clangd_gen.constants import (
    AUTO_COMPILER,
    C_COMPILERS,
    C_SUFFIXES,
    CXX_COMPILERS,
    INCLUDE_FLAG,
    OBJECT_SUFFIX,
)
from simple_clangd_gen.errors import CompilerNotFoundError
from simple_clangd_gen.models import BranchRule, CompileEntry, Configuration
from simple_clangd_gen.utils import is_under


def resolve_include_path(path: str, directory: Path) -> str:
    """Anchor ``.``-prefixed include paths at ``directory``; keep others as-is."""
    if path.startswith("."):
        return os.path.normpath(os.path.join(str(directory), path))
    return path


def resolve_compiler(source: Path) -> str:
    candidates = C_COMPILERS if source.suffix in C_SUFFIXES else CXX_COMPILERS
    for candidate in candidates:
        found = shutil.which(candidate)
        if found:
            return found
    raise CompilerNotFoundError(source)


class FlagComposer:
    """Build compile entries for one matched branch directory.

    Global flags and include paths come first, branch ones are appended.
    """

    def __init__(self, config: Configuration, rule: BranchRule, directory: Path) -> None:
        self._directory = directory
        self._compiler = rule.compiler or config.compiler

        flags = shlex.split(config.compile_flags)
        if rule.compile_flags:
            flags.extend(shlex.split(rule.compile_flags))
        self._flags = flags

        includes = list(config.include_paths) + list(rule.include_paths)
        self._include_paths = [
            resolve_include_path(path, directory) for path in includes
        ]

    @property
    def flags(self) -> list[str]:
        return list(self._flags)

    @property
    def include_paths(self) -> list[str]:
        return list(self._include_paths)

    def _compiler_for(self, source: Path) -> Optional[str]:
        if self._compiler is None:
            return None
        if self._compiler == AUTO_COMPILER:
            return resolve_compiler(source)
        return self._compiler

    def relative_name(self, source: Path) -> str:
        if is_under(source, self._directory):
            return source.relative_to(self._directory).as_posix()
        return str(source)

    def arguments(self, source: Path) -> list[str]:
        return self._compose(source)[0]

    def _compose(self, source: Path) -> tuple[list[str], Optional[str]]:
        name = self.relative_name(source)
        arguments = list(self._flags)
        arguments.extend(f"{INCLUDE_FLAG}{path}" for path in self._include_paths)

        compiler = self._compiler_for(source)
        if compiler is None:
            arguments.append(name)
            return arguments, None

        output = f"{source.stem}{OBJECT_SUFFIX}"
        return [compiler, *arguments, "-c", "-o", output, name], output

    def entry(self, source: Path) -> CompileEntry:
        arguments, output = self._compose(source)
        return CompileEntry(
            directory=self._directory,
            file=self.relative_name(source),
            arguments=arguments,
            output=output,
        )
