"""Run the layout pipeline: match branches, resolve files, compose entries."""

from pathlib import Path
from typing import Optional

from simple_clangd_gen.composer import FlagComposer
from simple_clangd_gen.discovery.matcher import BranchMatcher
from simple_clangd_gen.discovery.resolvers import resolver_for
from simple_clangd_gen.emitter import DatabaseEmitter
from simple_clangd_gen.models import (
    BranchMatch,
    CompileEntry,
    Configuration,
    GenerationResult,
)


class DatabaseGenerator:
    def __init__(self, config: Configuration, root: Optional[Path] = None) -> None:
        self.config = config
        self.matcher = BranchMatcher(root or Path.cwd())

    def build(self) -> GenerationResult:
        entries: list[CompileEntry] = []
        matches: list[BranchMatch] = []
        skipped: list[str] = []

        for rule in self.config.branches:
            directories = self.matcher.match(rule.branch)
            if not directories:
                skipped.append(f"Branch '{rule.branch}' matched no directories")
                continue

            for directory in directories:
                resolver = resolver_for(rule)
                files = resolver.resolve(directory)
                skipped.extend(resolver.skipped)
                matches.append(BranchMatch(rule=rule, directory=directory, files=files))

                composer = FlagComposer(self.config, rule, directory)
                entries.extend(composer.entry(path) for path in files)

        return GenerationResult(entries=entries, matches=matches, skipped=skipped)


def generate(
    config: Configuration,
    output: Path,
    root: Optional[Path] = None,
    use_command: bool = False,
) -> GenerationResult:
    result = DatabaseGenerator(config, root=root).build()
    DatabaseEmitter(output, use_command=use_command).write(result.entries)
    return result
