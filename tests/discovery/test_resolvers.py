"""Tests for mask and tool file resolvers."""

import shlex
from pathlib import Path

import pytest

from simple_clangd_gen.discovery.resolvers import (
    MaskFileResolver,
    ToolFileResolver,
    resolver_for,
)
from simple_clangd_gen.errors import ToolExecutionError
from simple_clangd_gen.models import BranchRule


def test_mask_is_not_recursive(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.c", "src/b.c", "src/sub/c.c", "src/d.h"])
    directory = project_root / "src"

    files = MaskFileResolver(("*.c",)).resolve(directory)

    assert files == [directory / "a.c", directory / "b.c"]


def test_mask_recursive_pattern(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.c", "src/sub/c.c"])
    directory = project_root / "src"

    files = MaskFileResolver(("**/*.c",)).resolve(directory)

    assert set(files) == {directory / "a.c", directory / "sub" / "c.c"}


def test_masks_keep_declared_order_and_deduplicate(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.cpp", "src/b.c", "src/c.c"])
    directory = project_root / "src"

    files = MaskFileResolver(("*.cpp", "*.c", "b.*")).resolve(directory)

    assert files == [directory / "a.cpp", directory / "b.c", directory / "c.c"]


def test_mask_skips_directories(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.c", "src/weird.c/inner.txt"])
    directory = project_root / "src"

    assert MaskFileResolver(("*.c",)).resolve(directory) == [directory / "a.c"]


def test_tool_lists_relative_files(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c", "src/sub/b.cpp"])
    tool = make_tool("list.sh", "printf 'a.c\\n\\n  sub/b.cpp  \\n'")
    directory = project_root / "src"

    resolver = ToolFileResolver(shlex.quote(str(tool)))
    files = resolver.resolve(directory)

    assert files == [directory / "a.c", directory / "sub" / "b.cpp"]
    assert resolver.skipped == []


def test_tool_runs_in_branch_directory(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/only_here.c", "other/not_here.c"])
    tool = make_tool("ls.sh", "ls *.c")
    directory = project_root / "src"

    files = ToolFileResolver(shlex.quote(str(tool))).resolve(directory)

    assert files == [directory / "only_here.c"]


def test_tool_passes_arguments(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/x.c"])
    tool = make_tool("echo_arg.sh", 'echo "$1"')

    files = ToolFileResolver(f"{shlex.quote(str(tool))} x.c").resolve(project_root / "src")

    assert files == [project_root / "src" / "x.c"]


def test_tool_absolute_paths_kept(project_root: Path, tmp_path: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c"])
    make_tree(tmp_path, ["shared/s.c"])
    tool = make_tool("abs.sh", f"echo {tmp_path / 'shared' / 's.c'}")

    files = ToolFileResolver(shlex.quote(str(tool))).resolve(project_root / "src")

    assert files == [tmp_path / "shared" / "s.c"]


def test_tool_missing_files_are_skipped(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c"])
    tool = make_tool("ghost.sh", "printf 'a.c\\nghost.c\\n'")
    directory = project_root / "src"

    resolver = ToolFileResolver(shlex.quote(str(tool)))
    files = resolver.resolve(directory)

    assert files == [directory / "a.c"]
    assert len(resolver.skipped) == 1
    assert "ghost.c" in resolver.skipped[0]


def test_tool_nonzero_exit_raises(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c"])
    tool = make_tool("fail.sh", "echo a.c\necho broken >&2\nexit 3")

    with pytest.raises(ToolExecutionError) as excinfo:
        ToolFileResolver(shlex.quote(str(tool))).resolve(project_root / "src")

    assert excinfo.value.returncode == 3
    assert "broken" in excinfo.value.stderr
    assert "a.c" in excinfo.value.stdout
    assert "exit status 3" in str(excinfo.value)


def test_tool_not_found_raises(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.c"])

    with pytest.raises(ToolExecutionError) as excinfo:
        ToolFileResolver("definitely-not-a-real-tool-4242").resolve(project_root / "src")

    assert excinfo.value.returncode is None


def test_tool_unbalanced_quotes_raise(project_root: Path, make_tree) -> None:
    make_tree(project_root, ["src/a.c"])

    with pytest.raises(ToolExecutionError):
        ToolFileResolver("ls 'unclosed").resolve(project_root / "src")


def test_resolver_for_picks_variant() -> None:
    assert isinstance(resolver_for(BranchRule(branch="src", mask=("*.c",))), MaskFileResolver)
    assert isinstance(resolver_for(BranchRule(branch="src", tool="ls")), ToolFileResolver)


def test_tool_output_with_undecodable_bytes(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c"])
    tool = make_tool("latin1.sh", "printf 'a.c\\n\\377.c\\n'")
    directory = project_root / "src"

    resolver = ToolFileResolver(shlex.quote(str(tool)))
    files = resolver.resolve(directory)

    assert files == [directory / "a.c"]
    assert len(resolver.skipped) == 1
    assert "�.c" in resolver.skipped[0]
    resolver.skipped[0].encode("utf-8")


def test_tool_failure_with_undecodable_stderr(project_root: Path, make_tree, make_tool) -> None:
    make_tree(project_root, ["src/a.c"])
    tool = make_tool("bad_stderr.sh", "printf 'caf\\351\\n' >&2\nexit 1")

    with pytest.raises(ToolExecutionError) as excinfo:
        ToolFileResolver(shlex.quote(str(tool))).resolve(project_root / "src")

    assert "caf�" in excinfo.value.stderr
    str(excinfo.value).encode("utf-8")
