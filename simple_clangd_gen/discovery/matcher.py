import os
from fnmatch import fnmatchcase
from pathlib import Path


class BranchMatcher:
    """Find directories under a project root that match a branch glob.

    Relative patterns are matched against the root-relative POSIX path of each
    directory; patterns starting with the path separator against the absolute
    path. ``*`` may cross directory separators. A matched directory is not
    descended into, so nested matches are never reported twice.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def match(self, pattern: str) -> list[Path]:
        absolute = pattern.startswith(os.sep) or pattern.startswith("/")
        matches: list[Path] = []

        for current, dir_names, _ in os.walk(str(self._root), topdown=True):
            current_path = Path(current)
            descend: list[str] = []
            for name in sorted(dir_names):
                candidate = current_path / name
                if candidate.is_symlink():
                    continue
                subject = (
                    candidate.as_posix()
                    if absolute
                    else candidate.relative_to(self._root).as_posix()
                )
                if fnmatchcase(subject, pattern):
                    matches.append(candidate)
                else:
                    descend.append(name)
            dir_names[:] = descend

        return matches
