from pathlib import Path


class ClangdGenError(Exception):
    """Base user-facing application error."""


class ClangdGenFileError(ClangdGenError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ConfigError(ClangdGenFileError):
    """Raised when the layout configuration cannot be used."""


class MissingConfigFileError(ConfigError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing config file")


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            path=path, message="Unsupported config format (use yaml, json or toml)"
        )


class InvalidConfigFormatError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class ToolExecutionError(ClangdGenError):
    def __init__(
        self,
        tool: str,
        directory: Path,
        detail: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.tool = tool
        self.directory = directory
        self.detail = detail
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        message = f"Tool '{tool}' failed in {directory} ({detail})"
        if stderr.strip():
            message = f"{message}\n---stderr:\n{stderr.rstrip()}"
        super().__init__(message)


class CompilerNotFoundError(ClangdGenError):
    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"Unable to locate a compiler for {source}")


class DatabaseWriteError(ClangdGenFileError, OSError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(
            path=path, message=f"Unable to write compilation database ({detail})"
        )
