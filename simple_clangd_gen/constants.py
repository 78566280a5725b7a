from typing import Final


PROG_NAME: Final[str] = "simple-clangd-gen"

INCLUDE_FLAG: Final[str] = "-I"
OBJECT_SUFFIX: Final[str] = ".o"

AUTO_COMPILER: Final[str] = "auto"
C_COMPILERS: Final[tuple[str, ...]] = ("clang", "gcc", "cc")
CXX_COMPILERS: Final[tuple[str, ...]] = ("clang++", "g++", "c++")
C_SUFFIXES: Final[tuple[str, ...]] = (".c",)

YAML_SUFFIXES: Final[tuple[str, ...]] = (".yml", ".yaml")
JSON_SUFFIXES: Final[tuple[str, ...]] = (".json",)
TOML_SUFFIXES: Final[tuple[str, ...]] = (".toml",)

DATABASE_INDENT: Final[int] = 2
