from simple_clangd_gen.discovery.matcher import BranchMatcher
from simple_clangd_gen.discovery.resolvers import (
    IFileResolver,
    MaskFileResolver,
    ToolFileResolver,
    resolver_for,
)

__all__ = [
    "BranchMatcher",
    "IFileResolver",
    "MaskFileResolver",
    "ToolFileResolver",
    "resolver_for",
]
