from simple_clangd_gen.tui.renderers import GeneratorConsoleUI

__all__ = ["GeneratorConsoleUI"]
