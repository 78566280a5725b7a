from enum import Enum

from simple_clangd_gen.models import FileSelection


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"


SELECTION_STYLE = {
    FileSelection.MASK: UIStyle.CYAN.value,
    FileSelection.TOOL: UIStyle.MAGENTA.value,
}
