"""Theme Example: override a few glyphs and colors process-wide."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

import clack
from clack.elements import State


class MagentaTheme(clack.Theme):
    def bar_color(self, state: State) -> Style:
        return Style(color="magenta")

    def state_symbol_color(self, state: State) -> Style:
        return Style(color="magenta")

    def info_symbol(self) -> Text:
        return Text("ℹ", style="magenta")


def main() -> None:
    clack.set_theme(MagentaTheme())
    clack.intro("themed")
    try:
        answer = clack.confirm("Do you like magenta?").interact()
    except clack.PromptCancelled:
        clack.outro_cancel("Maybe next time")
        return
    clack.log.info("Magenta it is!" if answer else "Fair enough.")
    clack.reset_theme()
    clack.outro("Back to the default theme")


if __name__ == "__main__":
    main()
