# clopts — MIT Licensed
"""
Style constants used by clopts output.

Colors follow the One Dark palette. Names ending in `_b` are the bold variants.
Each constant is a plain string usable both as a Rich markup tag and as a style
argument, e.g. `console.print(f"[{OneColors.GREEN}]ok[/]")`.
"""


class OneColors:
    """One Dark color palette as Rich style strings."""

    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    MAGENTA_b = f"bold {MAGENTA}"
