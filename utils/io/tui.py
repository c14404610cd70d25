import os

# Constants

FALLBACK_BG = {
    -1: "\033[100m",  # bright black (grey)
    0: "\033[40m",  # black
    1: "\033[44m",  # blue
    2: "\033[101m",  # red
    3: "\033[42m",  # green
    4: "\033[103m",  # yellow
    5: "\033[47m",  # white (gray)
    6: "\033[45m",  # magenta
    7: "\033[43m",  # dark yellow (orange)
    8: "\033[46m",  # cyan (teal)
    9: "\033[41m",  # dark red (brown)
}

RESET = "\033[0m"


def supports_true_color() -> bool:
    """True if COLORTERM or TERM advertises 24-bit colors."""
    for variable in ("COLORTERM", "TERM"):
        value = os.getenv(variable, "").lower()
        if "truecolor" in value or "24bit" in value:
            return True
    return False


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def background(palette: dict[int, tuple[int, int, int]], index: int) -> str:
    """
    Background escape code for a palette entry.
    Falls back to the 3-bit table when the terminal lacks true-color.
    """
    if supports_true_color():
        return bg_color_24b(*palette[index])
    return FALLBACK_BG[index]
