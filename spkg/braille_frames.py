"""Frames of the spinners drawn with braille dot patterns."""

from __future__ import annotations

_BRAILLE_BASE = 0x2800

_DOTS12 = (
    "⢀⠀", "⡀⠀", "⠄⠀", "⢂⠀", "⡂⠀", "⠅⠀", "⢃⠀", "⡃⠀", "⠍⠀", "⢋⠀",
    "⡋⠀", "⠍⠁", "⢋⠁", "⡋⠁", "⠍⠉", "⠋⠉", "⠋⠉", "⠉⠙", "⠉⠙", "⠉⠩",
    "⠈⢙", "⠈⡙", "⢈⠩", "⡀⢙", "⠄⡙", "⢂⠩", "⡂⢘", "⠅⡘", "⢃⠨", "⡃⢐",
    "⠍⡐", "⢋⠠", "⡋⢀", "⠍⡁", "⢋⠁", "⡋⠁", "⠍⠉", "⠋⠉", "⠋⠉", "⠉⠙",
    "⠉⠙", "⠉⠩", "⠈⢙", "⠈⡙", "⠈⠩", "⠀⢙", "⠀⡙", "⠀⠩", "⠀⢘", "⠀⡘",
    "⠀⠨", "⠀⢐", "⠀⡐", "⠀⠠", "⠀⢀", "⠀⡀",
)

# Single-character spinners: every character of the string is one frame.
_SINGLE_CHAR = {
    "Dots": ("⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏", 80),
    "Dots2": ("⣾⣽⣻⢿⡿⣟⣯⣷", 80),
    "Dots3": ("⠋⠙⠚⠞⠖⠦⠴⠲⠳⠓", 80),
    "Dots4": ("⠄⠆⠇⠋⠙⠸⠰⠠⠰⠸⠙⠋⠇⠆", 80),
    "Dots5": ("⠋⠙⠚⠒⠂⠂⠒⠲⠴⠦⠖⠒⠐⠐⠒⠓⠋", 80),
    "Dots6": ("⠁⠉⠙⠚⠒⠂⠂⠒⠲⠴⠤⠄⠄⠤⠴⠲⠒⠂⠂⠒⠚⠙⠉⠁", 80),
    "Dots7": ("⠈⠉⠋⠓⠒⠐⠐⠒⠖⠦⠤⠠⠠⠤⠦⠖⠒⠐⠐⠒⠓⠋⠉⠈", 80),
    "Dots8": ("⠁⠁⠉⠙⠚⠒⠂⠂⠒⠲⠴⠤⠄⠄⠤⠠⠠⠤⠦⠖⠒⠐⠐⠒⠓⠋⠉⠈⠈", 80),
    "Dots9": ("⢹⢺⢼⣸⣇⡧⡗⡏", 80),
    "Dots10": ("⢄⢂⢁⡁⡈⡐⡠", 80),
    "Dots11": ("⠁⠂⠄⡀⢀⠠⠐⠈", 100),
    "Bounce": ("⠁⠂⠄⠂", 120),
}


def _dots8bit_frame(n: int) -> str:
    """Map a counter to a braille cell, counting through dots 1-3, 7, 4-6 and 8 in turn."""
    bits = (
        (n & 0b0000_0111)
        | ((n & 0b0000_1000) << 3)
        | ((n & 0b0111_0000) >> 1)
        | (n & 0b1000_0000)
    )
    return chr(_BRAILLE_BASE + bits)


def braille_spinners() -> dict[str, tuple[tuple[str, ...], int]]:
    """Return the braille spinners as ``name -> (frames, interval in ms)``."""
    spinners = {name: (tuple(frames), interval) for name, (frames, interval) in _SINGLE_CHAR.items()}
    spinners["Dots12"] = (_DOTS12, 80)
    spinners["Dots8Bit"] = (tuple(_dots8bit_frame(n) for n in range(256)), 80)
    return spinners