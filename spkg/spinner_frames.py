"""Named spinner animations: their frames and frame intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cache

from spkg.braille_frames import braille_spinners


@dataclass(frozen=True)
class SpinnerData:
    """The frames of one spinner and the delay between them in milliseconds."""

    frames: tuple[str, ...]
    interval: int


class SpinnerName(Enum):
    """Every spinner that can be looked up by name."""

    DOTS = "Dots"
    DOTS2 = "Dots2"
    DOTS3 = "Dots3"
    DOTS4 = "Dots4"
    DOTS5 = "Dots5"
    DOTS6 = "Dots6"
    DOTS7 = "Dots7"
    DOTS8 = "Dots8"
    DOTS9 = "Dots9"
    DOTS10 = "Dots10"
    DOTS11 = "Dots11"
    DOTS12 = "Dots12"
    DOTS8_BIT = "Dots8Bit"
    LINE = "Line"
    LINE2 = "Line2"
    PIPE = "Pipe"
    SIMPLE_DOTS = "SimpleDots"
    SIMPLE_DOTS_SCROLLING = "SimpleDotsScrolling"
    STAR = "Star"
    STAR2 = "Star2"
    FLIP = "Flip"
    HAMBURGER = "Hamburger"
    GROW_VERTICAL = "GrowVertical"
    GROW_HORIZONTAL = "GrowHorizontal"
    BALLOON = "Balloon"
    BALLOON2 = "Balloon2"
    NOISE = "Noise"
    BOUNCE = "Bounce"
    BOX_BOUNCE = "BoxBounce"
    BOX_BOUNCE2 = "BoxBounce2"
    TRIANGLE = "Triangle"
    ARC = "Arc"
    CIRCLE = "Circle"
    SQUARE_CORNERS = "SquareCorners"
    CIRCLE_QUARTERS = "CircleQuarters"
    CIRCLE_HALVES = "CircleHalves"
    SQUISH = "Squish"
    TOGGLE = "Toggle"
    TOGGLE2 = "Toggle2"
    TOGGLE3 = "Toggle3"
    TOGGLE4 = "Toggle4"
    TOGGLE5 = "Toggle5"
    TOGGLE6 = "Toggle6"
    TOGGLE7 = "Toggle7"
    TOGGLE8 = "Toggle8"
    TOGGLE9 = "Toggle9"
    TOGGLE10 = "Toggle10"
    TOGGLE11 = "Toggle11"
    TOGGLE12 = "Toggle12"
    TOGGLE13 = "Toggle13"
    ARROW = "Arrow"
    ARROW2 = "Arrow2"
    ARROW3 = "Arrow3"
    BOUNCING_BAR = "BouncingBar"
    BOUNCING_BALL = "BouncingBall"
    SMILEY = "Smiley"
    MONKEY = "Monkey"
    HEARTS = "Hearts"
    CLOCK = "Clock"
    EARTH = "Earth"
    MATERIAL = "Material"
    MOON = "Moon"
    RUNNER = "Runner"
    PONG = "Pong"
    SHARK = "Shark"
    DQPB = "Dqpb"
    WEATHER = "Weather"
    CHRISTMAS = "Christmas"
    GRENADE = "Grenade"
    POINT = "Point"
    LAYER = "Layer"
    BETA_WAVE = "BetaWave"
    FINGER_DANCE = "FingerDance"
    FIST_BUMP = "FistBump"
    SOCCER_HEADER = "SoccerHeader"
    MINDBLOWN = "Mindblown"
    SPEAKER = "Speaker"
    ORANGE_PULSE = "OrangePulse"
    BLUE_PULSE = "BluePulse"
    ORANGE_BLUE_PULSE = "OrangeBluePulse"
    TIME_TRAVEL = "TimeTravel"
    AESTHETIC = "Aesthetic"

    def __str__(self) -> str:
        return self.value


def _chars(text: str) -> tuple[str, ...]:
    """One frame per character."""
    return tuple(text)


def _padded(text: str) -> tuple[str, ...]:
    """One frame per character, each followed by a space."""
    return tuple(f"{char} " for char in text)


def _material() -> tuple[str, ...]:
    # (start, filled cells, repeated frames) on a ring of 20 cells.
    runs = (
        (0, 1, 1), (0, 2, 1), (0, 3, 1), (0, 4, 1), (0, 6, 2), (0, 7, 1), (0, 8, 1),
        (0, 9, 2), (0, 10, 1), (0, 11, 1), (0, 13, 1), (0, 14, 2), (1, 14, 3),
        (2, 14, 1), (3, 14, 1), (4, 13, 1), (4, 14, 2), (5, 14, 3), (6, 14, 2),
        (7, 13, 2), (8, 12, 2), (9, 11, 2), (10, 10, 2), (12, 8, 1), (13, 7, 1),
        (14, 6, 1), (15, 5, 2), (16, 5, 1), (17, 5, 2), (17, 6, 1), (18, 6, 1),
        (19, 6, 2), (19, 7, 1), (0, 8, 1), (0, 9, 4), (0, 11, 1), (0, 12, 2),
        (0, 14, 2), (1, 14, 2), (3, 13, 1), (5, 12, 2), (6, 11, 1), (8, 9, 2),
        (9, 9, 2), (10, 9, 1), (11, 8, 2), (12, 7, 2), (13, 7, 2), (15, 5, 1),
        (16, 4, 3), (17, 3, 2), (18, 2, 3), (19, 1, 3), (0, 0, 4),
    )
    frames: list[str] = []
    for start, length, repeat in runs:
        filled = {(start + offset) % 20 for offset in range(length)}
        frame = "".join("█" if cell in filled else "▁" for cell in range(20))
        frames.extend([frame] * repeat)
    return tuple(frames)


def _pong() -> tuple[str, ...]:
    positions = (0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 7,
                 6, 6, 5, 5, 4, 4, 3, 3, 2, 2, 1, 1, 0)
    balls = "⠂⠈⠂⠠⡀⠠" * 5
    return tuple(
        "▐" + " " * pos + ball + " " * (7 - pos) + "▌"
        for pos, ball in zip(positions, balls)
    )


def _shark() -> tuple[str, ...]:
    right = tuple("▐" + "_" * i + "|\\" + "_" * (12 - i) + "▌" for i in range(13))
    left = tuple("▐" + "_" * (12 - i) + "/|" + "_" * i + "▌" for i in range(13))
    return right + left


def _weather() -> tuple[str, ...]:
    symbols = ("☀️ ", "🌤 ", "⛅️ ", "🌥 ", "☁️ ", "🌧 ", "🌨 ", "⛈ ")
    return tuple(symbols[int(step)] for step in "00012345656567656432100")


def _soccer_header() -> tuple[str, ...]:
    ball = "⚽️"

    def kick(gap: int) -> str:
        return "🧑" + " " * gap + ball + " " * (8 - gap) + "🧑 "

    outward = tuple(kick(gap) for gap in range(2, 7))
    inward = tuple(kick(gap) for gap in range(6, 1, -1))
    first = " 🧑" + ball + " " * 7 + "🧑 "
    header = "🧑" + " " * 7 + ball + "🧑  "
    return (first,) + outward + (header,) + inward


def _bouncing_bar() -> tuple[str, ...]:
    steps = ((0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 2), (3, 1), (0, 0),
             (3, 1), (2, 2), (1, 3), (0, 4), (0, 3), (0, 2), (0, 1))
    return tuple("[" + (" " * pad + "=" * width).ljust(4) + "]" for pad, width in steps)


def _bouncing_ball() -> tuple[str, ...]:
    return tuple("(" + " " * pos + "●" + " " * (5 - pos) + ")" for pos in (1, 2, 3, 4, 5, 4, 3, 2, 1, 0))


def _marker(mark: str, rest: str, length: int) -> tuple[str, ...]:
    """Frames where one marker walks across a row of filler characters."""
    return tuple(rest * pos + mark + rest * (length - 1 - pos) for pos in range(length))


_ORANGE_PULSE = _padded("🔸🔶🟠🟠🔶")
_BLUE_PULSE = _padded("🔹🔷🔵🔵🔷")

_OTHER: dict[str, tuple[tuple[str, ...], int]] = {
    "Line": (tuple(f"\x1b[32m\x1b[1m {char} \x1b[0m" for char in "-\\|/"), 130),
    "Line2": (_chars("⠂-–—–-"), 100),
    "Pipe": (_chars("┤┘┴└├┌┬┐"), 100),
    "SimpleDots": (tuple(("." * n).ljust(3) for n in (1, 2, 3, 0)), 400),
    "SimpleDotsScrolling": (
        tuple(("." * n).ljust(3) for n in (1, 2, 3)) + tuple(("." * n).rjust(3) for n in (2, 1, 0)),
        200,
    ),
    "Star": (_chars("✶✸✹✺✹✷"), 70),
    "Star2": (_chars("+x*"), 80),
    "Flip": (_chars("___-``'´-___"), 70),
    "Hamburger": (_chars("☱☲☴"), 100),
    "GrowVertical": (_chars("▁▃▄▅▆▇▆▅▄▃"), 120),
    "GrowHorizontal": (_chars("▏▎▍▌▋▊▉▊▋▌▍▎"), 120),
    "Balloon": (_chars(" .oO@* "), 140),
    "Balloon2": (_chars(".oO°Oo."), 120),
    "Noise": (_chars("▓▒░"), 100),
    "BoxBounce": (_chars("▖▘▝▗"), 120),
    "BoxBounce2": (_chars("▌▀▐▄"), 100),
    "Triangle": (_chars("◢◣◤◥"), 50),
    "Arc": (_chars("◜◠◝◞◡◟"), 100),
    "Circle": (_chars("◡⊙◠"), 120),
    "SquareCorners": (_chars("◰◳◲◱"), 180),
    "CircleQuarters": (_chars("◴◷◶◵"), 120),
    "CircleHalves": (_chars("◐◓◑◒"), 50),
    "Squish": (_chars("╫╪"), 100),
    "Toggle": (_chars("⊶⊷"), 250),
    "Toggle2": (_chars("▫▪"), 80),
    "Toggle3": (_chars("□■"), 120),
    "Toggle4": (_chars("■□▪▫"), 100),
    "Toggle5": (_chars("▮▯"), 100),
    "Toggle6": (_chars("ဝ၀"), 300),
    "Toggle7": (_chars("⦾⦿"), 80),
    "Toggle8": (_chars("◍◌"), 100),
    "Toggle9": (_chars("◉◎"), 100),
    "Toggle10": (_chars("㊂㊀㊁"), 100),
    "Toggle11": (_chars("⧇⧆"), 50),
    "Toggle12": (_chars("☗☖"), 120),
    "Toggle13": (_chars("=*-"), 80),
    "Arrow": (_chars("←↖↑↗→↘↓↙"), 100),
    "Arrow2": (
        tuple(f"{arrow} " for arrow in ("⬆️", "↗️", "➡️", "↘️", "⬇️", "↙️", "⬅️", "↖️")),
        80,
    ),
    "Arrow3": (("▹" * 5,) + _marker("▸", "▹", 5), 120),
    "BouncingBar": (_bouncing_bar(), 80),
    "BouncingBall": (_bouncing_ball(), 80),
    "Smiley": (_padded("😄😝"), 200),
    "Monkey": (_padded("🙈🙈🙉🙊"), 300),
    "Hearts": (_padded("💛💙💜💚") + ("❤️ ",), 100),
    "Clock": (
        (chr(0x1F55B) + " ",) + tuple(chr(code) + " " for code in range(0x1F550, 0x1F55B)),
        100,
    ),
    "Earth": (_padded("🌍🌎🌏"), 180),
    "Material": (_material(), 17),
    "Moon": (tuple(chr(code) + " " for code in range(0x1F311, 0x1F319)), 80),
    "Runner": (_padded("🚶🏃"), 140),
    "Pong": (_pong(), 80),
    "Shark": (_shark(), 120),
    "Dqpb": (_chars("dqpb"), 100),
    "Weather": (_weather(), 100),
    "Christmas": (_chars("🌲🎄"), 400),
    "Grenade": (
        ("،  ", "′  ", " ´ ", " ‾ ", "  ⸌", "  ⸊", "  |", "  ⁎", "  ⁕", " ෴ ", "  ⁓")
        + ("   ",) * 3,
        80,
    ),
    "Point": (("∙∙∙",) + _marker("●", "∙", 3) + ("∙∙∙",), 125),
    "Layer": (_chars("-=≡"), 150),
    "BetaWave": (_marker("ρ", "β", 7), 80),
    "FingerDance": (_padded("🤘🤟🖖✋🤚👆"), 160),
    "FistBump": (
        ("🤜　　　　🤛 ",) * 3 + ("　🤜　　🤛　 ", "　　🤜🤛　　 ", "　🤜✨🤛　　 ", "🤜　✨　🤛　 "),
        80,
    ),
    "SoccerHeader": (_soccer_header(), 80),
    "Mindblown": (_padded("😐😐😮😮😦😦😧😧🤯💥✨　　　"), 160),
    "Speaker": (_padded("🔈🔉🔊🔉"), 160),
    "OrangePulse": (_ORANGE_PULSE, 100),
    "BluePulse": (_BLUE_PULSE, 100),
    "OrangeBluePulse": (_ORANGE_PULSE + _BLUE_PULSE, 100),
    "TimeTravel": (
        (chr(0x1F55B) + " ",) + tuple(chr(code) + " " for code in range(0x1F55A, 0x1F54F, -1)),
        100,
    ),
    "Aesthetic": (
        tuple("▰" * filled + "▱" * (7 - filled) for filled in range(1, 8)) + ("▰▱▱▱▱▱▱",),
        80,
    ),
}


@cache
def _spinner_table() -> dict[str, SpinnerData]:
    table = {name: SpinnerData(tuple(frames), interval) for name, (frames, interval) in braille_spinners().items()}
    table.update({name: SpinnerData(frames, interval) for name, (frames, interval) in _OTHER.items()})
    return table


def get_spinner(name: SpinnerName | str) -> SpinnerData:
    """Return the frames and interval of the named spinner.

    Raises ValueError when no spinner has that name.
    """
    key = name.value if isinstance(name, SpinnerName) else str(name)
    try:
        return _spinner_table()[key]
    except KeyError:
        raise ValueError(f"No Spinner found with the given name: {key}") from None