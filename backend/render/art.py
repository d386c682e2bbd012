"""ASCII art, faces and bars for the pet."""

from models.pet import Evolution


ART = {
    Evolution.PIONEER: (
        "    ╭───╮\n"
        "   (⊙ ⊙ )\n"
        "  ╭┤ ▽ ├╮  ⛏️\n"
        "  │╰───╯│\n"
        "  ╰┬───┬╯\n"
        "   │   │\n"
        "   ╰───╯"
    ),
    Evolution.GUARDIAN: (
        "   ╔═══╗\n"
        "   ║ ⊕ ║\n"
        "  ╭╨───╨╮\n"
        "  (◉_◉ )\n"
        "  ├┤═══├┤ 🛡️\n"
        "  ╰┬───┬╯\n"
        "   │   │\n"
        "   ╰───╯"
    ),
    Evolution.BARD: (
        "   ♪ ♫ ♪\n"
        "   ╭~~~╮\n"
        "  (◕ ◡ ◕)\n"
        "  ╭┤ ♪ ├╮  📜\n"
        "  │╰~~~╯│\n"
        "  ╰┬───┬╯\n"
        "   │   │\n"
        "   ╰─♪─╯"
    ),
    Evolution.VOID: (
        "    · · ·\n"
        "   ╭─·─╮\n"
        "  ( ·_· )\n"
        "  ┤     ├\n"
        "   · · ·\n"
        "    ···"
    ),
    Evolution.LONELY: (
        "   ╭───╮\n"
        "  (；_；)\n"
        "  ╭┤   ├╮\n"
        "  │╰───╯│\n"
        "  ╰┬───┬╯  💤\n"
        "   │   │\n"
        "   ╰───╯\n"
        "  zzz..."
    ),
}

# click color names per evolution
COLORS = {
    Evolution.PIONEER: "yellow",
    Evolution.GUARDIAN: "blue",
    Evolution.BARD: "magenta",
    Evolution.VOID: "white",
    Evolution.LONELY: "white",
}


def art_for(evolution: Evolution) -> str:
    return ART[Evolution(evolution)]


def color_for(evolution: Evolution) -> str:
    return COLORS.get(Evolution(evolution), "white")


# ---------- Mood visuals ----------

def mood_face(mood: int) -> str:
    if mood >= 80:
        return "ᕕ( ᐛ )ᕗ"
    if mood >= 60:
        return "(◕‿◕)"
    if mood >= 40:
        return "(•‿•)"
    if mood >= 20:
        return "(•_•)"
    if mood > 0:
        return "(._. )"
    return "(；_；)"


def prompt_face(mood: int) -> str:
    if mood >= 80:
        return "ᐛ "
    if mood >= 60:
        return "◕‿◕ "
    if mood >= 40:
        return "•‿• "
    if mood >= 20:
        return "•_• "
    if mood > 0:
        return "._. "
    return ";_; "


def _bar(mood: int, cells: int) -> str:
    filled = max(0, min(cells, mood * cells // 100))
    return "█" * filled + "░" * (cells - filled)


def mood_bar(mood: int) -> str:
    return _bar(mood, 10)


def prompt_bar(mood: int) -> str:
    return _bar(mood, 5) + " "
