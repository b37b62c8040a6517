"""
Digital Rain Constants - Centralized tuning values.

Spawn ranges, frame-rate bounds, key codes and glyph sets used across the
simulator, renderer and CLI.
"""


class SpawnRanges:
    """Randomization ranges applied whenever a column (re)spawns."""
    TRAIL_MIN = 5           # Shortest trail, inclusive
    TRAIL_SPAN = 20         # trail_length in [TRAIL_MIN, TRAIL_MIN + TRAIL_SPAN)
    SPEED_MIN = 0.4         # Slowest fall speed before the global multiplier
    SPEED_SPAN = 1.2        # fall_speed in [SPEED_MIN, SPEED_MIN + SPEED_SPAN)
    ACTIVATION_DIVISOR = 200.0  # Idle columns wake with probability density / 200


class Render:
    """Glyph styling bounds."""
    TRAIL_DIM_ROWS = 2  # Rows this close to the far end of the trail are dimmed


class FrameRate:
    """Frame pacing bounds."""
    MIN_FPS = 10
    MAX_FPS = 240
    DEFAULT_FPS = 60


class Defaults:
    """Default values for command-line settings."""
    SPEED = 1.0
    DENSITY = 0.25
    BOLD = False
    FADE = True
    CHARSET = "katakana"
    LOG_LEVEL = "INFO"


class Keys:
    """Key codes recognized by the input handler."""
    ESCAPE = 27
    QUIT = (ord('q'), ESCAPE)
    PAUSE = (ord('p'), ord('P'))
    ESCAPE_DELAY_MS = 25  # Keep Escape responsive in nodelay mode


class Glyphs:
    """Glyph sets for the rain."""
    # Half-width katakana plus digits
    KATAKANA = (
        "ｦｧｨｩｪｫｬｭｮｯｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄ"
        "ﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝ0123456789"
    )
    ASCII = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789$#@&*+-=<>"
    BINARY = "01"

    SETS = {
        "katakana": KATAKANA,
        "ascii": ASCII,
        "binary": BINARY,
    }
