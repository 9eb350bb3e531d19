"""Color harmony: HSL hue rotation and heuristic color scoring.

The HSL arithmetic here is illustrative, not colorimetric. The WCAG numbers
are a lightness/saturation heuristic and are not contrast ratios against
any particular background.
"""

from __future__ import annotations

import colorsys
import re

from brandmark.pipeline.models import AccessibilityReport, ColorHarmony, ColorPsychology

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Complementary, two triadic, one analogous
HARMONY_ROTATIONS: tuple[int, ...] = (180, 120, 240, 30)

# (upper bound of hue band in degrees, band name, emotion phrase)
HUE_BANDS: list[tuple[float, str, str]] = [
    (30, "red", "Energy, passion, urgency"),
    (60, "orange", "Enthusiasm, creativity, warmth"),
    (90, "yellow", "Optimism, creativity, attention"),
    (180, "green", "Growth, nature, harmony"),
    (270, "blue", "Trust, stability, professionalism"),
    (330, "purple", "Luxury, creativity, mystery"),
    (360, "red", "Energy, passion, urgency"),
]
NEUTRAL_EMOTION = "Balanced, neutral"
ACHROMATIC_SATURATION = 10

ACCESSIBILITY_RECOMMENDATIONS = [
    "Use sufficient contrast ratios",
    "Test with color blindness simulators",
    "Provide alternative indicators beyond color",
]


def normalize_hex(value: str) -> str:
    """Return ``#RRGGBB`` (uppercase). Raises ValueError on malformed input."""
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def hex_to_hsl(value: str) -> tuple[float, float, float]:
    """Hex color to (hue degrees, saturation %, lightness %)."""
    digits = normalize_hex(value)[1:]
    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360, s * 100, l * 100


def _to_byte(value: float) -> int:
    # Halves round up, not to even
    return min(255, max(0, int(value + 0.5)))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return "#{:02X}{:02X}{:02X}".format(_to_byte(r * 255), _to_byte(g * 255), _to_byte(b * 255))


def generate_color_harmony(seed: str) -> list[str]:
    """Seed plus four hue rotations (+180, +120, +240, +30)."""
    base = normalize_hex(seed)
    h, s, l = hex_to_hsl(base)
    return [base, *(hsl_to_hex((h + degrees) % 360, s, l) for degrees in HARMONY_ROTATIONS)]


def calculate_wcag_score(value: str) -> int:
    _, s, l = hex_to_hsl(value)
    score = 90 if l > 50 else 85
    if s > 50:
        score += 5
    return min(score, 100)


def hue_band(value: str) -> tuple[str, str]:
    """(band name, emotion phrase) for a color; achromatic colors are neutral."""
    h, s, _ = hex_to_hsl(value)
    if s < ACHROMATIC_SATURATION:
        return "neutral", NEUTRAL_EMOTION
    for upper, band, emotion in HUE_BANDS:
        if h < upper:
            return band, emotion
    return HUE_BANDS[-1][1], HUE_BANDS[-1][2]


def _lightness_qualifier(lightness: float) -> str:
    if lightness >= 70:
        return "a light, airy presence"
    if lightness <= 30:
        return "a deep, grounded presence"
    return "a balanced presence"


def get_color_psychology(colors: list[str]) -> ColorPsychology:
    if not colors:
        return ColorPsychology(emotions=[], overall=NEUTRAL_EMOTION)

    emotions = [hue_band(color)[1] for color in colors]
    _, _, l = hex_to_hsl(colors[0])
    return ColorPsychology(
        emotions=emotions,
        overall=f"{emotions[0]} with {_lightness_qualifier(l)}",
    )


def analyze_accessibility(colors: list[str]) -> AccessibilityReport:
    """Heuristic accessibility figures from the primary (first) color."""
    primary = colors[0] if colors else "#000000"
    h, s, l = hex_to_hsl(primary)
    band, _ = hue_band(primary)

    return AccessibilityReport(
        wcag_score=calculate_wcag_score(primary),
        # far from mid-grey reads against either white or black text
        wcag_aa=l <= 40 or l >= 60,
        wcag_aaa=l <= 25 or l >= 80,
        color_blind_friendly=not (band in ("red", "green") and s > 80),
        recommendations=list(ACCESSIBILITY_RECOMMENDATIONS),
    )


def analyze_color_harmony(colors: list[str]) -> ColorHarmony:
    if not colors:
        return ColorHarmony(type="complementary", balance=85, contrast="low", temperature="neutral")

    lightness = [hex_to_hsl(color)[2] for color in colors]
    spread = max(lightness) - min(lightness)
    if spread >= 40:
        contrast = "high"
    elif spread >= 20:
        contrast = "medium"
    else:
        contrast = "low"

    band, _ = hue_band(colors[0])
    if band in ("red", "orange", "yellow"):
        temperature = "warm"
    elif band == "neutral":
        temperature = "neutral"
    else:
        temperature = "cool"

    return ColorHarmony(type="complementary", balance=85, contrast=contrast, temperature=temperature)
