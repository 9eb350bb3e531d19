"""Download formats for palettes and typography pairings."""

from __future__ import annotations

import json

from brandmark.pipeline.models import ColorPalette, TypographyPairing

PALETTE_FORMATS = ("css", "scss", "json", "ase")
TYPOGRAPHY_FORMATS = ("css", "scss", "json")

TYPOGRAPHY_CSS = """\
/* {name} Typography */
.heading {{
  font-family: '{heading}', {heading_fallback};
  font-weight: 700;
  line-height: 1.2;
}}

.body {{
  font-family: '{body}', {body_fallback};
  font-weight: 400;
  line-height: 1.6;
}}"""

TYPOGRAPHY_SCSS = """\
// {name} Typography
$font-heading: '{heading}', {heading_fallback};
$font-body: '{body}', {body_fallback};

.heading {{
  font-family: $font-heading;
  font-weight: 700;
  line-height: 1.2;
}}

.body {{
  font-family: $font-body;
  font-weight: 400;
  line-height: 1.6;
}}"""


def export_palette(palette: ColorPalette, fmt: str) -> str:
    colors = palette.colors
    if fmt == "css":
        lines = "\n".join(f"  --color-{i}: {color};" for i, color in enumerate(colors, 1))
        return f":root {{\n{lines}\n}}"
    if fmt == "scss":
        return "\n".join(f"$color-{i}: {color};" for i, color in enumerate(colors, 1))
    if fmt == "json":
        return json.dumps(colors, indent=2)
    if fmt == "ase":
        # simplified Adobe Swatch Exchange text block, not the binary format
        return "Adobe Swatch Exchange\n" + "\n".join(colors)
    raise ValueError(f"Unsupported palette format: {fmt}")


def export_typography(typography: TypographyPairing, fmt: str) -> str:
    fields = {
        "name": typography.name,
        "heading": typography.heading.family,
        "heading_fallback": typography.heading.fallback,
        "body": typography.body.family,
        "body_fallback": typography.body.fallback,
    }
    if fmt == "css":
        return TYPOGRAPHY_CSS.format(**fields)
    if fmt == "scss":
        return TYPOGRAPHY_SCSS.format(**fields)
    if fmt == "json":
        return json.dumps({
            "name": typography.name,
            "heading": typography.heading.model_dump(),
            "body": typography.body.model_dump(),
        }, indent=2)
    raise ValueError(f"Unsupported typography format: {fmt}")
