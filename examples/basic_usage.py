"""Basic Chromashade usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from chromashade import (
    RGB,
    HSL,
    ShadePolicy,
    convert,
    np_convert,
    delta_e_2000,
    match_palette,
    generate_shades,
    parse_hex,
    to_hex,
    to_css_rgba,
)
from chromashade.samples.palettes import MATERIAL_PALETTES


def demonstrate_colors() -> None:
    # Construct immutable colors and convert between spaces.
    accent = parse_hex("#FF8040")
    print("RGB:", accent)
    print("LCH:", accent.convert("lch"))
    print("HSL -> RGB:", HSL((200.0, 0.6, 0.4)).convert("rgb"))

    # Tuple-level and vectorized conversions.
    print("rgb -> lab tuple:", convert((0.2, 0.4, 0.6, 0.5), "rgb", "lab"))
    grid = np.random.default_rng(7).random((4, 3))
    print("rgb -> lch array:\n", np_convert(grid, "rgb", "lch"))


def demonstrate_distance() -> None:
    a = parse_hex("#2196F3")
    b = RGB((0.1, 0.55, 0.95))
    print("delta E 2000:", round(delta_e_2000(a, b), 4))


def demonstrate_shades() -> None:
    base = parse_hex("#3F7FBF")
    palette = match_palette(base, MATERIAL_PALETTES)
    print("Closest palette:", palette.name)

    for policy in (ShadePolicy.DEFAULT, ShadePolicy.PALETTE):
        shades = generate_shades(base, policy=policy, palette=palette)
        print(f"{policy.value} shades:")
        for grade, color in shades.items():
            print(f"  {grade:>4}: {to_hex(color)} {to_css_rgba(color)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_colors()
    demonstrate_distance()
    demonstrate_shades()
