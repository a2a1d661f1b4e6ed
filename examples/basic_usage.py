"""Basic easycolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from easycolor import (
    CMYK,
    HSL,
    RGBA,
    Hex,
    color_from_string,
    convert,
)


def demonstrate_colors() -> None:
    # Parse, convert and print in canonical text form.
    accent = Hex.parse("#2bc48a")
    print("Hex -> RGB:", accent.to_rgb())
    print("Hex -> HSL:", accent.to_hsl())
    print("Hex -> CMYK:", accent.to_cmyk())

    # Raw tuples convert without building value objects.
    print("RGBA -> RGB (on white):", convert((43, 196, 138, 0.85), "rgba", "rgb"))

    # Setters clamp and return new values.
    tweaked = accent.to_hsl().with_lightness(120)
    print("HSL clamped lightness:", tweaked)

    print("Any prefix:", repr(color_from_string("cmyk(100,34,53,38)")))


def demonstrate_blending() -> None:
    white = RGBA((255, 255, 255, 1.0))
    black = HSL((0, 0, 0))
    print("mix:", white.mix(black))
    print("mix 35%:", white.mix(black, 0.35))

    violet = RGBA((95, 45, 155, 0.8))
    print("grayscale:", violet.grayscale())
    print("negate:", violet.negate())
    print("fade:", violet.fade(0.5))
    print("darken:", CMYK((100, 34, 53, 38)).darken(0.2))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_blending()
