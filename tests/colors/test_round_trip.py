import pytest

from easycolor.colors import CMYK, HSL, HSLA, HSV, RGB, RGBA, Hex, color_from_string
from ..samples import samples_text

PARSERS = {
    "hex": Hex, "rgb": RGB, "rgba": RGBA, "hsl": HSL,
    "hsla": HSLA, "hsv": HSV, "cmyk": CMYK,
}


def test_parse_format_parse():
    for prefix, texts in samples_text.items():
        cls = PARSERS[prefix]
        for text in texts:
            color = cls.parse(text)
            assert cls.parse(str(color)) == color, text


def test_canonical_text_is_reproduced():
    for prefix, texts in samples_text.items():
        cls = PARSERS[prefix]
        for text in texts:
            if text == "#FAC":
                continue
            assert str(cls.parse(text)) == text


@pytest.mark.parametrize("cls", [RGB, RGBA, HSL, HSLA, HSV, CMYK])
def test_random_colors_survive_text(cls, seeded):
    for _ in range(50):
        color = cls.random()
        assert cls.parse(str(color)) == color
        assert color_from_string(str(color)) == color


def test_hex_text_survives_every_alpha_byte():
    for n in range(0, 256, 5):
        text = f"#2BC48A{n:02X}"
        color = Hex.parse(text)
        assert color.to_hex_alpha() == text
        assert Hex.parse(color.to_hex_alpha()) == color
