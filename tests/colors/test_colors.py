import numpy as np
import pytest

from easycolor.colors import CMYK, HSL, HSLA, HSV, RGB, RGBA, Hex, color_from_string, get_color_class
from easycolor.errors import ColorValueError
from easycolor.types.color_types import ColorSpace
from ..samples import ALL_COLOR_CLASSES


def test_hex_chain_scenario():
    rgb = Hex.parse("#2bc48a").to_rgb()
    assert str(rgb) == "rgb(43,196,138)"
    hsl = rgb.to_hsl()
    assert str(hsl) == "hsl(157,64%,47%)"
    hsv = hsl.to_hsv()
    assert str(hsv) == "hsv(157,78%,77%)"
    cmyk = hsv.to_cmyk()
    assert str(cmyk) == "cmyk(78,0,30,23)"


def test_setter_chain():
    color = (
        Hex.parse("#2bc48a")
        .to_rgb()
        .with_blue(255)
        .to_hsl()
        .with_lightness(50)
        .to_cmyk()
        .with_cyan(100)
        .to_hex()
    )
    assert str(color) == "#00B8FF"


def test_every_pair_converts(teal):
    for source in teal.values():
        for target_cls in ALL_COLOR_CLASSES:
            converted = source.convert(target_cls.space)
            assert isinstance(converted, target_cls)
            assert type(target_cls(source)) is target_cls


def test_convert_defaults_to_own_space(teal):
    for color in teal.values():
        assert color.convert() == color


def test_convert_accepts_names():
    assert RGB((43, 196, 138)).convert("hsl") == HSL((157, 64, 47))
    assert RGB((43, 196, 138)).convert(ColorSpace.CMYK) == CMYK((78, 0, 30, 23))


def test_rgb_accessors():
    rgb = RGB((1, 2, 3))
    assert (rgb.red, rgb.green, rgb.blue) == (1, 2, 3)
    assert rgb.value == (1, 2, 3)
    assert not rgb.has_alpha
    assert not rgb.has_hue


def test_rgba_forwards_to_rgb():
    rgba = RGBA((1, 2, 3, 0.5))
    assert rgba.rgb == RGB((1, 2, 3))
    assert (rgba.red, rgba.green, rgba.blue, rgba.alpha) == (1, 2, 3, 0.5)
    assert rgba.with_green(200).value == (1, 200, 3, 0.5)
    assert rgba.has_alpha


def test_hsla_forwards_to_hsl():
    hsla = HSLA((10, 20, 30, 0.25))
    assert hsla.hsl == HSL((10, 20, 30))
    assert (hsla.hue, hsla.saturation, hsla.lightness, hsla.alpha) == (10, 20, 30, 0.25)
    assert hsla.with_hue(200).value == (200, 20, 30, 0.25)
    assert hsla.has_hue and hsla.has_alpha


def test_hsv_brightness():
    hsv = HSV((157, 78, 77))
    assert (hsv.hue, hsv.saturation, hsv.brightness) == (157, 78, 77)
    assert hsv.with_brightness(10).value == (157, 78, 10)


def test_cmyk_accessors_read_own_field():
    cmyk = CMYK((1, 2, 3, 4))
    assert cmyk.cyan == 1
    assert cmyk.magenta == 2
    assert cmyk.yellow == 3
    assert cmyk.black == 4
    assert cmyk.with_yellow(50).value == (1, 2, 50, 4)
    assert cmyk.with_black(60).value == (1, 2, 3, 60)


def test_setters_clamp():
    assert RGB((1, 2, 3)).with_red(300).red == 255
    assert RGB((1, 2, 3)).with_red(-5).red == 0
    assert HSL((10, 20, 30)).with_hue(400).hue == 360
    assert HSL((10, 20, 30)).with_saturation(101).saturation == 100
    assert CMYK((1, 2, 3, 4)).with_black(150).black == 100
    assert RGBA((1, 2, 3, 0.5)).with_alpha(1.5).alpha == 1.0
    assert RGBA((1, 2, 3, 0.5)).with_alpha(-1).alpha == 0.0


def test_setters_map_nan_to_zero():
    nan = float("nan")
    assert RGB((1, 2, 3)).with_red(nan) == RGB((0, 2, 3))
    assert HSL((10, 20, 30)).with_hue(nan).hue == 0
    assert CMYK((1, 2, 3, 4)).with_black(nan).black == 0
    assert RGBA((1, 2, 3, 0.5)).with_alpha(nan).alpha == 0.0
    assert RGBA((1, 2, 3, 0.5)).with_red(nan).value == (0, 2, 3, 0.5)


def test_setters_clamp_infinities():
    inf = float("inf")
    assert RGB((1, 2, 3)).with_green(inf).green == 255
    assert RGB((1, 2, 3)).with_green(-inf).green == 0
    assert HSV((1, 2, 3)).with_brightness(inf).brightness == 100


def test_setters_return_new_values():
    rgb = RGB((1, 2, 3))
    changed = rgb.with_red(9)
    assert changed is not rgb
    assert rgb.red == 1
    assert changed.red == 9


def test_constructors_reject_out_of_range():
    with pytest.raises(ColorValueError):
        RGB((256, 0, 0))
    with pytest.raises(ColorValueError):
        HSL((361, 0, 0))
    with pytest.raises(ColorValueError):
        HSV((0, 101, 0))
    with pytest.raises(ColorValueError):
        CMYK((0, 0, 0, 101))
    with pytest.raises(ColorValueError):
        RGBA((1, 2, 3, 1.5))
    with pytest.raises(ColorValueError):
        HSLA((1, 2, 3, -0.1))
    with pytest.raises(ColorValueError):
        RGBA((1, 2, 3, float("nan")))


def test_constructors_reject_bad_shapes():
    with pytest.raises(ColorValueError):
        RGB((1, 2))
    with pytest.raises(ColorValueError):
        RGB((1, 2, 3, 4))
    with pytest.raises(ColorValueError):
        RGB("abc")
    with pytest.raises(ColorValueError):
        RGB(("1", 2, 3))
    with pytest.raises(ColorValueError):
        RGB((1.5, 2, 3))


def test_integral_values_are_accepted():
    assert RGB((1.0, 2, 3)).value == (1, 2, 3)
    assert type(RGB((1.0, 2, 3)).red) is int
    assert RGB((np.int64(1), np.uint8(2), 3)).value == (1, 2, 3)
    assert RGBA((1, 2, 3, 1)).alpha == 1.0
    assert RGB.from_tuple([4, 5, 6]) == RGB((4, 5, 6))


def test_frozen():
    rgb = RGB((1, 2, 3))
    with pytest.raises(AttributeError):
        rgb._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        rgb.red = 4
    with pytest.raises(AttributeError):
        rgb.extra = 1
    rgba = RGBA((1, 2, 3, 0.5))
    with pytest.raises(AttributeError):
        rgba._alpha = 1.0


def test_equality_and_hash():
    assert RGB((1, 2, 3)) == RGB((1, 2, 3))
    assert RGB((1, 2, 3)) != RGB((1, 2, 4))
    assert RGB((1, 2, 3)) != RGBA((1, 2, 3, 1.0))
    assert len({RGB((1, 2, 3)), RGB((1, 2, 3)), HSL((1, 2, 3))}) == 2


def test_repr():
    assert repr(RGB((43, 196, 138))) == "RGB(43, 196, 138)"
    assert repr(RGBA((1, 2, 3, 0.5))) == "RGBA(1, 2, 3, 0.5)"


def test_is_dark():
    assert RGB((0, 0, 0)).is_dark()
    assert RGB((255, 255, 255)).is_light()
    assert RGB((190, 190, 190)).is_dark()
    assert RGB((200, 200, 200)).is_light()
    assert Hex.parse("#2bc48a").is_dark()
    # translucent colors are judged after flattening onto white
    assert RGBA((0, 0, 0, 0.0)).is_light()


def test_with_alpha_on_opaque_types():
    assert RGB((1, 2, 3)).with_alpha(0.5) == RGBA((1, 2, 3, 0.5))
    assert HSL((10, 20, 30)).with_alpha() == HSLA((10, 20, 30, 1.0))
    assert HSL((200, 50, 0)).with_alpha(0.5) == HSLA((200, 50, 0, 0.5))
    assert HSL((300, 3, 97)).with_alpha().hsl == HSL((300, 3, 97))
    assert isinstance(HSV((0, 100, 100)).with_alpha(0.3), RGBA)
    assert CMYK((0, 100, 100, 0)).with_alpha(0.3) == RGBA((255, 0, 0, 0.3))


def test_get_color_class():
    assert get_color_class("rgb") is RGB
    assert get_color_class(ColorSpace.HEX) is Hex
    with pytest.raises(ValueError):
        get_color_class("lab")


def test_color_from_string():
    assert color_from_string("#2bc48a") == Hex((43, 196, 138, 1.0))
    assert color_from_string("rgba(1,2,3,0.5)") == RGBA((1, 2, 3, 0.5))
    assert color_from_string("  HSL(157,64%,47%) ") == HSL((157, 64, 47))
    assert color_from_string("cmyk(78,0,30,23)") == CMYK((78, 0, 30, 23))


def test_random_values_are_valid(seeded):
    for cls in ALL_COLOR_CLASSES:
        for _ in range(20):
            color = cls.random()
            assert cls(color.value) == color


def test_random_is_reproducible():
    from easycolor import seed

    seed(7)
    first = [RGBA.random() for _ in range(5)] + [HSV.random() for _ in range(5)]
    seed(7)
    second = [RGBA.random() for _ in range(5)] + [HSV.random() for _ in range(5)]
    seed(None)
    assert first == second


def test_random_alpha_has_two_decimals(seeded):
    for _ in range(50):
        alpha = HSLA.random().alpha
        assert round(alpha, 2) == alpha
