import pytest

from easycolor.colors import CMYK, HSL, HSLA, HSV, RGB, RGBA, Hex
from easycolor.utils.random_utils import seed


@pytest.fixture
def seeded():
    """Reseed the shared random source, then restore an unseeded one."""
    seed(1234)
    yield
    seed(None)


@pytest.fixture
def teal():
    """The #2bc48a sample color in every representation."""
    return {
        Hex: Hex((43, 196, 138, 1.0)),
        RGB: RGB((43, 196, 138)),
        RGBA: RGBA((43, 196, 138, 1.0)),
        HSL: HSL((157, 64, 47)),
        HSLA: HSLA((157, 64, 47, 1.0)),
        HSV: HSV((157, 78, 77)),
        CMYK: CMYK((78, 0, 30, 23)),
    }
