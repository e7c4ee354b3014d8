from chromacore.colors import RGB, HSL, HSV, CMYK, Gray, ColorBase, space_to_class
from chromacore.channels import Channel, Hue
from chromacore.errors import OutOfRangeError
from chromacore.types.color_types import ColorSpace, ColorCapability
from chromacore.types.format_type import FormatType
import pytest
from ..samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_cmyk

ALL_MODELS = (RGB, HSL, HSV, CMYK, Gray)


def test_default_alpha_is_opaque():
    for cls in ALL_MODELS:
        color = cls()
        assert color.alpha == 1.0
        assert isinstance(color.alpha, Channel)
        assert color.is_opaque


def test_channels_are_clamped():
    rgb = RGB(2.0, -1.0, 0.5, alpha=3.0)
    assert rgb.value == (1.0, 0.0, 0.5, 1.0)

    cmyk = CMYK(-0.5, 0.5, 1.5, 0.25, alpha=-1)
    assert cmyk.value == (0.0, 0.5, 1.0, 0.25, 0.0)

    assert Gray(7).luma == 1.0


def test_hue_wraps_on_construction():
    assert HSV(360.0, 1.0, 1.0) == HSV(0.0, 1.0, 1.0)
    assert HSL(-90.0, 0.5, 0.5).h == 270.0
    assert HSV(400.0, 2.0, 0.5).value == (40.0, 1.0, 0.5, 1.0)
    assert isinstance(HSL(10, 0, 0).h, Hue)


def test_accessors():
    rgb = RGB(0.1, 0.2, 0.3, alpha=0.4)
    assert (rgb.r, rgb.g, rgb.b, rgb.alpha) == (0.1, 0.2, 0.3, 0.4)
    assert rgb.channels == (0.1, 0.2, 0.3)

    hsl = HSL(10, 0.2, 0.3)
    assert (hsl.h, hsl.s, hsl.l) == (10.0, 0.2, 0.3)
    hsv = HSV(10, 0.2, 0.3)
    assert (hsv.h, hsv.s, hsv.v) == (10.0, 0.2, 0.3)
    cmyk = CMYK(0.1, 0.2, 0.3, 0.4)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0.1, 0.2, 0.3, 0.4)
    assert Gray(0.6).luma == 0.6


def test_immutable():
    rgb = RGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        rgb.r = 0.5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        rgb.extra = 1  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        rgb._value = (0.0, 0.0, 0.0, 1.0)
    assert rgb.r == 0.1


def test_with_alpha_returns_new_instance():
    rgb = RGB(0.5, 0.25, 0.75)
    half = rgb.with_alpha(0.5)
    assert half is not rgb
    assert half.alpha == 0.5
    assert half.channels == rgb.channels
    assert rgb.alpha == 1.0
    assert rgb.with_alpha(4).alpha == 1.0

    hsl = HSL(120.0, 0.5, 0.6).with_alpha(0.75)
    assert isinstance(hsl, HSL)
    assert hsl.value == (120.0, 0.5, 0.6, 0.75)


def test_equality_is_exact_and_model_specific():
    assert RGB(0.1, 0.2, 0.3) == RGB(0.1, 0.2, 0.3)
    assert RGB(0.1, 0.2, 0.3) != RGB(0.1, 0.2, 0.3 + 1e-12)
    assert RGB(0.0, 0.0, 0.0) != Gray(0.0)
    assert RGB() != (0.0, 0.0, 0.0, 1.0)
    assert len({RGB(0.1, 0.2, 0.3), RGB(0.1, 0.2, 0.3), HSL(0.1, 0.2, 0.3)}) == 2


def test_is_close_compares_hue_on_circle():
    assert HSV(359.9999999, 1, 1).is_close(HSV(0.0, 1, 1))
    assert not HSV(10.0, 1, 1).is_close(HSV(11.0, 1, 1))
    assert not RGB().is_close(Gray())


def test_repr():
    assert repr(RGB(1, 0, 0)) == "RGB(r=1.0, g=0.0, b=0.0, alpha=1.0)"
    assert repr(Gray(0.5, alpha=0.25)) == "Gray(luma=0.5, alpha=0.25)"


def test_has_hue_property():
    assert not RGB().has_hue
    assert not CMYK().has_hue
    assert not Gray().has_hue
    assert HSV().has_hue
    assert HSL().has_hue


def test_registry_and_capability():
    assert set(space_to_class) == set(ColorSpace)
    for space, cls in space_to_class.items():
        assert cls.mode == space
        assert issubclass(cls, ColorBase)
        assert isinstance(cls(), ColorCapability)


def test_checked_constructor_rejects_out_of_range():
    with pytest.raises(OutOfRangeError) as info:
        RGB.checked(1.2, 0.0, 0.0)
    assert info.value.channel == "r"
    assert info.value.value == 1.2

    with pytest.raises(OutOfRangeError) as info:
        HSL.checked(361.0, 0.5, 0.5)
    assert info.value.channel == "h"

    with pytest.raises(OutOfRangeError) as info:
        CMYK.checked(0.0, 0.0, 0.0, 0.0, alpha=-0.1)
    assert info.value.channel == "alpha"

    with pytest.raises(OutOfRangeError):
        Gray.checked(float("nan"))


def test_checked_constructor_accepts_valid_values():
    assert RGB.checked(1.0, 0.0, 0.5, alpha=0.5) == RGB(1.0, 0.0, 0.5, alpha=0.5)
    assert HSL.checked(360.0, 0.5, 0.5).h == 0.0


def test_checked_constructor_arity():
    with pytest.raises(ValueError):
        RGB.checked(0.1, 0.2)


def test_from_format():
    hsv = HSV.from_format((180, 128, 255), FormatType.INT)
    assert hsv.h == 180.0
    assert hsv.s == 128 / 255
    assert hsv.v == 1.0
    assert hsv.alpha == 1.0

    rgb = RGB.from_format((100, 50, 0, 50), FormatType.PERCENTAGE)
    assert rgb.value == (1.0, 0.5, 0.0, 0.5)

    with pytest.raises(ValueError):
        RGB.from_format((1, 2), FormatType.INT)


def test_to_format():
    assert HSV.from_format((180, 128, 255), FormatType.INT).to_format(FormatType.INT) == (180, 128, 255, 255)
    assert RGB(1.0, 0.5, 0.0, alpha=0.5).to_format(FormatType.PERCENTAGE) == (100.0, 50.0, 0.0, 50.0)
    assert RGB(1.0, 0.5, 0.0).to_format(FormatType.INT, include_alpha=False) == (255, 128, 0)
    # 359.6 degrees rounds to a full turn
    assert HSV(359.6, 1.0, 1.0).to_format(FormatType.INT)[0] == 0


def test_from_ints():
    assert RGB.from_ints(255, 0, 0) == RGB(1.0, 0.0, 0.0)
    assert RGB.from_ints(255, 128, 0, alpha=0.5).to_ints() == (255, 128, 0)


def test_class_conversion_rgb_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        hsv = RGB(*rgb).convert(HSV)
        assert isinstance(hsv, HSV)
        assert hsv.is_close(HSV(h_exp, s_exp, v_exp), tol=1e-9)


def test_class_conversion_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = RGB(*rgb).convert("hsl")
        assert isinstance(hsl, HSL)
        assert hsl.is_close(HSL(h_exp, s_exp, l_exp), tol=1e-9)


def test_class_conversion_rgb_to_cmyk():
    for rgb, cmyk in samples_rgb_cmyk.items():
        converted = RGB(*rgb).convert(ColorSpace.CMYK)
        assert isinstance(converted, CMYK)
        assert converted.is_close(CMYK(*cmyk), tol=1e-9)


def test_concrete_scenarios():
    hsv = RGB.from_ints(255, 0, 0).convert(HSV)
    assert (hsv.h, hsv.s, hsv.v) == (0.0, 1.0, 1.0)

    cmyk = RGB.from_ints(0, 0, 0).convert(CMYK)
    assert cmyk.value == (0.0, 0.0, 0.0, 1.0, 1.0)


def test_zero_chroma_has_zero_hue():
    for v in (0, 64, 128, 255):
        gray = RGB.from_ints(v, v, v)
        assert gray.convert(HSV).h == 0.0
        assert gray.convert(HSV).s == 0.0
        assert gray.convert(HSL).h == 0.0
        assert gray.convert(HSL).s == 0.0


def test_convert_to_same_model_returns_self():
    hsl = HSL(10, 0.5, 0.5)
    assert hsl.convert(HSL) is hsl
    assert hsl.convert("HSL") is hsl


def test_convert_rejects_unknown_targets():
    with pytest.raises(ValueError):
        RGB().convert("lab")
    with pytest.raises(TypeError):
        RGB().convert(42)  # type: ignore[arg-type]


def test_gray_luma_weights():
    assert abs(RGB(1, 0, 0).convert(Gray).luma - 0.299) < 1e-12
    assert RGB(0.2, 0.4, 0.6).convert(Gray) == Gray.from_rgb(RGB(0.2, 0.4, 0.6))
