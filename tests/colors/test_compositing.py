from chromacore.colors import RGB, HSL, HSV, CMYK, Gray
from chromacore.colors.compositing import composite, premultiply, unpremultiply, composite_premultiplied
import pytest


def test_red_over_blue():
    top = RGB.from_ints(255, 0, 0, alpha=0.5)
    bottom = RGB.from_ints(0, 0, 255, alpha=1.0)
    result = composite(top, bottom)
    assert result.to_ints() == (128, 0, 128)
    assert result.alpha == 1.0


def test_opaque_top_occludes_bottom():
    top = HSL(200.0, 0.4, 0.3)
    for bottom in (HSL(10.0, 1.0, 0.5), HSL(0.0, 0.0, 0.0, alpha=0.0), HSL(90, 0.5, 0.5, alpha=0.3)):
        assert composite(top, bottom) == top


def test_transparent_top_keeps_bottom():
    bottom = CMYK(0.1, 0.2, 0.3, 0.4, alpha=0.8)
    top = CMYK(0.9, 0.9, 0.9, 0.0, alpha=0.0)
    assert composite(top, bottom) == bottom


def test_zero_output_alpha_is_transparent_black():
    result = composite(RGB(1, 1, 1, alpha=0.0), RGB(0.5, 0.5, 0.5, alpha=0.0))
    assert result == RGB(0.0, 0.0, 0.0, alpha=0.0)


def test_output_alpha():
    result = composite(RGB(1, 0, 0, alpha=0.5), RGB(0, 0, 1, alpha=0.5))
    assert result.alpha == 0.75
    assert result.is_close(RGB(2 / 3, 0.0, 1 / 3, alpha=0.75), tol=1e-12)


def test_result_keeps_operand_model():
    result = composite(HSV(0, 1, 1, alpha=0.5), HSV(240, 1, 1))
    assert isinstance(result, HSV)
    assert result.to_rgb().is_close(RGB(0.5, 0.0, 0.5), tol=1e-9)

    gray = composite(Gray(1.0, alpha=0.25), Gray(0.0))
    assert isinstance(gray, Gray)
    assert gray.luma == 0.25


def test_mismatched_models_raise():
    with pytest.raises(TypeError):
        composite(RGB(), HSL())  # type: ignore[type-var]


def test_premultiplied_round_trip():
    rgb = RGB(0.8, 0.4, 0.2, alpha=0.5)
    assert premultiply(rgb) == (0.4, 0.2, 0.1, 0.5)
    assert unpremultiply(premultiply(rgb)).is_close(rgb, tol=1e-12)
    assert unpremultiply((0.3, 0.3, 0.3, 0.0)) == RGB(0, 0, 0, alpha=0.0)


def test_premultiplied_over_matches_straight_over():
    top = RGB(1.0, 0.0, 0.0, alpha=0.5)
    bottom = RGB(0.0, 0.0, 1.0, alpha=0.6)
    packed = composite_premultiplied(premultiply(top), premultiply(bottom))
    assert unpremultiply(packed).is_close(composite(top, bottom), tol=1e-12)
