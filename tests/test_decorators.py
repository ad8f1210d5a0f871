import pytest

from loresgfx.colour import UV, Colour, FColour, approx_equal, normal_to_colour
from loresgfx.decorators import (
    IDENTITY_2D,
    ImageColourTransform,
    ImageDecorator,
    ImageFilter,
    ImageLighting,
    ImageNormalMap,
    ImageRegion,
    ImageScale,
    ImageUVTransform,
)
from loresgfx.image import Image8, Image32


def make_colour(i):
    return Colour(i, i, i)


def src_image():
    src = Image32()
    src.set_size(2, 2)
    src.set_colour(0, 0, make_colour(1))
    src.set_colour(1, 0, make_colour(2))
    src.set_colour(0, 1, make_colour(3))
    src.set_colour(1, 1, make_colour(4))
    return src


def make_sq_image8():
    for i in range(1, 5):
        Image8.palette.add_colour(make_colour(i))
    im = Image8()
    im.set_size(2, 2)
    im.set_colour(0, 0, make_colour(1))
    im.set_colour(1, 0, make_colour(2))
    im.set_colour(0, 1, make_colour(3))
    im.set_colour(1, 1, make_colour(4))
    return im


# Image region

def test_full_size_region_looks_like_child():
    ir = ImageRegion(src_image())
    assert ir.width == 2
    assert ir.height == 2
    assert ir.get_colour(0, 0) == make_colour(1)
    assert ir.get_colour(1, 0) == make_colour(2)
    assert ir.get_colour(0, 1) == make_colour(3)
    assert ir.get_colour(1, 1) == make_colour(4)


def test_sub_region_top_left():
    ir = ImageRegion(src_image())
    ir.set_region(0, 0, 1, 1)
    assert ir.width == 1
    assert ir.height == 1
    assert ir.get_colour(0, 0) == make_colour(1)


def test_sub_region_lower_right():
    ir = ImageRegion(src_image())
    ir.set_region(1, 1, 1, 1)
    assert ir.width == 1
    assert ir.height == 1
    assert ir.get_colour(0, 0) == make_colour(4)


def test_write_to_sub_region_top_left():
    src = src_image()
    ir = ImageRegion(src)
    ir.set_region(0, 0, 1, 1)
    ir.set_colour(0, 0, make_colour(5))
    assert ir.get_colour(0, 0) == make_colour(5)
    assert src.get_colour(0, 0) == make_colour(5)


def test_write_to_sub_region_lower_right():
    src = src_image()
    ir = ImageRegion(src)
    ir.set_region(1, 1, 1, 1)
    ir.set_colour(0, 0, make_colour(5))
    assert ir.get_colour(0, 0) == make_colour(5)
    assert src.get_colour(0, 0) == make_colour(1)
    assert src.get_colour(1, 1) == make_colour(5)


def test_region_move_keeps_size():
    ir = ImageRegion(src_image(), 0, 0, 1, 2)
    ir.set_region(1, 0)
    assert (ir.width, ir.height) == (1, 2)
    assert ir.get_colour(0, 1) == make_colour(4)


def test_region_out_of_child_raises():
    ir = ImageRegion(src_image(), 1, 1, 2, 2)
    with pytest.raises(IndexError):
        ir.get_colour(1, 1)


# Base decorator

def test_decorator_delegates_everything():
    child = src_image()
    dec = ImageDecorator(child)
    dec.set_colour(1, 0, make_colour(9))
    assert child.get_colour(1, 0) == make_colour(9)
    dec.set_size(3, 1)
    assert (child.width, child.height) == (3, 1)
    assert (dec.width, dec.height) == (3, 1)
    dec.clear(make_colour(7))
    assert child.get_colour(2, 0) == make_colour(7)


def test_decorator_without_child_raises():
    with pytest.raises(ValueError):
        ImageDecorator().get_colour(0, 0)


# Lighting

def test_one_pixel_lighting_gives_dot_product_of_colour_as_normal():
    normal_map = Image32()
    normal_map.set_size(1, 1)
    normal_map.set_colour(0, 0, normal_to_colour((1, 0, 0)))

    lighting = ImageLighting(normal_map)
    lighting.light_dir = (1.0, 0.0, 0.0)

    assert approx_equal(lighting.get_colour(0, 0), Colour(0xFF, 0xFF, 0xFF), 3)


def test_light_dir_is_normalised():
    lighting = ImageLighting()
    lighting.light_dir = (3.0, 0.0, 4.0)
    assert approx_equal(lighting.light_dir, (0.6, 0.0, 0.8))


def test_zero_light_dir_rejected():
    lighting = ImageLighting()
    lighting.light_dir = (0.0, 0.0, 2.0)
    with pytest.raises(ValueError):
        lighting.light_dir = (0, 0, 0)
    assert approx_equal(lighting.light_dir, (0.0, 0.0, 1.0))


def test_lighting_transparent_normal_gives_transparent_result():
    normal_map = Image32(1, 1)
    normal_map.set_colour(0, 0, Colour(255, 128, 128, 0))
    lighting = ImageLighting(normal_map)
    lighting.light_dir = (1.0, 0.0, 0.0)
    assert lighting.get_colour(0, 0).a == 0


def test_lighting_colour_setters_accept_colour():
    lighting = ImageLighting()
    lighting.diffuse_colour = Colour(255, 0, 0)
    assert lighting.diffuse_colour.to_colour() == Colour(255, 0, 0)


# UV transform

def test_transform_by_identity():
    im = make_sq_image8()
    xf = ImageUVTransform(im, IDENTITY_2D)
    assert xf.width == im.width
    assert xf.height == im.height
    assert xf.get_colour(0, 0) == make_colour(1)
    assert xf.get_colour(1, 0) == make_colour(2)
    assert xf.get_colour(0, 1) == make_colour(3)
    assert xf.get_colour(1, 1) == make_colour(4)


def test_translation_shifts_lookup_and_marks_outside():
    im = src_image()
    xf = ImageUVTransform(im, ((1, 0, 1), (0, 1, 0), (0, 0, 1)))
    assert xf.get_colour(1, 0) == make_colour(1)
    assert xf.get_colour(1, 1) == make_colour(3)
    assert xf.get_colour(0, 0) == ImageUVTransform.OUT_OF_RANGE
    assert (xf.width, xf.height) == (2, 2)


def test_singular_transform_rejected():
    xf = ImageUVTransform(src_image())
    with pytest.raises(ValueError):
        xf.set_transform(((0, 0, 0), (0, 1, 0), (0, 0, 1)))
    assert xf.matrix == IDENTITY_2D


def test_scaling_transform_scales_size():
    xf = ImageUVTransform(src_image(), ((2, 0, 0), (0, 2, 0), (0, 0, 1)))
    assert (xf.width, xf.height) == (4, 4)
    assert xf.get_colour(3, 3) == make_colour(4)


# Scale

def test_scale_up_repeats_pixels():
    sc = ImageScale(src_image(), 2.0)
    assert (sc.width, sc.height) == (4, 4)
    assert sc.get_colour(3, 3) == make_colour(4)
    assert sc.get_colour(1, 0) == make_colour(1)


def test_scale_separate_axes():
    sc = ImageScale(src_image())
    sc.set_scale(1.0, 0.5)
    assert (sc.width, sc.height) == (2, 1)
    assert sc.get_colour(1, 0) == make_colour(2)


# Colour transform

def test_colour_transform_defaults_leave_colour_unchanged():
    child = src_image()
    xf = ImageColourTransform(child)
    assert xf.get_colour(1, 1) == child.get_colour(1, 1)


def test_colour_transform_add_is_clamped():
    child = Image32(1, 1)
    child.clear(Colour(200, 200, 200, 255))
    xf = ImageColourTransform(child, add=Colour(100, 0, 0, 0))
    assert xf.get_colour(0, 0) == Colour(255, 200, 200, 255)


def test_colour_transform_zero_mult_leaves_only_add():
    child = src_image()
    xf = ImageColourTransform(child, FColour(0.0, 0.0, 0.0, 0.0), Colour(5, 6, 7, 8))
    assert xf.get_colour(1, 1) == Colour(5, 6, 7, 8)


# Filter

def test_single_tap_filter_returns_child():
    child = src_image()
    flt = ImageFilter(child, [(UV(0, 0), 1.0)])
    assert flt.get_colour(1, 0) == child.get_colour(1, 0)


def test_filter_ignores_taps_outside_image():
    child = src_image()
    flt = ImageFilter(child, [(UV(0, 0), 1.0), (UV(5, 5), 1.0)])
    assert flt.get_colour(0, 1) == child.get_colour(0, 1)


def test_empty_filter_gives_default_black():
    flt = ImageFilter(src_image())
    assert flt.get_colour(0, 0) == Colour(0, 0, 0, 0xFF)


# Normal map

def test_normal_map_identity_keeps_normal_and_alpha():
    child = Image32(1, 1)
    child.set_colour(0, 0, Colour(255, 0, 128, 7))
    nm = ImageNormalMap(child)
    res = nm.get_colour(0, 0)
    assert approx_equal(Colour(res.r, res.g, res.b), Colour(255, 0, 128), 2)
    assert res.a == 7


def test_normal_map_half_turn_flips_x_and_y():
    child = Image32(1, 1)
    child.set_colour(0, 0, Colour(255, 0, 128))
    nm = ImageNormalMap(child, ((-1, 0, 0), (0, -1, 0), (0, 0, 1)))
    assert approx_equal(nm.get_colour(0, 0), Colour(0, 255, 128), 2)