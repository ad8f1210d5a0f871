from loresgfx.colour import Colour
from loresgfx.filler import fill, noise_colour, noise_greyscale, solid_colour
from loresgfx.image import Image32


def test_fill_with_solid_colour():
    im = Image32()
    im.set_size(1, 1)
    fill(im, solid_colour(Colour(0xFF, 0, 0)))
    assert im.get_colour(0, 0) == Colour(0xFF, 0, 0)


def test_fill_with_block_colour_using_lambda():
    im = Image32()
    im.set_size(1, 1)
    fill(im, lambda x, y, w, h: Colour(0xFF, 0, 0))
    assert im.get_colour(0, 0) == Colour(0xFF, 0, 0)


def test_fill_covers_every_pixel():
    im = Image32(3, 2)
    c = Colour(1, 2, 3, 4)
    fill(im, solid_colour(c))
    assert {im.get_colour(x, y) for x in range(3) for y in range(2)} == {c}


def test_fill_passes_coordinates_and_size():
    im = Image32(3, 2)
    seen = []

    def filler(x, y, w, h):
        seen.append((x, y, w, h))
        return Colour(x, y, 0)

    fill(im, filler)
    assert seen == [(x, y, 3, 2) for y in range(2) for x in range(3)]
    assert im.get_colour(2, 1) == Colour(2, 1, 0)


def test_fill_with_noise_is_opaque():
    im = Image32(4, 4)
    fill(im, noise_colour)
    assert all(im.get_colour(x, y).a == 0xFF for x in range(4) for y in range(4))


def test_fill_with_greyscale_noise_is_grey_and_opaque():
    im = Image32(4, 4)
    fill(im, noise_greyscale)
    for x in range(4):
        for y in range(4):
            c = im.get_colour(x, y)
            assert c.r == c.g == c.b
            assert c.a == 0xFF