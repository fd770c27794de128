import pytest

from conftest import UniformDecoder, png_bytes
from cropcare.services.decoding import ImageDecodeError, get_decoder, register_decoder
from cropcare.services.decoding.pillow_decoder import PillowDecoder


def test_registry_returns_pillow_by_default():
    assert isinstance(get_decoder(), PillowDecoder)
    assert get_decoder("PILLOW") is get_decoder("pillow")


def test_registry_rejects_unknown_decoder():
    with pytest.raises(ValueError):
        get_decoder("imagemagick")


def test_registered_decoders_are_resolvable():
    class SolidDecoder(UniformDecoder):
        def __init__(self):
            super().__init__(300, 300)

    register_decoder("solid", SolidDecoder)
    assert isinstance(get_decoder("solid"), SolidDecoder)


async def test_pillow_keeps_full_dimensions_and_downscales_raster():
    decoded = await PillowDecoder().decode(png_bytes((1024, 600)))
    with decoded:
        assert (decoded.width, decoded.height) == (1024, 600)
        raster = decoded.raster(512)
    assert (raster.width, raster.height) == (512, 300)
    assert len(raster.rgba) == 512 * 300 * 4
    assert raster.rgba[:4] == bytes((0, 200, 0, 255))


async def test_pillow_raster_of_rgb_image_is_opaque():
    decoded = await PillowDecoder().decode(png_bytes((300, 300), color=(10, 20, 30), mode="RGB"))
    raster = decoded.raster(512)
    decoded.close()
    assert (raster.width, raster.height) == (300, 300)
    assert raster.rgba[:4] == bytes((10, 20, 30, 255))


async def test_pillow_rejects_garbage():
    with pytest.raises(ImageDecodeError):
        await PillowDecoder().decode(b"GIF89a but not really")


def test_lookup_is_case_insensitive_for_registered_decoders():
    class CaseDecoder(UniformDecoder):
        def __init__(self):
            super().__init__(300, 300)

    register_decoder("Case", CaseDecoder)
    assert get_decoder("CASE") is get_decoder("case")
