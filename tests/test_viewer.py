import pytest
from PIL import Image

from dithery.dither import DitherType, dither_image
from dithery.viewer import ZOOM_STEP, ViewerState, algorithm_choices


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "picture.png"
    image = Image.new("RGB", (100, 50))
    image.putdata([((x * 3) % 256, (y * 5) % 256, (x + y) % 256) for y in range(50) for x in range(100)])
    image.save(path)
    return path


@pytest.fixture
def loaded(image_path):
    state = ViewerState()
    state.load(image_path)
    return state


def test_algorithm_choices_order():
    choices = algorithm_choices()
    assert [dither_type for _, dither_type in choices] == list(DitherType)
    assert choices[2] == ("Floyd-Steinberg", DitherType.FLOYD_STEINBERG)


def test_load_sets_images_and_label(loaded, image_path):
    assert loaded.original.mode == "RGBA"
    assert loaded.original.size == (100, 50)
    assert loaded.current.tobytes() == loaded.original.tobytes()
    assert loaded.file_text == "File: " + str(image_path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        ViewerState().load(tmp_path / "missing.png")


def test_initial_scaling_text():
    assert ViewerState().scaling_text() == "Scaling: 1.00x"


def test_zoom_requires_image():
    state = ViewerState()
    assert state.zoom_in() is False
    assert state.zoom_out() is False
    assert state.scaling == 1.0
    assert state.scaled_size() is None
    assert state.scaled_image() is None


def test_zoom_in_then_out_round_trip(loaded):
    assert loaded.zoom_in() is True
    assert loaded.scaling_text() == "Scaling: 1.10x"
    assert loaded.scaled_size() == (110, 55)
    assert loaded.zoom_out() is True
    assert loaded.scaling == pytest.approx(1.0)


def test_zoom_out_stops_at_minimum(loaded):
    steps = 0
    while loaded.zoom_out():
        steps += 1
        assert steps < 100
    assert 0 < loaded.scaling <= ZOOM_STEP
    before = loaded.scaling
    assert loaded.zoom_out() is False
    assert loaded.scaling == before


def test_scaled_image_matches_zoom(loaded):
    assert loaded.scaled_image().size == loaded.original.size
    loaded.zoom_out()
    width, height = loaded.scaled_size()
    scaled = loaded.scaled_image()
    assert scaled.size[0] <= width and scaled.size[1] <= height
    assert scaled.size[0] * loaded.original.size[1] // loaded.original.size[0] == scaled.size[1]


def test_select_algorithm(loaded):
    assert loaded.select_algorithm(4) == DitherType.BAYER_4X4
    assert loaded.dither_type == DitherType.BAYER_4X4
    assert loaded.select_algorithm(-1) == DitherType.NONE
    assert loaded.select_algorithm(len(algorithm_choices())) == DitherType.NONE


def test_apply_dither_without_image():
    assert ViewerState().apply_dither() is None


def test_apply_dither_uses_original(loaded):
    original_bytes = loaded.original.tobytes()
    loaded.select_algorithm(1)
    result = loaded.apply_dither()
    assert loaded.current is result
    assert result.tobytes() == dither_image(loaded.original, DitherType.BASIC).tobytes()
    assert loaded.original.tobytes() == original_bytes
    loaded.select_algorithm(2)
    again = loaded.apply_dither()
    assert again.tobytes() == dither_image(loaded.original, DitherType.FLOYD_STEINBERG).tobytes()


def test_apply_dither_none_restores_original(loaded):
    loaded.select_algorithm(3)
    loaded.apply_dither()
    loaded.select_algorithm(0)
    assert loaded.apply_dither().tobytes() == loaded.original.tobytes()


def test_set_image_converts_to_rgba():
    state = ViewerState()
    state.set_image(Image.new("L", (4, 3), 7))
    assert state.original.mode == "RGBA"
    assert state.current.getpixel((0, 0)) == (7, 7, 7, 255)