import pytest
from PIL import Image as PILImage

from seamdeck.cv.image import Image, Pixel
from seamdeck.cv.jpeg import has_jpeg_extension, read_jpeg, write_jpeg


@pytest.mark.parametrize(
    "name", ["photo.jpg", "PHOTO.JPEG", "dir.v2/picture.Jpg", "a.b.jpeg", "jpg"]
)
def test_jpeg_extension_accepted(name):
    assert has_jpeg_extension(name) is True


@pytest.mark.parametrize("name", ["photo.png", "jpg.png", "a.jpg.txt", "", "photo.jpgx"])
def test_jpeg_extension_rejected(name):
    assert has_jpeg_extension(name) is False


def _close(pixel, expected, tolerance=4):
    return all(abs(a - b) <= tolerance for a, b in zip(pixel, expected))


def test_round_trip_solid_colour(tmp_path):
    image = Image(8, 6)
    image.fill(Pixel(10, 200, 90))
    path = tmp_path / "solid.jpg"
    write_jpeg(image, path, True)
    loaded = read_jpeg(path)
    assert (loaded.width, loaded.height) == (8, 6)
    assert all(_close(loaded[r, c], (10, 200, 90)) for r in range(6) for c in range(8))


def test_values_are_truncated_to_eight_bits(tmp_path):
    image = Image(4, 4)
    image.fill(Pixel(256 + 10, 200, 512 + 90))
    path = tmp_path / "masked.jpg"
    write_jpeg(image, path, True)
    loaded = read_jpeg(path)
    assert (loaded.width, loaded.height) == (4, 4)
    pixel = loaded[2, 2]
    assert abs(pixel.r - 10) <= 4
    assert abs(pixel.g - 200) <= 4
    assert abs(pixel.b - 90) <= 4


def test_grayscale_fills_all_channels(tmp_path):
    path = tmp_path / "gray.jpg"
    PILImage.frombytes("L", (3, 2), bytes([0, 50, 100, 150, 200, 250])).save(
        path, "JPEG", quality=95
    )
    loaded = read_jpeg(path)
    assert (loaded.width, loaded.height) == (3, 2)
    for row in range(2):
        for column in range(3):
            pixel = loaded[row, column]
            assert pixel.r == pixel.g == pixel.b


def test_low_quality_is_smaller(tmp_path):
    image = Image(32, 32)
    for row in range(32):
        for column in range(32):
            image[row, column] = Pixel(row * 8, column * 8, (row * column) % 256)
    low, high = tmp_path / "low.jpg", tmp_path / "high.jpg"
    write_jpeg(image, low)
    write_jpeg(image, high, True)
    assert low.stat().st_size < high.stat().st_size
    assert read_jpeg(low).width == 32


def test_non_jpeg_file_rejected(tmp_path):
    path = tmp_path / "picture.png"
    PILImage.new("RGB", (2, 2)).save(path, "PNG")
    with pytest.raises(ValueError):
        read_jpeg(path)


def test_garbage_file_rejected(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ValueError):
        read_jpeg(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_jpeg(tmp_path / "absent.jpg")