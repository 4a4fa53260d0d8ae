import numpy as np
import pytest

from tracer.errors import InvalidInput
from tracer.models import PixelBuffer
from tracer.preprocess import to_gray, gaussian_blur, preprocess
from tools.gen_patterns import solid

def test_luma_weights_and_alpha_ignored():
    data = [255,0,0,0,  0,255,0,0,  0,0,255,255]
    gray = to_gray(PixelBuffer(3, 1, data))
    assert gray.dtype == np.float32
    assert gray.tolist() == [[76.0, 150.0, 29.0]]

def test_blur_impulse_response():
    rgba = np.zeros((5, 5, 4), np.uint8)
    rgba[2, 2, :3] = 16
    blurred = gaussian_blur(to_gray(PixelBuffer.from_array(rgba)))
    assert blurred[2, 2] == 4.0
    assert blurred[1, 2] == 2.0 and blurred[2, 1] == 2.0
    assert blurred[1, 1] == 1.0 and blurred[3, 3] == 1.0

def test_blur_leaves_border_zero():
    blurred = preprocess(solid(6, 5, 100))
    assert np.all(blurred[1:-1, 1:-1] == 100.0)
    assert not blurred[0].any() and not blurred[-1].any()
    assert not blurred[:, 0].any() and not blurred[:, -1].any()

@pytest.mark.parametrize("w,h", [(1, 1), (2, 5), (5, 2)])
def test_tiny_images_blur_to_zero(w, h):
    assert not preprocess(solid(w, h, 200)).any()

def test_buffer_from_bytes():
    buf = PixelBuffer(2, 2, bytes(range(16)))
    rgba = buf.as_array()
    assert rgba.shape == (2, 2, 4)
    assert rgba[0, 1, 2] == 6 and rgba[1, 1, 3] == 15
    assert PixelBuffer(2, 2, bytearray(range(16))).as_array()[1, 0, 0] == 8
    assert PixelBuffer(2, 2, memoryview(bytes(range(16)))).as_array()[1, 1, 0] == 12

def test_buffer_length_must_match():
    with pytest.raises(InvalidInput):
        PixelBuffer(2, 2, bytes(range(1, 16)))
    with pytest.raises(InvalidInput):
        PixelBuffer(2, 2, bytes(range(1, 18)))
    with pytest.raises(InvalidInput):
        PixelBuffer(4, 4, list(range(63)))
    with pytest.raises(ValueError):
        PixelBuffer(0, 4, b"")

def test_buffer_is_read_only():
    buf = PixelBuffer(2, 2, bytearray(16))
    with pytest.raises(ValueError):
        buf.as_array()[0, 0, 0] = 1
