import numpy as np

from tracer.gradient import sobel_gradients, non_max_suppression, direction_sectors
from tracer.preprocess import preprocess
from tools.gen_patterns import solid, step_edge

def test_uniform_black_has_no_gradient():
    mag, ang = sobel_gradients(preprocess(solid(5, 5, 0)))
    assert not mag.any() and not ang.any()

def test_step_edge_response():
    # 10x10, x<5 검정 / x>=5 흰색: 불연속 양쪽 픽셀에서 765
    mag, ang = sobel_gradients(preprocess(step_edge()))
    assert np.all(mag[2:8, 4] == 765.0) and np.all(mag[2:8, 5] == 765.0)
    assert np.all(mag[2:8, 3] == 255.0) and np.all(mag[2:8, 6] == 255.0)
    assert np.all(ang[2:8, 4] == 0.0)
    assert not mag[0].any() and not mag[:, -1].any()

def test_nms_thins_step_edge():
    mag, ang = sobel_gradients(preprocess(step_edge()))
    thin = non_max_suppression(mag, ang)
    assert np.all(thin[2:8, 4] == 765.0) and np.all(thin[2:8, 5] == 765.0)
    assert not thin[2:8, 1:4].any() and not thin[2:8, 6:8].any()
    # 오른쪽 테두리(0)와 맞닿은 열도 응답이 남는다
    assert np.all(thin[2:8, 8] == 1020.0)

def test_direction_sectors():
    deg = np.array([[0, 10, 30, 90, 120, 170, -45, -90, 180]], np.float32)
    assert direction_sectors(np.deg2rad(deg)).tolist() == [[0, 0, 1, 2, 3, 0, 3, 2, 0]]

def _single(center=5.0):
    mag = np.zeros((5, 5), np.float32)
    mag[2, 2] = center
    return mag

def test_nms_compares_along_gradient():
    mag = _single(); mag[2, 1] = 6.0
    ang = np.zeros((5, 5), np.float32)
    assert non_max_suppression(mag, ang)[2, 2] == 0.0
    ang[2, 2] = np.pi / 2
    assert non_max_suppression(mag, ang)[2, 2] == 5.0

def test_nms_diagonals():
    mag = _single(); mag[1, 3] = 9.0          # (x+1, y-1)
    ang = np.zeros((5, 5), np.float32)
    ang[2, 2] = np.pi / 4
    assert non_max_suppression(mag, ang)[2, 2] == 5.0
    ang[2, 2] = 3 * np.pi / 4
    assert non_max_suppression(mag, ang)[2, 2] == 0.0

def test_nms_keeps_ties():
    mag = _single(); mag[2, 1] = 5.0; mag[2, 3] = 5.0
    ang = np.zeros((5, 5), np.float32)
    assert non_max_suppression(mag, ang)[2, 2] == 5.0
