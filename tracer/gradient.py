import cv2
import numpy as np

from .preprocess import has_interior, zero_border


def sobel_gradients(field: np.ndarray):
    """
    3x3 Sobel (Gx=[-1,0,1,-2,0,2,-1,0,1], Gy=[-1,-2,-1,0,0,0,1,2,1]).
    return: (magnitude, direction[rad]) 둘 다 float32 (H, W), 테두리는 0
    """
    mag = np.zeros(field.shape, np.float32)
    ang = np.zeros(field.shape, np.float32)
    if not has_interior(field):
        return mag, ang

    src = field.astype(np.float64)
    sx = cv2.Sobel(src, cv2.CV_64F, 1, 0, ksize=3)
    sy = cv2.Sobel(src, cv2.CV_64F, 0, 1, ksize=3)

    mag[...] = np.sqrt(sx * sx + sy * sy)
    ang[...] = np.arctan2(sy, sx)
    return zero_border(mag), zero_border(ang)


def direction_sectors(direction: np.ndarray) -> np.ndarray:
    """
    방향을 [0, 180]도로 정규화 후 4개 섹터 인덱스(0:0도, 1:45도, 2:90도, 3:135도)로.
    0도 섹터는 [0, 22.5) U [157.5, 180] 으로 감싼다.
    """
    a = direction.astype(np.float64) * (180.0 / np.pi)
    a = np.where(a < 0, a + 180.0, a)
    sector = np.zeros(a.shape, np.uint8)
    sector[(a >= 22.5) & (a < 67.5)] = 1
    sector[(a >= 67.5) & (a < 112.5)] = 2
    sector[(a >= 112.5) & (a < 157.5)] = 3
    return sector


def non_max_suppression(magnitude: np.ndarray, direction: np.ndarray) -> np.ndarray:
    """
    그래디언트 방향을 따라 양쪽 이웃보다 크거나 같은 픽셀만 남긴다 (Canny thinning).
    섹터별 비교 이웃:
      0도   (x+1, y)   / (x-1, y)
      45도  (x+1, y+1) / (x-1, y-1)
      90도  (x, y+1)   / (x, y-1)
      135도 (x+1, y-1) / (x-1, y+1)
    """
    out = np.zeros(magnitude.shape, np.float32)
    if not has_interior(magnitude):
        return out

    m = magnitude
    c = m[1:-1, 1:-1]
    sector = direction_sectors(direction)[1:-1, 1:-1]

    q = np.select(
        [sector == 0, sector == 1, sector == 2, sector == 3],
        [m[1:-1, 2:], m[2:, 2:], m[2:, 1:-1], m[:-2, 2:]],
    )
    r = np.select(
        [sector == 0, sector == 1, sector == 2, sector == 3],
        [m[1:-1, :-2], m[:-2, :-2], m[:-2, 1:-1], m[2:, :-2]],
    )
    keep = (c >= q) & (c >= r)
    out[1:-1, 1:-1] = np.where(keep, c, 0)
    return out


def thin_edges(blurred: np.ndarray) -> np.ndarray:
    mag, ang = sobel_gradients(blurred)
    return non_max_suppression(mag, ang)
