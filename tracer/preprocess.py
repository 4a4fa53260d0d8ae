import cv2
import numpy as np

from .models import PixelBuffer

LUMA = (0.299, 0.587, 0.114)
BLUR_KERNEL = np.array([[1, 2, 1],
                        [2, 4, 2],
                        [1, 2, 1]], dtype=np.float64) / 16.0


def zero_border(field):
    """0행, H-1행, 0열, W-1열을 0으로 (in place)"""
    field[0, :] = 0
    field[-1, :] = 0
    field[:, 0] = 0
    field[:, -1] = 0
    return field


def has_interior(field) -> bool:
    h, w = field.shape[:2]
    return w >= 3 and h >= 3


def to_gray(buffer: PixelBuffer) -> np.ndarray:
    """
    RGBA → luma(0.299R + 0.587G + 0.114B), 정수로 반올림(half-up). alpha는 무시.
    return: float32 (H, W)
    """
    rgba = buffer.as_array().astype(np.float64)
    r, g, b = rgba[..., 0], rgba[..., 1], rgba[..., 2]
    luma = LUMA[0] * r + LUMA[1] * g + LUMA[2] * b
    gray = np.clip(np.floor(luma + 0.5), 0, 255)
    return gray.astype(np.float32)


def gaussian_blur(field: np.ndarray) -> np.ndarray:
    """
    3x3 가우시안 근사 [1,2,1,2,4,2,1,2,1]/16.
    내부 픽셀(1 <= x < W-1, 1 <= y < H-1)만 계산하고 테두리는 0으로 둔다.
    """
    out = np.zeros(field.shape, np.float32)
    if not has_interior(field):
        return out
    # 커널이 대칭이라 filter2D(상관)와 합성곱이 같다. 테두리 값은 아래에서 버림
    blurred = cv2.filter2D(field.astype(np.float64), cv2.CV_64F, BLUR_KERNEL,
                           borderType=cv2.BORDER_CONSTANT)
    out[1:-1, 1:-1] = blurred[1:-1, 1:-1]
    return out


def preprocess(buffer: PixelBuffer) -> np.ndarray:
    return gaussian_blur(to_gray(buffer))
