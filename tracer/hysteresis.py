# tracer/hysteresis.py
import cv2
import numpy as np

from .errors import InvalidInput
from .models import EdgeState


def _check_thresholds(low, high):
    if low > high:
        raise InvalidInput(f"low threshold {low} exceeds high threshold {high}")


def seed_mask(thinned: np.ndarray, low: float, high: float) -> np.ndarray:
    """
    전파 전 분류: >= high → STRONG, [low, high) → WEAK, 나머지 NONE.
    내부 픽셀만 분류하므로 threshold가 0이어도 테두리는 NONE.
    """
    _check_thresholds(low, high)
    states = np.full(thinned.shape, EdgeState.NONE, np.uint8)
    h, w = thinned.shape[:2]
    if w < 3 or h < 3:
        return states

    # threshold는 double 비교 (float32로 내려가지 않게)
    inner = thinned[1:-1, 1:-1].astype(np.float64)
    view = states[1:-1, 1:-1]
    view[inner >= low] = EdgeState.WEAK
    view[inner >= high] = EdgeState.STRONG
    return states


def propagate(states: np.ndarray) -> np.ndarray:
    """
    STRONG 씨앗과 8-연결된 WEAK 영역을 STRONG으로 승격 (in place).
    weak+strong 마스크의 연결요소 중 STRONG을 포함하는 것만 남기는 것과 같다.
    """
    candidates = (states != EdgeState.NONE).astype(np.uint8)
    if not candidates.any():
        return states
    _, labels = cv2.connectedComponents(candidates, connectivity=8)
    seeded = np.unique(labels[states == EdgeState.STRONG])
    seeded = seeded[seeded > 0]
    states[np.isin(labels, seeded) & (candidates > 0)] = EdgeState.STRONG
    return states


def classify(thinned: np.ndarray, low: float, high: float) -> np.ndarray:
    """
    hysteresis thresholding. return: EdgeState 값의 uint8 (H, W).
    전파되지 못한 WEAK는 그대로 WEAK로 남고 edge_pixels()에서 버려진다.
    """
    return propagate(seed_mask(thinned, low, high))


def edge_pixels(states: np.ndarray) -> np.ndarray:
    return states == EdgeState.STRONG
