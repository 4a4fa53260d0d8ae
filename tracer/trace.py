"""
Raster → polyline 트레이서.

    buffer ─ to_gray ─ gaussian_blur ─ sobel ─ NMS ─ hysteresis ─ trace ─ simplify

각 단계는 새 배열을 만들어 다음 단계로 넘기며 모듈 전역 상태는 없다.
"""
import logging
from dataclasses import replace

import numpy as np

from .gradient import thin_edges
from .hysteresis import classify, edge_pixels
from .models import EdgeState, PixelBuffer, TraceParams, TraceResult
from .preprocess import preprocess
from .vectorize import simplify_paths, trace_paths

logger = logging.getLogger(__name__)


def detect_edges(buffer: PixelBuffer, low: float, high: float) -> np.ndarray:
    """Canny 단계(1~3). return: EdgeState uint8 (H, W)"""
    blurred = preprocess(buffer)
    thinned = thin_edges(blurred)
    states = classify(thinned, low, high)
    logger.debug("edges %s: strong=%d weak=%d", buffer,
                 int((states == EdgeState.STRONG).sum()), int((states == EdgeState.WEAK).sum()))
    return states


def edges_to_rgba(states: np.ndarray) -> np.ndarray:
    """미리보기용: edge는 흰색, 나머지는 검정 (alpha 255)"""
    h, w = states.shape[:2]
    rgba = np.zeros((h, w, 4), np.uint8)
    rgba[edge_pixels(states), :3] = 255
    rgba[..., 3] = 255
    return rgba


def trace_image(buffer: PixelBuffer, params: TraceParams | None = None, **overrides) -> TraceResult:
    """
    전체 파이프라인.
    params: TraceParams (없으면 config 기본값), overrides로 개별 필드 덮어쓰기
      ex) trace_image(buf, low_threshold=10, high_threshold=50, min_path_length=0)
    """
    p = replace(params or TraceParams(), **overrides).validated()

    states = detect_edges(buffer, p.low_threshold, p.high_threshold)
    raw = trace_paths(edge_pixels(states), p.min_path_length)

    pairs = simplify_paths(raw, p.simplification)
    kept_raw = [r for r, _ in pairs]
    paths = [s for _, s in pairs]

    logger.info("traced %s: %d paths (%d points) low=%g high=%g stride=%d min_len=%d",
                buffer, len(paths), sum(len(q) for q in paths),
                p.low_threshold, p.high_threshold, int(p.simplification), p.min_path_length)
    return TraceResult(edges=states, raw_paths=kept_raw, paths=paths)
