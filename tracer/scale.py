import cv2
import numpy as np

import config
from .models import PixelBuffer, Point


def fit_to_width(buffer: PixelBuffer, max_width: int = config.MAX_TRACE_WIDTH):
    """
    폭이 max_width를 넘으면 비율 유지하며 축소 (INTER_AREA).
    return: (buffer, (sx, sy))  sx = 새 폭 / 원본 폭, sy = 새 높이 / 원본 높이
            높이는 반올림되므로 sy는 sx와 조금 다를 수 있다. 축소 안 하면 (1.0, 1.0)
    """
    if buffer.width <= max_width:
        return buffer, (1.0, 1.0)
    new_h = max(1, int(round(buffer.height * max_width / buffer.width)))
    resized = cv2.resize(buffer.as_array(), (int(max_width), new_h), interpolation=cv2.INTER_AREA)
    scale = (max_width / buffer.width, new_h / buffer.height)
    return PixelBuffer.from_array(np.ascontiguousarray(resized)), scale


def rescale_paths(paths, scale):
    """
    축소된 이미지에서 얻은 경로를 원본 좌표계로 (float Point)
    scale: fit_to_width가 돌려준 (sx, sy), 또는 두 축 공통 배율 하나
    """
    sx, sy = scale if isinstance(scale, tuple) else (scale, scale)
    if sx == 1.0 and sy == 1.0:
        return [list(p) for p in paths]
    return [[Point(pt.x / sx, pt.y / sy) for pt in path] for path in paths]
