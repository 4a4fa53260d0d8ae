# tracer/models.py
import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, NamedTuple

import numpy as np

import config
from .errors import InvalidInput


class EdgeState(IntEnum):
    NONE = 0
    WEAK = 1
    STRONG = 2


class Point(NamedTuple):
    """이미지 픽셀 좌표. 트레이스 결과는 int, 리스케일 후에는 float"""
    x: float
    y: float


Path = List[Point]


class PixelBuffer:
    """
    호출자 소유의 RGBA8 버퍼 (row-major, 길이 = width*height*4).
    내부적으로 읽기 전용 uint8 배열로 보관한다.
    """

    def __init__(self, width: int, height: int, data):
        if int(width) < 1 or int(height) < 1:
            raise InvalidInput(f"image size must be positive, got {width}x{height}")
        if isinstance(data, (bytes, bytearray, memoryview)):
            arr = np.frombuffer(data, np.uint8)
        else:
            arr = np.asarray(data, dtype=np.uint8).reshape(-1)
        expected = int(width) * int(height) * 4
        if arr.size != expected:
            raise InvalidInput(
                f"buffer length {arr.size} does not match {width}x{height} RGBA ({expected})"
            )
        arr = arr.copy()
        arr.flags.writeable = False
        self.width = int(width)
        self.height = int(height)
        self._data = arr

    @classmethod
    def from_array(cls, rgba: np.ndarray) -> "PixelBuffer":
        rgba = np.asarray(rgba)
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise InvalidInput(f"expected an HxWx4 array, got shape {rgba.shape}")
        h, w = rgba.shape[:2]
        return cls(w, h, rgba)

    def as_array(self) -> np.ndarray:
        return self._data.reshape(self.height, self.width, 4)

    @property
    def shape(self):
        return (self.height, self.width)

    def __len__(self):
        return self._data.size

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"


@dataclass(frozen=True)
class TraceParams:
    low_threshold: float = config.CANNY_LOW
    high_threshold: float = config.CANNY_HIGH
    simplification: float = config.SIMPLIFICATION
    min_path_length: int = config.MIN_PATH_LENGTH

    def validated(self) -> "TraceParams":
        """
        low > high, 유한하지 않은 threshold → InvalidInput
        나머지는 거부하지 않고 보정:
          - 음수 threshold → 0
          - simplification → max(1, floor)  (NaN/inf → 1)
          - min_path_length → max(0, floor)
        """
        low, high = float(self.low_threshold), float(self.high_threshold)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidInput(f"thresholds must be finite, got low={low}, high={high}")
        if low > high:
            raise InvalidInput(f"low threshold {low} exceeds high threshold {high}")

        s = float(self.simplification)
        stride = max(1, math.floor(s)) if math.isfinite(s) else 1

        m = float(self.min_path_length)
        min_len = max(0, math.floor(m)) if math.isfinite(m) else 0

        return replace(self, low_threshold=max(0.0, low), high_threshold=max(0.0, high),
                       simplification=float(stride), min_path_length=int(min_len))


@dataclass
class TraceResult:
    """한 번의 트레이스 결과 (edge mask, 원본 경로, 단순화 경로)"""
    edges: np.ndarray
    raw_paths: List[Path] = field(default_factory=list)
    paths: List[Path] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.edges.shape[1]

    @property
    def height(self) -> int:
        return self.edges.shape[0]

    def __len__(self):
        return len(self.paths)
