import math

import numpy as np

from .models import Path, Point

# 고정 스캔 순서: dy -1..1, dx -1..1 (자기 자신 제외)
NEIGHBORS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _next_neighbor(edges, visited, cx, cy):
    h, w = edges.shape
    for dx, dy in NEIGHBORS:
        nx, ny = cx + dx, cy + dy
        if 0 <= nx < w and 0 <= ny < h and edges[ny, nx] and not visited[ny, nx]:
            return nx, ny
    return None


def _walk(edges, visited, x0, y0):
    """
    (x0, y0)에서 시작하는 greedy DFS 워크.
    스캔 순서상 첫 번째 미방문 이웃으로 이동하고, 막히면 스택을 pop해서 되돌아간다.
    되돌아간 분기점에서 다시 나아갈 때는 그 분기점부터 새 경로를 시작하므로
    모든 경로의 연속된 두 점은 8-이웃이다.
    조각들은 시작 픽셀의 방문 순서대로 정렬해서 반환한다.
    """
    visited[y0, x0] = True
    order = {(x0, y0): 0}
    paths = []
    path = [Point(x0, y0)]
    stack = [(x0, y0)]
    while stack:
        cx, cy = stack[-1]
        nxt = _next_neighbor(edges, visited, cx, cy)
        if nxt is None:
            stack.pop()
            continue
        nx, ny = nxt
        visited[ny, nx] = True
        order[(nx, ny)] = len(order)
        if path[-1] != (cx, cy):
            paths.append(path)
            path = [Point(cx, cy)]
        path.append(Point(nx, ny))
        stack.append((nx, ny))
    paths.append(path)
    # 같은 분기점에서 나온 조각끼리는 생성 순서 유지 (stable sort)
    paths.sort(key=lambda p: order[p[0]])
    return paths


def trace_paths(edges: np.ndarray, min_length: int = 0):
    """
    edges: bool (H, W) edge 마스크
    row-major 순서로 미방문 edge 픽셀마다 워크를 시작하고,
    길이가 min_length 보다 긴 경로만 발견 순서대로 반환한다.
    """
    edges = np.asarray(edges, dtype=bool)
    visited = np.zeros(edges.shape, bool)
    w = edges.shape[1]
    paths = []
    for idx in np.flatnonzero(edges):
        y, x = divmod(int(idx), w)
        if visited[y, x]:
            continue
        paths += [p for p in _walk(edges, visited, x, y) if len(p) > min_length]
    return paths


def simplify_path(path: Path, factor: float = 1.0) -> Path:
    """stride = max(1, floor(factor)) 간격으로 점을 남기고 마지막 점은 항상 포함"""
    stride = max(1, math.floor(factor)) if math.isfinite(factor) else 1
    simple = list(path[::stride])
    if simple and simple[-1] != path[-1]:
        simple.append(path[-1])
    return simple


def simplify_paths(paths, factor: float = 1.0):
    """
    return: [(raw, simple), ...]  단순화 후 한 점만 남는 경로는 버림
    """
    pairs = []
    for path in paths:
        simple = simplify_path(path, factor)
        if len(simple) > 1:
            pairs.append((path, simple))
    return pairs


def vectorize(edges: np.ndarray, simplification: float = 1.0, min_length: int = 0):
    return [simple for _, simple in simplify_paths(trace_paths(edges, min_length), simplification)]
