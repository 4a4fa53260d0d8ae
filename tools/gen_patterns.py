from pathlib import Path
import cv2, numpy as np

from tracer.models import PixelBuffer

def _rgba(gray):
    h, w = gray.shape
    out = np.empty((h, w, 4), np.uint8)
    out[..., :3] = gray[..., None]
    out[..., 3] = 255
    return out

def solid(w, h, value=0):
    return PixelBuffer.from_array(_rgba(np.full((h, w), value, np.uint8)))

def step_edge(w=10, h=10, at=5):
    # x < at 검정, x >= at 흰색
    g = np.zeros((h, w), np.uint8)
    g[:, at:] = 255
    return PixelBuffer.from_array(_rgba(g))

def filled_rect(w=40, h=30, tl=(10, 8), br=(29, 21)):
    g = np.zeros((h, w), np.uint8)
    cv2.rectangle(g, tl, br, 255, -1)
    return PixelBuffer.from_array(_rgba(g))

def ring(w=64, h=64, radius=20, thickness=3):
    g = np.zeros((h, w), np.uint8)
    cv2.circle(g, (w//2, h//2), radius, 255, thickness)
    return PixelBuffer.from_array(_rgba(g))

def speckles(w=48, h=48, spacing=8):
    # 서로 떨어진 1px 점들 (노이즈). 점 하나당 3x3 링 하나가 검출됨
    g = np.zeros((h, w), np.uint8)
    g[6:h-4:spacing, 6:w-4:spacing] = 255
    return PixelBuffer.from_array(_rgba(g))

def main(out_dir=Path("data/patterns")):
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, buf in [("step", step_edge(64, 48, 32)), ("rect", filled_rect()),
                      ("ring", ring()), ("speckles", speckles())]:
        cv2.imwrite(str(out_dir/f"{name}.png"), cv2.cvtColor(buf.as_array(), cv2.COLOR_RGBA2BGRA))
    print(f"saved: {out_dir}")

if __name__ == "__main__":
    main()
