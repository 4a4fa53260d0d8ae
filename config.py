# 트레이서 기본 파라미터 (호스트 UI 슬라이더 초기값)
CANNY_LOW  = 50
CANNY_HIGH = 150

# 경로 단순화 / 노이즈 필터
SIMPLIFICATION  = 2.0   # stride, 소수는 내림
MIN_PATH_LENGTH = 20    # px, 이 길이 이하 경로는 버림

# 큰 이미지는 이 폭으로 줄여서 트레이스
MAX_TRACE_WIDTH = 800
