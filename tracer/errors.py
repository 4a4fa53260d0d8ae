# tracer/errors.py

class TracerError(Exception):
    """트레이서 공통 예외"""


class InvalidInput(TracerError, ValueError):
    """기본값으로 대체할 수 없는 입력 (버퍼 길이 불일치, low > high 등)"""
