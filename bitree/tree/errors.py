# -*- coding: utf-8 -*-


class FenwickError(Exception):
    """Base class of every error raised by the trees"""


class InvalidSize(FenwickError, ValueError):
    def __init__(self, size: int):
        super().__init__(f"size must be positive, got {size}")
        self.size = size


class IndexOutOfRange(FenwickError, IndexError):
    def __init__(self, index: int, low: int, high: int):
        super().__init__(f"index {index} out of range [{low}, {high}]")
        self.index = index
        self.low = low
        self.high = high


class InvalidRange(FenwickError, ValueError):
    def __init__(self, beg: int, end: int, size: int):
        super().__init__(f"range [{beg}, {end}] is not a valid range of [1, {size}]")
        self.beg = beg
        self.end = end
        self.size = size


class PreconditionViolated(FenwickError, ValueError):
    def __init__(self, message: str):
        super().__init__(message)
