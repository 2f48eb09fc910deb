"""cchmod 的异常层级：所有解析/用法错误都继承 CchmodError。"""

from __future__ import annotations


class CchmodError(Exception):
    """cchmod 所有错误的基类。"""


class InvalidDigitError(CchmodError, ValueError):
    """八进制位不在 0–7 范围内，或不是数字。"""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"{value!r}: invalid octal digit (expected 0-7)")


class InvalidSymbolError(CchmodError, ValueError):
    """符号字符不在该位置允许的字母表内（r/-、w/-、x/-）。"""

    def __init__(self, char: str, position: int, expected: str) -> None:
        self.char = char
        self.position = position
        self.expected = expected
        allowed = " or ".join(repr(c) for c in expected)
        super().__init__(f"{char!r} at position {position}: invalid symbol (expected {allowed})")


class InvalidLengthError(CchmodError, ValueError):
    """字符串长度与该类别要求的固定宽度不符；非字符串输入同样归为此类。"""

    def __init__(self, value: object, expected: int | tuple[int, ...]) -> None:
        self.value = value
        self.expected = expected
        if isinstance(expected, tuple):
            want = " or ".join(str(n) for n in expected)
        else:
            want = str(expected)
        if isinstance(value, str):
            super().__init__(f"{value!r}: invalid length {len(value)} (expected {want})")
        else:
            super().__init__(f"{value!r}: not a string (expected {want} characters)")


class InvalidModeError(CchmodError, ValueError):
    """Mode 解析失败；底层原因见 __cause__。"""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        msg = f"{value!r}: malformed mode"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class UsageError(CchmodError):
    """命令行用法错误（--num 与 --sym 同时给出或都未给出）。"""
