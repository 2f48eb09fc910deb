"""
权限数据模型（与 chmod 的八进制/符号表示一致）。

- Permission：一组 read/write/execute，对应 1 位八进制（0–7）或 3 个符号字符（如 'r-x'）。
- Mode：user（属主）/group/other 三组 Permission，对应 3 位八进制（如 '755'）或 9 个符号字符（如 'rwxr-xr-x'）。
- 两者均为不可变值类型，可比较、可哈希。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from cchmod.exceptions import (
    InvalidDigitError,
    InvalidLengthError,
    InvalidModeError,
    InvalidSymbolError,
)

# 各标志位对应的八进制权重
READ_BIT = 4
WRITE_BIT = 2
EXECUTE_BIT = 1

OCTAL_DIGITS = "01234567"
# 每个位置允许的字符：(置位字符, 未置位字符)
SYMBOL_ALPHABET = ("r-", "w-", "x-")

PERMISSION_OCTAL_WIDTH = 1
PERMISSION_SYM_WIDTH = 3
MODE_OCTAL_WIDTH = 3
MODE_SYM_WIDTH = 9


@runtime_checkable
class OctalConvertible(Protocol):
    """可渲染为八进制字符串的值。"""

    def as_octal(self) -> str: ...


@runtime_checkable
class SymbolicConvertible(Protocol):
    """可渲染为符号字符串的值。"""

    def as_sym(self) -> str: ...


@runtime_checkable
class Convertible(OctalConvertible, SymbolicConvertible, Protocol):
    """两种形式都可渲染的值（Permission、Mode）。"""


class DiffOp(str, Enum):
    """单个标志从 a 到 b 的变化。"""

    PLUS = "+"
    SAME = "="
    MINUS = "-"


def _diff_flag(a: bool, b: bool) -> DiffOp:
    if a == b:
        return DiffOp.SAME
    return DiffOp.MINUS if a else DiffOp.PLUS


@dataclass(frozen=True)
class PermissionDiff:
    read: DiffOp
    write: DiffOp
    execute: DiffOp

    @property
    def changed(self) -> bool:
        return any(op is not DiffOp.SAME for op in (self.read, self.write, self.execute))


@dataclass(frozen=True)
class ModeDiff:
    user: PermissionDiff
    group: PermissionDiff
    other: PermissionDiff

    @property
    def changed(self) -> bool:
        return self.user.changed or self.group.changed or self.other.changed


@dataclass(frozen=True)
class Permission:
    """一组 read/write/execute 权限。"""

    read: bool = False
    write: bool = False
    execute: bool = False

    @classmethod
    def from_octal(cls, digit: int | str) -> Permission:
        """
        从 1 位八进制构造。接受 0–7 的整数，或单个数字字符。
        - 越界整数、非数字字符、'8'/'9' → InvalidDigitError
        - 字符串长度不为 1 → InvalidLengthError
        """
        if isinstance(digit, str):
            if len(digit) != PERMISSION_OCTAL_WIDTH:
                raise InvalidLengthError(digit, PERMISSION_OCTAL_WIDTH)
            if digit not in OCTAL_DIGITS:
                raise InvalidDigitError(digit)
            digit = int(digit)
        elif isinstance(digit, bool) or not isinstance(digit, int):
            raise InvalidDigitError(digit)
        if not 0 <= digit <= 7:
            raise InvalidDigitError(digit)
        return cls(
            read=bool(digit & READ_BIT),
            write=bool(digit & WRITE_BIT),
            execute=bool(digit & EXECUTE_BIT),
        )

    @classmethod
    def from_sym(cls, text: str) -> Permission:
        """
        从 3 个符号字符构造，如 'rw-'。
        - 非字符串或长度不为 3 → InvalidLengthError
        - 某位置字符不在 r/-、w/-、x/- 中 → InvalidSymbolError
        """
        if not isinstance(text, str) or len(text) != PERMISSION_SYM_WIDTH:
            raise InvalidLengthError(text, PERMISSION_SYM_WIDTH)
        flags = []
        for pos, (ch, allowed) in enumerate(zip(text, SYMBOL_ALPHABET)):
            if ch not in allowed:
                raise InvalidSymbolError(ch, pos, allowed)
            flags.append(ch == allowed[0])
        read, write, execute = flags
        return cls(read=read, write=write, execute=execute)

    def as_octal_digit(self) -> int:
        return (
            (READ_BIT if self.read else 0)
            + (WRITE_BIT if self.write else 0)
            + (EXECUTE_BIT if self.execute else 0)
        )

    def as_octal(self) -> str:
        return str(self.as_octal_digit())

    def as_sym(self) -> str:
        return "".join(
            allowed[0] if flag else allowed[1]
            for flag, allowed in zip((self.read, self.write, self.execute), SYMBOL_ALPHABET)
        )

    def diff(self, other: Permission) -> PermissionDiff:
        """逐位比较：仅 self 有 → MINUS，仅 other 有 → PLUS。"""
        return PermissionDiff(
            read=_diff_flag(self.read, other.read),
            write=_diff_flag(self.write, other.write),
            execute=_diff_flag(self.execute, other.execute),
        )

    def __str__(self) -> str:
        return self.as_sym()


@dataclass(frozen=True)
class Mode:
    """完整权限：user（属主）、group、other 三组 Permission。"""

    user: Permission
    group: Permission
    other: Permission

    @classmethod
    def from_octal(cls, text: str) -> Mode:
        """从 3 位八进制字符串构造，如 '755'。任何失败均为 InvalidModeError（__cause__ 为底层错误）。"""
        try:
            if not isinstance(text, str) or len(text) != MODE_OCTAL_WIDTH:
                raise InvalidLengthError(text, MODE_OCTAL_WIDTH)
            user, group, other = (Permission.from_octal(ch) for ch in text)
        except (InvalidLengthError, InvalidDigitError) as e:
            raise InvalidModeError(text, str(e)) from e
        return cls(user, group, other)

    @classmethod
    def from_sym(cls, text: str) -> Mode:
        """从 9 个符号字符构造，如 'rwxr-xr-x'。任何失败均为 InvalidModeError（__cause__ 为底层错误）。"""
        try:
            if not isinstance(text, str) or len(text) != MODE_SYM_WIDTH:
                raise InvalidLengthError(text, MODE_SYM_WIDTH)
            user, group, other = (
                Permission.from_sym(text[i : i + PERMISSION_SYM_WIDTH])
                for i in range(0, MODE_SYM_WIDTH, PERMISSION_SYM_WIDTH)
            )
        except (InvalidLengthError, InvalidSymbolError) as e:
            raise InvalidModeError(text, str(e)) from e
        return cls(user, group, other)

    @classmethod
    def from_int(cls, bits: int) -> Mode:
        """从 os.stat/os.chmod 使用的权限位构造（如 0o755）；仅接受低 9 位。"""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= 0o777:
            raise InvalidModeError(bits, "expected permission bits 0o000-0o777")
        return cls(
            Permission.from_octal((bits >> 6) & 0o7),
            Permission.from_octal((bits >> 3) & 0o7),
            Permission.from_octal(bits & 0o7),
        )

    def as_int(self) -> int:
        return (
            (self.user.as_octal_digit() << 6)
            | (self.group.as_octal_digit() << 3)
            | self.other.as_octal_digit()
        )

    def as_octal(self) -> str:
        return "".join(p.as_octal() for p in (self.user, self.group, self.other))

    def as_sym(self) -> str:
        return "".join(p.as_sym() for p in (self.user, self.group, self.other))

    def diff(self, other: Mode) -> ModeDiff:
        return ModeDiff(
            user=self.user.diff(other.user),
            group=self.group.diff(other.group),
            other=self.other.diff(other.other),
        )

    def __str__(self) -> str:
        return self.as_sym()
