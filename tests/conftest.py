"""
pytest 配置与共享 fixture。

样例表见 tests.config。
"""

from __future__ import annotations

import itertools

import pytest

from cchmod import Mode, Permission


def _all_permission_syms() -> list[str]:
    """按位置字母表生成全部 8 个 3 字符符号串。"""
    return ["".join(chars) for chars in itertools.product("r-", "w-", "x-")]


@pytest.fixture(scope="session")
def all_permission_syms() -> list[str]:
    return _all_permission_syms()


@pytest.fixture(scope="session")
def all_mode_syms() -> list[str]:
    """全部 512 个合法的 9 字符 Mode 符号串。"""
    syms = _all_permission_syms()
    return [u + g + o for u, g, o in itertools.product(syms, repeat=3)]


@pytest.fixture(scope="session")
def all_modes() -> list[Mode]:
    perms = [Permission.from_octal(d) for d in range(8)]
    return [Mode(u, g, o) for u, g, o in itertools.product(perms, repeat=3)]
