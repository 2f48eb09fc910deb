"""
cchmod CLI：在符号形式（rwxr-xr-x）与八进制形式（755）之间转换权限。

输入类型自动识别：数字 1 位/3 位 → Permission/Mode；符号 3 位/9 位 → Permission/Mode。
以 '-' 开头的符号输入（如 ---、-wx）按普通参数处理：cchmod -n -wx
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from cchmod import __version__
from cchmod.exceptions import CchmodError, InvalidLengthError, InvalidSymbolError, UsageError
from cchmod.models import (
    MODE_OCTAL_WIDTH,
    MODE_SYM_WIDTH,
    PERMISSION_OCTAL_WIDTH,
    PERMISSION_SYM_WIDTH,
    Convertible,
    Mode,
    Permission,
)

# 输入分类用的字符集；'8'/'9' 归为数字，由解析阶段报 InvalidDigitError
NUMERIC_CHARS = "0123456789"
SYMBOLIC_CHARS = "rwx-"

# 退出码：解析错误 1，用法错误 2（与 click 的用法错误一致）
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _is_numeric(text: str) -> bool:
    """判断输入是数字形式还是符号形式；两者都不是则抛 InvalidSymbolError。"""
    if not text:
        raise InvalidLengthError(text, (PERMISSION_OCTAL_WIDTH, PERMISSION_SYM_WIDTH, MODE_SYM_WIDTH))
    if all(ch in NUMERIC_CHARS for ch in text):
        return True
    if all(ch in SYMBOLIC_CHARS for ch in text):
        return False
    # 以首字符决定期望的字母表，报告第一个不符合的字符
    alphabet = NUMERIC_CHARS if text[0] in NUMERIC_CHARS else SYMBOLIC_CHARS
    pos = next(i for i, ch in enumerate(text) if ch not in alphabet)
    raise InvalidSymbolError(text[pos], pos, alphabet)


def parse_input(text: str) -> Permission | Mode:
    """
    识别并解析一个输入字符串。
    - 数字：长度 1 → Permission，长度 3 → Mode
    - 符号：长度 3 → Permission，长度 9 → Mode
    其他长度抛 InvalidLengthError；解析失败抛对应的 CchmodError 子类。
    """
    if _is_numeric(text):
        if len(text) == PERMISSION_OCTAL_WIDTH:
            return Permission.from_octal(text)
        if len(text) == MODE_OCTAL_WIDTH:
            return Mode.from_octal(text)
        raise InvalidLengthError(text, (PERMISSION_OCTAL_WIDTH, MODE_OCTAL_WIDTH))
    if len(text) == PERMISSION_SYM_WIDTH:
        return Permission.from_sym(text)
    if len(text) == MODE_SYM_WIDTH:
        return Mode.from_sym(text)
    raise InvalidLengthError(text, (PERMISSION_SYM_WIDTH, MODE_SYM_WIDTH))


def convert(value: Convertible, numeric: bool) -> str:
    """按要求的形式渲染：numeric=True 为八进制，否则为符号。"""
    return value.as_octal() if numeric else value.as_sym()


def _output_numeric(num: bool, sym: bool) -> bool:
    """--num/--sym 必须且只能给出一个；返回是否输出八进制。"""
    if num and sym:
        raise UsageError("--num and --sym are exclusive")
    if not (num or sym):
        raise UsageError("--num or --sym must be supplied")
    return num


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cchmod {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="cchmod",
    help="Convert file permissions between symbolic (rwxr-xr-x) and octal (755) form.",
    add_completion=False,
    # 符号字母表 rwx- 与选项字母 n/s/h/V 不重叠，未知的 "-" 开头词即为 INPUT
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)


@app.command(name="cchmod")
def convert_cmd(
    text: Annotated[str, typer.Argument(metavar="INPUT", help="Permission (7, rwx) or mode (755, rwxr-xr-x)")],
    num: Annotated[bool, typer.Option("--num", "-n", help="Output the octal form")] = False,
    sym: Annotated[bool, typer.Option("--sym", "-s", help="Output the symbolic form")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    try:
        numeric = _output_numeric(num, sym)
    except UsageError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR)
    try:
        value = parse_input(text)
    except CchmodError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(EXIT_PARSE_ERROR)
    typer.echo(convert(value, numeric))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
