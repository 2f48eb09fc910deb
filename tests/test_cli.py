"""
CLI（typer）单元测试。通过 CliRunner 调用，验证输出、退出码与错误信息。
错误信息写入 stderr；用 result.output 断言，兼容新旧 click 的 stderr 捕获方式。
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cchmod import InvalidLengthError, InvalidModeError, InvalidSymbolError, Mode, Permission, __version__
from cchmod.cli import app, convert, parse_input

from tests.config import MODE_SAMPLES, PERMISSION_SAMPLES

runner = CliRunner()


# ------------------------- 端到端 -------------------------


@pytest.mark.parametrize(
    "args,expected",
    [
        (["-n", "rwxr-xr-x"], "755"),
        (["-s", "644"], "rw-r--r--"),
        (["-n", "r-x"], "5"),
        (["-s", "7"], "rwx"),
        (["--num", "rw-r-----"], "640"),
        (["--sym", "000"], "---------"),
        (["-n", "755"], "755"),
        (["-s", "rwx"], "rwx"),
    ],
)
def test_convert_outputs_one_line(args: list[str], expected: str) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert result.stdout == f"{expected}\n"


@pytest.mark.parametrize("octal,sym,_bits", MODE_SAMPLES)
def test_mode_both_directions(octal: str, sym: str, _bits: int) -> None:
    assert runner.invoke(app, ["-s", octal]).stdout.strip() == sym
    assert runner.invoke(app, ["-n", sym]).stdout.strip() == octal


@pytest.mark.parametrize(
    "args,expected",
    [
        (["-n", "---"], "0"),
        (["-n", "--x"], "1"),
        (["-n", "-w-"], "2"),
        (["-n", "-wx"], "3"),
        (["-n", "---r--r--"], "044"),
        (["-n", "---------"], "000"),
        (["-wx", "-n"], "3"),
        (["-s", "-w-"], "-w-"),
    ],
)
def test_input_starting_with_dash(args: list[str], expected: str) -> None:
    """以 '-' 开头的符号输入无需 '--' 也按 INPUT 处理。"""
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert result.stdout == f"{expected}\n"


def test_input_starting_with_dash_after_separator() -> None:
    """'--' 之后的输入同样可用。"""
    result = runner.invoke(app, ["-n", "--", "-wx"])
    assert result.exit_code == 0
    assert result.stdout == "3\n"

    result = runner.invoke(app, ["-n", "--", "---------"])
    assert result.exit_code == 0
    assert result.stdout == "000\n"


# ------------------------- 解析错误 -------------------------


@pytest.mark.parametrize("value", ["999", "8", "rwxrwxwrx", "rw", "7777", "rwq", "7r5", "abc"])
def test_malformed_input_exits_1(value: str) -> None:
    result = runner.invoke(app, ["-n", value])
    assert result.exit_code == 1
    assert result.output.startswith("error: ")
    assert result.output.count("\n") == 1


def test_bad_mode_digit_message() -> None:
    result = runner.invoke(app, ["-n", "999"])
    assert result.exit_code == 1
    assert "malformed mode" in result.output
    assert "invalid octal digit" in result.output


# ------------------------- 用法错误 -------------------------


def test_both_flags_is_usage_error() -> None:
    result = runner.invoke(app, ["-n", "-s", "755"])
    assert result.exit_code == 2
    assert "--num and --sym are exclusive" in result.output


def test_no_flag_is_usage_error() -> None:
    result = runner.invoke(app, ["755"])
    assert result.exit_code == 2
    assert "--num or --sym must be supplied" in result.output


def test_missing_input_is_usage_error() -> None:
    result = runner.invoke(app, ["-n"])
    assert result.exit_code == 2


# ------------------------- help / version -------------------------


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag: str) -> None:
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert "--num" in result.output
    assert "--sym" in result.output


def test_usage_uses_tool_name() -> None:
    result = runner.invoke(app, ["--help"])
    assert "cchmod" in result.output
    assert "convert-cmd" not in result.output


@pytest.mark.parametrize("flag", ["-V", "--version"])
def test_version_short_circuits(flag: str) -> None:
    """--version 先于必填参数与 --num/--sym 校验处理。"""
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert result.stdout == f"cchmod {__version__}\n"


# ------------------------- parse_input / convert -------------------------


@pytest.mark.parametrize("digit,sym", PERMISSION_SAMPLES)
def test_parse_input_permission(digit: int, sym: str) -> None:
    assert parse_input(str(digit)) == Permission.from_octal(digit)
    assert parse_input(sym) == Permission.from_octal(digit)


def test_parse_input_mode() -> None:
    assert parse_input("755") == Mode.from_octal("755")
    assert parse_input("rwxr-xr-x") == Mode.from_octal("755")


@pytest.mark.parametrize("value,expected", [("", (1, 3, 9)), ("75", (1, 3)), ("rwxr-", (3, 9))])
def test_parse_input_bad_length(value: str, expected: tuple[int, ...]) -> None:
    with pytest.raises(InvalidLengthError) as exc_info:
        parse_input(value)
    assert exc_info.value.expected == expected


def test_parse_input_mixed_alphabet() -> None:
    """以首字符决定字母表，报告第一个不符合的字符。"""
    with pytest.raises(InvalidSymbolError) as exc_info:
        parse_input("7r5")
    assert exc_info.value.char == "r"
    assert exc_info.value.position == 1

    with pytest.raises(InvalidSymbolError) as exc_info:
        parse_input("rw7")
    assert exc_info.value.position == 2


def test_parse_input_digit_out_of_range() -> None:
    with pytest.raises(InvalidModeError):
        parse_input("789")


def test_convert() -> None:
    m = Mode.from_octal("640")
    assert convert(m, numeric=True) == "640"
    assert convert(m, numeric=False) == "rw-r-----"
    assert convert(Permission.from_octal(5), numeric=True) == "5"
