"""cchmod - 在符号形式（rwxr-xr-x）与八进制形式（755）之间转换 Unix 文件权限"""

__version__ = "0.1.0"

from cchmod.exceptions import (
    CchmodError,
    InvalidDigitError,
    InvalidLengthError,
    InvalidModeError,
    InvalidSymbolError,
    UsageError,
)
from cchmod.models import (
    Convertible,
    DiffOp,
    Mode,
    ModeDiff,
    OctalConvertible,
    Permission,
    PermissionDiff,
    SymbolicConvertible,
)

__all__ = [
    "__version__",
    "Permission",
    "Mode",
    "DiffOp",
    "PermissionDiff",
    "ModeDiff",
    "OctalConvertible",
    "SymbolicConvertible",
    "Convertible",
    "CchmodError",
    "InvalidDigitError",
    "InvalidSymbolError",
    "InvalidLengthError",
    "InvalidModeError",
    "UsageError",
]
