"""常用 Permission 常量；每个值有符号名与八进制名两个名字（如 RX 与 P5）。"""

from cchmod.models import Permission

RWX = Permission(read=True, write=True, execute=True)
RW = Permission(read=True, write=True, execute=False)
RX = Permission(read=True, write=False, execute=True)
R = Permission(read=True, write=False, execute=False)
WX = Permission(read=False, write=True, execute=True)
W = Permission(read=False, write=True, execute=False)
X = Permission(read=False, write=False, execute=True)
EMPTY = Permission(read=False, write=False, execute=False)

P7 = RWX
P6 = RW
P5 = RX
P4 = R
P3 = WX
P2 = W
P1 = X
P0 = EMPTY

# 按八进制值索引：BY_DIGIT[5] is RX
BY_DIGIT = (P0, P1, P2, P3, P4, P5, P6, P7)
