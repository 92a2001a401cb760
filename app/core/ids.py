"""记录 ID 生成（CUID2）"""

import re

from cuid2 import Cuid

ID_LENGTH = 24

# 小写字母开头的定长小写字母数字串
ID_PATTERN = rf"^[a-z][a-z0-9]{{{ID_LENGTH - 1}}}$"

_id_regex = re.compile(ID_PATTERN)
_generator = Cuid(length=ID_LENGTH)


def generate_id() -> str:
    """生成新的记录 ID（无中心分配，跨进程不冲突）"""
    return _generator.generate()


def is_valid_id(value: object) -> bool:
    """校验 ID 格式"""
    return isinstance(value, str) and _id_regex.fullmatch(value) is not None
