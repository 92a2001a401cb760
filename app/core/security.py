"""密码策略与哈希

依赖安装: uv add "pwdlib[bcrypt]"
"""

import re

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

from app.config import get_settings
from app.core.exceptions import InvalidPasswordError

settings = get_settings()

MIN_PASSWORD_LENGTH = 8
# bcrypt 只处理前 72 字节
MAX_PASSWORD_BYTES = 72
SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

_uppercase = re.compile(r"[A-Z]")
_digit = re.compile(r"\d")
_special = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

password_hash = PasswordHash((BcryptHasher(rounds=settings.password_hash_rounds),))


def validate_password(password: str | None) -> None:
    """
    校验密码强度，按固定顺序检查，返回第一个失败项

    基础策略为五项：非空、长度、大写字母、数字、特殊字符。
    最后的 72 字节上限是额外加入的一项，不属于基础策略：
    bcrypt 只能处理 72 字节以内的输入，超长密码在此统一拒绝。

    Raises:
        InvalidPasswordError: 未通过上述任一检查
    """
    if not password:
        raise InvalidPasswordError("Password must not be empty or null.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidPasswordError(
            f"Password must contain at least {MIN_PASSWORD_LENGTH} characters."
        )
    if not _uppercase.search(password):
        raise InvalidPasswordError(
            "Password must contain at least one uppercase letter."
        )
    if not _digit.search(password):
        raise InvalidPasswordError("Password must contain at least one number.")
    if not _special.search(password):
        raise InvalidPasswordError(
            "Password must contain at least one special character."
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidPasswordError(
            f"Password must not exceed {MAX_PASSWORD_BYTES} bytes."
        )


def hash_password(password: str | None) -> str:
    """校验后生成加盐哈希（盐与参数内嵌于结果中）"""
    validate_password(password)
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码，不匹配或哈希无法识别时返回 False"""
    try:
        return password_hash.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        return False
