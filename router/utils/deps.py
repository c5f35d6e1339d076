import logging
import math
from typing import Any, Iterable

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from config import settings
from core.exceptions import BatchTooLargeError, InvalidCoordinateError

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="Authorization", auto_error=False)


async def verify_api_key(api_key: str = Security(api_key_header)) -> bool:
    """
    API密钥验证依赖
    """
    if not api_key:
        logger.warning("API密钥缺失")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API密钥缺失：请在请求头中添加 Authorization: Bearer YOUR_API_KEY",
            headers={"WWW-Authenticate": "Bearer"},
        )

    api_key_clean = api_key.replace("Bearer ", "") if api_key.startswith("Bearer ") else api_key

    if api_key_clean not in settings.api_keys:
        logger.warning("无效的API密钥尝试: %s...", api_key[:10])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API密钥无效：请检查密钥是否正确",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.debug("API密钥验证成功")
    return True


def ensure_batch_size(count: int) -> None:
    """
    批量点数超过配置上限时抛出 413。
    """
    if count > settings.max_batch_size:
        logger.warning("批量点数超限: %d > %d", count, settings.max_batch_size)
        raise BatchTooLargeError(count, settings.max_batch_size)


def _iter_numbers(value: Any) -> Iterable[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        yield value
    elif isinstance(value, dict):
        for item in value.values():
            yield from _iter_numbers(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _iter_numbers(item)


def ensure_finite(value: Any) -> None:
    """
    转换结果中出现 NaN / Inf（输入超出合理范围）时抛出 400，JSON 无法编码这类值。
    """
    for number in _iter_numbers(value):
        if not math.isfinite(number):
            logger.warning("转换结果包含非有限值: %s", number)
            raise InvalidCoordinateError("坐标超出有效范围，转换结果不是有限数值")
