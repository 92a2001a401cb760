"""日志配置

- loguru 为唯一出口，标准库 logging（uvicorn / sqlalchemy）统一转发
- 每行日志带 request_id，请求之外为 "-"
"""

import logging
import sys
from pathlib import Path
from typing import Any, Literal, TextIO

from loguru import logger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NO_REQUEST_ID = "-"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# 第三方 logger 的最低输出级别
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


class InterceptHandler(logging.Handler):
    """标准库日志转发到 loguru，保留原始调用位置"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 跳过 logging 模块自身的栈帧
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _sink_options(level: LogLevel, json_format: bool) -> dict[str, Any]:
    # JSON 模式下 extra（含 request_id）随记录一起序列化
    if json_format:
        return {"level": level, "serialize": True, "enqueue": True}
    return {"level": level, "format": LOG_FORMAT, "enqueue": True}


def setup_logging(
    *,
    level: LogLevel = "INFO",
    json_format: bool = False,
    to_file: bool = False,
    log_dir: str | Path = "logs",
    stream: TextIO | None = None,
) -> None:
    """
    配置日志（可重复调用，每次都会替换已有 sink）

    Args:
        level: 日志级别
        json_format: 输出 JSON 行，否则使用 LOG_FORMAT 文本格式
        to_file: 额外写入 log_dir/app.log（按大小轮转）
        log_dir: 日志文件目录
        stream: 控制台 sink，默认 sys.stderr
    """
    logger.remove()
    logger.configure(extra={"request_id": NO_REQUEST_ID})

    options = _sink_options(level, json_format)
    logger.add(stream or sys.stderr, **options)

    if to_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "app.log",
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
            **options,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name, min_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(min_level)
