import inspect
import logging
import sys
from pathlib import Path
from loguru import logger
from core.settings import settings

class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 跳过 logging 模块自身的栈帧，定位到真正的调用方
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )

def setup_logging(log_level=None, log_file_path=None):
    """配置 loguru 日志输出，并接管标准库 logging

    Args:
        log_level: 日志级别，默认使用 settings.LOG_LEVEL
        log_file_path: 日志文件路径，默认使用 settings.LOG_FILE_PATH，为空时不写文件
    """
    log_format = settings.LOG_FORMAT
    log_level = log_level or settings.LOG_LEVEL
    log_file_path = log_file_path or settings.LOG_FILE_PATH

    handlers = [
        {"sink": sys.stdout, "format": log_format, "level": log_level},
    ]
    if log_file_path:
        # 创建日志目录
        log_file = Path(log_file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append({
            "sink": str(log_file),
            "rotation": settings.LOG_ROTATION,
            "retention": settings.LOG_RETENTION,
            "compression": "zip",
            "format": log_format,
            "level": log_level,
            "enqueue": True,
        })

    logger.configure(
        handlers=handlers,
        levels=[{"name": "DEBUG", "color": "<blue>"}],
    )

    # 拦截标准库的日志
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return logger
