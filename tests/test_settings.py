#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试配置加载与日志初始化
"""

import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

from loguru import logger

from apps.location import BestLocationCache
from core.logging import setup_logging
from core.settings import Settings, settings


def test_default_settings():
    """测试默认配置"""
    config = Settings()
    assert config.COORDS_INVERSE_ITERATIONS == 2
    assert config.LOCATION_MAX_ACCEPTABLE_ACCURACY == 100.0
    assert config.LOCATION_MIN_ACCURACY_IMPROVEMENT == 10.0
    assert config.LOCATION_DISTANCE_FILTER == 10.0
    assert config.LOG_FILE_PATH is None
    # 只保留被实际读取的配置项
    assert "PROJECT_NAME" not in Settings.model_fields


def test_settings_from_env(monkeypatch):
    """测试环境变量覆盖配置"""
    monkeypatch.setenv("LOCATION_DISTANCE_FILTER", "25")
    monkeypatch.setenv("COORDS_INVERSE_ITERATIONS", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Settings()
    assert config.LOCATION_DISTANCE_FILTER == 25.0
    assert config.COORDS_INVERSE_ITERATIONS == 5
    assert config.LOG_LEVEL == "DEBUG"


def test_cache_defaults_follow_settings(monkeypatch):
    """测试最佳位置缓存默认阈值取自配置"""
    monkeypatch.setattr(settings, "LOCATION_DISTANCE_FILTER", 42.0)
    cache = BestLocationCache()
    assert cache.distance_filter == 42.0
    assert cache.max_acceptable_accuracy == settings.LOCATION_MAX_ACCEPTABLE_ACCURACY


def test_setup_logging_writes_file(tmp_path):
    """测试日志写入文件，并接管标准库 logging"""
    log_file = tmp_path / "logs" / "geo.log"
    try:
        setup_logging(log_level="INFO", log_file_path=str(log_file))
        logger.info("loguru 日志")
        logging.getLogger("flashmemo.test").warning("标准库日志")
        logger.complete()

        content = log_file.read_text(encoding="utf-8")
        assert "loguru 日志" in content
        assert "标准库日志" in content
        # 标准库日志应归属到真正的调用方，而不是 logging 模块内部
        stdlib_line = next(line for line in content.splitlines() if "标准库日志" in line)
        assert "test_setup_logging_writes_file" in stdlib_line
        assert "callHandlers" not in stdlib_line
    finally:
        setup_logging()
