#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微分析模块共享日志工具

提供安全的日志输出函数，捕获 Broken pipe 等异常。
"""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "ziwei"


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    初始化 ziwei 根日志器（重复调用只更新级别，不重复挂载 handler）

    Args:
        level: 日志级别名称，为 None 时取 ZIWEI_LOG_LEVEL 配置

    Returns:
        ziwei 根日志器
    """
    if level is None:
        from ziwei.config.app_config import get_config
        level = get_config().log_level

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    try:
        if level == 'warning':
            logger.warning(message)
        elif level == 'error':
            logger.error(message)
        elif level == 'debug':
            logger.debug(message)
        else:
            logger.info(message)
    except (BrokenPipeError, OSError):
        pass
