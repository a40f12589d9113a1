#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一分析配置管理
运行时可调参数统一从这里读取，避免配置分散
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# 项目根目录下的 .env（存在时加载，覆盖已有环境变量）
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
_ENV_PATH = os.path.join(_PROJECT_ROOT, '.env')
if os.path.exists(_ENV_PATH):
    load_dotenv(_ENV_PATH, override=True)


def _get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return default
    return float(value)


def _get_optional_int(key: str) -> Optional[int]:
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return None
    return int(value)


@dataclass
class AnalysisConfig:
    """分析配置"""
    log_level: str = 'INFO'
    norm_center: float = 0.0
    norm_spread: float = 8.0
    min_abs_effect: float = 0.3
    max_items_per_polarity: Optional[int] = None

    @classmethod
    def from_env(cls) -> 'AnalysisConfig':
        """从环境变量创建配置"""
        return cls(
            log_level=os.getenv('ZIWEI_LOG_LEVEL', 'INFO').upper(),
            norm_center=_get_float('ZIWEI_NORM_CENTER', 0.0),
            norm_spread=_get_float('ZIWEI_NORM_SPREAD', 8.0),
            min_abs_effect=_get_float('ZIWEI_MIN_ABS_EFFECT', 0.3),
            max_items_per_polarity=_get_optional_int('ZIWEI_MAX_ITEMS_PER_POLARITY'),
        )


# 全局配置实例（单例模式）
_config: Optional[AnalysisConfig] = None


def get_config() -> AnalysisConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AnalysisConfig.from_env()
    return _config


def reload_config() -> AnalysisConfig:
    """重新加载配置（环境变量变化后调用）"""
    global _config
    _config = AnalysisConfig.from_env()
    return _config
