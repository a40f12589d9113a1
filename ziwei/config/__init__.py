# -*- coding: utf-8 -*-
"""
配置模块
"""

from ziwei.config.app_config import AnalysisConfig, get_config, reload_config
from ziwei.config.registry import AnalysisRegistry, build_registry, get_registry

__all__ = [
    'AnalysisConfig',
    'get_config',
    'reload_config',
    'AnalysisRegistry',
    'build_registry',
    'get_registry',
]
