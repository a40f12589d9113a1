# -*- coding: utf-8 -*-
"""
接口抽象层
定义星盘能力接口，分析核心只依赖这些接口
"""

from .chart_interface import IChart, ITimeScopedView, IHoroscopeSource

__all__ = [
    'IChart',
    'ITimeScopedView',
    'IHoroscopeSource',
]
