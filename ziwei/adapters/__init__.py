#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘适配器 - 外部排盘数据到星盘接口的转换
"""

from ziwei.adapters.dict_chart_adapter import DictAstrolabeAdapter, DictHoroscopeAdapter
from ziwei.adapters.scoped_chart_adapter import ScopedChart

__all__ = [
    'DictAstrolabeAdapter',
    'DictHoroscopeAdapter',
    'ScopedChart',
]
