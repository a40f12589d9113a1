#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微核心计算模块

提供紫微斗数分析的基础计算：
- 十二宫环形位置关系
- 星盘索引构建
"""

from .ring_geometry import (
    RING_SIZE,
    left,
    right,
    opposite,
    trine,
    triad,
    hidden_pair,
    relation_of,
)
from .chart_index import ChartIndex, build_chart_index

__all__ = [
    'RING_SIZE',
    'left',
    'right',
    'opposite',
    'trine',
    'triad',
    'hidden_pair',
    'relation_of',
    'ChartIndex',
    'build_chart_index',
]
