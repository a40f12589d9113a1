# -*- coding: utf-8 -*-
"""
紫微斗数格局识别与合盘分析核心

对外接口：
- detect_patterns: 格局识别（本命 + 可选运限盘）
- score_synastry / interpret_synastry / narrate_synastry: 合盘评分、解释、叙述
- analyze_synastry: 合盘完整流程
"""

from ziwei.adapters import DictAstrolabeAdapter, DictHoroscopeAdapter, ScopedChart
from ziwei.analyzers import (
    get_bucket,
    interpret_synastry,
    narrate_synastry,
    normalize_score,
    score_synastry,
)
from ziwei.calculators.ziwei_core import build_chart_index
from ziwei.engines import detect_patterns
from ziwei.services import analyze_synastry
from ziwei.utils import InvalidScopeError, StructuralError, ZiweiError, setup_logging

__version__ = "1.0.0"

__all__ = [
    'detect_patterns',
    'score_synastry',
    'interpret_synastry',
    'narrate_synastry',
    'analyze_synastry',
    'normalize_score',
    'get_bucket',
    'build_chart_index',
    'StructuralError',
    'InvalidScopeError',
    'ZiweiError',
    'DictAstrolabeAdapter',
    'DictHoroscopeAdapter',
    'ScopedChart',
    'setup_logging',
]
