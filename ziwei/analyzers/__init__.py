# -*- coding: utf-8 -*-
"""
合盘分析模块
"""

from ziwei.analyzers.synastry_scorer import score_synastry
from ziwei.analyzers.synastry_interpreter import get_bucket, interpret_synastry, normalize_score
from ziwei.analyzers.synastry_narrator import narrate_synastry

__all__ = [
    'score_synastry',
    'normalize_score',
    'get_bucket',
    'interpret_synastry',
    'narrate_synastry',
]
