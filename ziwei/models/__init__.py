#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微数据模型 - 统一的数据结构定义
"""

from ziwei.models.chart import StarModel, PalaceModel
from ziwei.models.pattern import PatternMatch
from ziwei.models.synastry import (
    SynastryBucket,
    Evidence,
    PalaceScore,
    SynastryScoreResult,
    PalaceInterpretation,
    SynastryInterpretation,
    NarratedPalace,
    SynastryNarration,
)

__all__ = [
    'StarModel',
    'PalaceModel',
    'PatternMatch',
    'SynastryBucket',
    'Evidence',
    'PalaceScore',
    'SynastryScoreResult',
    'PalaceInterpretation',
    'SynastryInterpretation',
    'NarratedPalace',
    'SynastryNarration',
]
