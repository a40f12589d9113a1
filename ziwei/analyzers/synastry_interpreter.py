#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合盘解释分析器

原始分 → 0~100 归一化分数 → 六档档位，并按正负筛选评分依据、匹配宫位建议。
"""

import logging
import math
from typing import List, Optional, Tuple

from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.models.synastry import (
    Evidence,
    PalaceInterpretation,
    SynastryBucket,
    SynastryInterpretation,
    SynastryScoreResult,
)

logger = logging.getLogger(__name__)

# 归一化分数落在开区间 (0, 100)
_SCORE_FLOOR = math.nextafter(0.0, 100.0)
_SCORE_CEIL = math.nextafter(100.0, 0.0)


def normalize_score(raw: float, center: float = 0.0, spread: float = 8.0) -> float:
    """
    逻辑函数归一化：100 / (1 + e^(-(raw - center) / spread))

    Args:
        raw: 原始分
        center: 中心点（归一化为 50 的原始分）
        spread: 展开度，<= 0 时按 1 处理

    Returns:
        float: (0, 100) 开区间内的分数，极端原始分钳制到区间端点的相邻浮点数
    """
    if spread <= 0:
        spread = 1.0
    z = (raw - center) / spread
    # 分两支计算，避免 exp 溢出
    if z >= 0:
        score = 100.0 / (1.0 + math.exp(-z))
    else:
        ez = math.exp(z)
        score = 100.0 * ez / (1.0 + ez)
    return min(max(score, _SCORE_FLOOR), _SCORE_CEIL)


def get_bucket(score: float, registry: Optional[AnalysisRegistry] = None) -> SynastryBucket:
    """
    分数所属档位（左闭右开，最高档覆盖 100）

    Args:
        score: 归一化分数
        registry: 分析注册表

    Returns:
        SynastryBucket
    """
    registry = registry or get_registry()
    for name, low, high in registry.bins:
        if low <= score < high:
            return SynastryBucket(name)
    return SynastryBucket.NEUTRAL


def _select(
    evidence: List[Evidence],
    min_abs_effect: float,
    max_items: Optional[int],
) -> Tuple[List[Evidence], List[Evidence]]:
    """按正负拆分依据：过滤小于阈值的条目，按影响绝对值降序，按条数截断"""
    kept = [e for e in evidence if abs(e.value) >= min_abs_effect]
    positives = sorted((e for e in kept if e.value > 0), key=lambda e: abs(e.value), reverse=True)
    negatives = sorted((e for e in kept if e.value < 0), key=lambda e: abs(e.value), reverse=True)
    if max_items is not None:
        positives = positives[:max_items]
        negatives = negatives[:max_items]
    return positives, negatives


def interpret_synastry(
    score_result: SynastryScoreResult,
    min_abs_effect: Optional[float] = None,
    max_items_per_polarity: Optional[int] = None,
    registry: Optional[AnalysisRegistry] = None,
) -> SynastryInterpretation:
    """
    合盘解释

    Args:
        score_result: score_synastry 的结果
        min_abs_effect: 最小影响阈值，默认取配置（0.3）
        max_items_per_polarity: 每个方向最多保留的依据条数，默认取配置（不限）
        registry: 分析注册表

    Returns:
        SynastryInterpretation: 每宫的分数、档位、亮点、风险、建议
    """
    registry = registry or get_registry()
    if min_abs_effect is None:
        min_abs_effect = registry.min_abs_effect
    if max_items_per_polarity is None:
        max_items_per_polarity = registry.max_items_per_polarity

    palaces = {}
    for name, item in score_result.palaces.items():
        highlights, risks = _select(item.evidence, min_abs_effect, max_items_per_polarity)
        score = normalize_score(item.raw, registry.norm_center, registry.norm_spread)
        bucket = get_bucket(score, registry)
        advice = registry.palace_advice.get(name, {}).get(registry.bucket_family(bucket.value), ())
        palaces[name] = PalaceInterpretation(
            palace=name,
            raw=item.raw,
            score=score,
            bucket=bucket,
            highlights=highlights,
            risks=risks,
            advice=list(advice),
        )

    logger.debug(f"合盘解释完成: {len(palaces)} 宫")
    return SynastryInterpretation(palaces=palaces)
