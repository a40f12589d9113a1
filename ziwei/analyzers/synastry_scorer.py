#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合盘评分分析器

把 B 盘按地支叠加到 A 盘的宫位坐标上，再对 A 盘每个宫位的三方四正
（本宫 0.7、对宫 0.1、两个三合各 0.1）累计 B 盘星曜与四化的带符号分值。
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ziwei.calculators.ziwei_core.chart_index import ChartIndex, build_chart_index
from ziwei.calculators.ziwei_core.ring_geometry import triad
from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.data.constants import MUTAGENS, PALACE_NAMES
from ziwei.models.synastry import Evidence, PalaceScore, SynastryScoreResult
from ziwei.utils.exceptions import StructuralError

logger = logging.getLogger(__name__)

# 低于该绝对值的贡献视为未知星曜，不记录
EPSILON = 1e-9

_RELATION_KEYS = ('self', 'opp', 'tri1', 'tri2')


class _Overlay:
    """B 盘按地支对齐到 A 盘坐标后的星曜、四化、亮度"""

    def __init__(self, chart_a: ChartIndex, chart_b: ChartIndex):
        self.stars: Dict[int, Set[str]] = {}
        self.mutagens: Dict[int, Set[str]] = {}
        self.brightness: Dict[int, Dict[str, str]] = {}
        for ai, branch in chart_a.index_to_branch.items():
            bi = chart_b.index_of_branch(branch)
            if bi is None:
                raise StructuralError(f"B 盘缺少地支: {branch}", palace=chart_a.name_of(ai))
            self.stars[ai] = chart_b.stars_at(bi)
            self.mutagens[ai] = chart_b.mutagens_at(bi)
            self.brightness[ai] = chart_b.palace_brightness.get(bi, {})


def _sorted_mutagens(mutagens: Set[str]) -> List[str]:
    order = {tag: i for i, tag in enumerate(MUTAGENS)}
    return sorted(mutagens, key=lambda m: (order.get(m, len(order)), m))


def _score_palace(
    i: int,
    chart_a: ChartIndex,
    overlay: _Overlay,
    registry: AnalysisRegistry,
    scale: float,
) -> Tuple[float, List[Evidence]]:
    """计算 A 盘单宫得分与依据"""
    total = 0.0
    evidence: List[Evidence] = []
    target = chart_a.name_of(i)

    for key, j in zip(_RELATION_KEYS, triad(i)):
        rel_weight = registry.relation_weights[key]
        source = chart_a.name_of(j)

        for star in sorted(overlay.stars.get(j, set())):
            raw_brightness = overlay.brightness.get(j, {}).get(star)
            adjusted = registry.brightness_adjust(registry.base_weight(star), raw_brightness)
            inc = adjusted * rel_weight * scale
            if abs(inc) <= EPSILON:
                continue
            total += inc
            evidence.append(Evidence(
                target_index=i,
                target=target,
                source_index=j,
                source=source,
                kind='star',
                name=star,
                brightness=registry.normalize_brightness(raw_brightness),
                relation_weight=rel_weight,
                value=inc,
            ))

        for tag in _sorted_mutagens(overlay.mutagens.get(j, set())):
            inc = registry.mutagen_weight(tag) * rel_weight * scale
            if abs(inc) <= EPSILON:
                continue
            total += inc
            evidence.append(Evidence(
                target_index=i,
                target=target,
                source_index=j,
                source=source,
                kind='mutagen',
                name=tag,
                relation_weight=rel_weight,
                value=inc,
            ))

    return total, evidence


def score_synastry(
    chart_a,
    chart_b,
    registry: Optional[AnalysisRegistry] = None,
    scale: float = 1.0,
) -> SynastryScoreResult:
    """
    合盘评分

    Args:
        chart_a: A 方星盘（IChart / ScopedChart / ChartIndex）
        chart_b: B 方星盘，须与 A 方同一运限范围
        registry: 分析注册表，默认使用进程级注册表
        scale: 整体缩放系数

    Returns:
        SynastryScoreResult: A 盘十二宫的原始得分与依据

    Raises:
        StructuralError: 任一星盘结构不完整
    """
    registry = registry or get_registry()
    index_a = chart_a if isinstance(chart_a, ChartIndex) else build_chart_index(chart_a)
    index_b = chart_b if isinstance(chart_b, ChartIndex) else build_chart_index(chart_b)
    overlay = _Overlay(index_a, index_b)

    palaces: Dict[str, PalaceScore] = {}
    for name in PALACE_NAMES:
        i = index_a.index_of(name)
        raw, evidence = _score_palace(i, index_a, overlay, registry, scale)
        palaces[name] = PalaceScore(palace=name, index=i, raw=raw, evidence=evidence)

    logger.debug(f"合盘评分完成 scope={index_a.scope}")
    return SynastryScoreResult(palaces=palaces, scope=index_a.scope)
