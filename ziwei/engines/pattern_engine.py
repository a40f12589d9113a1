#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局识别引擎

按规则目录的固定顺序逐条判定，输出命中的格局列表。
运限规则只在提供运限盘时参与判定。
"""

import logging
from typing import List, Optional, Union

from ziwei.adapters.scoped_chart_adapter import ScopedChart
from ziwei.calculators.ziwei_core.chart_index import ChartIndex, build_chart_index
from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.data.constants import SCOPE_ORIGIN
from ziwei.engines.pattern_rules import PATTERN_RULES, RuleContext
from ziwei.interfaces.chart_interface import IChart, ITimeScopedView
from ziwei.models.pattern import PatternMatch
from ziwei.utils.exceptions import InvalidScopeError

logger = logging.getLogger(__name__)


def _as_index(chart: Union[IChart, ChartIndex]) -> ChartIndex:
    if isinstance(chart, ChartIndex):
        return chart
    return build_chart_index(chart)


def _active_index(active_chart, scope: Optional[str]) -> ChartIndex:
    """运限盘索引：未绑定范围的运限盘必须给出 scope"""
    if isinstance(active_chart, ITimeScopedView) and not isinstance(active_chart, IChart):
        if scope is None or scope == SCOPE_ORIGIN:
            raise InvalidScopeError(str(scope))
        return build_chart_index(ScopedChart(active_chart, scope))
    return _as_index(active_chart)


def detect_patterns(
    chart: Union[IChart, ChartIndex],
    active_chart: Optional[Union[IChart, ChartIndex]] = None,
    registry: Optional[AnalysisRegistry] = None,
    scope: Optional[str] = None,
) -> List[PatternMatch]:
    """
    识别星盘格局

    Args:
        chart: 本命盘（IChart 或已构建的 ChartIndex）
        active_chart: 运限盘（ScopedChart、ChartIndex，或配合 scope 的 ITimeScopedView），
            为 None 时跳过运限规则
        registry: 分析注册表，默认使用进程级注册表
        scope: active_chart 为未绑定范围的运限盘时所取的运限范围

    Returns:
        List[PatternMatch]: 按规则目录顺序排列的命中结果

    Raises:
        StructuralError: 星盘结构不完整
        InvalidScopeError: 运限盘未绑定范围且未给出 scope
    """
    registry = registry or get_registry()
    base = _as_index(chart)
    active = _active_index(active_chart, scope) if active_chart is not None else None
    ctx = RuleContext.build(base, active)

    matches: List[PatternMatch] = []
    for rule in PATTERN_RULES:
        if rule.temporal and active is None:
            continue
        outcome = rule.detect(ctx)
        if outcome is None:
            continue
        pattern_id, name = rule.resolve(outcome)
        copy = registry.copy_for(pattern_id)
        matches.append(PatternMatch(
            id=pattern_id,
            name=name,
            strict=outcome.strict,
            reason=outcome.reason,
            involved=list(outcome.involved),
            title=copy.get('title'),
            blurb=copy.get('blurb'),
        ))

    scope = active.scope if active is not None else base.scope
    logger.info(f"格局识别完成: scope={scope}, 命中 {len(matches)} 个")
    return matches


def get_pattern_names(patterns: List[PatternMatch]) -> List[str]:
    """提取格局名称列表"""
    return [p.name for p in patterns]


def get_strict_patterns(patterns: List[PatternMatch]) -> List[PatternMatch]:
    """只保留严判命中的格局"""
    return [p for p in patterns if p.strict]


def get_patterns_by_category(patterns: List[PatternMatch], category: str) -> List[PatternMatch]:
    """
    按 id 前缀筛选格局

    Args:
        patterns: 格局列表
        category: id 前缀，如 'junchen'、'zifu'、'luma'
    """
    return [p for p in patterns if p.id.startswith(category)]
