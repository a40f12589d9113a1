#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运限格局服务
按查询范围识别本命格局与各层运限格局（大限 ⊂ 流年 ⊂ 流月 ⊂ 流日）
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from ziwei.adapters.scoped_chart_adapter import ScopedChart
from ziwei.calculators.ziwei_core.chart_index import build_chart_index
from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.data.constants import (
    SCOPE_DAILY,
    SCOPE_DECADAL,
    SCOPE_DISPLAY_NAMES,
    SCOPE_MONTHLY,
    SCOPE_ORIGIN,
    SCOPE_YEARLY,
    SCOPES,
)
from ziwei.engines.pattern_engine import detect_patterns
from ziwei.interfaces.chart_interface import IHoroscopeSource
from ziwei.utils.exceptions import InvalidScopeError, ZiweiError
from ziwei.utils.logging_utils import safe_log

logger = logging.getLogger(__name__)

# 运限层级（由粗到细）
SCOPE_CHAIN = (SCOPE_DECADAL, SCOPE_YEARLY, SCOPE_MONTHLY, SCOPE_DAILY)

# 大限/流年查询取 3 月 1 日，保证已过农历新年
YEARLY_QUERY_MONTH = 3


def build_query_date(scope: str, year: int, month: Optional[int] = None, day: Optional[int] = None) -> date:
    """
    构造运限查询日期

    Args:
        scope: 运限范围
        year: 年
        month: 月（流月、流日必填）
        day: 日（流日必填）

    Returns:
        date: decadal/yearly → 当年 3 月 1 日；monthly → 当月 1 日；daily → 当日
    """
    if scope not in SCOPES:
        raise InvalidScopeError(scope)
    if scope in (SCOPE_MONTHLY, SCOPE_DAILY) and month is None:
        raise ZiweiError(f"{SCOPE_DISPLAY_NAMES[scope]}查询需要月份")
    if scope == SCOPE_DAILY and day is None:
        raise ZiweiError(f"{SCOPE_DISPLAY_NAMES[scope]}查询需要日期")

    if scope == SCOPE_MONTHLY:
        return date(year, month, 1)
    if scope == SCOPE_DAILY:
        return date(year, month, day)
    return date(year, YEARLY_QUERY_MONTH, 1)


def analyze_horoscope_patterns(
    chart,
    source: IHoroscopeSource,
    scope: str,
    query_date: date,
    registry: Optional[AnalysisRegistry] = None,
) -> Dict[str, Any]:
    """
    运限格局分析

    Args:
        chart: 本命盘
        source: 运限生成器（外部排盘引擎）
        scope: decadal/yearly/monthly/daily
        query_date: 查询日期
        registry: 分析注册表

    Returns:
        {"本命格局": [...], "大限盘": {"运限格局": [...]}, ..., "小限": 宫名}
        查询范围及所有更粗的范围都会输出
    """
    if scope not in SCOPE_CHAIN:
        raise InvalidScopeError(scope)
    registry = registry or get_registry()

    logger.info(f"🔍 开始运限格局分析 scope={scope}, date={query_date.isoformat()}")
    base = build_chart_index(chart, SCOPE_ORIGIN)
    view = source.horoscope(query_date)

    result: Dict[str, Any] = {
        '本命格局': [p.model_dump() for p in detect_patterns(base, registry=registry)],
    }
    depth = SCOPE_CHAIN.index(scope)
    for sc in SCOPE_CHAIN[:depth + 1]:
        active = build_chart_index(ScopedChart(view, sc))
        patterns = detect_patterns(base, active, registry=registry)
        result[SCOPE_DISPLAY_NAMES[sc]] = {'运限格局': [p.model_dump() for p in patterns]}

    age = view.age_palace()
    if age is not None:
        result['小限'] = age.name

    safe_log('info', f"✅ 运限格局分析完成 scope={scope}")
    return result
