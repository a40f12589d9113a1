#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合盘分析服务
串联评分、解释、叙述三个阶段，输出完整合盘结果；支持本命与运限合盘
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from ziwei.adapters.scoped_chart_adapter import ScopedChart
from ziwei.analyzers.synastry_interpreter import interpret_synastry
from ziwei.analyzers.synastry_narrator import narrate_synastry
from ziwei.analyzers.synastry_scorer import score_synastry
from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.data.constants import SCOPE_ORIGIN, SCOPES
from ziwei.interfaces.chart_interface import IChart, IHoroscopeSource
from ziwei.utils.exceptions import InvalidScopeError, ZiweiError

logger = logging.getLogger(__name__)


class SynastryService:
    """合盘分析服务"""

    @staticmethod
    def analyze_synastry(
        chart_a,
        chart_b,
        name_a: str = "A",
        name_b: str = "B",
        min_abs_effect: Optional[float] = None,
        max_items_per_polarity: Optional[int] = None,
        include_raw_data: bool = False,
        registry: Optional[AnalysisRegistry] = None,
    ) -> Dict[str, Any]:
        """
        完整合盘分析

        Args:
            chart_a: A 方星盘（IChart / ScopedChart）
            chart_b: B 方星盘
            name_a: A 方称呼
            name_b: B 方称呼
            min_abs_effect: 最小影响阈值，默认取配置
            max_items_per_polarity: 每个方向最多保留的依据条数，默认取配置
            include_raw_data: 是否附带评分与解释的原始数据
            registry: 分析注册表

        Returns:
            {summary, palaces, metadata[, raw_data]}

        Raises:
            StructuralError: 星盘结构不完整（不返回部分结果）
        """
        registry = registry or get_registry()
        if min_abs_effect is None:
            min_abs_effect = registry.min_abs_effect
        if max_items_per_polarity is None:
            max_items_per_polarity = registry.max_items_per_polarity

        logger.info(f"🔍 开始合盘分析: {name_a} × {name_b}")

        # 1. 评分
        score_result = score_synastry(chart_a, chart_b, registry=registry)
        # 2. 解释
        interpretation = interpret_synastry(
            score_result,
            min_abs_effect=min_abs_effect,
            max_items_per_polarity=max_items_per_polarity,
            registry=registry,
        )
        # 3. 叙述
        narration = narrate_synastry(name_a, name_b, score_result, interpretation, registry=registry)

        result: Dict[str, Any] = {
            'summary': {
                'headline': narration.headline,
                'total_palaces': len(interpretation.palaces),
            },
            'palaces': [section.model_dump(mode='json') for section in narration.palaces],
            'metadata': {
                'analysis_time': datetime.now().isoformat(),
                'min_effect_threshold': min_abs_effect,
                'scope': score_result.scope,
            },
        }
        if include_raw_data:
            result['raw_data'] = {
                'synastry_scores': score_result.model_dump(mode='json'),
                'interpretation': interpretation.model_dump(mode='json'),
            }

        logger.info(f"✅ 合盘分析完成: {name_a} × {name_b}")
        return result

    @staticmethod
    def analyze_scoped_synastry(
        source_a,
        source_b,
        scope: str,
        query_date: Optional[date] = None,
        name_a: str = "A",
        name_b: str = "B",
        min_abs_effect: Optional[float] = None,
        max_items_per_polarity: Optional[int] = None,
        include_raw_data: bool = False,
        registry: Optional[AnalysisRegistry] = None,
    ) -> Dict[str, Any]:
        """
        运限合盘分析

        Args:
            source_a: A 方（origin 时为 IChart，其余范围为 IHoroscopeSource）
            source_b: B 方
            scope: origin/decadal/yearly/monthly/daily/age
            query_date: 运限查询日期（非 origin 时必填）

        Returns:
            同 analyze_synastry
        """
        if scope not in SCOPES:
            raise InvalidScopeError(scope)

        if scope == SCOPE_ORIGIN:
            chart_a, chart_b = source_a, source_b
            for side, chart in (('A', chart_a), ('B', chart_b)):
                if not isinstance(chart, IChart):
                    raise ZiweiError(f"{side} 方不是本命盘: {type(chart).__name__}")
        else:
            if query_date is None:
                raise ZiweiError(f"运限合盘需要查询日期: scope={scope}")
            for side, source in (('A', source_a), ('B', source_b)):
                if not isinstance(source, IHoroscopeSource):
                    raise ZiweiError(f"{side} 方不支持运限查询: {type(source).__name__}")
            chart_a = ScopedChart(source_a.horoscope(query_date), scope)
            chart_b = ScopedChart(source_b.horoscope(query_date), scope)

        return SynastryService.analyze_synastry(
            chart_a,
            chart_b,
            name_a=name_a,
            name_b=name_b,
            min_abs_effect=min_abs_effect,
            max_items_per_polarity=max_items_per_polarity,
            include_raw_data=include_raw_data,
            registry=registry,
        )


analyze_synastry = SynastryService.analyze_synastry
analyze_scoped_synastry = SynastryService.analyze_scoped_synastry
