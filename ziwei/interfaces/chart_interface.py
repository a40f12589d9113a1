#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘接口
定义分析核心对外部排盘引擎的最小能力要求：按宫名取宫、按运限取宫、运限四化、小限宫
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ziwei.models.chart import PalaceModel


class IChart(ABC):
    """本命盘接口"""

    @abstractmethod
    def palace(self, name: str) -> Optional[PalaceModel]:
        """
        按宫名取宫

        Args:
            name: 十二宫名之一，如 "命宫"

        Returns:
            PalaceModel；宫名无法解析时返回 None
        """
        pass


class ITimeScopedView(ABC):
    """运限盘接口（大限/流年/流月/流日）"""

    @abstractmethod
    def palace(self, name: str, scope: str) -> Optional[PalaceModel]:
        """
        按运限范围内的宫名取宫

        Args:
            name: 运限宫名，如 "命宫" 表示该运限的命宫
            scope: 运限范围 decadal/yearly/monthly/daily

        Returns:
            PalaceModel（星曜已包含运限流曜）；无法解析时返回 None
        """
        pass

    @abstractmethod
    def mutagen_stars(self, scope: str) -> List[str]:
        """
        运限四化星

        Returns:
            按 禄、权、科、忌 顺序排列的星曜名列表
        """
        pass

    def age_palace(self) -> Optional[PalaceModel]:
        """小限宫（不提供时返回 None）"""
        return None


class IHoroscopeSource(ABC):
    """运限生成接口（由外部排盘引擎实现）"""

    @abstractmethod
    def horoscope(self, query_date: date) -> ITimeScopedView:
        """
        生成查询时刻的运限盘

        Args:
            query_date: 查询日期

        Returns:
            ITimeScopedView
        """
        pass
