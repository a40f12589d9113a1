#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘索引模块

从星盘接口构建宫位查找表：宫→星曜集合、宫→四化集合、宫→星曜亮度、
宫名↔索引、索引→地支/天干。本命盘与运限盘使用同一套结构。
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from ziwei.calculators.ziwei_core.ring_geometry import RING_SIZE, hidden_pair, triad
from ziwei.data.constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    MUTAGEN_JI,
    MUTAGENS,
    PALACE_NAMES,
    SCOPE_ORIGIN,
    SCOPES,
    SHA_SET,
)
from ziwei.interfaces.chart_interface import IChart, ITimeScopedView
from ziwei.models.chart import PalaceModel
from ziwei.utils.exceptions import InvalidScopeError, StructuralError

logger = logging.getLogger(__name__)


@dataclass
class ChartIndex:
    """星盘索引（构建后只读）"""
    palace_stars: Dict[int, Set[str]]
    palace_mutagens: Dict[int, Set[str]]
    palace_brightness: Dict[int, Dict[str, str]]
    name_to_index: Dict[str, int]
    index_to_name: Dict[int, str]
    index_to_branch: Dict[int, str]
    index_to_stem: Dict[int, str]
    body_index: Optional[int] = None
    age_index: Optional[int] = None
    scope: str = SCOPE_ORIGIN
    branch_to_index: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        if not self.branch_to_index:
            self.branch_to_index = {b: i for i, b in self.index_to_branch.items()}

    # ---------- 基本查询 ----------

    def index_of(self, name: str) -> int:
        return self.name_to_index[name]

    def name_of(self, index: int) -> str:
        return self.index_to_name.get(index % RING_SIZE, "")

    def branch_of(self, index: int) -> str:
        return self.index_to_branch.get(index % RING_SIZE, "")

    def stars_at(self, index: int) -> Set[str]:
        return self.palace_stars.get(index % RING_SIZE, set())

    def mutagens_at(self, index: int) -> Set[str]:
        return self.palace_mutagens.get(index % RING_SIZE, set())

    def brightness_of(self, index: int, star: str) -> Optional[str]:
        return self.palace_brightness.get(index % RING_SIZE, {}).get(star)

    def has(self, index: int, star: str) -> bool:
        return star in self.stars_at(index)

    def has_all(self, index: int, stars: Iterable[str]) -> bool:
        palace_stars = self.stars_at(index)
        return all(s in palace_stars for s in stars)

    def has_any(self, index: int, stars: Iterable[str]) -> bool:
        palace_stars = self.stars_at(index)
        return any(s in palace_stars for s in stars)

    def has_mutagen(self, index: int, tag: str) -> bool:
        return tag in self.mutagens_at(index)

    # ---------- 关系查询 ----------

    def index_of_branch(self, branch: str) -> Optional[int]:
        return self.branch_to_index.get(branch)

    def hidden_pair_index(self, index: int) -> Optional[int]:
        """暗合宫索引"""
        peer = hidden_pair(self.branch_of(index))
        if peer is None:
            return None
        return self.index_of_branch(peer)

    def triad_union(self, index: int) -> Set[str]:
        """三方四正星曜并集"""
        union: Set[str] = set()
        for j in triad(index):
            union |= self.stars_at(j)
        return union

    def no_sha_ji(self, indices: Iterable[int]) -> bool:
        """宫位集合内无六煞且无化忌"""
        for i in indices:
            if self.stars_at(i) & SHA_SET:
                return False
            if MUTAGEN_JI in self.mutagens_at(i):
                return False
        return True


def _resolve(chart, name: str, scope: Optional[str]) -> Optional[PalaceModel]:
    if isinstance(chart, ITimeScopedView):
        return chart.palace(name, scope or SCOPE_ORIGIN)
    return chart.palace(name)


def _scope_mutagen_stars(chart, scope: str) -> List[str]:
    if scope == SCOPE_ORIGIN:
        return []
    if isinstance(chart, ITimeScopedView):
        return list(chart.mutagen_stars(scope))
    getter = getattr(chart, 'mutagen_stars', None)
    return list(getter()) if callable(getter) else []


def _age_palace(chart) -> Optional[PalaceModel]:
    getter = getattr(chart, 'age_palace', None)
    return getter() if callable(getter) else None


def build_chart_index(chart, scope: Optional[str] = None) -> ChartIndex:
    """
    构建星盘索引

    Args:
        chart: IChart（本命盘或 ScopedChart），或 ITimeScopedView（需同时给出 scope）
        scope: 运限范围；为 None 时取 chart.scope（ScopedChart）或 origin

    Returns:
        ChartIndex

    Raises:
        StructuralError: 缺宫、索引越界或重复、干支非法、地支重复
        InvalidScopeError: 运限范围非法
    """
    if not isinstance(chart, (IChart, ITimeScopedView)):
        raise StructuralError(f"不支持的星盘类型: {type(chart).__name__}")

    if scope is None:
        scope = getattr(chart, 'scope', SCOPE_ORIGIN)
    if scope not in SCOPES:
        raise InvalidScopeError(scope)

    active = _scope_mutagen_stars(chart, scope)
    # 运限四化：星名 → 四化
    active_mutagen = {star: MUTAGENS[i] for i, star in enumerate(active[:len(MUTAGENS)]) if star}

    palace_stars: Dict[int, Set[str]] = {}
    palace_mutagens: Dict[int, Set[str]] = {}
    palace_brightness: Dict[int, Dict[str, str]] = {}
    name_to_index: Dict[str, int] = {}
    index_to_name: Dict[int, str] = {}
    index_to_branch: Dict[int, str] = {}
    index_to_stem: Dict[int, str] = {}
    body_index = None

    for name in PALACE_NAMES:
        palace = _resolve(chart, name, scope)
        if palace is None:
            raise StructuralError(f"星盘缺少宫位: {name}", palace=name)

        idx = palace.index
        if not isinstance(idx, int) or not 0 <= idx < RING_SIZE:
            raise StructuralError(f"宫位索引越界: {name}={idx}", palace=name)
        if idx in index_to_name:
            raise StructuralError(f"宫位索引重复: {name} 与 {index_to_name[idx]} 同为 {idx}", palace=name)
        if palace.earthly_branch not in EARTHLY_BRANCHES:
            raise StructuralError(f"地支非法: {name}={palace.earthly_branch}", palace=name)
        if palace.heavenly_stem not in HEAVENLY_STEMS:
            raise StructuralError(f"天干非法: {name}={palace.heavenly_stem}", palace=name)
        if palace.earthly_branch in index_to_branch.values():
            raise StructuralError(f"地支重复: {name}={palace.earthly_branch}", palace=name)

        stars: Set[str] = set()
        muts: Set[str] = set()
        bright: Dict[str, str] = {}
        for star in palace.all_stars():
            stars.add(star.name)
            if star.mutagen:
                muts.add(star.mutagen)
            if star.brightness:
                bright[star.name] = star.brightness
            if star.name in active_mutagen:
                muts.add(active_mutagen[star.name])

        name_to_index[name] = idx
        index_to_name[idx] = name
        index_to_branch[idx] = palace.earthly_branch
        index_to_stem[idx] = palace.heavenly_stem
        palace_stars[idx] = stars
        palace_mutagens[idx] = muts
        palace_brightness[idx] = bright
        if palace.is_body_palace:
            body_index = idx

    age_index = None
    if scope != SCOPE_ORIGIN:
        age = _age_palace(chart)
        if age is not None:
            age_index = age.index

    logger.debug(f"星盘索引构建完成 scope={scope}")
    return ChartIndex(
        palace_stars=palace_stars,
        palace_mutagens=palace_mutagens,
        palace_brightness=palace_brightness,
        name_to_index=name_to_index,
        index_to_name=index_to_name,
        index_to_branch=index_to_branch,
        index_to_stem=index_to_stem,
        body_index=body_index,
        age_index=age_index,
        scope=scope,
    )
