#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
字典星盘适配器 - 将外部排盘引擎的序列化结果适配为星盘接口

本命盘：{"palaces": [{index, name, heavenlyStem, earthlyBranch, majorStars, ...}, ...]}
运限盘：{"decadal": {"palaceNames": [...], "mutagen": [...], "stars": [[...], ...]},
        "yearly": {...}, "monthly": {...}, "daily": {...}, "age": {"index": n}}
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ziwei.data.constants import LIFE_PALACE, PALACE_NAMES, SCOPE_ORIGIN, SCOPES
from ziwei.interfaces.chart_interface import IChart, ITimeScopedView
from ziwei.models.chart import PalaceModel, StarModel
from ziwei.utils.exceptions import InvalidScopeError, StructuralError

logger = logging.getLogger(__name__)


class DictAstrolabeAdapter(IChart):
    """本命盘字典适配器"""

    def __init__(self, data: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]):
        """
        Args:
            data: 含 "palaces" 键的字典，或宫位字典列表
        """
        if isinstance(data, Mapping):
            raw_palaces = data.get('palaces')
        else:
            raw_palaces = data
        if not isinstance(raw_palaces, (list, tuple)):
            raise StructuralError("星盘数据缺少宫位列表")

        self._palaces: List[PalaceModel] = []
        for idx, item in enumerate(raw_palaces):
            if isinstance(item, PalaceModel):
                self._palaces.append(item)
                continue
            try:
                self._palaces.append(PalaceModel.model_validate(item))
            except ValidationError as e:
                raise StructuralError(f"第 {idx} 个宫位数据格式错误: {e.error_count()} 处校验失败") from e

        self._by_name = {p.name: p for p in self._palaces}
        self._by_index = {p.index: p for p in self._palaces}
        logger.debug(f"本命盘适配完成，共 {len(self._palaces)} 个宫位")

    @property
    def palaces(self) -> List[PalaceModel]:
        return list(self._palaces)

    def palace(self, name: str) -> Optional[PalaceModel]:
        return self._by_name.get(name)

    def palace_by_index(self, index: int) -> Optional[PalaceModel]:
        return self._by_index.get(index)


class DictHoroscopeAdapter(ITimeScopedView):
    """运限盘字典适配器"""

    def __init__(self, astrolabe: DictAstrolabeAdapter, data: Mapping[str, Any]):
        """
        Args:
            astrolabe: 本命盘适配器（运限盘复用其宫干支与星曜）
            data: 运限序列化数据
        """
        self.astrolabe = astrolabe
        self._data: Dict[str, Any] = dict(data or {})

    def _scope_data(self, scope: str) -> Dict[str, Any]:
        if scope not in SCOPES:
            raise InvalidScopeError(scope)
        item = self._data.get(scope)
        return item if isinstance(item, Mapping) else {}

    def palace(self, name: str, scope: str) -> Optional[PalaceModel]:
        if scope == SCOPE_ORIGIN:
            return self.astrolabe.palace(name)

        scope_data = self._scope_data(scope)
        palace_names = self._palace_names(scope_data)
        if name not in palace_names:
            return None
        index = palace_names.index(name)
        base = self.astrolabe.palace_by_index(index)
        if base is None:
            return None

        flow_stars = self._flow_stars(scope_data, index)
        return base.model_copy(update={
            'name': name,
            'adjective_stars': [*base.adjective_stars, *flow_stars],
        })

    def mutagen_stars(self, scope: str) -> List[str]:
        if scope == SCOPE_ORIGIN:
            return []
        return list(self._scope_data(scope).get('mutagen') or [])

    def age_palace(self) -> Optional[PalaceModel]:
        age = self._data.get('age')
        if not isinstance(age, Mapping) or age.get('index') is None:
            return None
        return self.astrolabe.palace_by_index(age['index'])

    @staticmethod
    def _palace_names(scope_data: Mapping[str, Any]) -> List[str]:
        """
        运限宫名（按本命索引排列）

        未给出 palaceNames 时按运限命宫索引 index 轮转十二宫（如小限只给出 index）
        """
        names = scope_data.get('palaceNames')
        if names:
            return list(names)
        life = scope_data.get('index')
        if not isinstance(life, int):
            return []
        offset = PALACE_NAMES.index(LIFE_PALACE) - life
        return [PALACE_NAMES[(i + offset) % len(PALACE_NAMES)] for i in range(len(PALACE_NAMES))]

    @staticmethod
    def _flow_stars(scope_data: Mapping[str, Any], index: int) -> List[StarModel]:
        stars = scope_data.get('stars') or []
        if index >= len(stars) or not stars[index]:
            return []
        result = []
        for item in stars[index]:
            try:
                result.append(item if isinstance(item, StarModel) else StarModel.model_validate(item))
            except ValidationError as e:
                raise StructuralError(f"运限流曜数据格式错误: {e.error_count()} 处校验失败") from e
        return result
