#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试星盘数据

按 iztro 序列化格式构造十二宫星盘与运限数据，用于单元测试和集成测试
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from ziwei.adapters.dict_chart_adapter import DictAstrolabeAdapter, DictHoroscopeAdapter
from ziwei.data.constants import EARTHLY_BRANCHES, HEAVENLY_STEMS, MAJOR_14, SHA_SET, SOFT_STARS
from ziwei.interfaces.chart_interface import IHoroscopeSource

# 宫名顺序（自命宫起，索引递减方向排列）
PALACE_ORDER = (
    "命宫", "兄弟", "夫妻", "子女", "财帛", "疾厄",
    "迁移", "仆役", "官禄", "田宅", "福德", "父母",
)

MINOR_STARS = SOFT_STARS | SHA_SET | {"禄存", "天马"}


def palace_name_at(index: int, life_index: int = 5) -> str:
    """命宫在 life_index 时，索引 index 上的宫名"""
    return PALACE_ORDER[(life_index - index) % 12]


def _star(item: Any) -> Dict[str, Any]:
    """星曜描述：'紫微' / ('紫微', '庙') / ('紫微', '庙', '禄') / dict"""
    if isinstance(item, dict):
        return dict(item)
    if isinstance(item, str):
        return {"name": item}
    name, brightness, *rest = item
    star = {"name": name}
    if brightness:
        star["brightness"] = brightness
    if rest and rest[0]:
        star["mutagen"] = rest[0]
    return star


def build_chart_data(
    stars: Optional[Dict[str, Iterable[Any]]] = None,
    life_index: int = 5,
    life_branch: str = "午",
    body_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    构造本命盘序列化数据

    Args:
        stars: 宫名 → 星曜描述列表
        life_index: 命宫索引
        life_branch: 命宫地支（其余宫按索引递增顺排地支）
        body_name: 身宫所在宫名

    Returns:
        {"palaces": [...]}，按索引 0..11 排列
    """
    stars = stars or {}
    offset = EARTHLY_BRANCHES.index(life_branch) - life_index
    palaces = []
    for i in range(12):
        name = palace_name_at(i, life_index)
        major, minor, adjective = [], [], []
        for item in stars.get(name, []):
            star = _star(item)
            if star["name"] in MAJOR_14:
                major.append(star)
            elif star["name"] in MINOR_STARS:
                minor.append(star)
            else:
                adjective.append(star)
        palaces.append({
            "index": i,
            "name": name,
            "isBodyPalace": name == body_name,
            "isOriginalPalace": False,
            "heavenlyStem": HEAVENLY_STEMS[i % 10],
            "earthlyBranch": EARTHLY_BRANCHES[(i + offset) % 12],
            "majorStars": major,
            "minorStars": minor,
            "adjectiveStars": adjective,
        })
    return {"palaces": palaces}


def build_chart(stars: Optional[Dict[str, Iterable[Any]]] = None, **kwargs) -> DictAstrolabeAdapter:
    return DictAstrolabeAdapter(build_chart_data(stars, **kwargs))


def build_scope_data(
    scope_life_index: int,
    mutagen: Optional[List[str]] = None,
    flow_stars: Optional[Dict[int, List[str]]] = None,
) -> Dict[str, Any]:
    """
    构造单个运限范围的序列化数据

    Args:
        scope_life_index: 运限命宫所在的本命索引
        mutagen: 运限四化星（禄权科忌顺序）
        flow_stars: 本命索引 → 流曜名列表
    """
    flow_stars = flow_stars or {}
    return {
        "palaceNames": [palace_name_at(i, scope_life_index) for i in range(12)],
        "mutagen": list(mutagen or []),
        "stars": [[{"name": s, "scope": "flow"} for s in flow_stars.get(i, [])] for i in range(12)],
    }


def build_horoscope(
    astrolabe: DictAstrolabeAdapter,
    scopes: Dict[str, Dict[str, Any]],
    age_index: Optional[int] = None,
) -> DictHoroscopeAdapter:
    data: Dict[str, Any] = dict(scopes)
    if age_index is not None:
        data["age"] = {"index": age_index, "palaceNames": [palace_name_at(i, age_index) for i in range(12)]}
    return DictHoroscopeAdapter(astrolabe, data)


class FixtureChartSource(DictAstrolabeAdapter, IHoroscopeSource):
    """既是本命盘又能生成运限盘的测试星盘（记录查询日期）"""

    def __init__(self, data: Dict[str, Any], horoscope_data: Dict[str, Any]):
        super().__init__(data)
        self.horoscope_data = horoscope_data
        self.queries: List[date] = []

    def horoscope(self, query_date: date) -> DictHoroscopeAdapter:
        self.queries.append(query_date)
        return DictHoroscopeAdapter(self, self.horoscope_data)
