#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析注册表 - 进程内只读的静态配置

把权重表、亮度乘数、档位、建议、星曜简义、格局文案冻结为一个不可变对象，
进程启动时构建一次，评分器与格局引擎通过参数注入使用。
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ziwei.config import pattern_copy_config, synastry_config
from ziwei.config.app_config import AnalysisConfig, get_config
from ziwei.data.constants import BRIGHTNESS_ALIASES

logger = logging.getLogger(__name__)


def _freeze(value: Any) -> Any:
    """递归冻结：dict → MappingProxyType，list → tuple"""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set):
        return frozenset(value)
    return value


@dataclass(frozen=True)
class AnalysisRegistry:
    """只读分析注册表"""
    star_weights: Mapping[str, float]
    category_weights: Tuple[Tuple[frozenset, float], ...]
    mutagen_weights: Mapping[str, float]
    relation_weights: Mapping[str, float]
    brightness_pos_mult: Mapping[str, float]
    brightness_neg_mult: Mapping[str, float]
    brightness_aliases: Mapping[str, str]
    bins: Tuple[Tuple[str, float, float], ...]
    positive_buckets: frozenset
    negative_buckets: frozenset
    bucket_tone: Mapping[str, str]
    palace_advice: Mapping[str, Mapping[str, Tuple[str, ...]]]
    star_brief: Mapping[str, str]
    mutagen_tone: Mapping[str, str]
    mutagen_meaning: Mapping[str, str]
    relation_phrases: Mapping[str, str]
    pattern_copy: Mapping[str, Mapping[str, str]]
    norm_center: float = 0.0
    norm_spread: float = 8.0
    min_abs_effect: float = 0.3
    max_items_per_polarity: Optional[int] = None

    def base_weight(self, star: str) -> float:
        """
        星曜基础权重

        先查星曜表，再按桃花/解神/吉杂曜/凶杂曜分类；未知星曜为 0。
        """
        if star in self.star_weights:
            return self.star_weights[star]
        for members, weight in self.category_weights:
            if star in members:
                return weight
        return 0.0

    def mutagen_weight(self, tag: str) -> float:
        return self.mutagen_weights.get(tag, 0.0)

    def normalize_brightness(self, brightness: Optional[str]) -> Optional[str]:
        """亮度别名归一（得地→得、落陷→陷 等）；空值返回 None"""
        if not brightness:
            return None
        brightness = brightness.strip()
        return self.brightness_aliases.get(brightness, brightness)

    def brightness_adjust(self, weight: float, brightness: Optional[str]) -> float:
        """
        按亮度调整权重

        正权重星用正向乘数（陷时反号），负权重星用负向乘数（越陷越凶）；
        未知亮度乘数为 1.0。
        """
        grade = self.normalize_brightness(brightness)
        if grade is None:
            return weight
        table = self.brightness_pos_mult if weight >= 0 else self.brightness_neg_mult
        return weight * table.get(grade, 1.0)

    def bucket_family(self, bucket: str) -> str:
        """档位族：pos / neg / neu"""
        if bucket in self.positive_buckets:
            return 'pos'
        if bucket in self.negative_buckets:
            return 'neg'
        return 'neu'

    def copy_for(self, pattern_id: str) -> Mapping[str, str]:
        return self.pattern_copy.get(pattern_id, MappingProxyType({}))


def build_registry(config: Optional[AnalysisConfig] = None) -> AnalysisRegistry:
    """
    由静态配置表与运行时配置构建注册表

    Args:
        config: 分析配置；为 None 时取全局配置

    Returns:
        AnalysisRegistry
    """
    config = config or get_config()
    registry = AnalysisRegistry(
        star_weights=_freeze(synastry_config.BASE_STAR_WEIGHTS),
        category_weights=tuple(
            (frozenset(members), weight) for members, weight in synastry_config.CATEGORY_WEIGHTS
        ),
        mutagen_weights=_freeze(synastry_config.MUTAGEN_WEIGHTS),
        relation_weights=_freeze(synastry_config.RELATION_WEIGHTS),
        brightness_pos_mult=_freeze(synastry_config.BRIGHTNESS_POS_MULT),
        brightness_neg_mult=_freeze(synastry_config.BRIGHTNESS_NEG_MULT),
        brightness_aliases=_freeze(BRIGHTNESS_ALIASES),
        bins=_freeze(synastry_config.SYNASTRY_BINS),
        positive_buckets=frozenset(synastry_config.POSITIVE_BUCKETS),
        negative_buckets=frozenset(synastry_config.NEGATIVE_BUCKETS),
        bucket_tone=_freeze(synastry_config.BUCKET_TONE),
        palace_advice=_freeze(synastry_config.PALACE_ADVICE),
        star_brief=_freeze(synastry_config.STAR_BRIEF),
        mutagen_tone=_freeze(synastry_config.MUTAGEN_TONE),
        mutagen_meaning=_freeze(synastry_config.MUTAGEN_MEANING),
        relation_phrases=_freeze(synastry_config.RELATION_PHRASES),
        pattern_copy=_freeze(pattern_copy_config.PATTERN_COPY),
        norm_center=config.norm_center,
        norm_spread=config.norm_spread,
        min_abs_effect=config.min_abs_effect,
        max_items_per_polarity=config.max_items_per_polarity,
    )
    logger.debug("分析注册表构建完成")
    return registry


# 全局注册表实例（单例模式）
_registry: Optional[AnalysisRegistry] = None


def get_registry() -> AnalysisRegistry:
    """获取进程级注册表（首次调用时构建）"""
    global _registry
    if _registry is None:
        _registry = build_registry()
    return _registry
