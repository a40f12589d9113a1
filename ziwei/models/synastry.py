#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合盘数据模型 - 评分、解释、叙述三个阶段的结果结构
"""

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class SynastryBucket(str, Enum):
    """合盘评分档位（由低到高）"""
    ADVERSE = "相克"
    CLASHING = "相冲"
    NEUTRAL = "中性"
    HARMONIOUS = "相合"
    STRONG_HARMONY = "强合"
    RESONANT = "共振"


class Evidence(BaseModel):
    """单条评分依据：B 盘某颗星/某个四化对 A 盘某宫的贡献"""
    target_index: int = Field(..., description="A 盘目标宫索引")
    target: str = Field(..., description="A 盘目标宫名")
    source_index: int = Field(..., description="贡献来源宫索引（A 盘坐标）")
    source: str = Field(..., description="贡献来源宫名")
    kind: Literal['star', 'mutagen'] = Field(..., description="贡献类型")
    name: str = Field(..., description="星曜名或四化（禄/权/科/忌）")
    brightness: Optional[str] = Field(None, description="归一化后的亮度")
    relation_weight: float = Field(..., description="三方四正关系权重")
    value: float = Field(..., description="带符号的分值贡献")

    def to_line(self) -> str:
        """渲染为审计用的单行依据，如 命宫←迁移: B星[紫微|庙] *0.1 => 0.33"""
        if self.kind == 'star':
            token = f"{self.name}|{self.brightness}" if self.brightness else self.name
            body = f"B星[{token}]"
        else:
            body = f"B化[{self.name}]"
        return f"{self.target}←{self.source}: {body} *{self.relation_weight:.1f} => {self.value:.2f}"


class PalaceScore(BaseModel):
    """A 盘单宫原始得分"""
    palace: str
    index: int
    raw: float = 0.0
    evidence: List[Evidence] = Field(default_factory=list)


class SynastryScoreResult(BaseModel):
    """合盘评分结果（按 A 盘宫名索引）"""
    palaces: Dict[str, PalaceScore] = Field(default_factory=dict)
    scope: Optional[str] = Field(None, description="运限范围，本命为 origin")

    def raw_scores(self) -> Dict[str, float]:
        return {name: item.raw for name, item in self.palaces.items()}


class PalaceInterpretation(BaseModel):
    """单宫解释：归一化分数、档位、正负依据、建议"""
    palace: str
    raw: float
    score: float
    bucket: SynastryBucket
    highlights: List[Evidence] = Field(default_factory=list)
    risks: List[Evidence] = Field(default_factory=list)
    advice: List[str] = Field(default_factory=list)


class SynastryInterpretation(BaseModel):
    palaces: Dict[str, PalaceInterpretation] = Field(default_factory=dict)


class NarratedPalace(BaseModel):
    """单宫自然语言段落"""
    palace: str
    bucket: SynastryBucket
    one_liner: str
    positives: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    advice: List[str] = Field(default_factory=list)


class SynastryNarration(BaseModel):
    headline: str
    palaces: List[NarratedPalace] = Field(default_factory=list)
