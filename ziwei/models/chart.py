#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘数据模型 - 外部排盘引擎产出的宫位/星曜结构

字段别名与 iztro 序列化格式（camelCase）一致，也可按 snake_case 构造。
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StarModel(BaseModel):
    """星曜数据模型"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., description="星曜名称", examples=["紫微"])
    type: Optional[str] = Field(None, description="星曜类型：major/soft/tough/flower/helper/adjective/lucun/tianma")
    scope: Optional[str] = Field(None, description="作用范围：origin/decadal/yearly/monthly/daily")
    brightness: Optional[str] = Field(None, description="亮度：庙/旺/得/利/平/不/陷", examples=["庙"])
    mutagen: Optional[str] = Field(None, description="四化：禄/权/科/忌", examples=["禄"])


class PalaceModel(BaseModel):
    """宫位数据模型"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    index: int = Field(..., description="宫位索引 0-11", examples=[5])
    name: str = Field(..., description="宫位名称", examples=["命宫"])
    is_body_palace: bool = Field(False, alias="isBodyPalace", description="是否身宫")
    is_original_palace: bool = Field(False, alias="isOriginalPalace", description="是否来因宫")
    heavenly_stem: str = Field(..., alias="heavenlyStem", description="宫干", examples=["甲"])
    earthly_branch: str = Field(..., alias="earthlyBranch", description="宫支", examples=["午"])
    major_stars: List[StarModel] = Field(default_factory=list, alias="majorStars", description="主星")
    minor_stars: List[StarModel] = Field(default_factory=list, alias="minorStars", description="辅星")
    adjective_stars: List[StarModel] = Field(default_factory=list, alias="adjectiveStars", description="杂曜")

    def all_stars(self) -> List[StarModel]:
        """主星、辅星、杂曜合并列表"""
        return [*self.major_stars, *self.minor_stars, *self.adjective_stars]
