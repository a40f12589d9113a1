#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局命中数据模型
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class PatternMatch(BaseModel):
    """格局命中结果"""
    id: str = Field(..., description="格局标识", examples=["junchen_qinghui_A"])
    name: str = Field(..., description="格局名称", examples=["君臣庆会A"])
    strict: bool = Field(..., description="严判（无煞忌破格）为 True，宽判为 False")
    reason: str = Field(..., description="判定依据：涉及的宫位与星曜")
    involved: List[str] = Field(default_factory=list, description="涉及宫位")
    title: Optional[str] = Field(None, description="展示标题")
    blurb: Optional[str] = Field(None, description="展示简介")
