#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运限盘适配器 - 将运限盘绑定到单一运限范围，作为普通星盘使用
"""

from typing import List, Optional

from ziwei.data.constants import SCOPES
from ziwei.interfaces.chart_interface import IChart, ITimeScopedView
from ziwei.models.chart import PalaceModel
from ziwei.utils.exceptions import InvalidScopeError


class ScopedChart(IChart):
    """绑定运限范围的星盘视图（用于运限格局与运限合盘）"""

    def __init__(self, view: ITimeScopedView, scope: str):
        if scope not in SCOPES:
            raise InvalidScopeError(scope)
        self.view = view
        self.scope = scope

    def palace(self, name: str) -> Optional[PalaceModel]:
        return self.view.palace(name, self.scope)

    def mutagen_stars(self) -> List[str]:
        return self.view.mutagen_stars(self.scope)

    def age_palace(self) -> Optional[PalaceModel]:
        return self.view.age_palace()

    def __repr__(self) -> str:
        return f"ScopedChart(scope={self.scope!r})"
