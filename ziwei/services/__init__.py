# -*- coding: utf-8 -*-
"""
分析服务模块
"""

from ziwei.services.synastry_service import (
    SynastryService,
    analyze_scoped_synastry,
    analyze_synastry,
)
from ziwei.services.horoscope_pattern_service import (
    analyze_horoscope_patterns,
    build_query_date,
)

__all__ = [
    'SynastryService',
    'analyze_synastry',
    'analyze_scoped_synastry',
    'analyze_horoscope_patterns',
    'build_query_date',
]
