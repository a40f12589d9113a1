# -*- coding: utf-8 -*-
"""
格局引擎模块
"""

from ziwei.engines.pattern_engine import (
    detect_patterns,
    get_pattern_names,
    get_patterns_by_category,
    get_strict_patterns,
)
from ziwei.engines.pattern_rules import PATTERN_RULES, PatternRule, RuleContext, RuleOutcome

__all__ = [
    'detect_patterns',
    'get_pattern_names',
    'get_strict_patterns',
    'get_patterns_by_category',
    'PATTERN_RULES',
    'PatternRule',
    'RuleContext',
    'RuleOutcome',
]
