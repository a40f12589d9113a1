#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（示例星盘、运限盘、注册表）
- 测试钩子
"""

import os
import sys

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from tests.fixtures.sample_charts import build_chart, build_horoscope, build_scope_data  # noqa: E402


# ==================== 星盘 Fixtures ====================

@pytest.fixture(scope="function")
def empty_chart():
    """
    空星盘（十二宫齐全、无星曜，命宫在午）

    Returns:
        DictAstrolabeAdapter
    """
    return build_chart()


@pytest.fixture(scope="function")
def junchen_chart():
    """
    君臣庆会A 标准盘：命宫紫微+破军，左邻左辅、右邻右弼，三方无煞忌

    Returns:
        DictAstrolabeAdapter
    """
    return build_chart({
        "命宫": [("紫微", "庙"), ("破军", "旺")],
        "兄弟": ["左辅"],
        "父母": ["右弼"],
    })


@pytest.fixture(scope="function")
def temporal_charts():
    """
    运限测试盘：本命疾厄禄存、田宅天马+廉贞+擎羊；流年在疾厄加大耗、在田宅加天刑，
    流年四化 廉贞化忌，小限在田宅

    Returns:
        (本命盘, 运限盘)
    """
    chart = build_chart({
        "疾厄": ["禄存"],
        "田宅": ["天马", "廉贞", "擎羊"],
    })
    scope = build_scope_data(
        scope_life_index=8,
        mutagen=["太阳", "武曲", "文昌", "廉贞"],
        flow_stars={0: ["大耗"], 8: ["天刑"]},
    )
    horoscope = build_horoscope(
        chart,
        {"decadal": build_scope_data(3), "yearly": scope, "monthly": build_scope_data(10)},
        age_index=8,
    )
    return chart, horoscope


@pytest.fixture(scope="function")
def registry():
    """
    按默认配置构建的注册表

    Returns:
        AnalysisRegistry
    """
    from ziwei.config.app_config import AnalysisConfig
    from ziwei.config.registry import build_registry
    return build_registry(AnalysisConfig())


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "unit: 单元测试")


def pytest_collection_modifyitems(config, items):
    """
    根据路径自动添加标记
    """
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
