#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十二宫环形位置关系模块

提供左右邻宫、对宫、三合、三方四正、暗合等纯位置计算。
所有索引按 12 取模，不存在非法输入。
"""

from typing import Literal, Optional, Tuple

from ziwei.data.constants import DARK_PAIR

RING_SIZE = 12

# 宫位关系类型
RelationType = Literal['same', 'opposite', 'trine', 'remote']


def left(i: int) -> int:
    """左邻宫（逆时针）"""
    return (i - 1) % RING_SIZE


def right(i: int) -> int:
    """右邻宫（顺时针）"""
    return (i + 1) % RING_SIZE


def opposite(i: int) -> int:
    """对宫"""
    return (i + 6) % RING_SIZE


def trine(i: int) -> Tuple[int, int]:
    """三合宫（不含本宫）"""
    return ((i + 4) % RING_SIZE, (i + 8) % RING_SIZE)


def triad(i: int) -> Tuple[int, int, int, int]:
    """
    三方四正：本宫、对宫、两个三合宫

    Args:
        i: 宫位索引

    Returns:
        (本宫, 对宫, 三合一, 三合二)
    """
    i = i % RING_SIZE
    tri1, tri2 = trine(i)
    return (i, opposite(i), tri1, tri2)


def hidden_pair(branch: str) -> Optional[str]:
    """
    暗合地支

    Args:
        branch: 地支

    Returns:
        暗合的地支；未定义时返回 None
    """
    return DARK_PAIR.get(branch)


def relation_of(source: int, target: int) -> RelationType:
    """
    判断来源宫相对目标宫的位置关系

    Returns:
        RelationType:
        - 'same': 同宫
        - 'opposite': 对宫
        - 'trine': 三合
        - 'remote': 其他
    """
    source = source % RING_SIZE
    target = target % RING_SIZE
    if source == target:
        return 'same'
    if source == opposite(target):
        return 'opposite'
    if source in trine(target):
        return 'trine'
    return 'remote'
