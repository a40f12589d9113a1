#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十二宫环形位置关系单元测试
"""

import pytest

from ziwei.calculators.ziwei_core.ring_geometry import (
    RING_SIZE,
    hidden_pair,
    left,
    opposite,
    relation_of,
    right,
    trine,
    triad,
)
from ziwei.data.constants import DARK_PAIR, EARTHLY_BRANCHES


class TestRingAlgebra:
    """环形代数性质测试"""

    @pytest.mark.parametrize("i", range(RING_SIZE))
    def test_opposite_is_involution(self, i):
        """对宫的对宫是本宫"""
        assert opposite(opposite(i)) == i

    @pytest.mark.parametrize("i", range(RING_SIZE))
    def test_left_right_inverse(self, i):
        """左右邻互逆"""
        assert left(right(i)) == i
        assert right(left(i)) == i

    @pytest.mark.parametrize("i", range(RING_SIZE))
    def test_triad_has_four_distinct_members(self, i):
        """三方四正恰好 4 个不同宫位且包含本宫"""
        members = triad(i)
        assert len(set(members)) == 4
        assert members[0] == i

    def test_wraparound(self):
        """索引按 12 取模"""
        assert left(0) == 11
        assert right(11) == 0
        assert opposite(9) == 3
        assert trine(10) == (2, 6)
        assert triad(17) == (5, 11, 9, 1)

    def test_life_triad_matches_named_palaces(self):
        """命宫（索引 5）的三方四正为 命/迁/官/财"""
        assert triad(5) == (5, 11, 9, 1)


class TestHiddenPair:
    """暗合测试"""

    @pytest.mark.parametrize("branch", EARTHLY_BRANCHES)
    def test_involution(self, branch):
        """暗合的暗合是自身"""
        peer = hidden_pair(branch)
        assert peer is not None
        assert hidden_pair(peer) == branch

    def test_known_pairs(self):
        """固定配对"""
        assert hidden_pair("巳") == "申"
        assert hidden_pair("午") == "未"
        assert hidden_pair("卯") == "戌"
        assert hidden_pair("寅") == "亥"
        assert hidden_pair("丑") == "子"
        assert hidden_pair("辰") == "酉"

    def test_unknown_branch(self):
        """未定义的地支返回 None"""
        assert hidden_pair("X") is None
        assert len(DARK_PAIR) == 12


class TestRelationOf:
    """宫位关系判断测试"""

    def test_relations(self):
        assert relation_of(5, 5) == 'same'
        assert relation_of(11, 5) == 'opposite'
        assert relation_of(9, 5) == 'trine'
        assert relation_of(1, 5) == 'trine'
        assert relation_of(4, 5) == 'remote'

    def test_relation_mod(self):
        """关系判断按 12 取模"""
        assert relation_of(17, 5) == 'same'
        assert relation_of(-1, 5) == 'opposite'
