#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局识别引擎单元测试
覆盖各判定形态、严判/宽判互斥、运限规则与文案
"""

import pytest

from tests.fixtures.sample_charts import build_chart, build_chart_data

from ziwei.adapters.dict_chart_adapter import DictAstrolabeAdapter
from ziwei.adapters.scoped_chart_adapter import ScopedChart
from ziwei.calculators.ziwei_core.chart_index import build_chart_index
from ziwei.engines.pattern_engine import (
    detect_patterns,
    get_pattern_names,
    get_patterns_by_category,
    get_strict_patterns,
)
from ziwei.engines.pattern_rules import PATTERN_RULES
from ziwei.utils.exceptions import InvalidScopeError, StructuralError


def _by_id(patterns):
    return {p.id: p for p in patterns}


class TestJunchenQinghui:
    """君臣庆会测试"""

    def test_strict_variant(self, junchen_chart):
        """命宫紫微+破军、左右辅弼、三方无煞忌 → 严判"""
        hits = _by_id(detect_patterns(junchen_chart))
        assert "junchen_qinghui_A" in hits
        assert "junchen_qinghui_A_weak" not in hits
        match = hits["junchen_qinghui_A"]
        assert match.strict is True
        assert match.name == "君臣庆会A"
        assert "三方无煞忌" in match.reason
        assert "兄弟" in match.reason and "父母" in match.reason
        assert match.title == "君臣庆会"
        assert match.blurb

    def test_swapped_neighbors(self):
        """左右辅弼互换也成立"""
        chart = build_chart({
            "命宫": ["紫微", "破军"],
            "兄弟": ["右弼"],
            "父母": ["左辅"],
        })
        hits = _by_id(detect_patterns(chart))
        assert hits["junchen_qinghui_A"].strict is True

    def test_spoiled_variant(self):
        """对宫加煞 → 只出宽判"""
        chart = build_chart({
            "命宫": ["紫微", "破军"],
            "兄弟": ["左辅"],
            "父母": ["右弼"],
            "迁移": ["擎羊"],
        })
        hits = _by_id(detect_patterns(chart))
        assert "junchen_qinghui_A" not in hits
        weak = hits["junchen_qinghui_A_weak"]
        assert weak.strict is False
        assert "宽判" in weak.reason
        assert weak.title is None

    def test_spoiled_by_ji(self):
        """三方化忌同样破格"""
        chart = build_chart({
            "命宫": ["紫微", "破军"],
            "兄弟": ["左辅"],
            "父母": ["右弼"],
            "官禄": [("太阳", None, "忌")],
        })
        hits = _by_id(detect_patterns(chart))
        assert "junchen_qinghui_A_weak" in hits

    def test_variant_b(self):
        chart = build_chart({
            "命宫": ["紫微", "天相", "文昌"],
            "迁移": ["文曲"],
        })
        hits = _by_id(detect_patterns(chart))
        assert hits["junchen_qinghui_B"].strict is True

    def test_variant_c(self):
        chart = build_chart({
            "命宫": ["天府"],
            "兄弟": ["天机", "天梁"],
            "父母": ["天同", "太阴"],
        })
        hits = _by_id(detect_patterns(chart))
        assert hits["junchen_qinghui_C"].strict is True


# (宫位星曜, 命支, 期望 id, 期望严判)
CASES = [
    ({"田宅": ["紫微", "天府"]}, "午", "zifu_tonggong", True),
    ({"命宫": ["天府"], "兄弟": ["太阳"], "父母": ["太阴"]}, "丑", "jinyu_fujia", True),
    ({"命宫": ["天府"], "兄弟": ["太阳"], "父母": ["太阴"]}, "午", "jinyu_fujia_weak", False),
    ({"命宫": ["天机", "太阴"], "兄弟": ["紫微"], "父母": ["天府"]}, "午", "zifu_jiaming", True),
    ({"命宫": ["紫微"]}, "午", "jixiang_liming", True),
    ({"命宫": ["紫微"], "财帛": [("武曲", None, "忌")]}, "午", "jixiang_liming_weak", False),
    ({"命宫": ["贪狼", "火星"]}, "午", "huotan", True),
    ({"命宫": ["贪狼", "铃星"]}, "午", "lingtan", True),
    ({"命宫": ["贪狼"], "官禄": ["火星"]}, "午", "huo_or_ling_tan_weak", False),
    ({"命宫": ["巨门"]}, "子", "shizhong_yinyu", True),
    ({"福德": ["天梁", "天马"]}, "午", "liangma_piaodang", True),
    ({"命宫": ["太阳"], "迁移": ["天梁"], "官禄": ["文昌"], "财帛": ["禄存"]}, "午", "yangliang_changlu", True),
    ({"命宫": ["七杀"], "财帛": ["贪狼"], "官禄": ["破军"]}, "辰", "shapolang", True),
    ({"命宫": ["七杀"]}, "寅", "qisha_chaodou", True),
    ({"命宫": ["破军"]}, "子", "yingxing_rumiao", True),
    ({"子女": ["破军", "文曲"]}, "午", "zhongshui_chaodong", True),
    ({"命宫": [("天机", None, "禄")], "财帛": [("太阴", None, "权")], "官禄": [("天同", None, "科")]},
     "午", "sanqi_jiahui", True),
    ({"疾厄": ["禄存", "天马"]}, "午", "luma_jiaochi", True),
    ({"疾厄": ["禄存"], "父母": ["天马"]}, "午", "luma_jiaochi_weak", False),
    ({"福德": ["禄存", ("武曲", None, "禄")]}, "午", "luhe_yuanyang", True),
    ({"福德": ["禄存"], "财帛": [("武曲", None, "禄")]}, "午", "luhe_yuanyang_weak", False),
    ({"命宫": ["禄存"], "父母": [("天同", None, "禄")]}, "午", "minglu_anlu", True),
    ({"田宅": ["禄存", "天马", "天相"]}, "午", "luma_peiyin", True),
    ({"命宫": ["禄存", ("武曲", None, "禄"), "地空"]}, "午", "liangchong_huagai", True),
    ({"命宫": ["紫微", "左辅", "右弼"]}, "辰", "fubi_gongzhu", True),
    ({"命宫": ["紫微"], "财帛": ["左辅"], "官禄": ["右弼"]}, "辰", "fubi_gongzhu_weak", False),
    ({"夫妻": ["左辅", "右弼"]}, "午", "zuoyou_tonggong", True),
    ({"兄弟": ["左辅"], "父母": ["右弼"]}, "午", "zuoyou_jiaming", True),
    ({"兄弟": ["天钺"], "父母": ["天魁"]}, "午", "kuiyue_jiaming", True),
    ({"命宫": ["文昌"], "官禄": ["天府"], "财帛": ["天相"]}, "午", "fuxiang_chaoyuan", True),
    ({"命宫": [("文曲", None, "科")], "父母": ["禄存"]}, "午", "keming_anlu", True),
    ({"迁移": ["天机", "天梁"]}, "午", "jiliang_tonggong", True),
    ({"疾厄": ["太阳", "太阴"]}, "午", "riyue_tonggong", True),
    ({"命宫": ["天机"], "迁移": ["太阴"], "财帛": ["天同"], "官禄": ["天梁"]}, "午", "jiyue_tongliang", True),
    ({"兄弟": ["文曲"], "父母": ["文昌"]}, "午", "changqu_jiaming", True),
    ({"命宫": ["文昌", "文曲"]}, "午", "wengui_wenhua", True),
    ({"命宫": ["天钺"], "迁移": ["天魁"]}, "午", "zuogui_xianggui", True),
    ({"夫妻": ["贪狼", "武曲"]}, "午", "tanwu_tongxing", True),
    ({"官禄": ["太阳"], "财帛": ["太阴"]}, "未", "mingzhu_chuhai", True),
    ({"命宫": [("廉贞", None, "忌")], "兄弟": ["陀罗"], "父母": ["擎羊"]}, "午", "yangtuo_jiaji", True),
    ({"兄弟": ["火星"], "父母": ["铃星"]}, "午", "huoling_jiaming", True),
    ({"兄弟": ["地劫"], "父母": ["地空"]}, "午", "kongjie_jiaming", True),
    ({"命宫": ["擎羊"]}, "午", "mati_daijian", True),
]


class TestCatalogShapes:
    """规则目录各形态测试"""

    @pytest.mark.parametrize("stars,life_branch,expected_id,expected_strict", CASES)
    def test_rule_fires(self, stars, life_branch, expected_id, expected_strict):
        chart = build_chart(stars, life_branch=life_branch)
        hits = _by_id(detect_patterns(chart))
        assert expected_id in hits, f"{expected_id} 未命中，实际: {list(hits)}"
        assert hits[expected_id].strict is expected_strict
        assert hits[expected_id].reason
        assert hits[expected_id].involved

    def test_empty_chart_has_no_patterns(self, empty_chart):
        """空盘无格局"""
        assert detect_patterns(empty_chart) == []

    def test_branch_constraint(self):
        """巨门坐命但命支不在子午 → 不成石中隐玉"""
        hits = _by_id(detect_patterns(build_chart({"命宫": ["巨门"]}, life_branch="寅")))
        assert "shizhong_yinyu" not in hits

    def test_any_slot_scan_reports_once(self):
        """多宫满足时只报告第一处"""
        chart = build_chart({
            "疾厄": ["左辅", "右弼"],
            "田宅": ["左辅", "右弼"],
        })
        matches = [p for p in detect_patterns(chart) if p.id == "zuoyou_tonggong"]
        assert len(matches) == 1
        assert "疾厄" in matches[0].reason

    def test_reason_names_palace_and_branch(self):
        """判定依据写明宫位与地支"""
        hits = _by_id(detect_patterns(build_chart({"子女": ["破军", "文曲"]})))
        reason = hits["zhongshui_chaodong"].reason
        assert "子女(卯)" in reason
        assert "破军" in reason and "文曲" in reason

    def test_hidden_pair_reason(self):
        """明禄暗禄依据写明暗合宫"""
        chart = build_chart({"命宫": ["禄存"], "父母": [("天同", None, "禄")]})
        reason = _by_id(detect_patterns(chart))["minglu_anlu"].reason
        assert "父母(未)" in reason
        assert "化禄" in reason

    def test_fuxiang_requires_empty_life(self):
        """命宫有主星时不成府相朝垣"""
        chart = build_chart({"命宫": ["紫微"], "官禄": ["天府"], "财帛": ["天相"]})
        assert "fuxiang_chaoyuan" not in _by_id(detect_patterns(chart))


class TestStrictLooseExclusivity:
    """严判/宽判互斥测试"""

    def test_huotan_suppresses_weak(self):
        """命宫火贪同宫时不再报三方宽判"""
        chart = build_chart({"命宫": ["贪狼", "火星"], "官禄": ["铃星"]})
        hits = _by_id(detect_patterns(chart))
        assert "huotan" in hits
        assert "huo_or_ling_tan_weak" not in hits

    def test_luhe_strict_wins_over_weak(self):
        """任一宫双禄同宫时不报对拱"""
        chart = build_chart({
            "疾厄": ["禄存"],
            "父母": [("天同", None, "禄")],
            "福德": ["禄存", ("武曲", None, "禄")],
        })
        hits = _by_id(detect_patterns(chart))
        assert "luhe_yuanyang" in hits
        assert "luhe_yuanyang_weak" not in hits
        assert "福德" in hits["luhe_yuanyang"].reason

    def test_luma_strict_wins_over_weak(self):
        chart = build_chart({
            "疾厄": ["禄存"],
            "父母": ["天马"],
            "田宅": ["禄存", "天马"],
        })
        hits = _by_id(detect_patterns(chart))
        assert "luma_jiaochi" in hits
        assert "luma_jiaochi_weak" not in hits

    def test_every_loose_id_is_exclusive(self, junchen_chart):
        """任何盘上同一描述符最多命中一个 id"""
        patterns = detect_patterns(junchen_chart)
        ids = [p.id for p in patterns]
        assert len(ids) == len(set(ids))
        for rule in PATTERN_RULES:
            if rule.loose_id:
                assert not (rule.rule_id in ids and rule.loose_id in ids)

    def test_catalog_ids_unique(self):
        """规则目录 id 唯一"""
        ids = [r.rule_id for r in PATTERN_RULES] + [r.loose_id for r in PATTERN_RULES if r.loose_id]
        assert len(ids) == len(set(ids))
        assert len(PATTERN_RULES) == 41


class TestTemporalRules:
    """运限规则测试"""

    def test_skipped_without_active_chart(self, temporal_charts):
        """不提供运限盘时跳过运限规则"""
        chart, _ = temporal_charts
        ids = {p.id for p in detect_patterns(chart)}
        assert "lushuai_makun" not in ids
        assert "xiaoxian_shaji" not in ids

    def test_yearly_active_chart(self, temporal_charts):
        """流年盘：禄存遇大耗、天马遇天刑/擎羊，小限宫化忌逢擎羊"""
        chart, horoscope = temporal_charts
        hits = _by_id(detect_patterns(chart, ScopedChart(horoscope, "yearly")))
        assert hits["lushuai_makun"].strict is True
        assert "大耗" in hits["lushuai_makun"].reason
        assert "天刑" in hits["lushuai_makun"].reason
        assert hits["xiaoxian_shaji"].strict is True
        assert "擎羊" in hits["xiaoxian_shaji"].reason

    def test_prebuilt_active_index(self, temporal_charts):
        """运限盘也可传入已构建的索引"""
        chart, horoscope = temporal_charts
        active = build_chart_index(horoscope, "yearly")
        ids = {p.id for p in detect_patterns(build_chart_index(chart), active)}
        assert {"lushuai_makun", "xiaoxian_shaji"} <= ids

    def test_unbound_view_with_scope(self, temporal_charts):
        """直接传入运限盘并给出 scope，与绑定视图结果一致"""
        chart, horoscope = temporal_charts
        bound = [p.id for p in detect_patterns(chart, ScopedChart(horoscope, "yearly"))]
        unbound = [p.id for p in detect_patterns(chart, horoscope, scope="yearly")]
        assert unbound == bound
        assert {"lushuai_makun", "xiaoxian_shaji"} <= set(unbound)

    def test_unbound_view_without_scope(self, temporal_charts):
        """未绑定范围的运限盘不给 scope 时报错，不退化为本命盘"""
        chart, horoscope = temporal_charts
        with pytest.raises(InvalidScopeError):
            detect_patterns(chart, horoscope)
        with pytest.raises(InvalidScopeError):
            detect_patterns(chart, horoscope, scope="origin")

    def test_decadal_without_conditions(self, temporal_charts):
        """大限盘无流曜、无四化时不成运限格局"""
        chart, horoscope = temporal_charts
        ids = {p.id for p in detect_patterns(chart, ScopedChart(horoscope, "decadal"))}
        assert "lushuai_makun" not in ids
        assert "xiaoxian_shaji" not in ids


class TestStructuralFailure:
    """结构错误测试"""

    def test_missing_palace_raises(self):
        """缺宫时抛出结构错误，无部分结果"""
        data = build_chart_data({"命宫": ["紫微"]})
        data["palaces"] = [p for p in data["palaces"] if p["name"] != "父母"]
        with pytest.raises(StructuralError):
            detect_patterns(DictAstrolabeAdapter(data))


class TestHelpers:
    """辅助函数测试"""

    def test_helpers(self):
        chart = build_chart({
            "命宫": ["紫微", "破军"],
            "兄弟": ["左辅"],
            "父母": ["右弼"],
            "迁移": ["擎羊"],
        })
        patterns = detect_patterns(chart)
        names = get_pattern_names(patterns)
        assert "君臣庆会A（弱）" in names
        strict_ids = {p.id for p in get_strict_patterns(patterns)}
        assert "junchen_qinghui_A_weak" not in strict_ids
        assert "zuoyou_jiaming" in strict_ids
        junchen = get_patterns_by_category(patterns, "junchen")
        assert [p.id for p in junchen] == ["junchen_qinghui_A_weak"]
