#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数格局规则目录

每条格局是一个 PatternRule 描述符：规则 id、格局名、判定闭包，以及可选的宽判 id。
同一构型的严判/宽判放在同一个描述符中，由判定闭包决定走哪一支，保证两者不会同时命中。
判定闭包只读 RuleContext，不修改任何状态。

判定依据（reason）必须写明具体宫位（含地支）与星曜，供下游解释使用。
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Set, Tuple

from ziwei.calculators.ziwei_core.chart_index import ChartIndex
from ziwei.calculators.ziwei_core.ring_geometry import RING_SIZE, left, opposite, right
from ziwei.data.constants import (
    CAREER_PALACE,
    KILL_OR_LOSS_SET,
    LIFE_PALACE,
    MAJOR_14,
    MUTAGEN_JI,
    MUTAGEN_KE,
    MUTAGEN_LU,
    MUTAGEN_QUAN,
    RESTRAINT_SET,
    SHA_SET,
    TRAVEL_PALACE,
    WEALTH_PALACE,
)

NO_SPOIL_SUFFIX = "；三方无煞忌"
SPOILED_SUFFIX = "；但三方有煞忌（宽判）"


@dataclass(frozen=True)
class RuleOutcome:
    """单条规则的判定结果"""
    strict: bool
    reason: str
    involved: Tuple[str, ...] = ()
    # 同一描述符下的并列变体（如 火贪/铃贪）覆盖 id 与名称
    rule_id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class RuleContext:
    """规则判定上下文：本命索引、运限索引与命宫周边位置"""
    chart: ChartIndex
    active: Optional[ChartIndex]
    life: int
    wealth: int
    career: int
    travel: int
    left: int
    right: int
    opp: int
    tri: Tuple[int, int, int, int]
    tri_union: Set[str] = field(default_factory=set)

    @classmethod
    def build(cls, chart: ChartIndex, active: Optional[ChartIndex] = None) -> 'RuleContext':
        life = chart.index_of(LIFE_PALACE)
        wealth = chart.index_of(WEALTH_PALACE)
        career = chart.index_of(CAREER_PALACE)
        travel = chart.index_of(TRAVEL_PALACE)
        tri = (life, wealth, career, travel)
        union: Set[str] = set()
        for j in tri:
            union |= chart.stars_at(j)
        return cls(
            chart=chart,
            active=active,
            life=life,
            wealth=wealth,
            career=career,
            travel=travel,
            left=left(life),
            right=right(life),
            opp=opposite(life),
            tri=tri,
            tri_union=union,
        )

    # ---------- 文本辅助 ----------

    def label(self, i: int, chart: Optional[ChartIndex] = None) -> str:
        """宫位标签，如 命宫(午)"""
        chart = chart or self.chart
        return f"{chart.name_of(i)}({chart.branch_of(i)})"

    def names(self, indices: Iterable[int], chart: Optional[ChartIndex] = None) -> Tuple[str, ...]:
        chart = chart or self.chart
        seen: List[str] = []
        for i in indices:
            name = chart.name_of(i)
            if name not in seen:
                seen.append(name)
        return tuple(seen)

    @property
    def life_branch(self) -> str:
        return self.chart.branch_of(self.life)

    @property
    def tri_label(self) -> str:
        return "/".join(self.chart.name_of(i) for i in self.tri)

    def locate(self, star: str) -> str:
        """星曜在三方四正中的位置，如 太阳@官禄(申)"""
        for j in self.tri:
            if self.chart.has(j, star):
                return f"{star}@{self.label(j)}"
        return star


@dataclass(frozen=True)
class PatternRule:
    """格局规则描述符"""
    rule_id: str
    name: str
    detect: Callable[[RuleContext], Optional[RuleOutcome]]
    loose_id: Optional[str] = None
    loose_name: Optional[str] = None
    temporal: bool = False

    def resolve(self, outcome: RuleOutcome) -> Tuple[str, str]:
        """根据判定结果确定输出的 (id, 名称)"""
        if outcome.rule_id:
            return outcome.rule_id, outcome.name or self.name
        if not outcome.strict and self.loose_id:
            return self.loose_id, self.loose_name or self.name
        return self.rule_id, self.name


# ---------- 通用判定形态 ----------

def _split(chart: ChartIndex, a: str, b: str, i: int, j: int) -> Optional[Tuple[str, str]]:
    """两颗星分见 i、j 两宫（任意一种分配）；命中返回 (i 宫的星, j 宫的星)"""
    if chart.has(i, a) and chart.has(j, b):
        return a, b
    if chart.has(i, b) and chart.has(j, a):
        return b, a
    return None


def _scan(chart: ChartIndex, stars: Iterable[str], branches: Optional[Iterable[str]] = None) -> Optional[int]:
    """扫描十二宫，返回首个同宫见齐 stars（且地支符合）的宫位索引"""
    stars = tuple(stars)
    allowed = set(branches) if branches else None
    for i in range(RING_SIZE):
        if not chart.has_all(i, stars):
            continue
        if allowed is not None and chart.branch_of(i) not in allowed:
            continue
        return i
    return None


def _has_lu(chart: ChartIndex, i: int) -> bool:
    """宫内见禄（禄存或化禄）"""
    return chart.has(i, "禄存") or chart.has_mutagen(i, MUTAGEN_LU)


def _lu_desc(chart: ChartIndex, i: int) -> str:
    parts = []
    if chart.has(i, "禄存"):
        parts.append("禄存")
    if chart.has_mutagen(i, MUTAGEN_LU):
        parts.append("化禄")
    return "+".join(parts)


def _spoil(ctx: RuleContext, base_reason: str) -> Tuple[bool, str]:
    """三方四正无煞忌为严判"""
    if ctx.chart.no_sha_ji(ctx.tri):
        return True, base_reason + NO_SPOIL_SUFFIX
    return False, base_reason + SPOILED_SUFFIX


def _scan_rule(stars: Tuple[str, ...], branches: Optional[Tuple[str, ...]] = None):
    """任一宫同宫型规则"""
    def detect(ctx: RuleContext) -> Optional[RuleOutcome]:
        i = _scan(ctx.chart, stars, branches)
        if i is None:
            return None
        reason = f"{ctx.label(i)}同宫见{'+'.join(stars)}"
        if branches:
            reason += f"，支={ctx.chart.branch_of(i)}"
        return RuleOutcome(True, reason, ctx.names([i]))
    return detect


def _flank_rule(a: str, b: str):
    """左右邻宫夹命型规则"""
    def detect(ctx: RuleContext) -> Optional[RuleOutcome]:
        hit = _split(ctx.chart, a, b, ctx.left, ctx.right)
        if hit is None:
            return None
        reason = (
            f"命宫({ctx.life_branch})左邻{ctx.label(ctx.left)}见{hit[0]}，"
            f"右邻{ctx.label(ctx.right)}见{hit[1]}"
        )
        return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.left, ctx.right]))
    return detect


def _tri_union_rule(stars: Tuple[str, ...]):
    """命宫三方四正合见型规则"""
    def detect(ctx: RuleContext) -> Optional[RuleOutcome]:
        if not all(s in ctx.tri_union for s in stars):
            return None
        found = "、".join(ctx.locate(s) for s in stars)
        reason = f"命三方四正（{ctx.tri_label}）集齐：{found}"
        return RuleOutcome(True, reason, ctx.names(ctx.tri))
    return detect


def _life_branch_rule(star: str, branches: Tuple[str, ...]):
    """某星坐命且命支限定型规则"""
    def detect(ctx: RuleContext) -> Optional[RuleOutcome]:
        if not ctx.chart.has(ctx.life, star) or ctx.life_branch not in branches:
            return None
        return RuleOutcome(True, f"{star}坐命，命支={ctx.life_branch}", ctx.names([ctx.life]))
    return detect


# ---------- 君臣庆会 ----------

def _junchen_qinghui_a(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has_all(ctx.life, ("紫微", "破军")):
        return None
    hit = _split(chart, "左辅", "右弼", ctx.left, ctx.right)
    if hit is None:
        return None
    base = (
        f"命宫({ctx.life_branch})同宫紫微+破军，左邻{ctx.label(ctx.left)}见{hit[0]}、"
        f"右邻{ctx.label(ctx.right)}见{hit[1]}"
    )
    strict, reason = _spoil(ctx, base)
    return RuleOutcome(strict, reason, ctx.names([ctx.life, ctx.left, ctx.right, *ctx.tri]))


def _junchen_qinghui_b(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has_all(ctx.life, ("紫微", "天相")):
        return None
    hit = _split(chart, "文昌", "文曲", ctx.life, ctx.travel)
    if hit is None:
        return None
    base = (
        f"命宫({ctx.life_branch})紫微+天相并见{hit[0]}，"
        f"迁移端{ctx.label(ctx.travel)}见{hit[1]}"
    )
    strict, reason = _spoil(ctx, base)
    return RuleOutcome(strict, reason, ctx.names([ctx.life, ctx.travel, *ctx.tri]))


def _junchen_qinghui_c(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has(ctx.life, "天府"):
        return None
    if not (chart.has_all(ctx.left, ("天机", "天梁")) and chart.has_all(ctx.right, ("天同", "太阴"))):
        return None
    base = (
        f"命宫({ctx.life_branch})天府，左邻{ctx.label(ctx.left)}见天机+天梁，"
        f"右邻{ctx.label(ctx.right)}见天同+太阴"
    )
    strict, reason = _spoil(ctx, base)
    return RuleOutcome(strict, reason, ctx.names([ctx.life, ctx.left, ctx.right, *ctx.tri]))


# ---------- 紫府系 ----------

def _jinyu_fujia(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has(ctx.life, "天府"):
        return None
    flank = chart.stars_at(ctx.left) | chart.stars_at(ctx.right)
    if not ("太阳" in flank and "太阴" in flank):
        return None
    strict = ctx.life_branch in ("丑", "未")
    reason = (
        f"命宫天府，左邻{ctx.label(ctx.left)}、右邻{ctx.label(ctx.right)}合见太阳与太阴；"
        f"命支={ctx.life_branch}"
    )
    if not strict:
        reason += "（非丑未，宽判）"
    return RuleOutcome(strict, reason, ctx.names([ctx.life, ctx.left, ctx.right]))


def _zifu_jiaming(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has_all(ctx.life, ("天机", "太阴")):
        return None
    hit = _split(chart, "天府", "紫微", ctx.left, ctx.right)
    if hit is None:
        return None
    reason = (
        f"命宫({ctx.life_branch})天机+太阴，左邻{ctx.label(ctx.left)}见{hit[0]}、"
        f"右邻{ctx.label(ctx.right)}见{hit[1]}"
    )
    return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.left, ctx.right]))


def _jixiang_liming(ctx: RuleContext) -> Optional[RuleOutcome]:
    if not ctx.chart.has(ctx.life, "紫微") or ctx.life_branch != "午":
        return None
    strict, reason = _spoil(ctx, "命宫紫微在午")
    return RuleOutcome(strict, reason, ctx.names([ctx.life, *ctx.tri]))


# ---------- 火贪 / 铃贪 ----------

def _huo_ling_tan(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    life_label = ctx.label(ctx.life)
    if chart.has(ctx.life, "贪狼"):
        if chart.has(ctx.life, "火星"):
            return RuleOutcome(True, f"{life_label}同宫：贪狼+火星", ctx.names([ctx.life]))
        if chart.has(ctx.life, "铃星"):
            return RuleOutcome(
                True, f"{life_label}同宫：贪狼+铃星", ctx.names([ctx.life]),
                rule_id="lingtan", name="铃贪",
            )
    union = ctx.tri_union
    if "贪狼" in union and ("火星" in union or "铃星" in union):
        impulse = [s for s in ("火星", "铃星") if s in union]
        found = "、".join(ctx.locate(s) for s in ["贪狼", *impulse])
        reason = f"命三方四正（{ctx.tri_label}）会照：{found}"
        return RuleOutcome(False, reason, ctx.names(ctx.tri))
    return None


# ---------- 禄马系 ----------

def _luma_jiaochi(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    i = _scan(chart, ("禄存", "天马"))
    if i is not None:
        return RuleOutcome(True, f"{ctx.label(i)}同宫禄存+天马", ctx.names([i]))
    for i in range(RING_SIZE):
        j = opposite(i)
        if chart.has(i, "禄存") and chart.has(j, "天马"):
            reason = f"{ctx.label(i)}禄存与对宫{ctx.label(j)}天马对拱"
            return RuleOutcome(False, reason, ctx.names([i, j]))
    return None


def _luhe_yuanyang(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    for i in range(RING_SIZE):
        if chart.has(i, "禄存") and chart.has_mutagen(i, MUTAGEN_LU):
            return RuleOutcome(True, f"{ctx.label(i)}同宫禄存+化禄", ctx.names([i]))
    for i in range(RING_SIZE):
        j = opposite(i)
        if chart.has(i, "禄存") and chart.has_mutagen(j, MUTAGEN_LU):
            reason = f"{ctx.label(i)}禄存对拱{ctx.label(j)}化禄"
            return RuleOutcome(False, reason, ctx.names([i, j]))
    return None


def _minglu_anlu(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    dark = chart.hidden_pair_index(ctx.life)
    if dark is None:
        return None
    if not (_has_lu(chart, ctx.life) and _has_lu(chart, dark)):
        return None
    reason = (
        f"命宫({ctx.life_branch})明禄（{_lu_desc(chart, ctx.life)}），"
        f"暗合宫{ctx.label(dark)}亦见禄（{_lu_desc(chart, dark)}）"
    )
    return RuleOutcome(True, reason, ctx.names([ctx.life, dark]))


def _liangchong_huagai(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not (chart.has(ctx.life, "禄存") and chart.has_mutagen(ctx.life, MUTAGEN_LU)):
        return None
    voids = [s for s in ("地空", "地劫") if chart.has(ctx.life, s)]
    if not voids:
        return None
    reason = f"{ctx.label(ctx.life)}禄存+化禄并遇{'、'.join(voids)}"
    return RuleOutcome(True, reason, ctx.names([ctx.life]))


# ---------- 辅弼魁钺 ----------

def _fubi_gongzhu(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has(ctx.life, "紫微"):
        return None
    hit = _split(chart, "左辅", "右弼", ctx.left, ctx.right)
    if hit is not None:
        reason = (
            f"命宫({ctx.life_branch})紫微，左邻{ctx.label(ctx.left)}见{hit[0]}、"
            f"右邻{ctx.label(ctx.right)}见{hit[1]}"
        )
        return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.left, ctx.right]))
    if chart.has_all(ctx.life, ("左辅", "右弼")):
        reason = f"{ctx.label(ctx.life)}紫微与左辅、右弼同宫"
        return RuleOutcome(True, reason, ctx.names([ctx.life]))
    if "左辅" in ctx.tri_union and "右弼" in ctx.tri_union:
        found = "、".join(ctx.locate(s) for s in ("左辅", "右弼"))
        reason = f"命宫({ctx.life_branch})紫微，三方四正会{found}"
        return RuleOutcome(False, reason, ctx.names(ctx.tri))
    return None


def _fuxiang_chaoyuan(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if chart.stars_at(ctx.life) & MAJOR_14:
        return None
    if not (chart.has(ctx.career, "天府") and chart.has(ctx.wealth, "天相")):
        return None
    reason = (
        f"{ctx.label(ctx.life)}无主星；{ctx.label(ctx.career)}坐天府，"
        f"{ctx.label(ctx.wealth)}坐天相"
    )
    return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.career, ctx.wealth]))


def _keming_anlu(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has_mutagen(ctx.life, MUTAGEN_KE):
        return None
    dark = chart.hidden_pair_index(ctx.life)
    if dark is None or not _has_lu(chart, dark):
        return None
    reason = f"{ctx.label(ctx.life)}见化科；暗合宫{ctx.label(dark)}见禄（{_lu_desc(chart, dark)}）"
    return RuleOutcome(True, reason, ctx.names([ctx.life, dark]))


def _sanqi_jiahui(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    found = []
    for tag in (MUTAGEN_LU, MUTAGEN_QUAN, MUTAGEN_KE):
        holder = next((j for j in ctx.tri if chart.has_mutagen(j, tag)), None)
        if holder is None:
            return None
        found.append(f"化{tag}@{ctx.label(holder)}")
    reason = f"命三方四正（{ctx.tri_label}）见{'、'.join(found)}"
    return RuleOutcome(True, reason, ctx.names(ctx.tri))


def _wengui_wenhua(ctx: RuleContext) -> Optional[RuleOutcome]:
    if not ctx.chart.has_all(ctx.life, ("文昌", "文曲")):
        return None
    return RuleOutcome(True, f"{ctx.label(ctx.life)}文昌+文曲同宫", ctx.names([ctx.life]))


def _zuogui_xianggui(ctx: RuleContext) -> Optional[RuleOutcome]:
    hit = _split(ctx.chart, "天魁", "天钺", ctx.life, ctx.travel)
    if hit is None:
        return None
    reason = f"{ctx.label(ctx.life)}坐{hit[0]}，{ctx.label(ctx.travel)}见{hit[1]}"
    return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.travel]))


def _mingzhu_chuhai(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if chart.stars_at(ctx.life) & MAJOR_14 or ctx.life_branch != "未":
        return None
    if not ("太阳" in ctx.tri_union and "太阴" in ctx.tri_union):
        return None
    found = "、".join(ctx.locate(s) for s in ("太阳", "太阴"))
    reason = f"命宫无主星坐未，三方四正会{found}"
    return RuleOutcome(True, reason, ctx.names(ctx.tri))


# ---------- 煞忌系 ----------

def _yangtuo_jiaji(ctx: RuleContext) -> Optional[RuleOutcome]:
    chart = ctx.chart
    if not chart.has_mutagen(ctx.life, MUTAGEN_JI):
        return None
    hit = _split(chart, "擎羊", "陀罗", ctx.left, ctx.right)
    if hit is None:
        return None
    reason = (
        f"{ctx.label(ctx.life)}见化忌，左邻{ctx.label(ctx.left)}见{hit[0]}、"
        f"右邻{ctx.label(ctx.right)}见{hit[1]}"
    )
    return RuleOutcome(True, reason, ctx.names([ctx.life, ctx.left, ctx.right]))


# ---------- 运限规则 ----------

def _lushuai_makun(ctx: RuleContext) -> Optional[RuleOutcome]:
    active = ctx.active
    if active is None:
        return None
    lu = None
    for i in range(RING_SIZE):
        losses = active.stars_at(i) & KILL_OR_LOSS_SET
        if active.has(i, "禄存") and losses:
            lu = (i, sorted(losses))
            break
    if lu is None:
        return None
    ma = None
    for i in range(RING_SIZE):
        if not active.has(i, "天马"):
            continue
        blockers = sorted(active.stars_at(i) & RESTRAINT_SET)
        if active.has_mutagen(i, MUTAGEN_JI):
            blockers.append("化忌")
        if blockers:
            ma = (i, blockers)
            break
    if ma is None:
        return None
    reason = (
        f"运盘{ctx.label(lu[0], active)}禄存遇{'、'.join(lu[1])}；"
        f"{ctx.label(ma[0], active)}天马遇{'、'.join(ma[1])}"
    )
    return RuleOutcome(True, reason, ctx.names([lu[0], ma[0]], active))


def _xiaoxian_shaji(ctx: RuleContext) -> Optional[RuleOutcome]:
    active = ctx.active
    if active is None or active.age_index is None:
        return None
    i = active.age_index
    if not active.has_mutagen(i, MUTAGEN_JI):
        return None
    sha = sorted(active.stars_at(i) & SHA_SET)
    if not sha:
        return None
    reason = f"小限宫{ctx.label(i, active)}见化忌，同宫逢{'、'.join(sha)}"
    return RuleOutcome(True, reason, ctx.names([i], active))


# ---------- 规则目录（按评估顺序） ----------

PATTERN_RULES: Tuple[PatternRule, ...] = (
    PatternRule("junchen_qinghui_A", "君臣庆会A", _junchen_qinghui_a,
                loose_id="junchen_qinghui_A_weak", loose_name="君臣庆会A（弱）"),
    PatternRule("junchen_qinghui_B", "君臣庆会B", _junchen_qinghui_b,
                loose_id="junchen_qinghui_B_weak", loose_name="君臣庆会B（弱）"),
    PatternRule("junchen_qinghui_C", "君臣庆会C", _junchen_qinghui_c,
                loose_id="junchen_qinghui_C_weak", loose_name="君臣庆会C（弱）"),
    PatternRule("zifu_tonggong", "紫府同宫", _scan_rule(("紫微", "天府"))),
    PatternRule("jinyu_fujia", "金舆扶驾", _jinyu_fujia,
                loose_id="jinyu_fujia_weak", loose_name="金舆扶驾（弱）"),
    PatternRule("zifu_jiaming", "紫府夹命", _zifu_jiaming),
    PatternRule("jixiang_liming", "极向离明", _jixiang_liming,
                loose_id="jixiang_liming_weak", loose_name="极向离明（弱）"),
    PatternRule("huotan", "火贪", _huo_ling_tan,
                loose_id="huo_or_ling_tan_weak", loose_name="火/铃贪（弱）"),
    PatternRule("shizhong_yinyu", "石中隐玉", _life_branch_rule("巨门", ("子", "午"))),
    PatternRule("liangma_piaodang", "梁马飘荡", _scan_rule(("天梁", "天马"))),
    PatternRule("yangliang_changlu", "阳梁昌禄", _tri_union_rule(("太阳", "天梁", "文昌", "禄存"))),
    PatternRule("shapolang", "杀破狼", _tri_union_rule(("七杀", "破军", "贪狼"))),
    PatternRule("qisha_chaodou", "七杀朝斗", _life_branch_rule("七杀", ("子", "午", "寅", "申"))),
    PatternRule("yingxing_rumiao", "英星入庙", _life_branch_rule("破军", ("子", "午"))),
    PatternRule("zhongshui_chaodong", "众水朝东", _scan_rule(("破军", "文曲"), ("寅", "卯"))),
    PatternRule("sanqi_jiahui", "三奇加会", _sanqi_jiahui),
    PatternRule("luma_jiaochi", "禄马交驰", _luma_jiaochi,
                loose_id="luma_jiaochi_weak", loose_name="禄马交驰（弱）"),
    PatternRule("luhe_yuanyang", "禄合鸳鸯", _luhe_yuanyang,
                loose_id="luhe_yuanyang_weak", loose_name="禄合鸳鸯（对拱）"),
    PatternRule("minglu_anlu", "明禄暗禄", _minglu_anlu),
    PatternRule("luma_peiyin", "禄马佩印", _scan_rule(("禄存", "天马", "天相"))),
    PatternRule("liangchong_huagai", "两重华盖", _liangchong_huagai),
    PatternRule("fubi_gongzhu", "辅弼拱主", _fubi_gongzhu,
                loose_id="fubi_gongzhu_weak", loose_name="辅弼拱主（弱）"),
    PatternRule("zuoyou_tonggong", "左右同宫", _scan_rule(("左辅", "右弼"))),
    PatternRule("zuoyou_jiaming", "左右夹命", _flank_rule("左辅", "右弼")),
    PatternRule("kuiyue_jiaming", "魁钺夹命", _flank_rule("天魁", "天钺")),
    PatternRule("fuxiang_chaoyuan", "府相朝垣", _fuxiang_chaoyuan),
    PatternRule("keming_anlu", "科明暗禄", _keming_anlu),
    PatternRule("jiliang_tonggong", "机梁同宫", _scan_rule(("天机", "天梁"))),
    PatternRule("riyue_tonggong", "日月同宫", _scan_rule(("太阳", "太阴"))),
    PatternRule("jiyue_tongliang", "机月同梁", _tri_union_rule(("天机", "太阴", "天同", "天梁"))),
    PatternRule("changqu_jiaming", "昌曲夹命", _flank_rule("文昌", "文曲")),
    PatternRule("wengui_wenhua", "文桂文华", _wengui_wenhua),
    PatternRule("zuogui_xianggui", "坐贵向贵", _zuogui_xianggui),
    PatternRule("tanwu_tongxing", "贪武同行", _scan_rule(("贪狼", "武曲"), ("辰", "戌", "丑", "未"))),
    PatternRule("mingzhu_chuhai", "明珠出海", _mingzhu_chuhai),
    PatternRule("yangtuo_jiaji", "羊陀夹忌", _yangtuo_jiaji),
    PatternRule("huoling_jiaming", "火铃夹命", _flank_rule("火星", "铃星")),
    PatternRule("kongjie_jiaming", "空劫夹命", _flank_rule("地空", "地劫")),
    PatternRule("mati_daijian", "马头带箭", _life_branch_rule("擎羊", ("午",))),
    PatternRule("lushuai_makun", "禄衰马困", _lushuai_makun, temporal=True),
    PatternRule("xiaoxian_shaji", "小限逢煞忌", _xiaoxian_shaji, temporal=True),
)
