# -*- coding: utf-8 -*-
"""
格局展示文案配置

格局 id → {title, blurb}。未收录的 id 展示时 title/blurb 为空。
"""

PATTERN_COPY = {
    "junchen_qinghui_A": {
        "title": "君臣庆会",
        "blurb": "紫破坐命，辅弼左右夹辅，君有良臣，主领导统御之才。",
    },
    "junchen_qinghui_B": {
        "title": "君臣庆会",
        "blurb": "紫相坐命，昌曲照应，文武兼备，宜在体制内发挥。",
    },
    "junchen_qinghui_C": {
        "title": "君臣庆会",
        "blurb": "天府坐命，机梁与同阴左右拱扶，谋略与人缘并重。",
    },
    "zifu_tonggong": {
        "title": "紫府同宫",
        "blurb": "帝星与库星同宫，主稳重厚实，利守成与积累。",
    },
    "jinyu_fujia": {
        "title": "金舆扶驾",
        "blurb": "天府坐命，日月夹辅，贵人扶持，出入有依。",
    },
    "zifu_jiaming": {
        "title": "紫府夹命",
        "blurb": "紫微天府夹命，得尊长庇荫，做事有靠。",
    },
    "jixiang_liming": {
        "title": "极向离明",
        "blurb": "紫微居午，帝座得位，主格局宏大、名望显达。",
    },
    "huotan": {
        "title": "火贪格",
        "blurb": "贪狼会火星，主突发机遇与横发，宜把握时机。",
    },
    "lingtan": {
        "title": "铃贪格",
        "blurb": "贪狼会铃星，主暗中蓄势、厚积薄发。",
    },
    "shizhong_yinyu": {
        "title": "石中隐玉",
        "blurb": "巨门居子午，才华内敛，宜先隐后显。",
    },
    "liangma_piaodang": {
        "title": "梁马飘荡",
        "blurb": "天梁遇天马，主奔波变动，宜稳定心性。",
    },
    "yangliang_changlu": {
        "title": "阳梁昌禄",
        "blurb": "日梁昌禄会照，主考试功名与学术声誉。",
    },
    "shapolang": {
        "title": "杀破狼",
        "blurb": "七杀破军贪狼会照，主开创变动，人生起伏较大。",
    },
    "qisha_chaodou": {
        "title": "七杀朝斗",
        "blurb": "七杀坐命于子午寅申，主果断刚毅、敢于担当。",
    },
    "yingxing_rumiao": {
        "title": "英星入庙",
        "blurb": "破军居子午，主开拓进取、破旧立新。",
    },
    "zhongshui_chaodong": {
        "title": "众水朝东",
        "blurb": "破军文曲同宫于寅卯，主才情外放而多波折。",
    },
    "sanqi_jiahui": {
        "title": "三奇加会",
        "blurb": "禄权科会照命宫三方，主名利双收。",
    },
    "luma_jiaochi": {
        "title": "禄马交驰",
        "blurb": "禄存天马相会，主动中求财，越动越旺。",
    },
    "luhe_yuanyang": {
        "title": "禄合鸳鸯",
        "blurb": "禄存与化禄相会，双禄叠加，财源稳固。",
    },
    "minglu_anlu": {
        "title": "明禄暗禄",
        "blurb": "命宫见禄，暗合宫亦见禄，明暗皆有财源。",
    },
    "luma_peiyin": {
        "title": "禄马佩印",
        "blurb": "禄存天马天相同宫，主财禄与权印兼得。",
    },
    "liangchong_huagai": {
        "title": "两重华盖",
        "blurb": "双禄坐命而逢空劫，财来财去，宜修身养性。",
    },
    "fubi_gongzhu": {
        "title": "辅弼拱主",
        "blurb": "左辅右弼拱卫紫微，主得力助手与团队支持。",
    },
    "zuoyou_tonggong": {
        "title": "左右同宫",
        "blurb": "左辅右弼同宫，助力集中。",
    },
    "zuoyou_jiaming": {
        "title": "左右夹命",
        "blurb": "辅弼夹命，主平辈与同事助力。",
    },
    "kuiyue_jiaming": {
        "title": "魁钺夹命",
        "blurb": "天魁天钺夹命，主贵人提携。",
    },
    "fuxiang_chaoyuan": {
        "title": "府相朝垣",
        "blurb": "命无主星，天府天相朝拱，主借力成事。",
    },
    "keming_anlu": {
        "title": "科明暗禄",
        "blurb": "命见化科，暗合宫见禄，名声带财。",
    },
    "jiliang_tonggong": {
        "title": "机梁同宫",
        "blurb": "天机天梁同宫，善谋划与辅佐。",
    },
    "riyue_tonggong": {
        "title": "日月同宫",
        "blurb": "太阳太阴同宫，阴阳调和，情绪多变。",
    },
    "jiyue_tongliang": {
        "title": "机月同梁",
        "blurb": "机月同梁会照，宜从事稳定的文职与专业工作。",
    },
    "changqu_jiaming": {
        "title": "昌曲夹命",
        "blurb": "文昌文曲夹命，主文采与学识。",
    },
    "wengui_wenhua": {
        "title": "文桂文华",
        "blurb": "昌曲同宫坐命，主聪明好学、文思敏捷。",
    },
    "zuogui_xianggui": {
        "title": "坐贵向贵",
        "blurb": "魁钺分居命迁，出入皆逢贵人。",
    },
    "tanwu_tongxing": {
        "title": "贪武同行",
        "blurb": "贪狼武曲同宫于四墓，主先贫后富、大器晚成。",
    },
    "mingzhu_chuhai": {
        "title": "明珠出海",
        "blurb": "命无主星坐未，日月会照，主才华出众。",
    },
    "yangtuo_jiaji": {
        "title": "羊陀夹忌",
        "blurb": "化忌坐命而羊陀相夹，压力较大，宜谨慎行事。",
    },
    "huoling_jiaming": {
        "title": "火铃夹命",
        "blurb": "火星铃星夹命，性情急躁，宜防冲动。",
    },
    "kongjie_jiaming": {
        "title": "空劫夹命",
        "blurb": "地空地劫夹命，理想与现实易有落差。",
    },
    "mati_daijian": {
        "title": "马头带箭",
        "blurb": "擎羊居午坐命，主威猛进取，先难后成。",
    },
    "lushuai_makun": {
        "title": "禄衰马困",
        "blurb": "运限中禄存受损、天马受制，宜守不宜攻。",
    },
    "xiaoxian_shaji": {
        "title": "小限逢煞忌",
        "blurb": "小限宫见化忌并逢煞，当年诸事宜保守。",
    },
}
