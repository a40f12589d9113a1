#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数基础常量

宫位、天干地支、星曜分类、四化、亮度、运限范围等静态数据。
所有集合均为不可变类型，进程内只读共享。
"""

# 十二宫（按 iztro 排盘的索引顺序，命宫索引为 5）
PALACE_NAMES = (
    "疾厄", "财帛", "子女", "夫妻", "兄弟", "命宫",
    "父母", "福德", "田宅", "官禄", "仆役", "迁移",
)

LIFE_PALACE = "命宫"
WEALTH_PALACE = "财帛"
CAREER_PALACE = "官禄"
TRAVEL_PALACE = "迁移"

EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

# 十四主星
MAJOR_14 = frozenset([
    "紫微", "天机", "太阳", "武曲", "天同", "廉贞", "天府",
    "太阴", "贪狼", "巨门", "天相", "天梁", "七杀", "破军",
])

# 六吉星
SOFT_STARS = frozenset(["左辅", "右弼", "天魁", "天钺", "文昌", "文曲"])

# 六煞星
SHA_SET = frozenset(["擎羊", "陀罗", "火星", "铃星", "地空", "地劫"])

# 桃花星
FLOWER_STARS = frozenset(["红鸾", "天喜", "天姚", "咸池"])

# 解神
HELPER_STARS = frozenset(["解神", "年解", "月解"])

# 吉性杂曜
POSITIVE_ADJECTIVE_STARS = frozenset([
    "天德", "月德", "天福", "三台", "八座", "恩光", "天贵",
    "天官", "台辅", "封诰", "龙池", "凤阁", "天才", "天厨",
])

# 凶性杂曜
NEGATIVE_ADJECTIVE_STARS = frozenset([
    "天空", "旬空", "空亡", "天刑", "阴煞", "天哭",
    "破碎", "小耗", "大耗", "伏兵", "官符", "病符",
])

# 禄衰：禄存遇耗/空/劫
KILL_OR_LOSS_SET = frozenset(["天空", "地空", "旬空", "小耗", "大耗", "地劫"])

# 马困：天马遇羊陀刑煞
RESTRAINT_SET = frozenset(["擎羊", "陀罗", "天刑", "阴煞"])

# 四化（顺序即 禄、权、科、忌）
MUTAGENS = ("禄", "权", "科", "忌")
MUTAGEN_LU = "禄"
MUTAGEN_QUAN = "权"
MUTAGEN_KE = "科"
MUTAGEN_JI = "忌"

# 亮度别名 → 庙旺得利平不陷七级
BRIGHTNESS_ALIASES = {
    "得地": "得",
    "利益": "利",
    "平和": "平",
    "不得地": "不",
    "不得": "不",
    "落陷": "陷",
    "庙旺": "庙",
}

# 暗合（六合镜像）：巳↔申、午↔未、卯↔戌、寅↔亥、丑↔子、辰↔酉
DARK_PAIR = {
    "巳": "申", "申": "巳",
    "午": "未", "未": "午",
    "卯": "戌", "戌": "卯",
    "寅": "亥", "亥": "寅",
    "丑": "子", "子": "丑",
    "辰": "酉", "酉": "辰",
}

# 运限范围
SCOPE_ORIGIN = "origin"
SCOPE_DECADAL = "decadal"
SCOPE_YEARLY = "yearly"
SCOPE_MONTHLY = "monthly"
SCOPE_DAILY = "daily"
SCOPE_AGE = "age"

SCOPES = (SCOPE_ORIGIN, SCOPE_DECADAL, SCOPE_YEARLY, SCOPE_MONTHLY, SCOPE_DAILY, SCOPE_AGE)

SCOPE_DISPLAY_NAMES = {
    SCOPE_ORIGIN: "本命盘",
    SCOPE_DECADAL: "大限盘",
    SCOPE_YEARLY: "流年盘",
    SCOPE_MONTHLY: "流月盘",
    SCOPE_DAILY: "流日盘",
    SCOPE_AGE: "小限盘",
}
