# -*- coding: utf-8 -*-
"""
合盘评分配置

星曜权重、四化权重、亮度乘数、三方四正关系权重、档位区间、
档位语气、宫位建议、星曜简义。
"""

from ziwei.data.constants import (
    FLOWER_STARS,
    HELPER_STARS,
    NEGATIVE_ADJECTIVE_STARS,
    POSITIVE_ADJECTIVE_STARS,
)

# 星曜基础权重
BASE_STAR_WEIGHTS = {
    # 主星
    "紫微": 2.5, "天相": 2.0, "天府": 2.0, "太阳": 1.8, "太阴": 1.6,
    "天同": 1.6, "武曲": 1.5, "天机": 1.4, "天梁": 1.4, "巨门": 0.8,
    "七杀": 0.8, "贪狼": 0.6, "廉贞": 0.6, "破军": 0.5,
    # 六吉星
    "左辅": 1.2, "右弼": 1.2, "天魁": 1.2, "天钺": 1.2, "文昌": 1.2, "文曲": 1.2,
    # 六煞星
    "擎羊": -1.5, "陀罗": -1.5, "火星": -1.5, "铃星": -1.5, "地空": -1.5, "地劫": -1.5,
    # 禄马
    "禄存": 1.4, "天马": 0.8,
}

# 分类权重
FLOWER_WEIGHT = 0.8
HELPER_WEIGHT = 0.6
POS_ADJ_WEIGHT = 0.4
NEG_ADJ_WEIGHT = -0.6

CATEGORY_WEIGHTS = (
    (FLOWER_STARS, FLOWER_WEIGHT),
    (HELPER_STARS, HELPER_WEIGHT),
    (POSITIVE_ADJECTIVE_STARS, POS_ADJ_WEIGHT),
    (NEGATIVE_ADJECTIVE_STARS, NEG_ADJ_WEIGHT),
)

# 四化权重
MUTAGEN_WEIGHTS = {
    "禄": 1.2, "权": 0.8, "科": 0.8, "忌": -1.6,
}

# 三方四正关系权重
RELATION_WEIGHTS = {
    "self": 0.7,   # 同宫
    "opp": 0.1,    # 对宫
    "tri1": 0.1,   # 三合之一
    "tri2": 0.1,   # 三合之二
}

# 亮度对正权重星的乘数
BRIGHTNESS_POS_MULT = {
    "庙": 1.30, "旺": 1.20, "得": 1.08, "利": 1.03, "平": 1.00, "不": 0.60, "陷": -1.20,
}

# 亮度对负权重星的乘数
BRIGHTNESS_NEG_MULT = {
    "庙": 0.85, "旺": 0.90, "得": 0.95, "利": 0.98, "平": 1.00, "不": 1.10, "陷": 1.30,
}

# 评分档位（左闭右开，最后一档上界取 101 以覆盖 100）
SYNASTRY_BINS = (
    ("相克", 0, 35),
    ("相冲", 35, 50),
    ("中性", 50, 60),
    ("相合", 60, 75),
    ("强合", 75, 85),
    ("共振", 85, 101),
)

POSITIVE_BUCKETS = frozenset(["相合", "强合", "共振"])
NEGATIVE_BUCKETS = frozenset(["相克", "相冲"])

# 档位语气
BUCKET_TONE = {
    "相克": "冲突偏多，需规避关键决策。",
    "相冲": "摩擦与互补并存，建立互动规则更重要。",
    "中性": "可做但别硬上，围绕具体主题再看组合。",
    "相合": "和谐互补，适合推进关键事项。",
    "强合": "高度匹配，建议升阶合作/关系。",
    "共振": "强同频，适合关键节点与共创。",
}

# 宫位建议（pos/neg/neu）
PALACE_ADVICE = {
    "夫妻": {
        "pos": ["提升沟通频率，规划共同时间与仪式感。"],
        "neg": ["建立冲突降噪规则：冷静期/复盘/沟通边界。"],
        "neu": ["从小议题协作，逐步验证相处节奏。"],
    },
    "官禄": {
        "pos": ["明确分工与节奏，设立周迭代和月度复盘。"],
        "neg": ["明确权限与决策门槛，避免职责拉扯。"],
        "neu": ["小范围试合作，逐步扩大责任。"],
    },
    "财帛": {
        "pos": ["共拟预算与分配规则，设收益复盘。"],
        "neg": ["设止损线与上限，避免冲动投入。"],
        "neu": ["从小额试点开始校验资金规则。"],
    },
    "田宅": {
        "pos": ["可共建家庭资产/居住规划，明确产权边界。"],
        "neg": ["保持财产独立，避免高杠杆与长期绑定。"],
        "neu": ["从短期居住/资产安排试运行。"],
    },
    "父母": {
        "pos": ["建立与权威的正向沟通与汇报机制。"],
        "neg": ["隔离外部权威压力，内部先达成一致。"],
        "neu": ["约定对外口径，降低外部干扰。"],
    },
    "子女": {
        "pos": ["推进项目/育成计划，明确里程碑与质控。"],
        "neg": ["明确职责归属与质量门槛，避免扯皮。"],
        "neu": ["小步快跑，短周期评审与纠偏。"],
    },
    "迁移": {
        "pos": ["安排旅行/差旅/岗位轮换，增强共同体验。"],
        "neg": ["减少大幅变动，必要时先做短期尝试。"],
        "neu": ["短期流动尝试，评估适配度。"],
    },
    "疾厄": {
        "pos": ["建立健康习惯与风险缓释清单。"],
        "neg": ["避免高风险安排，设置预警与兜底。"],
        "neu": ["制定基础作息与体检提醒。"],
    },
    "兄弟": {
        "pos": ["利用社交与协同网络，扩大协作半径。"],
        "neg": ["避免圈层冲突，划清人际边界。"],
        "neu": ["小群试协作，逐步扩圈。"],
    },
    "福德": {
        "pos": ["强化价值观同频：共享语言与仪式。"],
        "neg": ["避免价值观争论，聚焦具体议题。"],
        "neu": ["围绕共同兴趣开展低风险活动。"],
    },
    "命宫": {
        "pos": ["鼓励优势表达，彼此赋能。"],
        "neg": ["尊重个体空间与界限，降低消耗。"],
        "neu": ["观察互动边界，逐步加深了解。"],
    },
}

# 四化叙述：语气与含义
MUTAGEN_TONE = {"禄": "生助", "权": "增强", "科": "调和", "忌": "冲克"}
MUTAGEN_MEANING = {"禄": "财缘增益", "权": "权力推动", "科": "名望调和", "忌": "压力阻滞"}

# 宫位关系叙述
RELATION_PHRASES = {
    "same": "同宫",
    "opposite": "对宫照入",
    "trine": "三方会照",
    "remote": "他宫会照",
}

# 星曜简义（用于自然语言叙述）
STAR_BRIEF = {
    "紫微": "权柄统筹", "天机": "机变策划", "太阳": "光彩名誉", "武曲": "财务执行", "天同": "温和求稳",
    "廉贞": "制度边界", "天府": "守成聚财", "太阴": "温润细腻", "贪狼": "社交尝鲜", "巨门": "口才是非",
    "天相": "平衡协调", "天梁": "庇护正直", "七杀": "决断攻坚", "破军": "变革重来",
    "左辅": "强势援助", "右弼": "温柔后援", "天魁": "领导贵气", "天钺": "方案解题", "文昌": "文书逻辑",
    "文曲": "文艺表达",
    "擎羊": "刚猛冲突", "陀罗": "顽固拖拽", "火星": "急躁爆点", "铃星": "惊扰敏感", "地空": "理想落空",
    "地劫": "破耗错失",
    "禄存": "俸禄保底", "天马": "机动奔波",
    "红鸾": "端庄亲和", "天喜": "活泼喜庆", "天姚": "表现魅力", "咸池": "风情吸引",
    "三台": "排场品位", "八座": "荣耀享受", "恩光": "礼遇情分", "天贵": "小贵回馈", "天官": "权位名器",
    "台辅": "名声助力", "封诰": "物质赏赐",
    "龙池": "技艺结构", "凤阁": "审美设计", "天才": "聪敏悟性", "天厨": "美食品鉴",
    "解神": "化解援助", "年解": "年度缓冲", "月解": "月度缓冲", "天德": "仁心稳重", "月德": "温和包容",
    "天福": "乐天随缘",
    "天空": "突发跳变", "旬空": "潜能未发", "空亡": "虚无迷茫", "华盖": "哲思孤高",
    "天刑": "严肃边界", "天哭": "悲情压力", "天虚": "内耗纠结", "阴煞": "忧郁退缩", "破碎": "杂碎分散",
    "小耗": "小额消费", "大耗": "大额破财", "病符": "体弱病态", "官符": "官非是非", "伏兵": "多疑不安",
    "孤辰": "孤独清高", "寡宿": "沉默内向",
    "长生": "好奇创新", "沐浴": "心浮气躁", "冠带": "血气方刚", "临官": "独立自主", "帝旺": "志得意满",
    "衰": "老成理智", "病": "思虑过多", "死": "畏难情绪", "墓": "低调节俭", "绝": "消极冷淡",
    "胎": "寻求变化", "养": "希望好奇",
    "博士": "聪慧学识", "力士": "执著勇猛", "青龙": "执行反应", "将军": "权力掌控", "奏书": "文案理解",
    "飞廉": "好奇表达", "喜神": "喜庆拖延",
    "将星": "精神饱满", "攀鞍": "短暂知名", "岁驿": "变迁奔忙", "息神": "意志消沉", "劫煞": "精神压力",
    "灾煞": "意外困扰", "天煞": "长辈压力", "指背": "背后议论", "月煞": "女性压力", "亡神": "丢三落四",
    "岁建": "年度开始", "晦气": "情绪不稳", "丧门": "悲观情绪", "贯索": "束缚感重", "龙德": "物质幸运",
    "白虎": "冲动增强", "吊客": "悲观加重",
    "天寿": "长寿养生", "天伤": "离散伤感", "天使": "生死循环", "天月": "体弱阴湿", "天巫": "第六直觉",
    "蜚廉": "叛逆创意", "截空": "阻隔考验", "截路": "阻断绕行",
}
