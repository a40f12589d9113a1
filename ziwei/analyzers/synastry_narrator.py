#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合盘叙述生成器 - 把评分依据转写为自然语言段落
"""

import logging
from typing import List, Optional

from ziwei.calculators.ziwei_core.ring_geometry import relation_of
from ziwei.config.registry import AnalysisRegistry, get_registry
from ziwei.models.synastry import (
    Evidence,
    NarratedPalace,
    SynastryInterpretation,
    SynastryNarration,
    SynastryScoreResult,
)

logger = logging.getLogger(__name__)


def _star_tone(evidence: Evidence, brief: str) -> str:
    if evidence.value > 0:
        return "生助" if "援助" in brief else "增益"
    return "相克" if evidence.name in ("擎羊", "陀罗") else "冲克"


def _sentence(evidence: Evidence, name_a: str, name_b: str, registry: AnalysisRegistry) -> str:
    """单条依据 → 一句话"""
    rel = registry.relation_phrases[relation_of(evidence.source_index, evidence.target_index)]
    if evidence.kind == 'star':
        brief = registry.star_brief.get(evidence.name, "")
        parts = [f"{name_b}的「{evidence.name}」"]
        if brief:
            parts.append(f"（{brief}）")
        if evidence.brightness:
            parts.append(f"（亮度：{evidence.brightness}）")
        tone = _star_tone(evidence, brief)
        return f"{''.join(parts)}{rel}到{name_a}的「{evidence.target}」，{tone}。"

    tone = registry.mutagen_tone.get(evidence.name, "影响")
    meaning = registry.mutagen_meaning.get(evidence.name, "")
    return f"{name_b}的化{evidence.name}{rel}到{name_a}的「{evidence.target}」，{tone}（{meaning}）。"


def narrate_synastry(
    name_a: str,
    name_b: str,
    score_result: SynastryScoreResult,
    interpretation: SynastryInterpretation,
    registry: Optional[AnalysisRegistry] = None,
) -> SynastryNarration:
    """
    生成合盘自然语言叙述

    Args:
        name_a: A 方称呼
        name_b: B 方称呼
        score_result: score_synastry 的结果（决定宫位顺序）
        interpretation: interpret_synastry 的结果
        registry: 分析注册表

    Returns:
        SynastryNarration: 标题与逐宫段落
    """
    registry = registry or get_registry()
    order = [name for name in score_result.palaces if name in interpretation.palaces]
    order += [name for name in interpretation.palaces if name not in order]

    sections: List[NarratedPalace] = []
    for name in order:
        info = interpretation.palaces[name]
        tone = registry.bucket_tone.get(info.bucket.value, "")
        one_liner = tone if tone.endswith("。") else f"{tone}。"
        sections.append(NarratedPalace(
            palace=name,
            bucket=info.bucket,
            one_liner=one_liner,
            positives=[_sentence(e, name_a, name_b, registry) for e in info.highlights],
            risks=[_sentence(e, name_a, name_b, registry) for e in info.risks],
            advice=list(info.advice),
        ))

    logger.debug(f"合盘叙述完成: {name_a} × {name_b}")
    return SynastryNarration(headline=f"{name_a} × {name_b}", palaces=sections)
