#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微分析异常定义

结构性错误（星盘缺宫、干支非法）直接终止整次分析，不做重试，
未知星曜、空结果不视为错误。
"""

from typing import Optional


class ZiweiError(Exception):
    """
    分析异常基类

    用于表示输入数据或调用方式错误，与系统错误区分开来。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "ziwei_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class StructuralError(ZiweiError):
    """星盘结构错误：缺少宫位、索引越界/重复、干支非法或地支重复"""
    def __init__(self, message: str, palace: Optional[str] = None):
        self.palace = palace
        error_type = f"structural_error:{palace}" if palace else "structural_error"
        super().__init__(message, code=422, error_type=error_type)


class InvalidScopeError(ZiweiError):
    """运限范围错误"""
    def __init__(self, scope: str):
        self.scope = scope
        super().__init__(f"不支持的运限范围: {scope}", code=400, error_type="invalid_scope")
