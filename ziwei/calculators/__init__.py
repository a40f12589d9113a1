# -*- coding: utf-8 -*-
"""
计算模块
"""
