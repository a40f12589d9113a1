# -*- coding: utf-8 -*-
"""
静态数据模块
"""
