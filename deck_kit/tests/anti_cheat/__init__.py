"""
Anti-Cheat System - 反作弊系统

确保测试使用真实的核心模块。

Modules:
    core_usage_checker.py: 核心模块使用检查器
"""
