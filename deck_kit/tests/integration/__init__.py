"""deck_kit integration 测试"""
