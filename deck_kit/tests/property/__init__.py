"""deck_kit property 测试"""
