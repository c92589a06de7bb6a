"""deck_kit unit 测试"""
