"""deck_kit 测试包"""
