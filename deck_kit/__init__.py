"""
deck_kit - 不可变扑克牌组、洗牌与发牌

Packages:
    core: 纯领域逻辑（牌、牌组、洗牌、发牌、统计）
    application: 配置与发牌服务
    ui: 命令行和Streamlit界面
"""

__version__ = "1.0.0"
