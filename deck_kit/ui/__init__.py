"""
deck_kit UI Layer - 用户界面层

cli: 命令行发牌工具
streamlit: 发牌结果网页查看器
"""
