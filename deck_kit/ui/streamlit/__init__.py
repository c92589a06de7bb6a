"""发牌查看器 Streamlit 界面."""
