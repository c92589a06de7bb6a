"""
牌组业务异常定义
核心层只抛出异常，由调用方决定如何处理
"""


class DeckError(Exception):
    """牌组操作基础异常类"""
    pass


class EmptySequenceError(DeckError, IndexError):
    """从已发完的牌序列中继续发牌"""
    pass


class InvalidRequestError(DeckError, ValueError):
    """发牌请求参数无效（负数，或超过整副牌的张数）"""
    pass
