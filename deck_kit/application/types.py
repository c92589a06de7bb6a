"""
Application Layer Types - 应用层类型定义

发牌服务和配置服务返回给UI层的结果对象。
服务不向外抛出核心异常，失败时返回带错误码的结果。
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, Tuple, TypeVar

from deck_kit.core.dealing import CardSequence, Hand

T = TypeVar('T')


class ResultStatus(Enum):
    """服务调用结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()


@dataclass(frozen=True)
class DealOutcome:
    """
    一次发牌的结果

    Attributes:
        hands: 按发牌顺序排列的手牌
        residual: 未发出的剩余牌序列
        seed: 实际使用的随机种子，用同一种子可以重放这次发牌
        profile: 使用的发牌配置名
    """
    hands: Tuple[Hand, ...]
    residual: CardSequence
    seed: int
    profile: str

    @property
    def cards_per_hand(self) -> int:
        return len(self.hands[0]) if self.hands else 0


@dataclass(frozen=True)
class DealResult:
    """发牌命令结果，成功时outcome为本次发牌"""
    success: bool
    status: ResultStatus
    message: str = ""
    error_code: Optional[str] = None
    outcome: Optional[DealOutcome] = None

    @classmethod
    def dealt(cls, outcome: DealOutcome) -> 'DealResult':
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            message=f"已发出{len(outcome.hands)}手牌",
            outcome=outcome
        )

    @classmethod
    def rejected(cls, message: str, error_code: str) -> 'DealResult':
        """发牌请求无效，没有消耗任何随机数"""
        return cls(
            success=False,
            status=ResultStatus.VALIDATION_ERROR,
            message=message,
            error_code=error_code
        )


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """配置和牌组查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T) -> 'QueryResult[T]':
        return cls(success=True, status=ResultStatus.SUCCESS, data=data)

    @classmethod
    def failure_result(cls, message: str, error_code: str) -> 'QueryResult[T]':
        return cls(
            success=False,
            status=ResultStatus.FAILURE,
            message=message,
            error_code=error_code
        )
