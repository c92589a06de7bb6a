"""
deck_kit Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记注册

所有测试都会自动加载这些配置。
"""

import random

import pytest

from deck_kit.application import ConfigService, DealService
from deck_kit.core.deck import Deck

# 固定种子，保证洗牌结果可复现
TEST_SEED = 20240601


@pytest.fixture(scope="session")
def deck():
    """整个测试会话共享的牌组，牌组不可变"""
    return Deck()


@pytest.fixture
def seeded_rng():
    """带固定种子的随机数生成器fixture"""
    return random.Random(TEST_SEED)


@pytest.fixture
def config_service():
    """配置服务fixture"""
    return ConfigService()


@pytest.fixture
def deal_service(config_service, deck):
    """发牌服务fixture"""
    return DealService(config_service=config_service, deck=deck)


@pytest.fixture
def mock_detector():
    """Mock对象检测器fixture"""
    def _detect_mocks(*objects):
        """检测对象中是否包含mock"""
        for obj in objects:
            if hasattr(obj, '_mock_name') or hasattr(obj, 'call_count'):
                pytest.fail(f"检测到mock对象: {obj}, 测试必须使用真实对象")
    return _detect_mocks


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )

