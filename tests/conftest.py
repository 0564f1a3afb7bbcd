"""测试配置和共享 Fixtures。"""

import pytest
from unittest.mock import MagicMock

from gift_agent.models import EndpointConfig, Gender, Profile
from gift_agent.services.settings_store import SettingsStore


SAMPLE_REPLY = "1． 定制书名咖啡杯 - 文艺暖心\n2． 迷你手冲咖啡套装 - 精致生活\n3． 复古皮质书签 - 优雅实用"


# ============================================================================
# Mock Services
# ============================================================================

class MockRecommendationClient:
    """测试用 Mock 推荐客户端。

    可以通过设置 response 属性来控制返回值。
    可以通过设置 error 来模拟失败。
    """

    def __init__(self):
        self.response = SAMPLE_REPLY
        self.error: Exception | None = None
        self.calls: list[tuple[EndpointConfig, str, str]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def generate(self, config: EndpointConfig, system: str, user: str) -> str:
        self.calls.append((config, system, user))
        if self.error is not None:
            raise self.error
        return self.response


def make_response(status_code=200, json_data=None, reason="OK", json_error=None):
    """创建模拟的 requests.Response。"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def completion_body(content):
    """创建 chat completion 成功响应体。"""
    return {
        "id": "chatcmpl-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


# ============================================================================
# Model Fixtures
# ============================================================================

@pytest.fixture
def sample_profile() -> Profile:
    """创建示例 Profile。"""
    return Profile(
        gender=Gender.FEMALE,
        age=25,
        interests="阅读、咖啡",
        budget_min=100,
        budget_max=200,
    )


@pytest.fixture
def minimal_profile() -> Profile:
    """创建无兴趣的 Profile（用于边界测试）。"""
    return Profile(gender=Gender.MALE, age=60, budget_min=0, budget_max=50)


@pytest.fixture
def endpoint_config() -> EndpointConfig:
    """创建带 API Key 的配置。"""
    return EndpointConfig(
        url="https://llm.example.com/v1/chat/completions",
        api_key="sk-test-1234567890",
        model="Qwen/Qwen3-8B",
    )


@pytest.fixture
def empty_key_config() -> EndpointConfig:
    """创建未配置 API Key 的配置。"""
    return EndpointConfig(url="https://llm.example.com/v1/chat/completions", api_key="", model="m")


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_client() -> MockRecommendationClient:
    """创建 Mock 推荐客户端。"""
    return MockRecommendationClient()


@pytest.fixture
def mock_session():
    """创建 Mock requests.Session，默认返回成功响应。"""
    session = MagicMock()
    session.post.return_value = make_response(json_data=completion_body(SAMPLE_REPLY))
    return session


@pytest.fixture
def settings_store(tmp_path) -> SettingsStore:
    """创建使用临时文件的 SettingsStore。"""
    return SettingsStore(tmp_path / "settings" / "config.json")
