"""SettingsStore 单元测试。"""

import json

from gift_agent.models import EndpointConfig


class TestSettingsStore:
    """测试配置的保存与加载。"""

    def test_load_missing_file_returns_none(self, settings_store):
        """测试文件不存在时返回 None。"""
        assert settings_store.load() is None

    def test_save_then_load(self, settings_store, endpoint_config):
        """测试保存后加载得到相同配置。"""
        settings_store.save(endpoint_config)

        assert settings_store.load() == endpoint_config

    def test_saved_file_layout(self, settings_store, endpoint_config):
        """测试文件使用 apiUrl/apiKey/model 字段。"""
        settings_store.save(endpoint_config)

        data = json.loads(settings_store.path.read_text(encoding="utf-8"))
        assert set(data) == {"apiUrl", "apiKey", "model"}

    def test_malformed_file_returns_none(self, settings_store):
        """测试文件损坏时返回 None。"""
        settings_store.path.parent.mkdir(parents=True)
        settings_store.path.write_text("{not json", encoding="utf-8")

        assert settings_store.load() is None

    def test_non_object_file_returns_none(self, settings_store):
        """测试 JSON 不是对象时返回 None。"""
        settings_store.path.parent.mkdir(parents=True)
        settings_store.path.write_text("[1, 2]", encoding="utf-8")

        assert settings_store.load() is None

    def test_load_or_default(self, settings_store):
        """测试无配置时返回默认配置。"""
        assert settings_store.load_or_default() == EndpointConfig()
