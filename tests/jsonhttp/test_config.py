import pydantic
import pytest

from jsonhttp import ClientConfig


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url is None
        assert config.headers == {}

    def test_empty_base_url_is_none(self):
        assert ClientConfig(base_url="").base_url is None

    @pytest.mark.parametrize(
        "base_url", ["http://api.test", "https://api.test:8443/v1/"]
    )
    def test_valid_base_url(self, base_url: str):
        assert ClientConfig(base_url=base_url).base_url == base_url

    @pytest.mark.parametrize("base_url", ["/relative", "ftp://files.test", "api.test"])
    def test_invalid_base_url(self, base_url: str):
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(base_url=base_url)

    def test_config_is_frozen(self):
        config = ClientConfig(base_url="http://api.test")
        with pytest.raises(pydantic.ValidationError):
            config.base_url = "http://other.test"  # type: ignore[misc]

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("JSONHTTP_BASE_URL", "https://example.com")
        config = ClientConfig.from_env(headers={"X-A": "1"})
        assert config.base_url == "https://example.com"
        assert config.headers == {"X-A": "1"}

    def test_config_from_env_without_base_url(self):
        assert ClientConfig.from_env().base_url is None
