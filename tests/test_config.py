"""Tests for the config module."""

from zoneimport.config import Settings, _parse_cors_origins, _parse_extensions


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")

        assert _parse_cors_origins() == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

        assert _parse_cors_origins() == ["*"]


class TestParseExtensions:
    """Test upload extension parsing."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_EXTENSIONS", raising=False)

        assert _parse_extensions() == [".csv"]

    def test_values_are_normalized(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_EXTENSIONS", "CSV, .txt ,")

        assert _parse_extensions() == [".csv", ".txt"]

    def test_blank_value_falls_back(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_EXTENSIONS", " , ")

        assert _parse_extensions() == [".csv"]


class TestSettings:
    """Test Settings configuration."""

    def test_explicit_values(self):
        settings = Settings(max_file_size_bytes=10, preview_row_limit=3, log_level="DEBUG")

        assert settings.max_file_size_bytes == 10
        assert settings.preview_row_limit == 3
        assert settings.log_level == "DEBUG"

    def test_defaults(self):
        settings = Settings()

        assert settings.max_file_size_bytes > 0
        assert settings.preview_row_limit > 0
        assert isinstance(settings.allowed_extensions, list)
