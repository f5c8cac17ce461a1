"""
Settings parsing.
"""

from nursery.core.config import Settings


def test_cors_origins_comma_separated():
    settings = Settings(CORS_ORIGINS=" https://admin.example.com, http://localhost:3000 ,")
    assert settings.cors_origins_list == ["https://admin.example.com", "http://localhost:3000"]


def test_cors_origins_json_array():
    settings = Settings(CORS_ORIGINS='["https://admin.example.com", "http://localhost:5173"]')
    assert settings.cors_origins_list == ["https://admin.example.com", "http://localhost:5173"]


def test_cors_origins_empty():
    assert Settings(CORS_ORIGINS="").cors_origins_list == []
