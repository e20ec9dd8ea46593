"""
Tests for environment-driven configuration.
"""

from shadowstag import ShadowParameters, ShadowSettings


def test_defaults():
    settings = ShadowSettings()
    assert settings.DEFAULT_RADIUS == 30.0
    assert settings.DEFAULT_COLOR == '#444444FF'
    assert settings.MAX_BUFFER_PIXELS == 4096 * 4096


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('SHADOWSTAG_DEFAULT_RADIUS', '12.5')
    monkeypatch.setenv('SHADOWSTAG_DEFAULT_ENABLED', 'false')
    monkeypatch.setenv('SHADOWSTAG_MAX_BUFFER_PIXELS', '1000')

    settings = ShadowSettings()
    assert settings.DEFAULT_RADIUS == 12.5
    assert settings.DEFAULT_ENABLED is False
    assert settings.MAX_BUFFER_PIXELS == 1000

    params = ShadowParameters.from_settings(settings)
    assert params.radius == 12.5
    assert params.enabled is False
