from app.config import CodewarsConfig, ServerConfig

def test_codewars_defaults(monkeypatch):
    monkeypatch.delenv('CODEWARS_API_URL', raising=False)
    config = CodewarsConfig()
    assert config.API_URL == 'https://www.codewars.com/api/v1/users/'
    assert config.REQUEST_TIMEOUT > 0
    assert config.MAX_USERNAMES >= 1

def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv('CODEWARS_REQUEST_TIMEOUT', '2.5')
    monkeypatch.setenv('LEADERBOARD_SESSION_MAX_ENTRIES', '7')
    monkeypatch.setenv('LEADERBOARD_PORT', '9001')

    assert CodewarsConfig().REQUEST_TIMEOUT == 2.5
    assert ServerConfig().SESSION_MAX_ENTRIES == 7
    assert ServerConfig().PORT == 9001

def test_unprefixed_environment_is_ignored(monkeypatch):
    """Generic names such as PORT belong to other programs"""
    monkeypatch.delenv('LEADERBOARD_PORT', raising=False)
    monkeypatch.delenv('LEADERBOARD_LOG_LEVEL', raising=False)
    monkeypatch.setenv('PORT', '1234')
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
    monkeypatch.setenv('REQUEST_TIMEOUT', '99')

    assert ServerConfig().PORT == 8000
    assert ServerConfig().LOG_LEVEL == 'INFO'
    assert CodewarsConfig().REQUEST_TIMEOUT != 99
