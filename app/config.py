from pydantic_settings import BaseSettings, SettingsConfigDict

class CodewarsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='CODEWARS_')

    API_URL: str = 'https://www.codewars.com/api/v1/users/'
    PROFILE_URL: str = 'https://www.codewars.com/users/'
    REQUEST_TIMEOUT: float = 10.0
    MAX_USERNAMES: int = 50
    USER_AGENT: str = 'codewars-leaderboard/1.0'

codewars = CodewarsConfig()

class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='LEADERBOARD_')

    HOST: str = '0.0.0.0'
    PORT: int = 8000
    LOG_LEVEL: str = 'INFO'
    SESSION_COOKIE: str = 'leaderboard_session'
    SESSION_MAX_ENTRIES: int = 1000

server = ServerConfig()
