from __future__ import annotations
import os
from pydantic import BaseModel

class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "batting-board-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "Batting Order Board")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")

    # Key-value store
    redis_url: str = os.getenv("REDIS_URL", "redis://redis:6379/0")
    redis_connect_timeout_s: float = float(os.getenv("REDIS_CONNECT_TIMEOUT_S", "10"))
    redis_socket_timeout_s: float = float(os.getenv("REDIS_SOCKET_TIMEOUT_S", "5"))
    redis_reconnect_backoff_ms: int = int(os.getenv("REDIS_RECONNECT_BACKOFF_MS", "100"))  # capped at 3000

    # Keys holding the serialized state
    batting_orders_key: str = os.getenv("BATTING_ORDERS_KEY", "battingOrders")
    players_key: str = os.getenv("PLAYERS_KEY", "players")
    player_votes_key: str = os.getenv("PLAYER_VOTES_KEY", "player-votes")
    legacy_votes_key: str = os.getenv("LEGACY_VOTES_KEY", "votes")

settings = Settings()
