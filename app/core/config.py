import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno


def get_env(key: str, default: str) -> str:
    """Devuelve la variable de entorno, o `default` si no existe o está vacía."""
    value = os.getenv(key)
    return value if value else default


def build_database_url(host: str, port: str, user: str, password: str, name: str) -> str:
    return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"


@dataclass
class Settings:
    database_url: str
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    static_dir: str = "./web"
    log_level: str = "INFO"
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        database_url: Optional[str] = os.getenv("DATABASE_URL")
        if not database_url:
            database_url = build_database_url(
                host=get_env("DB_HOST", "localhost"),
                port=get_env("DB_PORT", "5432"),
                user=get_env("DB_USER", "postgres"),
                password=get_env("DB_PASSWORD", "postgres"),
                name=get_env("DB_NAME", "analytics"),
            )
        return cls(
            database_url=database_url,
            server_host=get_env("SERVER_HOST", "0.0.0.0"),
            server_port=int(get_env("SERVER_PORT", "8080")),
            static_dir=get_env("STATIC_DIR", "./web"),
            log_level=get_env("LOG_LEVEL", "INFO").upper(),
            sql_echo=get_env("SQL_ECHO", "false").lower() in ("1", "true", "yes"),
        )


settings = Settings.from_env()
