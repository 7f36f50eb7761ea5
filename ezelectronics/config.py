# ezelectronics/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if os.getenv("EZ_DB_HOST"):
        return (
            f"postgresql+asyncpg://{os.getenv('EZ_DB_USER')}:{os.getenv('EZ_DB_PASSWORD')}"
            f"@{os.getenv('EZ_DB_HOST')}:{os.getenv('EZ_DB_PORT', '5432')}/{os.getenv('EZ_DB_NAME')}"
        )
    return "sqlite+aiosqlite:///./ezelectronics.sqlite"


DATABASE_URL = _database_url()
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")

SECRET_KEY = os.getenv("SECRET_KEY", "your_secret_key")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

API_PREFIX = "/ezelectronics"
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "true").lower() in ("1", "true", "yes")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))
