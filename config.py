import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./logs.db")
    STORAGE_BACKEND = data.get("STORAGE_BACKEND", "sql")  # "sql" or "memory"
    STORAGE_TIMEOUT_SECONDS = float(data.get("STORAGE_TIMEOUT_SECONDS", 5))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    LOG_GROUP = data.get("LOG_GROUP", "LOG")
    RECENT_LOGS_LIMIT = int(data.get("RECENT_LOGS_LIMIT", 100))
    MAX_MESSAGE_LENGTH = int(data.get("MAX_MESSAGE_LENGTH", 10000))
