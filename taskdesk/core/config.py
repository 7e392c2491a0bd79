from os import getenv

class Settings:
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    SQL_ECHO = getenv("SQL_ECHO", "0") == "1"
    CORS_ORIGINS = [
        origin.strip()
        for origin in getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:4173").split(",")
        if origin.strip()
    ]
    HOST = getenv("HOST", "127.0.0.1")
    PORT = int(getenv("PORT", "8000"))

settings = Settings()
