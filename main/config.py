from decouple import AutoConfig, Csv
from pathlib import Path

config = AutoConfig()


class Config:
    def __init__(self):
        # Environment
        self.ENV = config("ENV", default="development")

        # Database
        self.DATABASE_URL = config("DATABASE_URL", default="")
        self.DB_HOST = config("DB_HOST", default="localhost")
        self.DB_PORT = config("DB_PORT", default=5432, cast=int)
        self.DB_USER = config("DB_USER", default="postgres")
        self.DB_PASSWORD = config("DB_PASSWORD", default="password")
        self.DB_NAME = config("DB_NAME", default="advocates_db")
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        # Auth
        self.SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")

        # App
        self.BIND = config("BIND", default="127.0.0.1:8000")
        self.DEBUG = config("DEBUG", default=True, cast=bool)
        self.CORS_ORIGINS = config("CORS_ORIGINS", default="*", cast=Csv())

        # API docs
        self.API_TITLE = "Advocates API"
        self.API_VERSION = "v1"
        self.OPENAPI_VERSION = "3.0.3"
        self.OPENAPI_URL_PREFIX = "/"
        self.OPENAPI_JSON_PATH = "openapi.json"

        # Logging
        self.LOG_DIR = Path(config("LOG_DIR", default="logs"))
        self.LOG_LEVEL = config("LOG_LEVEL", default="INFO")
        self.LOG_TO_FILE = config("LOG_TO_FILE", default=True, cast=bool)
        self.SQL_LOG_LEVEL = config("SQL_LOG_LEVEL", default="WARNING")

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


settings = Config()
