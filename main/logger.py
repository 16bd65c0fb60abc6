import logging
import logging.config
from main.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = "advocates.log"


def build_logging_config(level, log_dir=None, sql_level="WARNING"):
    """
    Build a dictConfig mapping for the service.

    Console output is always on. A file handler under ``log_dir`` is added
    only when a directory is given. Request lines from werkzeug stay at INFO
    and SQLAlchemy engine chatter is held at ``sql_level`` so that a DEBUG
    root level does not echo every statement.
    """
    handlers = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "level": level,
            "class": "logging.FileHandler",
            "filename": str(log_dir / LOG_FILENAME),
            "encoding": "utf-8",
            "formatter": "standard",
        }
    names = list(handlers)

    def quiet(logger_level):
        return {"handlers": names, "level": logger_level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "root": {"handlers": names, "level": level},
        "loggers": {
            "werkzeug": quiet("INFO"),
            "sqlalchemy.engine": quiet(sql_level),
        },
    }


def setup_logging():
    log_dir = None
    if settings.LOG_TO_FILE:
        log_dir = settings.LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(settings.LOG_LEVEL, log_dir, settings.SQL_LOG_LEVEL)
    )
