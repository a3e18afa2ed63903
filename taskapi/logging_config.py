# taskapi/logging_config.py
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

BASE_DIR = Path(__file__).resolve().parent.parent


def build_logging_config(level: str = "INFO", log_file: str = "") -> Dict[str, Any]:
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    app_handlers = ["console"]
    access_handlers = ["console"]

    if log_file:
        path = Path(log_file)
        if not path.is_absolute():
            path = BASE_DIR / path
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": str(path),
            "maxBytes": 5 * 1024 * 1024,  # 5 MB
            "backupCount": 5,
            "encoding": "utf-8",
            "level": level,
        }
        handlers["access_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "access",
            "filename": str(path),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 5,
            "encoding": "utf-8",
            "level": level,
        }
        app_handlers = ["console", "file"]
        access_handlers = ["access_file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
            "access": {
                "format": "%(asctime)s | %(levelname)s | uvicorn.access | %(message)s",
            },
        },

        "handlers": handlers,

        "loggers": {
            "uvicorn": {"handlers": app_handlers, "level": level, "propagate": False},
            "uvicorn.error": {"handlers": app_handlers, "level": level, "propagate": False},
            "uvicorn.access": {"handlers": access_handlers, "level": level, "propagate": False},
            "taskapi": {"handlers": app_handlers, "level": level, "propagate": False},
        },

        "root": {
            "handlers": app_handlers,
            "level": level,
        },
    }


def setup_logging(level: str = "INFO", log_file: str = "") -> None:
    logging.config.dictConfig(build_logging_config(level, log_file))
    logging.getLogger("taskapi").info("Logging initialized")
