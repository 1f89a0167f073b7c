import os
from logging import config, getLevelName, getLogger

LOGGER_NAME = "ip2geo"
LOG_LEVEL = getLevelName(os.getenv("IP2GEO_LOG_LEVEL", "WARNING"))  # DEBUG, INFO, ERROR

log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)s %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOGGER_NAME: {"handlers": ["default"], "level": LOG_LEVEL, "propagate": False},
    },
}

config.dictConfig(log_config)

logger = getLogger(LOGGER_NAME)
