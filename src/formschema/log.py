import logging.config

from .utils import canonicalify, ensure_path

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.WARNING,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "formschema": {
            "handlers": ["console"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def build_config(logfile=None, verbose=False) -> dict:
    config = {
        **LOGGING_CONFIG,
        "handlers": {
            name: dict(handler) for name, handler in LOGGING_CONFIG["handlers"].items()
        },
        "loggers": {
            name: dict(cfg) for name, cfg in LOGGING_CONFIG["loggers"].items()
        },
    }

    if verbose:
        config["handlers"]["console"]["level"] = logging.DEBUG

    if logfile:
        p = canonicalify(logfile)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": str(p),
            "maxBytes": 5 * 1024 * 1024,  # 5MB
            "backupCount": 10,
        }
        config["loggers"]["formschema"]["handlers"] = ["console", "file"]

    return config


def setup(logfile=None, verbose=False):
    config = build_config(logfile, verbose)

    if logfile:
        p = canonicalify(logfile)
        if len(p.parts) > 1:
            ensure_path(p.parent)

    logging.config.dictConfig(config)


logger = logging.getLogger("formschema")
