import logging
import logging.config
import re

SENSITIVE_PATTERNS = [
    re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    re.compile(r"(?i)(bearer\s+)([A-Za-z0-9._~+/=-]+)"),
    re.compile(r"(?i)(password\s*[=:]\s*)([^,\s]+)"),
]


class SensitiveDataFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in SENSITIVE_PATTERNS:
            if pattern.groups:
                redacted = pattern.sub(r"\1[REDACTED]", redacted)
            else:
                redacted = pattern.sub("[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


def build_logging_config(log_level: str, normalization_log_level: str) -> dict:
    """Return the ``dictConfig`` mapping for the service.

    Application loggers under ``taskboard`` follow *log_level*.  The
    normalization package has its own level because it logs one debug line
    per unparseable legacy value.  Third-party loggers stay at WARNING.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "redact": {"()": "taskboard.core.logging.SensitiveDataFilter"},
        },
        "formatters": {
            "service": {
                "format": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            }
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "service",
                "filters": ["redact"],
            }
        },
        "root": {"handlers": ["stderr"], "level": "WARNING"},
        "loggers": {
            "taskboard": {"level": log_level.upper()},
            "taskboard.normalization": {"level": normalization_log_level.upper()},
            "sqlalchemy.engine": {"level": "WARNING"},
            "uvicorn.access": {"handlers": ["stderr"], "level": "WARNING", "propagate": False},
        },
    }


def setup_logging() -> None:
    from taskboard.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        build_logging_config(settings.log_level, settings.normalization_log_level)
    )
