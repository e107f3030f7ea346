import logging
import logging.config
import re

# (pattern, replacement); groups kept in the replacement are context, not PII.
PII_PATTERNS = [
    (re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"), "[REDACTED]"),
    (re.compile(r"\b(?:\+1[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?)\d{3}[-.\s]?\d{4}\b"), "[REDACTED]"),
    (re.compile(r"\b[A-Za-z]\d[A-Za-z]\s?\d[A-Za-z]\d\b"), "[REDACTED]"),
    (re.compile(r"\b\d{5}-\d{4}\b"), "[REDACTED]"),
    # A bare 5-digit zip only after a state code or zip/postal label; ids stay readable.
    (re.compile(r"(?i)(\b(?:zip|postal)(?:\s*code)?\s*[=:]?\s*)\d{5}\b"), r"\1[REDACTED]"),
    (re.compile(r"(\b[A-Z]{2}\s+)\d{5}\b"), r"\1[REDACTED]"),
    (re.compile(r"(?i)(value\s*[=:]\s*)([^,\s]+)"), r"\1[REDACTED]"),
]


class PIISafeFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern, replacement in PII_PATTERNS:
            redacted = pattern.sub(replacement, redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from sailclub.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "pii_safe": {
                    "()": "sailclub.core.logging.PIISafeFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["pii_safe"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )
