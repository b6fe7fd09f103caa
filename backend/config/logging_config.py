"""Process-wide logging configuration."""

from logging.config import dictConfig

from .settings import Settings


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings (console, optional file)."""
    formatter = 'json' if settings.log_format == 'json' else 'default'
    handlers = {
        'console': {
            'level': settings.log_level,
            'class': 'logging.StreamHandler',
            'formatter': formatter,
        },
    }
    if settings.log_file:
        handlers['file'] = {
            'level': settings.log_level,
            'class': 'logging.FileHandler',
            'filename': settings.log_file,
            'formatter': formatter,
        }

    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
            'json': {
                'class': 'pythonjsonlogger.json.JsonFormatter',
                'format': '%(asctime)s %(name)s %(levelname)s %(message)s'
            }
        },
        'handlers': handlers,
        'root': {
            'level': settings.log_level,
            'handlers': list(handlers),
        },
    })
