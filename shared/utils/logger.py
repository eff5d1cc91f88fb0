"""
Logging utilities for the multi-cloud gateway services

Provides centralized logging configuration shared by the gateway and the
provider services. Stdlib logging owns the stdout handler; structlog renders
the event dictionaries on top of it.
"""

import copy
import os
import logging
import logging.config
from typing import Optional, Dict, Any

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(message)s',
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console'],
    },
    'loggers': {
        'uvicorn.access': {
            # request lines come from the shared middleware instead
            'level': 'WARNING',
            'handlers': ['console'],
            'propagate': False
        },
    }
}

LOG_FORMATS = ("json", "console")


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a dictConfig mapping

    Args:
        config_path: Optional path to a YAML logging configuration file

    Returns:
        Logging configuration dictionary, the defaults when no file is given
    """
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Logging config {config_path} must contain a mapping")
        return config
    return copy.deepcopy(DEFAULT_LOGGING_CONFIG)


def setup_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "json",
    config_path: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        service_name: Service identifier bound to every log event
        log_level: Root log level
        log_format: Renderer for structlog events ('json' or 'console')
        config_path: Path to a YAML logging configuration file
    """
    config = load_logging_config(config_path)

    # Override log level
    log_level = log_level.upper()
    config.setdefault('root', {})['level'] = log_level
    for handler_config in config.get('handlers', {}).values():
        handler_config['level'] = log_level

    logging.config.dictConfig(config)

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger bound to the stdlib logger of that name
    """
    return structlog.get_logger(name)
