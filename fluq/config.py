import logging
from dataclasses import dataclass, fields, replace
from .types import *
from .errors import InvalidArgumentError

logger = logging.getLogger('fluq')


@dataclass(frozen=True)
class QueryConfig:
    """runtime options for the query engines"""
    trace_operators: bool = False
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(message)s'


settings = QueryConfig()


def configure(**overrides: Any) -> QueryConfig:
    """replace the active settings, returning the new config"""
    global settings
    known = {f.name for f in fields(QueryConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidArgumentError(f"unknown config option(s): {', '.join(unknown)}")
    updated = replace(settings, **overrides)
    level = _level_number(updated.log_level)
    settings = updated
    # trace lines are DEBUG records
    logger.setLevel(logging.DEBUG if settings.trace_operators else level)
    return settings


def _level_number(level: Any) -> int:
    number = logging.getLevelName(level.upper()) if isinstance(level, str) else None
    if not isinstance(number, int):
        raise InvalidArgumentError(f"unknown log level: {level!r}")
    return number


def reset() -> QueryConfig:
    """restore default settings"""
    global settings
    settings = QueryConfig()
    logger.setLevel(logging.NOTSET)
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    """basic console logging for scripts. libraries importing fluq should configure their own handlers."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=settings.log_format)


def trace(operator: str, size_in: int, size_out: Any) -> None:
    """log one line per operator call when tracing is enabled"""
    if settings.trace_operators:
        logger.debug("%s: %s -> %s", operator, size_in, size_out)
