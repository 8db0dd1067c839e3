"""Structured debug logging (timestamp, operation, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/trie_search.log"
_LOG_LEVEL = logging.INFO

_file_handler: Union[logging.handlers.RotatingFileHandler, None] = None


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.handlers.RotatingFileHandler:
    """Configure the root logger to write structured lines to a file.

    Any handler already attached to the root logger is removed first.

    Args:
        log_file_path (Path): The file the log lines are written to.
        level (int): The logging level of the root logger.

    Returns:
        logging.handlers.RotatingFileHandler: The installed handler.

    """
    global _file_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    _file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
        "module=%(module)s | funcName=%(funcName)s | "
        "lineno=%(lineno)d | message=%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    _file_handler.setFormatter(formatter)
    root_logger.addHandler(_file_handler)
    return _file_handler


def shutdown_logging() -> None:
    """Flush, close and detach the handler installed by setup_logging()."""
    global _file_handler
    if _file_handler is not None:
        _file_handler.flush()
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log(
    time_stamp: str,
    operation: str,
    argument: str,
    response: str,
    execution_time_ms: float,
) -> None:
    """Log the details of a query execution using the configured
    logging system.

    Args:
        time_stamp (str): The timestamp of the query execution.
        operation (str): The executed command, e.g. "MATCHES".
        argument (str): The word or prefix the command was given.
        response (str): The response sent back for the query.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Timestamp: %s, Operation: %s, Argument: '%s', Response: '%s', "
        "Execution Time: %.2f ms",
        time_stamp,
        operation,
        argument,
        response,
        execution_time_ms,
    )
