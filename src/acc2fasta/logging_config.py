"""Logging configuration and utilities."""

import logging
from datetime import datetime
from typing import Optional

import click

PACKAGE_LOGGER = 'acc2fasta'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""
    
    COLORS = {
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'magenta'
    }
    
    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if enabled."""
        levelname = record.levelname
        
        if self.use_colors and levelname in self.COLORS:
            record.levelname = click.style(levelname, fg=self.COLORS[levelname], bold=True)
        
        result = super().format(record)
        
        # Restore original levelname for other handlers
        record.levelname = levelname
        
        return result


class ClickEchoHandler(logging.Handler):
    """Handler writing through ``click.echo``.
    
    The target stream is resolved on every record, so the handler follows
    whatever ``sys.stdout``/``sys.stderr`` is active (e.g. under CliRunner).
    Colors are stripped automatically when the stream is not a terminal.
    """
    
    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.echo(message, err=record.levelno >= logging.ERROR)
        except Exception:
            self.handleError(record)


def setup_logging(
    log_level: str = "INFO",
    colors: bool = True,
    quiet: bool = False
) -> logging.Logger:
    """
    Configure the package logger.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        colors: Enable colored level names on the console
        quiet: Suppress all but error logs on the console
        
    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    
    logger.setLevel(logging.DEBUG)
    
    console_handler = ClickEchoHandler()
    if quiet:
        console_handler.setLevel(logging.ERROR)
    else:
        console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(ColoredFormatter(
        '[%(asctime)s] %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        use_colors=colors
    ))
    logger.addHandler(console_handler)
    
    logger.debug(f"Logging initialized - Level: {log_level}")
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class LogTimer:
    """Context manager for timing operations."""
    
    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        """
        Initialize timer.
        
        Args:
            operation: Operation description
            logger: Logger to use (defaults to the performance logger)
        """
        self.operation = operation
        self.logger = logger or get_logger('performance')
        self.start_time = None
        self.elapsed = 0.0
    
    @property
    def seconds(self) -> int:
        """Elapsed time in whole seconds."""
        return int(self.elapsed)
    
    def __enter__(self):
        """Start timing."""
        self.start_time = datetime.now()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log elapsed time."""
        if self.start_time:
            self.elapsed = (datetime.now() - self.start_time).total_seconds()
            if exc_type is None:
                self.logger.debug(f"{self.operation} completed in {self.elapsed:.2f}s")
            else:
                self.logger.error(f"{self.operation} failed after {self.elapsed:.2f}s")
