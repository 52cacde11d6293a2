import logging
import os
import sys
from typing import Optional
from docker_autostart.utils.constants import LOGGER_NAME, DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, ENV_LOG_FILE

def _level_from_env() -> int:
    """Resolve the log level from the environment, falling back to the default."""
    env_level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, env_level, None)
    if not isinstance(level, int):
        return logging.INFO
    return level

def setup_logger(name: str, level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with consistent formatting and configuration.
    
    Args:
        name: Name of the logger
        level: Optional logging level. Defaults to the environment setting, then INFO.
        log_file: Optional path to log file. If not specified, logs only to stderr
                  unless DOCKER_AUTOSTART_LOG_FILE is set.
    
    Returns:
        logging.Logger: Configured logger instance
    """
    if log_file is None:
        log_file = os.environ.get(ENV_LOG_FILE)

    logger = logging.getLogger(name)
    
    if level is None:
        level = _level_from_env()
    
    logger.setLevel(level)
    
    # Clear existing handlers
    logger.handlers = []
    
    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    
    # Console handler on stderr, stdout belongs to the forwarded docker command
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)
            
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger

def verbosity_level(verbose: bool, quiet: bool) -> int:
    """Map the -v/-q flags onto a log level. Verbose wins when both are set."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO

# Create default logger for the application
logger = setup_logger(LOGGER_NAME)
