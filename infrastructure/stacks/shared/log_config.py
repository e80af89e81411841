from rich.console import Console
from rich.logging import RichHandler
from datetime import datetime
import logging
import os
import sys

# Create a Rich console specifically for output
console = Console(file=sys.stdout)


class InfrastructureFormatter(logging.Formatter):
    def format(self, record):
        # Add timestamp in a consistent format
        record.asctime = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        return super().format(record)


def setup_logging():
    """
    Configure the root logger for CDK app runs.

    Log records go to stdout through a Rich handler. The level is DEBUG when
    the DEBUG environment variable is set and INFO otherwise.
    """
    rich_handler = RichHandler(
        console=console,
        markup=True,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        show_level=False,  # Level is part of the format string
        log_time_format='[%X]'
    )
    rich_handler.setFormatter(InfrastructureFormatter('%(asctime)s [%(levelname)s] %(message)s'))

    root_logger = logging.getLogger()

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = logging.DEBUG if os.getenv('DEBUG') else logging.INFO
    root_logger.setLevel(log_level)
    root_logger.addHandler(rich_handler)

    # Disable noisy loggers
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)
    logging.getLogger('boto3').setLevel(logging.WARNING)


__all__ = ['setup_logging', 'console']
