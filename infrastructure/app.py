#!/usr/bin/env python3
import logging
import os
import sys

from dotenv import load_dotenv
from stacks.app_builder import build_app
from stacks.shared.context import MissingConfigurationError
from stacks.shared.log_config import setup_logging

logger = logging.getLogger(__name__)


def main(context=None):
    """
    Build and synthesize the app.

    Args:
        context: Context values for the app. When omitted, the CDK CLI's
            --context values are used.
    """
    # Load environment variables (e.g. DEBUG) from .env file
    load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env'))
    setup_logging()

    try:
        app = build_app(context)
    except MissingConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    app.synth()


if __name__ == '__main__':
    main()
