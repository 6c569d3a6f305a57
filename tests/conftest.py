import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by cli.setup_logging between tests"""
    yield
    package_logger = logging.getLogger("qualcount")
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
