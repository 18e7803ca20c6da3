import logging

import pytest


@pytest.fixture(autouse=True)
def reset_formschema_logger():
    """Drop handlers installed by CLI invocations so later tests don't write to closed streams."""
    yield
    logger = logging.getLogger("formschema")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
