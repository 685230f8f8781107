import logging

import pytest


@pytest.fixture(autouse=True)
def reset_filescope_logger():
    """Undo handler setup done by CLI runs so caplog sees library records."""
    yield
    logger = logging.getLogger("filescope")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
