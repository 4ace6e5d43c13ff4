import pytest
from loguru import logger


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def mixed_blocks():
    """Sizes in multiples of 8, largest side first."""
    sizes = [
        (64, 64), (64, 32), (32, 64), (56, 24), (48, 48), (40, 16), (16, 40),
        (32, 32), (32, 24), (24, 32), (24, 8), (16, 16), (16, 8), (8, 16),
        (8, 8), (8, 8),
    ]
    return sorted(sizes, key=lambda s: max(s), reverse=True)
