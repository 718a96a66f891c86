# tests/test_logging.py
import numpy as np
import pytest
from loguru import logger

from whisperwave import NoiseClassifier, configure_logging


@pytest.fixture
def captured():
    messages = []
    handler = configure_logging('DEBUG', sink=lambda message: messages.append(str(message)))
    yield messages
    logger.remove(handler)
    logger.disable("whisperwave")


def test_classification_is_logged(captured):
    NoiseClassifier(seed=0).classify(np.zeros(100))
    assert any('Classified noise as' in m for m in captured)


def test_silent_by_default():
    messages = []
    handler = logger.add(lambda message: messages.append(str(message)))
    try:
        NoiseClassifier(seed=0).classify(np.zeros(100))
    finally:
        logger.remove(handler)
    assert messages == []


def test_configure_keeps_application_sinks():
    app_messages = []
    first, second = [], []
    app_handler = logger.add(lambda message: app_messages.append(str(message)))
    try:
        configure_logging('DEBUG', sink=lambda message: first.append(str(message)))
        own = configure_logging('DEBUG', sink=lambda message: second.append(str(message)))
        NoiseClassifier(seed=0).classify(np.zeros(100))
        logger.remove(own)
    finally:
        logger.remove(app_handler)
        logger.disable("whisperwave")

    # Reconfiguring replaced only the earlier whisperwave sink
    assert first == []
    assert any('Classified noise as' in m for m in second)
    assert any('Classified noise as' in m for m in app_messages)
