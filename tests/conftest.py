"""Shared fixtures: a mocked UDP socket and a clean root logger."""

import logging
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def reset_root_logger():
    """The manager attaches handlers to the root logger, drop them after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()

    root.setLevel(level)


@pytest.fixture
def mock_socket():
    """Patch socket.socket and return the socket object used inside the `with` block."""
    with patch("lanwake.libraries.transmitter.socket.socket") as mock_socket_cls:
        sock = MagicMock()
        sock.sendto.side_effect = lambda payload, addr: len(payload)

        mock_socket_cls.return_value.__enter__.return_value = sock
        mock_socket_cls.return_value.__exit__.return_value = False

        sock.socket_cls = mock_socket_cls
        yield sock
