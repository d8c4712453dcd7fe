import pytest

from lib.telemetry import errors as error_sink


@pytest.fixture
def reported():
    """Collect errors delivered to the error sink during a test."""

    seen = []
    error_sink.register_sink(seen.append)
    yield seen
    error_sink.clear_sinks()
