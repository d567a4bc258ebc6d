import pytest

from textfit.measurers import FixedWidthMeasurer, Measurer


class RecordingMeasurer(Measurer):
    """Character-count measurer that remembers every call."""

    def __init__(self):
        self.calls = []

    def measure(self, text, font):
        self.calls.append((text, font))
        return float(len(text))


@pytest.fixture
def measurer():
    # width == number of characters
    return FixedWidthMeasurer()


@pytest.fixture
def recording_measurer():
    return RecordingMeasurer()


@pytest.fixture
def font():
    return "16px Test Sans"


@pytest.fixture
def missing_config(tmp_path):
    return str(tmp_path / "missing.json")
