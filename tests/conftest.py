import pytest

from tests.fakes import RecordingHandler, build_client


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def client(recorder):
    return build_client(recorder)
