import pytest

from ytmusic_dl.core.playlist_processor import PlaylistProcessor
from ytmusic_dl.core.video_processor import VideoProcessor
from ytmusic_dl.models.config import DownloadConfig
from ytmusic_dl.models.stats import RunStats

from .fakes import FakeClient, FakeTagger, FakeTranscoder


@pytest.fixture
def config(tmp_path):
    return DownloadConfig.for_directory(tmp_path)


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def transcoder():
    return FakeTranscoder()


@pytest.fixture
def tagger():
    return FakeTagger()


@pytest.fixture
def stats():
    return RunStats()


@pytest.fixture
def video_processor(config, client, transcoder, tagger, stats):
    return VideoProcessor(config, client, transcoder, tagger, stats)


@pytest.fixture
def playlist_processor(client, video_processor):
    return PlaylistProcessor(client, video_processor)
