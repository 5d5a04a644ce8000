import asyncio

import pytest

from ytmusic_dl.core.playlist_processor import PlaylistProcessor
from ytmusic_dl.exceptions import FetchError
from ytmusic_dl.models.media import Playlist, Video

from .fakes import audio_stream

PLAYLIST_ID = "PLQLqnnnfa_fAkUmMFw5xh8Kv0S5voEjC9"
VIDEO_IDS = ["aaaaaaaaaaa", "bbbbbbbbbbb", "ccccccccccc"]


def _add_playlist(client, video_ids=VIDEO_IDS, missing=()):
    client.playlists[PLAYLIST_ID] = Playlist(
        id=PLAYLIST_ID, title="Mix", video_ids=list(video_ids)
    )
    for video_id in video_ids:
        if video_id in missing:
            continue
        client.videos[video_id] = Video(id=video_id, title=f"Band - Song {video_id}")
        client.streams[video_id] = [audio_stream(128, url=f"https://x/{video_id}")]


class RecordingProcessor:
    def __init__(self, stats):
        self.stats = stats
        self.calls = []

    async def process(self, video_id):
        self.calls.append(video_id)
        return video_id


def test_each_video_processed_once_in_order(client, stats):
    _add_playlist(client)
    recorder = RecordingProcessor(stats)
    processor = PlaylistProcessor(client, recorder)

    results = asyncio.run(processor.process(PLAYLIST_ID))

    assert recorder.calls == VIDEO_IDS
    assert [video_id for video_id, _ in results] == VIDEO_IDS
    assert stats.playlists_processed == 1


def test_playlist_produces_files(playlist_processor, client, config):
    _add_playlist(client)
    results = asyncio.run(playlist_processor.process(PLAYLIST_ID))

    assert len(results) == 3
    assert sorted(p.name for p in config.output_dir.iterdir()) == [
        f"Band - Song {video_id}.mp3" for video_id in VIDEO_IDS
    ]


def test_fail_fast_stops_at_first_failure(playlist_processor, client):
    _add_playlist(client, missing={"bbbbbbbbbbb"})

    with pytest.raises(FetchError):
        asyncio.run(playlist_processor.process(PLAYLIST_ID))

    assert [stream.url for stream, _ in client.downloads] == ["https://x/aaaaaaaaaaa"]


def test_without_fail_fast_failures_become_results(client, video_processor):
    _add_playlist(client, missing={"bbbbbbbbbbb"})
    processor = PlaylistProcessor(client, video_processor, fail_fast=False)

    results = asyncio.run(processor.process(PLAYLIST_ID))

    assert [video_id for video_id, _ in results] == VIDEO_IDS
    assert isinstance(results[1][1], FetchError)
    assert results[2][1].name == "Band - Song ccccccccccc.mp3"


def test_unknown_playlist_is_fetch_error(playlist_processor):
    with pytest.raises(FetchError):
        asyncio.run(playlist_processor.process(PLAYLIST_ID))
