import asyncio

import pytest

from ytmusic_dl.core.runner import Runner
from ytmusic_dl.exceptions import FetchError, UnrecognizedInputError
from ytmusic_dl.models.media import Playlist, Video

from .fakes import audio_stream

VIDEO_ID = "dQw4w9WgXcQ"
OTHER_VIDEO_ID = "9bZkp7q19f0"
PLAYLIST_ID = "PLQLqnnnfa_fAkUmMFw5xh8Kv0S5voEjC9"


@pytest.fixture
def runner(client, video_processor, playlist_processor):
    for video_id, title in [(VIDEO_ID, "Rick Astley - Never"), (OTHER_VIDEO_ID, "PSY - Gangnam")]:
        client.videos[video_id] = Video(id=video_id, title=title)
        client.streams[video_id] = [audio_stream(160, url=f"https://x/{video_id}")]
    client.playlists[PLAYLIST_ID] = Playlist(
        id=PLAYLIST_ID, title="Hits", video_ids=[OTHER_VIDEO_ID, VIDEO_ID]
    )
    return Runner(client, video_processor, playlist_processor)


def test_dispatches_by_identifier_kind(runner, config):
    stats = asyncio.run(
        runner.run(
            [
                f"https://youtu.be/{VIDEO_ID}",
                f"https://www.youtube.com/playlist?list={PLAYLIST_ID}",
            ]
        )
    )

    assert [o.kind for o in stats.outcomes] == ["video", "playlist"]
    assert [o.status for o in stats.outcomes] == ["done", "done"]
    assert stats.outcomes[0].detail == "Rick Astley - Never.mp3"
    assert stats.outcomes[1].detail == "2 videos"
    assert stats.videos_converted == 3
    assert stats.playlists_processed == 1
    assert not stats.aborted
    assert len(list(config.output_dir.iterdir())) == 2


def test_unrecognized_argument_aborts_remaining(runner, client):
    with pytest.raises(UnrecognizedInputError):
        asyncio.run(runner.run([VIDEO_ID, "not a video", OTHER_VIDEO_ID]))

    outcomes = runner.stats.outcomes
    assert [o.argument for o in outcomes] == [VIDEO_ID, "not a video"]
    assert [o.status for o in outcomes] == ["done", "failed"]
    assert outcomes[1].kind is None
    assert runner.stats.aborted
    assert [stream.url for stream, _ in client.downloads] == [f"https://x/{VIDEO_ID}"]


def test_pipeline_error_aborts_remaining(runner, client):
    del client.videos[OTHER_VIDEO_ID]

    with pytest.raises(FetchError):
        asyncio.run(runner.run([PLAYLIST_ID, VIDEO_ID]))

    assert len(runner.stats.outcomes) == 1
    assert runner.stats.outcomes[0].status == "failed"
    assert client.downloads == []


def test_empty_argument_list_does_nothing(runner):
    stats = asyncio.run(runner.run([]))
    assert stats.outcomes == []
    assert stats.videos_converted == 0
