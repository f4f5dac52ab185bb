import io
import zipfile

import pytest

from swipesort.services import NoLikedTracks, build_archive, build_playlist
from swipesort.services.bundling import archive_name
from swipesort.utils import generate_stored_name


def add_track(mem_storage, session_id, name, data):
    file_name = generate_stored_name(name)
    path = mem_storage.files.save_file(session_id, file_name, data)
    return mem_storage.create_track(session_id=session_id, file_name=file_name,
                                    original_name=name, file_size=len(data), file_path=path)


def test_build_playlist_keeps_order(mem_storage):
    tracks = [add_track(mem_storage, 's', name, b'x') for name in ('b.mp3', 'a.mp3', 'c.mp3')]
    assert build_playlist(tracks) == 'b.mp3\na.mp3\nc.mp3'


def test_build_playlist_empty():
    assert build_playlist([]) == ''


def test_build_archive_contains_audio_and_playlist(mem_storage):
    tracks = [
        add_track(mem_storage, 's', 'one.mp3', b'first'),
        add_track(mem_storage, 's', 'two.mp3', b'second'),
    ]

    with zipfile.ZipFile(io.BytesIO(build_archive(tracks, mem_storage.files))) as zf:
        assert zf.namelist() == ['one.mp3', 'two.mp3', 'playlist.txt']
        assert zf.read('one.mp3') == b'first'
        assert zf.read('playlist.txt') == b'one.mp3\ntwo.mp3'


def test_build_archive_skips_missing_files(mem_storage):
    present = add_track(mem_storage, 's', 'present.mp3', b'here')
    gone = mem_storage.create_track(session_id='s', file_name='gone', original_name='gone.mp3',
                                    file_size=4, file_path='/nowhere/gone.mp3')

    with zipfile.ZipFile(io.BytesIO(build_archive([present, gone], mem_storage.files))) as zf:
        assert zf.namelist() == ['present.mp3', 'playlist.txt']
        assert zf.read('playlist.txt') == b'present.mp3\ngone.mp3'


def test_build_archive_empty_raises(mem_storage):
    with pytest.raises(NoLikedTracks):
        build_archive([], mem_storage.files)


def test_build_archive_flattens_entry_names(mem_storage):
    tracks = [
        add_track(mem_storage, 's', '../escape.mp3', b'up'),
        add_track(mem_storage, 's', '/abs/root.mp3', b'abs'),
        add_track(mem_storage, 's', 'C:\\music\\win.mp3', b'win'),
    ]

    with zipfile.ZipFile(io.BytesIO(build_archive(tracks, mem_storage.files))) as zf:
        assert zf.namelist() == ['escape.mp3', 'root.mp3', 'win.mp3', 'playlist.txt']
        assert zf.read('escape.mp3') == b'up'
        assert zf.read('playlist.txt') == b'../escape.mp3\n/abs/root.mp3\nC:\\music\\win.mp3'


def test_archive_name_falls_back_for_empty_names():
    assert archive_name('..') == 'track.mp3'
    assert archive_name('dir/') == 'track.mp3'
    assert archive_name('song.mp3') == 'song.mp3'
