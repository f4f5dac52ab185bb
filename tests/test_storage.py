import pytest

from swipesort.services import DatabaseStorage


def track_fields(session_id, name='song.mp3', size=5000):
    return {
        'session_id': session_id,
        'file_name': f'gen-{name}',
        'original_name': name,
        'file_size': size,
        'file_path': f'/uploads/{session_id}/gen-{name}'
    }


def test_create_session_assigns_sequential_ids(mem_storage):
    first = mem_storage.create_session('token-a', '2026-01-01T00:00:00+00:00')
    second = mem_storage.create_session('token-b')

    assert (first.id, second.id) == (1, 2)
    assert first.created_at == '2026-01-01T00:00:00+00:00'
    assert second.created_at
    assert mem_storage.get_session('token-a') is first


def test_get_session_unknown_is_none(mem_storage):
    assert mem_storage.get_session('missing') is None


def test_create_track_applies_defaults(mem_storage):
    track = mem_storage.create_track(**track_fields('s1'))

    assert track.id == 1
    assert track.duration is None
    assert track.liked is None
    assert track.processed is False


def test_track_ids_increase(mem_storage):
    ids = [mem_storage.create_track(**track_fields('s1', f'{i}.mp3')).id for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_get_tracks_by_session_filters_and_keeps_insertion_order(mem_storage):
    a = mem_storage.create_track(**track_fields('s1', 'a.mp3'))
    mem_storage.create_track(**track_fields('s2', 'other.mp3'))
    b = mem_storage.create_track(**track_fields('s1', 'b.mp3'))

    assert mem_storage.get_tracks_by_session('s1') == [a, b]
    assert mem_storage.get_tracks_by_session('nobody') == []


def test_update_track_merges_fields(mem_storage):
    track = mem_storage.create_track(**track_fields('s1'))

    updated = mem_storage.update_track(track.id, {'liked': True, 'id': 99})

    assert updated.liked is True
    assert updated.id == track.id
    assert updated.original_name == 'song.mp3'
    assert mem_storage.get_track(track.id).liked is True


def test_update_track_is_idempotent(mem_storage):
    track = mem_storage.create_track(**track_fields('s1'))
    once = mem_storage.update_track(track.id, {'liked': True}).to_dict()
    twice = mem_storage.update_track(track.id, {'liked': True}).to_dict()
    assert once == twice


def test_update_unknown_track_returns_none(mem_storage):
    assert mem_storage.update_track(42, {'liked': False}) is None


def test_delete_track(mem_storage):
    track = mem_storage.create_track(**track_fields('s1'))

    mem_storage.delete_track(track.id)
    mem_storage.delete_track(track.id)

    assert mem_storage.get_track(track.id) is None
    assert mem_storage.get_tracks_by_session('s1') == []


@pytest.fixture
def db_app(tmp_path):
    from swipesort import create_app
    return create_app('testing', {
        'UPLOADS_DIR': str(tmp_path / 'uploads'),
        'STORAGE_BACKEND': 'database',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://'
    })


def test_database_storage_round_trip(db_app):
    storage = db_app.extensions['swipesort_storage']
    assert isinstance(storage, DatabaseStorage)

    with db_app.app_context():
        session = storage.create_session('token-a')
        assert storage.get_session('token-a').id == session.id
        assert storage.get_session('missing') is None

        a = storage.create_track(**track_fields('token-a', 'a.mp3'))
        storage.create_track(**track_fields('token-b', 'x.mp3'))
        b = storage.create_track(**track_fields('token-a', 'b.mp3'))
        assert a.id < b.id
        assert a.liked is None and a.processed is False

        tracks = storage.get_tracks_by_session('token-a')
        assert [t.original_name for t in tracks] == ['a.mp3', 'b.mp3']

        updated = storage.update_track(a.id, {'liked': False})
        assert updated.liked is False
        assert storage.get_track(a.id).liked is False
        assert storage.update_track(9999, {'liked': True}) is None

        storage.delete_track(b.id)
        storage.delete_track(b.id)
        assert storage.get_track(b.id) is None
