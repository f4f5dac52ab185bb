import io

import pytest

from swipesort import create_app
from swipesort.services import FileStore, MemStorage


@pytest.fixture
def app(tmp_path):
    return create_app('testing', {'UPLOADS_DIR': str(tmp_path / 'uploads')})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return app.extensions['swipesort_storage']


@pytest.fixture
def file_store(tmp_path):
    return FileStore(tmp_path / 'store')


@pytest.fixture
def mem_storage(file_store):
    return MemStorage(file_store)


def make_session(client):
    response = client.post('/api/sessions')
    assert response.status_code == 200
    return response.get_json()['session']['sessionId']


def upload(client, session_id, *files):
    """files are (filename, content, mimetype) tuples"""
    data = {'tracks': [(io.BytesIO(content), name, mimetype) for name, content, mimetype in files]}
    return client.post(f'/api/sessions/{session_id}/tracks', data=data,
                       content_type='multipart/form-data')
