"""
Shared fixtures: an app wired to a temporary store file and upload folder.
"""

import io
import itertools

import pytest

import models
from app import create_app
from routes import STORE_EXTENSION


@pytest.fixture
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'DATA_FILE': str(tmp_path / 'db.json'),
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'SECRET_KEY': 'test-secret',
        'API_BASE': '',
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions[STORE_EXTENSION]


@pytest.fixture
def distinct_ids(monkeypatch):
    """Sequential ids, so back-to-back creates never share a millisecond"""
    counter = itertools.count(1700000000000)
    monkeypatch.setattr(models, 'generate_candidate_id', lambda: str(next(counter)))


@pytest.fixture
def referral():
    def _referral(**overrides):
        data = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'phone': '5551234567',
            'jobTitle': 'Backend Engineer',
        }
        data.update(overrides)
        return data
    return _referral


@pytest.fixture
def upload():
    """Multipart file tuple as accepted by the Flask test client"""
    def _upload(filename='resume.pdf', content_type='application/pdf', body=b'%PDF-1.4 test'):
        return (io.BytesIO(body), filename, content_type)
    return _upload
