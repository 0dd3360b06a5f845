import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from uploads import is_pdf, build_upload_name, save_resume, has_file, public_url, UploadRejected


@pytest.mark.parametrize('filename, mimetype, expected', [
    ('resume.pdf', 'application/pdf', True),
    ('resume.txt', 'text/plain', False),
    ('resume.pdf', 'text/plain', True),
    ('RESUME.PDF', 'application/octet-stream', True),
    ('resume', 'application/pdf', True),
    ('resume.pdf.exe', 'application/x-msdownload', False),
    (None, None, False),
])
def test_is_pdf(filename, mimetype, expected):
    assert is_pdf(filename, mimetype) is expected


def test_build_upload_name_replaces_whitespace():
    assert build_upload_name('my  cv\tfinal.pdf', now_ms=1700000000000) == '1700000000000-my_cv_final.pdf'


def test_build_upload_name_drops_directories():
    assert build_upload_name('../../etc/cv.pdf', now_ms=1) == '1-cv.pdf'
    assert build_upload_name('C:\\Users\\me\\my cv.pdf', now_ms=1) == '1-my_cv.pdf'


def test_build_upload_name_uses_current_time():
    prefix = build_upload_name('cv.pdf').split('-', 1)[0]
    assert prefix.isdigit() and len(prefix) >= 13


def test_save_resume_writes_file(tmp_path):
    folder = tmp_path / 'uploads'
    file = FileStorage(stream=io.BytesIO(b'%PDF-1.7'), filename='cv.pdf', content_type='application/pdf')

    stored_name = save_resume(file, str(folder))

    assert stored_name.endswith('-cv.pdf')
    assert (folder / stored_name).read_bytes() == b'%PDF-1.7'
    assert public_url(stored_name) == f'/uploads/{stored_name}'


def test_save_resume_rejects_non_pdf(tmp_path):
    file = FileStorage(stream=io.BytesIO(b'hi'), filename='cv.docx', content_type='application/msword')
    with pytest.raises(UploadRejected, match='Only PDF files are allowed!'):
        save_resume(file, str(tmp_path))
    assert os.listdir(tmp_path) == []


def test_upload_rejected_is_a_value_error():
    assert issubclass(UploadRejected, ValueError)


def test_has_file():
    assert not has_file(None)
    assert not has_file(FileStorage(stream=io.BytesIO(b''), filename=''))
    assert has_file(FileStorage(stream=io.BytesIO(b'x'), filename='cv.pdf'))
