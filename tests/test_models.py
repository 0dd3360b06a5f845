from models import Candidate, CandidateStatus, generate_candidate_id


def test_generate_candidate_id_is_millisecond_timestamp():
    assert generate_candidate_id(1700000000123) == '1700000000123'
    assert len(generate_candidate_id()) >= 13


def test_create_defaults_to_pending_without_resume():
    candidate = Candidate.create('Ada', 'ada@example.com', '5551234567', 'QA')
    assert candidate.status == CandidateStatus.PENDING.value == 'Pending'
    assert candidate.resumeUrl is None
    assert candidate.id.isdigit()


def test_to_dict_field_order():
    candidate = Candidate.create('Ada', 'ada@example.com', '5551234567', 'QA', resume_url='/uploads/1-cv.pdf')
    assert list(candidate.to_dict()) == ['id', 'name', 'email', 'phone', 'jobTitle', 'resumeUrl', 'status']


def test_from_dict_round_trips_unknown_keys():
    record = {'id': '1', 'name': 'Ada', 'email': 'a@b.co', 'phone': '5551234567',
              'jobTitle': 'QA', 'resumeUrl': None, 'status': 'Whatever', 'note': 'x'}
    candidate = Candidate.from_dict(record)
    assert candidate.status == 'Whatever'
    assert candidate.extra == {'note': 'x'}
    assert candidate.to_dict() == record


def test_from_dict_keeps_record_as_stored():
    candidate = Candidate.from_dict({'id': 42, 'name': 'Ada'})
    assert candidate.id == 42
    assert candidate.to_dict() == {'id': 42, 'name': 'Ada'}


def test_set_status_restores_missing_key():
    candidate = Candidate.from_dict({'id': '1'})
    candidate.set_status('Hired')
    assert candidate.to_dict() == {'id': '1', 'status': 'Hired'}
