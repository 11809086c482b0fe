import pytest

from jobfeed.models.job import JobPosting
from jobfeed.models.results import Origin, RetrievalResult


def test_from_payload_maps_wire_keys():
    job = JobPosting.from_payload({
        'id': 7,
        'title': 'Engineer',
        'company': 'Acme',
        'location': 'Remote',
        'logo': 'https://example.com/logo.png',
        'description': 'Build things',
        'requirements': 'Python',
        'apply_link': 'https://example.com/apply',
    })

    assert job.id == 7
    assert job.logo_url == 'https://example.com/logo.png'
    assert job.apply_link == 'https://example.com/apply'


def test_from_payload_tolerates_missing_fields():
    job = JobPosting.from_payload({'title': 'Engineer'})

    assert job.id is None
    assert job.company is None
    assert job.title == 'Engineer'


def test_from_payload_ignores_unknown_keys():
    job = JobPosting.from_payload({'id': 1, 'salary_from': 1000})

    assert job == JobPosting(id=1)


def test_from_payload_rejects_non_objects():
    with pytest.raises(TypeError):
        JobPosting.from_payload(['not', 'a', 'job'])


def test_posting_is_immutable():
    job = JobPosting(id=1, title='Engineer')

    with pytest.raises(AttributeError):
        job.title = 'Manager'


def test_to_payload_uses_wire_keys():
    payload = JobPosting(id=1, logo_url='x.png').to_payload()

    assert payload['logo'] == 'x.png'
    assert 'logo_url' not in payload


def test_result_flags():
    assert RetrievalResult((), Origin.FRESH).is_fresh
    assert RetrievalResult((), Origin.CACHED).is_stale
    assert RetrievalResult((), Origin.EMPTY).is_empty
    assert not RetrievalResult((), Origin.FRESH).is_stale
