import pytest

from feedback.app import create_app

from conftest import BrokenHistory, FakeCache


def test_index_serves_page(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.content_type == 'text/html; charset=utf-8'
    body = response.get_data(as_text=True)
    assert 'fetch("/summarize"' in body
    assert '<textarea id="feedback"' in body


def test_history_empty(client):
    response = client.get('/history')
    assert response.status_code == 200
    assert response.get_json() == []


def test_history_lists_summaries(client):
    client.post('/summarize', json={'feedback': 'Slow dashboard'})

    rows = client.get('/history').get_json()
    assert len(rows) == 1
    assert set(rows[0]) == {'id', 'feedback', 'summary', 'created_at'}
    assert rows[0]['feedback'] == 'Slow dashboard'


def test_history_failure_propagates(inference):
    app = create_app(inference=inference, cache=FakeCache(), history=BrokenHistory())
    app.config['TESTING'] = True

    with pytest.raises(RuntimeError):
        app.test_client().get('/history')


def test_feedback_analyzer_returns_raw_payload(client, inference):
    response = client.get('/feedback-analyzer')

    assert response.status_code == 200
    assert response.get_json() == {'response': '- Dashboard is slow'}
    model, inputs = inference.calls[0]
    assert inputs == {'prompt': 'What is the origin of the phrase Hello, World?'}


def test_feedback_analyzer_does_not_touch_cache_or_history(client, cache, history):
    client.get('/feedback-analyzer')
    assert cache.entries == {}
    assert history.list_recent() == []


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


@pytest.mark.parametrize('method, path', [
    ('GET', '/unknown-path'),
    ('POST', '/'),
    ('GET', '/summarize'),
    ('POST', '/history'),
    ('DELETE', '/feedback-analyzer'),
    ('PUT', '/nowhere'),
    ('HEAD', '/'),
    ('OPTIONS', '/'),
    ('OPTIONS', '/summarize'),
    ('HEAD', '/history'),
])
def test_unmatched_routes_return_not_found(client, method, path):
    response = client.open(path, method=method)
    assert response.status_code == 404
    assert response.content_type.startswith('text/plain')
    # HEAD responses carry no body
    if method != 'HEAD':
        assert response.get_data(as_text=True) == 'Not found'


def test_head_history_does_not_query_store(inference):
    app = create_app(inference=inference, cache=FakeCache(), history=BrokenHistory())
    app.config['TESTING'] = True

    response = app.test_client().open('/history', method='HEAD')

    assert response.status_code == 404
