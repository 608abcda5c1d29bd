"""
Tests for the HTTP API
"""

import json

import pytest

import config


def test_index_reports_app_info(client):
    response = client.get('/')
    assert response.status_code == 200
    body = response.get_json()
    assert body['name'] == config.APP_NAME
    assert body['version'] == config.APP_VERSION
    assert body['validation_policy'] == 'enforce'


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_unknown_route_is_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_wrong_method_is_json_405(client):
    response = client.get('/api/simple-interest')
    assert response.status_code == 405
    assert 'error' in response.get_json()


class TestSimpleInterestEndpoint:
    def test_calculation(self, client):
        response = client.post('/api/simple-interest', json={'principal': '1000', 'rate': '10', 'time': '2'})
        assert response.status_code == 200
        assert response.get_json() == {'interest': 200.0, 'total': 1200.0}

    def test_accepts_json_numbers(self, client):
        response = client.post('/api/simple-interest', json={'principal': 1000, 'rate': 10, 'time': 2})
        assert response.get_json() == {'interest': 200.0, 'total': 1200.0}

    def test_blank_fields_are_rejected(self, client):
        response = client.post('/api/simple-interest', json={'principal': '', 'rate': '10'})
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Missing required fields', 'fields': ['principal', 'time']}

    def test_non_numeric_text_counts_as_zero(self, client):
        response = client.post('/api/simple-interest', json={'principal': '1000', 'rate': 'ten', 'time': '2'})
        assert response.status_code == 200
        assert response.get_json() == {'interest': 0.0, 'total': 1000.0}

    def test_blank_fields_allowed_when_validation_disabled(self, lenient_client):
        response = lenient_client.post('/api/simple-interest', json={'principal': '1000'})
        assert response.status_code == 200
        assert response.get_json() == {'interest': 0.0, 'total': 1000.0}

    @pytest.mark.parametrize("payload", [[1, 2, 3], "1000", None])
    def test_body_must_be_an_object(self, client, payload):
        response = client.post('/api/simple-interest', json=payload)
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Request body must be a JSON object'}

    def test_invalid_json(self, client):
        response = client.post('/api/simple-interest', data='{not json', content_type='application/json')
        assert response.status_code == 400


class TestCompoundInterestEndpoint:
    def test_calculation(self, client):
        response = client.post('/api/compound-interest',
                               json={'principal': '1000', 'rate': '5', 'time': '2', 'frequency': '1'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['total'] == pytest.approx(1102.5)
        assert body['interest'] == pytest.approx(102.5)
        assert body['frequency'] == 1

    @pytest.mark.parametrize("frequency", ['0', '-12', 'monthly', 0, 2.5, '3000000000', '1' + '0' * 400, 10 ** 400])
    def test_invalid_frequency_uses_annual(self, client, frequency):
        response = client.post('/api/compound-interest',
                               json={'principal': 1000, 'rate': 5, 'time': 2, 'frequency': frequency})
        body = response.get_json()
        assert response.status_code == 200
        assert body['frequency'] == 1
        assert body['total'] == pytest.approx(1102.5)

    def test_numeric_frequency(self, client):
        response = client.post('/api/compound-interest',
                               json={'principal': 10000, 'rate': 8, 'time': 1, 'frequency': 4.0})
        body = response.get_json()
        assert body['frequency'] == 4
        assert body['total'] == pytest.approx(10000 * 1.02 ** 4)

    def test_missing_frequency_is_rejected(self, client):
        response = client.post('/api/compound-interest', json={'principal': 1000, 'rate': 5, 'time': 2})
        assert response.status_code == 400
        assert response.get_json()['fields'] == ['frequency']

    def test_missing_frequency_allowed_when_validation_disabled(self, lenient_client):
        response = lenient_client.post('/api/compound-interest', json={'principal': 1000, 'rate': 5, 'time': 2})
        body = response.get_json()
        assert response.status_code == 200
        assert body['frequency'] == 1

    def test_zero_time(self, client):
        response = client.post('/api/compound-interest',
                               json={'principal': 1000, 'rate': 40, 'time': 0, 'frequency': 12})
        assert response.get_json()['interest'] == 0


class TestValidateEndpoint:
    def test_reports_blank_fields(self, client):
        response = client.post('/api/validate', json={'fields': {'principal': '', 'time': '1', 'rate': '2'}})
        assert response.status_code == 200
        assert response.get_json() == {'invalid': ['principal']}

    def test_ignores_policy(self, lenient_client):
        response = lenient_client.post('/api/validate', json={'fields': {'rate': ' ', 'time': None}})
        assert response.get_json() == {'invalid': ['rate', 'time']}

    def test_fields_must_be_an_object(self, client):
        response = client.post('/api/validate', json={'fields': ['principal']})
        assert response.status_code == 400
        assert 'fields' in response.get_json()['error']


def _strict_json(response):
    """Decode a response body, refusing NaN and Infinity tokens"""
    def reject(token):
        raise ValueError(f"non-standard JSON constant {token}")

    return json.loads(response.get_data(as_text=True), parse_constant=reject)


class TestNonFiniteResults:
    def test_huge_principal_is_not_a_server_error(self, client):
        response = client.post('/api/simple-interest', json={'principal': 10 ** 400, 'rate': 5, 'time': 2})
        assert response.status_code == 200
        assert _strict_json(response) == {'interest': None, 'total': None}

    def test_undefined_compound_result_is_null(self, client):
        response = client.post('/api/compound-interest',
                               json={'principal': 1000, 'rate': -300, 'time': 0.5, 'frequency': 1})
        assert response.status_code == 200
        assert _strict_json(response) == {'interest': None, 'total': None, 'frequency': 1}

    def test_overflowing_compound_result_is_null(self, client):
        response = client.post('/api/compound-interest',
                               json={'principal': 1000, 'rate': 100, 'time': 10000, 'frequency': 1})
        body = _strict_json(response)
        assert body['total'] is None
        assert body['interest'] is None

    def test_finite_results_are_unchanged(self, client):
        response = client.post('/api/simple-interest', json={'principal': 1000, 'rate': 10, 'time': 2})
        assert _strict_json(response) == {'interest': 200.0, 'total': 1200.0}


def test_unexpected_errors_return_json_500(app, monkeypatch):
    import app as app_module

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(app_module, 'compute', boom)
    response = app.test_client().post('/api/simple-interest', json={'principal': 1, 'rate': 1, 'time': 1})
    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}
