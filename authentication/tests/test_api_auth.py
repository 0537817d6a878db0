"""API tests for login, the current-user endpoint and the health check."""
import pytest
from django.core.management import call_command


@pytest.mark.django_db
def test_login_returns_tokens_and_user(api_client, user):
    r = api_client.post('/api/auth/login/', {'email': user.email, 'password': 'S3cure-pass!'}, format='json')
    assert r.status_code == 200
    body = r.json()
    assert {'access', 'refresh'} <= set(body)
    assert body['user']['email'] == user.email
    assert body['user']['full_name'] == 'Sam Waiter'


@pytest.mark.django_db
def test_login_with_wrong_password(api_client, user):
    r = api_client.post('/api/auth/login/', {'email': user.email, 'password': 'nope'}, format='json')
    assert r.status_code == 401
    assert r.json()['status'] is False


@pytest.mark.django_db
def test_current_user_requires_token(api_client, user):
    r = api_client.get('/api/user/')
    assert r.status_code == 401

    token = api_client.post(
        '/api/auth/login/', {'email': user.email, 'password': 'S3cure-pass!'}, format='json'
    ).json()['access']
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    r = api_client.get('/api/user/')
    assert r.status_code == 200
    assert r.json()['data']['id'] == user.pk


@pytest.mark.django_db
def test_health_check(api_client):
    r = api_client.get('/api/health/')
    assert r.status_code == 200
    assert r.json()['database'] == 'connected'


@pytest.mark.django_db
def test_admin_created_with_createsuperuser_can_log_in(api_client, monkeypatch):
    monkeypatch.setenv('DJANGO_SUPERUSER_PASSWORD', 'Adm1n-pass!')
    call_command(
        'createsuperuser', interactive=False,
        email='admin@example.com', first_name='Ada', last_name='Admin', verbosity=0
    )

    r = api_client.post('/api/auth/login/', {'email': 'admin@example.com', 'password': 'Adm1n-pass!'}, format='json')
    assert r.status_code == 200
    assert r.json()['user']['email'] == 'admin@example.com'
