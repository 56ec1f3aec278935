import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from web.app import app

@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client

def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}

def test_declaration_preview(client):
    response = client.post('/declaration', json={'css': '.zeta {} .alpha-beta:hover {}', 'path': 'src/a.module.css'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['identifiers'] == ['zeta', 'alphaBeta']
    assert data['declaration'] == (
        "declare const styles: {\n"
        "  readonly zeta: string\n"
        "  readonly alphaBeta: string\n"
        "}\n\nexport default styles\n"
    )

def test_declaration_preview_kebab_case(client):
    response = client.post('/declaration', json={'css': '.alphaBeta {}', 'format': 'kebab-case'})
    assert response.get_json()['identifiers'] == ["'alpha-beta'"]

def test_declaration_preview_without_classes(client):
    response = client.post('/declaration', json={'css': 'div {}'})
    assert response.status_code == 200
    assert response.get_json() == {'path': 'styles.module.css', 'identifiers': [], 'declaration': None}

def test_declaration_requires_css(client):
    assert client.post('/declaration', json={}).status_code == 400
    assert client.post('/declaration', data='not json').status_code == 400

def test_declaration_unknown_format(client):
    response = client.post('/declaration', json={'css': '.a {}', 'format': 'snake_case'})
    assert response.status_code == 400
    assert 'snake_case' in response.get_json()['error']

def test_declaration_ineligible_path(client):
    response = client.post('/declaration', json={'css': '.a {}', 'path': 'global.css'})
    assert response.status_code == 422

def test_config(client):
    response = client.get('/config?format=kebab-case&hash_length=4&production=true')
    assert response.status_code == 200
    assert response.get_json() == {
        'css': {
            'modules': {'localsConvention': 'dashesOnly', 'generateScopedName': '[hash:base64:4]'},
            'postcss': {'plugins': ['postcss-typed-css-modules']},
        }
    }

def test_config_defaults(client):
    modules = client.get('/config').get_json()['css']['modules']
    assert modules == {'localsConvention': 'camelCaseOnly', 'generateScopedName': '[local]_[hash:base64:6]'}

def test_config_invalid(client):
    assert client.get('/config?hash_length=0').status_code == 400
    assert client.get('/config?format=snake_case').status_code == 400

def test_declaration_body_must_be_an_object(client):
    for body in (['x'], 'css', 42):
        response = client.post('/declaration', json=body)
        assert response.status_code == 400
        assert 'JSON object' in response.get_json()['error']
