import importlib.util

import file_cleanup.config as config
from file_cleanup.api_client import ApiClient
from file_cleanup.deleters import ApiDeleter
from file_cleanup.service import FileDeletionService


def load_lambda(name, path):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_lambda_runs_cleanup(monkeypatch, settings, fake_api):
    module = load_lambda('cleanup', 'services/file-cleanup/src/file_cleanup_lambda.py')
    fake_api.files = ['x.txt']

    def build(s):
        client = ApiClient(s.api_base_url, s.api_token, transport=fake_api.transport)
        return FileDeletionService(s, client, ApiDeleter(client, s.delete_s3_file_endpoint))

    monkeypatch.setattr(module, 'load_settings', lambda: settings)
    monkeypatch.setattr(module, 'build_service', build)

    result = module.lambda_handler({'source': 'aws.events'}, {})
    assert result['statusCode'] == 200
    assert result['body']['outcome'] == 'completed'
    assert result['body']['deleted'] == 1
    assert fake_api.bodies('/mark-deleted') == [{'fileToDelete': 'x.txt'}]


def test_lambda_reports_configuration_error(monkeypatch):
    for name in ('API_BASE_URL', 'API_TOKEN', 'S3_BUCKET_NAME'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, 'get_config', lambda name, **_: None)
    module = load_lambda('cleanup', 'services/file-cleanup/src/file_cleanup_lambda.py')

    result = module.lambda_handler({}, {})
    assert result['statusCode'] == 500
    assert result['body']['error'] == 'Invalid cleanup configuration'
    assert 'API_BASE_URL is missing' in result['body']['detail']
