import json
import os
import sys

import httpx
import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(ROOT, 'common', 'layers', 'common-utils', 'python'))
sys.path.insert(0, os.path.join(ROOT, 'services', 'file-cleanup'))

from file_cleanup.config import CleanupSettings  # noqa: E402


class DummyS3:
    """In-memory stand-in for the boto3 S3 client."""

    def __init__(self, page_size=1000):
        self.objects = {}
        self.page_size = page_size
        self.deleted = []
        self.list_calls = []

    def put_object(self, Bucket, Key, Body, **kwargs):
        if isinstance(Body, str):
            Body = Body.encode('utf-8')
        self.objects[(Bucket, Key)] = Body
        return {}

    def delete_object(self, Bucket, Key):
        self.deleted.append((Bucket, Key))
        self.objects.pop((Bucket, Key), None)
        return {}

    def list_objects_v2(self, Bucket, Prefix='', ContinuationToken=None):
        self.list_calls.append({'Bucket': Bucket, 'Prefix': Prefix, 'ContinuationToken': ContinuationToken})
        keys = sorted(k for b, k in self.objects if b == Bucket and k.startswith(Prefix))
        start = int(ContinuationToken or 0)
        page = keys[start:start + self.page_size]
        resp = {'Contents': [{'Key': k, 'Size': len(self.objects[(Bucket, k)])} for k in page]}
        if start + self.page_size < len(keys):
            resp['IsTruncated'] = True
            resp['NextContinuationToken'] = str(start + self.page_size)
        return resp


@pytest.fixture
def s3_stub():
    return DummyS3()


@pytest.fixture(autouse=True)
def no_parameter_store(monkeypatch):
    monkeypatch.delenv('SSM_PARAMETER_PREFIX', raising=False)
    monkeypatch.delenv('API_TOKEN_SECRET_NAME', raising=False)
    yield


@pytest.fixture
def settings():
    return CleanupSettings(
        api_base_url='http://api.test',
        api_token='secret-token',
        bucket_name='files-bucket',
        base_path='/srv/app\\uploads\\',
        root_path='/srv/app',
        get_files_to_delete_endpoint='/files/to-delete',
        mark_file_as_deleted_endpoint='/files/mark-deleted',
        delete_s3_file_endpoint='/files/delete-s3',
    )


class FakeApi:
    """Routes requests for ``httpx.MockTransport`` and records what was sent."""

    def __init__(self, files=None, list_status=200, list_body=None):
        self.files = files or []
        self.list_status = list_status
        self.list_body = list_body
        self.delete_status = {}
        self.mark_status = {}
        self.requests = []

    def envelope(self):
        return {'results': {'Data': self.files, 'Message': 'ok', 'ResponseCode': True}}

    def __call__(self, request):
        self.requests.append(request)
        path = request.url.path
        if path.endswith('/to-delete'):
            if self.list_body is not None:
                return httpx.Response(self.list_status, content=self.list_body)
            return httpx.Response(self.list_status, json=self.envelope())
        body = json.loads(request.content)
        if path.endswith('/delete-s3'):
            return httpx.Response(self.delete_status.get(body['keyName'], 200))
        if path.endswith('/mark-deleted'):
            return httpx.Response(self.mark_status.get(body['fileToDelete'], 200))
        return httpx.Response(404)

    def bodies(self, suffix):
        return [json.loads(r.content) for r in self.requests if r.url.path.endswith(suffix)]

    @property
    def transport(self):
        return httpx.MockTransport(self)


@pytest.fixture
def fake_api():
    return FakeApi()
