"""
Object storage adapters: provider calls and error mapping.

SDK clients are replaced by duck-typed fakes or unittest.mock objects so no
network or credentials are needed.
"""
from __future__ import annotations

import re
from unittest.mock import MagicMock

import httplib2
import pytest
from botocore.exceptions import ClientError
from googleapiclient.errors import HttpError

from backend.storage.google_drive import GoogleDriveStorageAdapter
from backend.storage.keys import make_image_key
from backend.storage.ports import NullObjectStorage
from backend.storage.spaces import SpacesStorageAdapter
from backend.storage.storage_supabase import SupabaseStorageAdapter
from backend.wall.errors import UploadError

KEY_RE = re.compile(r"^[0-9a-f]{32}\.[a-z0-9]+$")


# --- keys ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "filename,ext",
    [
        ("photo.PNG", "png"),
        ("../../etc/passwd.jpeg", "jpeg"),
        ("no_extension", "jpg"),
        (None, "jpg"),
        ("weird.p-n_g", "png"),
    ],
)
def test_make_image_key_sanitizes_extension(filename, ext):
    key = make_image_key(filename=filename)
    assert KEY_RE.match(key)
    assert key.endswith(f".{ext}")


def test_make_image_key_uses_given_hex():
    assert make_image_key(filename="a.gif", uuid_hex="abc") == "abc.gif"


# --- null ---------------------------------------------------------------------


def test_null_storage_raises_not_configured():
    with pytest.raises(UploadError) as exc:
        NullObjectStorage().store(body=b"x", content_type="image/png", suggested_name="a.png")
    assert str(exc.value) == "storage_adapter_not_configured"


# --- spaces -------------------------------------------------------------------


def _spaces(client) -> SpacesStorageAdapter:
    return SpacesStorageAdapter(
        endpoint="https://sgp1.digitaloceanspaces.com/",
        bucket="wall",
        region="sgp1",
        access_key="k",
        secret_key="s",
        client=client,
    )


def test_spaces_put_object_public_read_and_url():
    client = MagicMock()
    url = _spaces(client).store(body=b"img", content_type="image/png", suggested_name="cat.png")

    kwargs = client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "wall"
    assert kwargs["Body"] == b"img"
    assert kwargs["ContentType"] == "image/png"
    assert kwargs["ACL"] == "public-read"
    assert KEY_RE.match(kwargs["Key"]) and kwargs["Key"].endswith(".png")
    assert url == f"https://sgp1.digitaloceanspaces.com/wall/{kwargs['Key']}"


def test_spaces_client_error_maps_to_upload_error():
    client = MagicMock()
    client.put_object.side_effect = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
    with pytest.raises(UploadError):
        _spaces(client).store(body=b"img", content_type="image/png", suggested_name="cat.png")


def test_spaces_malformed_endpoint_maps_to_upload_error():
    # No scheme: botocore rejects it while building the client.
    adapter = SpacesStorageAdapter(
        endpoint="sgp1.digitaloceanspaces.com",
        bucket="wall",
        region="sgp1",
        access_key="k",
        secret_key="s",
    )
    with pytest.raises(UploadError):
        adapter.store(body=b"img", content_type="image/png", suggested_name="cat.png")


# --- google drive ---------------------------------------------------------------


def _drive_service(file_id="file-123"):
    service = MagicMock()
    service.files.return_value.create.return_value.execute.return_value = {"id": file_id} if file_id else {}
    return service


def test_drive_uploads_into_folder_and_shares_publicly():
    service = _drive_service()
    adapter = GoogleDriveStorageAdapter(folder_id="folder-1", service_account_file="sa.json", service=service)
    url = adapter.store(body=b"img", content_type="image/jpeg", suggested_name="me.jpg")

    create_kwargs = service.files.return_value.create.call_args.kwargs
    assert create_kwargs["body"]["parents"] == ["folder-1"]
    assert create_kwargs["body"]["name"].endswith(".jpg")
    assert create_kwargs["fields"] == "id"
    perm_kwargs = service.permissions.return_value.create.call_args.kwargs
    assert perm_kwargs == {"fileId": "file-123", "body": {"role": "reader", "type": "anyone"}}
    assert url == "https://drive.google.com/uc?export=view&id=file-123"


def test_drive_http_error_maps_to_upload_error():
    service = _drive_service()
    resp = MagicMock(status=403, reason="Forbidden")
    service.files.return_value.create.return_value.execute.side_effect = HttpError(resp, b"{}")
    adapter = GoogleDriveStorageAdapter(folder_id="f", service_account_file="sa.json", service=service)
    with pytest.raises(UploadError):
        adapter.store(body=b"img", content_type="image/png", suggested_name="a.png")


def test_drive_missing_file_id_is_an_upload_error():
    adapter = GoogleDriveStorageAdapter(folder_id="f", service_account_file="sa.json", service=_drive_service(None))
    with pytest.raises(UploadError):
        adapter.store(body=b"img", content_type="image/png", suggested_name="a.png")


def test_drive_connection_error_maps_to_upload_error():
    service = _drive_service()
    service.files.return_value.create.return_value.execute.side_effect = httplib2.ServerNotFoundError(
        "Unable to find the server at www.googleapis.com"
    )
    adapter = GoogleDriveStorageAdapter(folder_id="f", service_account_file="sa.json", service=service)
    with pytest.raises(UploadError) as exc:
        adapter.store(body=b"img", content_type="image/png", suggested_name="a.png")
    assert "Unable to find the server" in str(exc.value)


def test_drive_malformed_service_account_file_maps_to_upload_error(tmp_path):
    key_file = tmp_path / "sa.json"
    key_file.write_text("{}")
    adapter = GoogleDriveStorageAdapter(folder_id="f", service_account_file=str(key_file))
    with pytest.raises(UploadError):
        adapter.store(body=b"img", content_type="image/png", suggested_name="a.png")


# --- supabase -------------------------------------------------------------------


class _FakeBucket:
    def __init__(self, public_url_result=None, fail_upload: bool = False) -> None:
        self.uploads: list[tuple] = []
        self.public_url_result = public_url_result
        self.fail_upload = fail_upload

    def upload(self, path, file, file_options=None):
        if self.fail_upload:
            raise RuntimeError("413 payload too large")
        self.uploads.append((path, file, file_options))
        return {"Key": path}

    def get_public_url(self, path):
        if self.public_url_result is not None:
            return self.public_url_result
        return f"https://proj.supabase.co/storage/v1/object/public/wall/{path}?"


class _FakeStorage:
    def __init__(self, bucket: _FakeBucket) -> None:
        self.bucket = bucket
        self.requested: list[str] = []

    def from_(self, name: str):
        self.requested.append(name)
        return self.bucket


class _FakeClient:
    def __init__(self, bucket: _FakeBucket) -> None:
        self.storage = _FakeStorage(bucket)


def test_supabase_uploads_and_returns_public_url():
    bucket = _FakeBucket()
    client = _FakeClient(bucket)
    url = SupabaseStorageAdapter(client, bucket="wall").store(body=b"img", content_type="image/webp", suggested_name="x.webp")

    path, body, opts = bucket.uploads[0]
    assert client.storage.requested == ["wall"]
    assert body == b"img"
    assert opts["content-type"] == "image/webp"
    assert url == f"https://proj.supabase.co/storage/v1/object/public/wall/{path}"


def test_supabase_accepts_dict_public_url_shape():
    bucket = _FakeBucket(public_url_result={"data": {"publicUrl": "https://cdn/x.png"}})
    url = SupabaseStorageAdapter(_FakeClient(bucket), bucket="wall").store(body=b"i", content_type="image/png", suggested_name="x.png")
    assert url == "https://cdn/x.png"


def test_supabase_upload_failure_maps_to_upload_error():
    bucket = _FakeBucket(fail_upload=True)
    with pytest.raises(UploadError):
        SupabaseStorageAdapter(_FakeClient(bucket), bucket="wall").store(body=b"i", content_type="image/png", suggested_name="x.png")


def test_supabase_invalid_client_is_rejected():
    with pytest.raises(UploadError) as exc:
        SupabaseStorageAdapter(object(), bucket="wall").store(body=b"i", content_type="image/png", suggested_name="x.png")
    assert str(exc.value) == "invalid_supabase_client"
