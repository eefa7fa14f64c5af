"""Unit tests for the storage service"""

import re
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from portfolio_cms.config import settings
from portfolio_cms.services.storage_service import (
    FileTooLargeError,
    InvalidFileTypeError,
    StorageConnectionError,
    StorageService,
)

PROJECT_ID = "550e8400-e29b-41d4-a716-446655440000"


class TestStorageValidation:
    """Test file validation"""

    def test_validate_image_success(self, storage):
        # Should not raise exception
        storage.validate_file(1024 * 100, "image/jpeg")
        storage.validate_file(1024 * 100, "image/webp")

    def test_validate_image_too_large(self, storage):
        with pytest.raises(FileTooLargeError, match="exceeds maximum"):
            storage.validate_file(settings.max_image_size_bytes + 1, "image/jpeg")

    def test_validate_empty_file(self, storage):
        with pytest.raises(FileTooLargeError, match="empty"):
            storage.validate_file(0, "image/png")

    def test_validate_invalid_mime_type(self, storage):
        with pytest.raises(InvalidFileTypeError, match="not allowed"):
            storage.validate_file(1024, "image/gif")

        with pytest.raises(InvalidFileTypeError, match="not allowed"):
            storage.validate_file(1024, "video/mp4")

    def test_validate_video(self, storage):
        storage.validate_file(50 * 1024 * 1024, "video/mp4", kind="video")

        with pytest.raises(InvalidFileTypeError):
            storage.validate_file(1024, "image/jpeg", kind="video")


class TestStoragePaths:
    """Test object path generation and URL mapping"""

    def test_build_path_format(self, storage):
        path = storage.build_path(PROJECT_ID, "gallery", "Cozinha Final.JPG")

        assert re.fullmatch(rf"{PROJECT_ID}/gallery/[0-9a-f-]{{36}}\.jpg", path)

    def test_build_path_guesses_extension(self, storage):
        path = storage.build_path(PROJECT_ID, "videos", "blob", "video/mp4")

        assert path.startswith(f"{PROJECT_ID}/videos/")
        assert path.endswith(".mp4")

    def test_build_path_is_unique(self, storage):
        assert storage.build_path(PROJECT_ID, "cover", "a.png") != storage.build_path(PROJECT_ID, "cover", "a.png")

    def test_public_url_default(self, storage):
        url = storage.get_public_url(f"{PROJECT_ID}/after/x.jpg")

        assert url == f"https://projects.s3.us-east-1.amazonaws.com/{PROJECT_ID}/after/x.jpg"

    def test_public_url_with_cdn(self, storage):
        with patch.object(settings, "storage_public_base_url", "https://cdn.galreforms.com/"):
            url = storage.get_public_url("p/gallery/x.jpg")
            assert url == "https://cdn.galreforms.com/p/gallery/x.jpg"
            assert storage.path_from_url(url) == "p/gallery/x.jpg"

    def test_public_url_with_local_endpoint(self, storage):
        with patch.object(settings, "aws_endpoint_url", "http://localhost:9000"):
            url = storage.get_public_url("p/before/x.jpg")
            assert url == "http://localhost:9000/projects/p/before/x.jpg"
            assert storage.path_from_url(url) == "p/before/x.jpg"

    def test_path_from_url_round_trip(self, storage):
        path = f"{PROJECT_ID}/before/x.jpg"

        assert storage.path_from_url(storage.get_public_url(path)) == path

    def test_path_from_path_style_url(self, storage):
        url = "https://s3.us-east-1.amazonaws.com/projects/p/gallery/x.jpg"

        assert storage.path_from_url(url) == "p/gallery/x.jpg"

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/embed/abc",
            "https://images.unsplash.com/photo-1?w=1200",
            "https://other-bucket.s3.us-east-1.amazonaws.com/p/x.jpg",
            "",
            None,
        ],
    )
    def test_path_from_foreign_url(self, storage, url):
        assert storage.path_from_url(url) is None


class TestStorageOperations:
    """Test upload and removal against the mocked client"""

    def test_upload_success(self, storage, mock_s3_client):
        result = storage.upload("p/gallery/x.jpg", b"jpeg-bytes", "image/jpeg")

        mock_s3_client.put_object.assert_called_once_with(
            Bucket="projects",
            Key="p/gallery/x.jpg",
            Body=b"jpeg-bytes",
            ContentType="image/jpeg",
        )
        assert result == {
            "path": "p/gallery/x.jpg",
            "public_url": "https://projects.s3.us-east-1.amazonaws.com/p/gallery/x.jpg",
        }

    def test_upload_client_error(self, storage, mock_s3_client):
        mock_s3_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
        )

        with pytest.raises(StorageConnectionError, match="AccessDenied"):
            storage.upload("p/gallery/x.jpg", b"data", "image/jpeg")

    def test_remove(self, storage, mock_s3_client):
        deleted = storage.remove(["p/a.jpg", "p/b.jpg"])

        assert deleted == ["p/a.jpg", "p/b.jpg"]
        kwargs = mock_s3_client.delete_objects.call_args.kwargs
        assert kwargs["Delete"]["Objects"] == [{"Key": "p/a.jpg"}, {"Key": "p/b.jpg"}]

    def test_remove_nothing(self, storage, mock_s3_client):
        assert storage.remove([]) == []
        mock_s3_client.delete_objects.assert_not_called()

    def test_remove_reports_per_object_errors(self, storage, mock_s3_client):
        mock_s3_client.delete_objects.side_effect = None
        mock_s3_client.delete_objects.return_value = {
            "Deleted": [],
            "Errors": [{"Key": "p/a.jpg", "Code": "AccessDenied"}],
        }

        with pytest.raises(StorageConnectionError, match="p/a.jpg"):
            storage.remove(["p/a.jpg"])

    def test_remove_quietly_swallows_failures(self, storage, mock_s3_client):
        mock_s3_client.delete_objects.side_effect = ClientError(
            {"Error": {"Code": "InternalError", "Message": "boom"}}, "DeleteObjects"
        )

        assert storage.remove_quietly(storage.get_public_url("p/a.jpg")) is False

    def test_remove_quietly_success(self, storage, mock_s3_client):
        assert storage.remove_quietly(storage.get_public_url("p/a.jpg")) is True

    def test_remove_quietly_ignores_external_urls(self, storage, mock_s3_client):
        assert storage.remove_quietly("https://www.youtube.com/embed/abc") is False
        mock_s3_client.delete_objects.assert_not_called()

    def test_client_init_failure(self):
        with patch("boto3.client", side_effect=ValueError("bad region")):
            with pytest.raises(StorageConnectionError, match="initialize"):
                StorageService()
