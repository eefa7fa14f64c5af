"""Object storage service for project media (S3-compatible bucket)"""

import logging
import mimetypes
from typing import Dict, List, Optional
from urllib.parse import urlparse
from uuid import uuid4

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from portfolio_cms.config import settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for storage errors"""
    pass


class StorageConnectionError(StorageError):
    """Storage backend unreachable or rejected the request"""
    pass


class InvalidFileTypeError(StorageError):
    """Invalid file type error"""
    pass


class FileTooLargeError(StorageError):
    """File too large error"""
    pass


class StorageService:
    """Upload, public URL and removal operations on the media bucket"""

    def __init__(self):
        """Initialize S3 client with retry configuration"""
        retry_config = Config(
            retries={
                "max_attempts": 3,
                "mode": "standard",
            },
            connect_timeout=5,
            read_timeout=30,
        )

        client_kwargs = {
            "region_name": settings.aws_region,
            "config": retry_config,
        }

        # Add credentials if provided (not needed for IAM roles)
        if settings.aws_access_key_id and settings.aws_secret_access_key:
            client_kwargs["aws_access_key_id"] = settings.aws_access_key_id
            client_kwargs["aws_secret_access_key"] = settings.aws_secret_access_key

        # Use custom endpoint for local development (MinIO)
        if settings.aws_endpoint_url:
            client_kwargs["endpoint_url"] = settings.aws_endpoint_url

        self.bucket = settings.storage_bucket

        try:
            self.s3_client = boto3.client("s3", **client_kwargs)
            logger.info(f"Storage client initialized for bucket: {self.bucket}")
        except Exception as e:
            logger.error(f"Failed to initialize storage client: {e}")
            raise StorageConnectionError(f"Failed to initialize storage client: {e}")

    @staticmethod
    def validate_file(file_size: int, mime_type: str, kind: str = "image") -> None:
        """
        Validate file size and MIME type for an image or video upload.

        Raises:
            FileTooLargeError: If the file is empty or exceeds the limit
            InvalidFileTypeError: If the MIME type is not allowed
        """
        if kind == "video":
            max_size = settings.max_video_size_bytes
            allowed = settings.allowed_video_types_set
        else:
            max_size = settings.max_image_size_bytes
            allowed = settings.allowed_image_types_set

        if file_size <= 0:
            raise FileTooLargeError("File is empty")

        if file_size > max_size:
            raise FileTooLargeError(
                f"File size {file_size} bytes exceeds maximum of {max_size} bytes"
            )

        if mime_type not in allowed:
            raise InvalidFileTypeError(
                f"MIME type {mime_type} not allowed. Allowed types: {sorted(allowed)}"
            )

    @staticmethod
    def build_path(project_id: str, folder: str, file_name: str, mime_type: Optional[str] = None) -> str:
        """
        Generate an object path following the structure:
        {project_id}/{folder}/{random uuid}.{extension}

        folder is the image type (gallery/before/after), "videos" or "cover".
        """
        extension = ""
        if file_name and "." in file_name:
            extension = file_name.rsplit(".", 1)[-1].lower()
        elif mime_type:
            guessed = mimetypes.guess_extension(mime_type) or ""
            extension = guessed.lstrip(".")

        name = str(uuid4())
        if extension:
            name = f"{name}.{extension}"
        return f"{project_id}/{folder}/{name}"

    def get_public_url(self, path: str) -> str:
        """Public URL of an object in the media bucket"""
        if settings.storage_public_base_url:
            return f"{settings.storage_public_base_url.rstrip('/')}/{path}"
        if settings.aws_endpoint_url:
            # For local development with MinIO
            return f"{settings.aws_endpoint_url}/{self.bucket}/{path}"
        return f"https://{self.bucket}.s3.{settings.aws_region}.amazonaws.com/{path}"

    def path_from_url(self, url: str) -> Optional[str]:
        """
        Recover the object path from a public URL produced by get_public_url.

        Returns:
            Object path, or None when the URL does not point into this bucket
            (external links, YouTube embeds and so on)
        """
        if not url:
            return None

        candidates = []
        if settings.storage_public_base_url:
            candidates.append(settings.storage_public_base_url.rstrip("/") + "/")
        if settings.aws_endpoint_url:
            candidates.append(f"{settings.aws_endpoint_url}/{self.bucket}/")
        candidates.append(f"https://{self.bucket}.s3.{settings.aws_region}.amazonaws.com/")

        for prefix in candidates:
            if url.startswith(prefix):
                return url[len(prefix):] or None

        # Path-style AWS URL: https://s3.<region>.amazonaws.com/<bucket>/<path>
        parsed = urlparse(url)
        if parsed.netloc.endswith("amazonaws.com") and parsed.path.startswith(f"/{self.bucket}/"):
            return parsed.path[len(self.bucket) + 2:] or None

        return None

    def upload(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> Dict[str, str]:
        """
        Upload bytes to the media bucket.

        Returns:
            Dict with the object "path" and its "public_url"

        Raises:
            StorageConnectionError: If upload fails
        """
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"Error uploading {path}: {error_code} - {e}")
            raise StorageConnectionError(f"Failed to upload file: {error_code}")
        except Exception as e:
            logger.error(f"Unexpected error uploading {path}: {e}")
            raise StorageConnectionError(f"Failed to upload file: {str(e)}")

        public_url = self.get_public_url(path)
        logger.info(f"Uploaded {len(data)} bytes to {public_url}")
        return {"path": path, "public_url": public_url}

    def remove(self, paths: List[str]) -> List[str]:
        """
        Delete objects from the media bucket.

        Returns:
            Paths that were deleted

        Raises:
            StorageConnectionError: If the request fails or any object could not be deleted
        """
        if not paths:
            return []

        try:
            response = self.s3_client.delete_objects(
                Bucket=self.bucket,
                Delete={"Objects": [{"Key": path} for path in paths], "Quiet": False},
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"Error deleting objects {paths}: {error_code} - {e}")
            raise StorageConnectionError(f"Failed to delete objects: {error_code}")

        errors = response.get("Errors") or []
        if errors:
            failed = [err.get("Key") for err in errors]
            raise StorageConnectionError(f"Failed to delete objects: {failed}")

        deleted = [obj.get("Key") for obj in response.get("Deleted", [])]
        logger.info(f"Deleted objects: {deleted}")
        return deleted

    def remove_quietly(self, url: Optional[str]) -> bool:
        """
        Best-effort removal of the object behind a public URL.

        Failures are logged and swallowed; the database row is the source of
        truth and an orphaned object is harmless.

        Returns:
            True if an object was removed
        """
        path = self.path_from_url(url) if url else None
        if not path:
            return False

        try:
            self.remove([path])
            return True
        except Exception as e:
            logger.warning(f"Could not delete {path} from storage: {e}")
            return False

    def check_bucket(self) -> None:
        """Raise if the bucket is unreachable (used by health checks)"""
        self.s3_client.head_bucket(Bucket=self.bucket)


_storage_service: Optional[StorageService] = None


def get_storage_service() -> StorageService:
    """FastAPI dependency returning a shared storage service"""
    global _storage_service
    if _storage_service is None:
        _storage_service = StorageService()
    return _storage_service
