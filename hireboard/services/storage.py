import os
import time
from werkzeug.utils import secure_filename
from flask import current_app
import boto3
from botocore.client import Config

AVATARS = "avatars"
RESUMES = "resumes"
RESUME_EXTENSIONS = ("pdf", "doc", "docx")


class UploadError(ValueError):
    pass


def _ensure_local_dir():
    d = current_app.config['LOCAL_STORAGE_DIR']
    os.makedirs(d, exist_ok=True)
    return d


def _s3_client():
    # endpoint_url may be empty when talking to AWS-managed S3
    s3_kwargs = {}
    endpoint = current_app.config.get('S3_ENDPOINT')
    if endpoint:
        s3_kwargs['endpoint_url'] = endpoint
    region = current_app.config.get('S3_REGION')
    if region:
        s3_kwargs['region_name'] = region
    return boto3.client(
        's3',
        aws_access_key_id=current_app.config.get('S3_ACCESS_KEY'),
        aws_secret_access_key=current_app.config.get('S3_SECRET_KEY'),
        config=Config(signature_version='s3v4', s3={'addressing_style': 'path'}),
        **s3_kwargs,
    )


def _extension(filename):
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[-1].lower()


def stream_size(file_storage) -> int:
    """Byte size of an uploaded file without consuming its stream."""
    stream = getattr(file_storage, 'stream', file_storage)
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_avatar(file_storage):
    max_bytes = current_app.config.get('MAX_UPLOAD_BYTES', 5 * 1024 * 1024)
    mimetype = (getattr(file_storage, 'mimetype', None) or '').lower()
    if not mimetype.startswith('image/'):
        raise UploadError("Avatar must be an image file")
    if stream_size(file_storage) > max_bytes:
        raise UploadError("File size should not exceed 5MB")
    ext = _extension(file_storage.filename)
    if not ext.isalnum():
        ext = secure_filename(mimetype.split('/', 1)[1]) or 'img'
    return ext


def validate_resume(file_storage):
    max_bytes = current_app.config.get('MAX_UPLOAD_BYTES', 5 * 1024 * 1024)
    ext = _extension(file_storage.filename)
    if ext not in RESUME_EXTENSIONS:
        raise UploadError("Only PDF, DOC, and DOCX files are allowed")
    if stream_size(file_storage) > max_bytes:
        raise UploadError("File size should not exceed 5MB")
    return ext


def public_url(bucket, key):
    backend = current_app.config.get('STORAGE_BACKEND', 'local')
    if backend == 's3':
        base = current_app.config.get('STORAGE_PUBLIC_URL') or current_app.config.get('S3_ENDPOINT') or ''
        return f"{base.rstrip('/')}/{bucket}/{key}"
    path = os.path.join(_ensure_local_dir(), bucket, key)
    return f"file://{os.path.abspath(path)}"


def put_object(file_storage, bucket, key):
    """Store the upload under ``bucket/key``, overwriting any previous object."""
    backend = current_app.config.get('STORAGE_BACKEND', 'local')
    stream = getattr(file_storage, 'stream', file_storage)
    stream.seek(0)
    if backend == 's3':
        extra = {}
        if getattr(file_storage, 'mimetype', None):
            extra['ContentType'] = file_storage.mimetype
        _s3_client().upload_fileobj(stream, bucket, key, ExtraArgs=extra or None)
    else:
        path = os.path.join(_ensure_local_dir(), bucket, key)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        file_storage.save(path)
    return public_url(bucket, key)


def _stamp():
    return int(time.time() * 1000)


def upload_avatar(user_id, file_storage):
    ext = validate_avatar(file_storage)
    key = f"{secure_filename(user_id)}/{_stamp()}.{ext}"
    return put_object(file_storage, AVATARS, key)


def upload_resume(user_id, file_storage):
    ext = validate_resume(file_storage)
    key = f"{secure_filename(user_id)}/{_stamp()}_resume.{ext}"
    return put_object(file_storage, RESUMES, key)

