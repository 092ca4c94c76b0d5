from storages.backends.s3boto3 import S3Boto3Storage

class StaticStorage(S3Boto3Storage):
    """Storage para os estáticos do admin"""
    location = "static"
    default_acl = "public-read"

class MediaStorage(S3Boto3Storage):
    """Storage para as planilhas enviadas na importação de leads/clientes"""
    location = "media"
    default_acl = "private"
    file_overwrite = False
