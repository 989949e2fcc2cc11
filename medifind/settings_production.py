"""
Production overrides for MediFind.

Selected with ``DJANGO_SETTINGS_MODULE=medifind.settings_production``. Secrets,
hosts and browser origins have no defaults here and must come from the
environment.
"""
from decouple import Csv, config

from .settings import *  # noqa: F401,F403


DEBUG = False

SECRET_KEY = config("SECRET_KEY")
SIMPLE_JWT["SIGNING_KEY"] = config("JWT_SIGNING_KEY", default=SECRET_KEY)

ALLOWED_HOSTS = config("ALLOWED_HOSTS", cast=Csv())
CSRF_TRUSTED_ORIGINS = [f"https://{host}" for host in ALLOWED_HOSTS]

# The SPA is served from its own origin; never fall back to allow-all.
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config("CORS_ALLOWED_ORIGINS", cast=Csv())

DATABASES["default"] = {
    "ENGINE": "django.db.backends.postgresql",
    "NAME": config("POSTGRES_DB", default="medifind"),
    "USER": config("POSTGRES_USER", default="medifind"),
    "PASSWORD": config("POSTGRES_PASSWORD"),
    "HOST": config("POSTGRES_HOST", default="127.0.0.1"),
    "PORT": config("POSTGRES_PORT", default=5432, cast=int),
    "CONN_MAX_AGE": config("POSTGRES_CONN_MAX_AGE", default=60, cast=int),
}

# Static files are only the admin's; WhiteNoise serves them right after SecurityMiddleware.
MIDDLEWARE = [MIDDLEWARE[0], "whitenoise.middleware.WhiteNoiseMiddleware", *MIDDLEWARE[1:]]
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# TLS terminates at the proxy.
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = config("SECURE_SSL_REDIRECT", default=True, cast=bool)
SECURE_HSTS_SECONDS = config("SECURE_HSTS_SECONDS", default=60 * 60 * 24 * 365, cast=int)
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

LOGGING["root"]["level"] = config("ROOT_LOG_LEVEL", default="ERROR")
