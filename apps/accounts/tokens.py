"""
Bearer token issuing and verification.

Tokens are simplejwt access tokens: HS256, carrying the user id claim plus
``iat``/``exp``. Lifetime comes from ``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]``.
"""
from rest_framework_simplejwt.tokens import AccessToken


def issue_token(user):
    """Return a signed access token string for *user*."""
    return str(AccessToken.for_user(user))


def decode_token(raw_token):
    """
    Verify *raw_token* and return its payload as a dict.

    Raises ``rest_framework_simplejwt.exceptions.TokenError`` when the
    signature is invalid or the token has expired.
    """
    return dict(AccessToken(raw_token).payload)
