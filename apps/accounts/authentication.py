from rest_framework.exceptions import NotFound
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.settings import api_settings


class BearerTokenAuthentication(JWTAuthentication):
    """
    Resolve ``Authorization: Bearer <token>`` into ``request.user``.

    Requests without a bearer header stay anonymous and are rejected later by
    the permission classes with 401. A verified token pointing at a deleted
    user answers 404 instead of 401.
    """

    www_authenticate_realm = "medifind"

    def get_user(self, validated_token):
        user_id = validated_token.get(api_settings.USER_ID_CLAIM)
        if user_id is not None and not self.user_model.objects.filter(
            **{api_settings.USER_ID_FIELD: user_id}
        ).exists():
            raise NotFound("User not found")
        return super().get_user(validated_token)


class PublicReadMixin:
    """
    Skip bearer authentication for the viewset's public read actions.

    A stale token sent along with a public read is ignored instead of
    turning the read into a 401.
    """
    public_actions = ("list", "retrieve")

    def get_authenticators(self):
        # runs before ``self.action`` is set, so resolve it from the method
        action = self.action_map.get(self.request.method.lower())
        if action in self.public_actions:
            return []
        return super().get_authenticators()
