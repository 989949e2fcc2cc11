"""
Serializers for accounts app.

Handles serialization/deserialization of User model and authentication data.
"""
from django.contrib.auth import authenticate
from rest_framework import serializers

from .models import User
from .tokens import issue_token


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Used for profile, user list and user detail responses. The password hash
    is never part of the output.
    """
    role_display = serializers.CharField(source='get_role_display', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'name', 'email', 'role', 'role_display', 'phone_number', 'address',
            'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for profile updates.

    ``role`` is only writable when the requesting user is an admin.
    """

    class Meta:
        model = User
        fields = ['name', 'email', 'phone_number', 'address', 'role']
        extra_kwargs = {'email': {'validators': []}}

    def validate_email(self, value):
        value = value.lower()
        queryset = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('User already exists')
        return value

    def validate_role(self, value):
        request = self.context.get('request')
        if not (request and request.user.is_authenticated and request.user.is_admin()):
            raise serializers.ValidationError('Only admins can change roles.')
        return value

    def update(self, instance, validated_data):
        if 'email' in validated_data:
            validated_data['username'] = validated_data['email']
        return super().update(instance, validated_data)


class AuthResponseMixin:
    def to_representation(self, user):
        return {
            'id': user.id,
            'name': user.name,
            'email': user.email,
            'role': user.role,
            'token': issue_token(user),
        }


class RegisterSerializer(AuthResponseMixin, serializers.ModelSerializer):
    """
    Serializer for self-registration.

    Admin accounts cannot be self-registered.
    """
    password = serializers.CharField(write_only=True, min_length=6)
    role = serializers.ChoiceField(
        choices=[User.ROLE_USER, User.ROLE_PHARMACY],
        required=False,
        default=User.ROLE_USER,
    )

    class Meta:
        model = User
        fields = ['name', 'email', 'password', 'role', 'phone_number', 'address']
        extra_kwargs = {
            'name': {'required': True, 'allow_blank': False},
            # Uniqueness is reported by validate_email with a friendlier message.
            'email': {'validators': []},
        }

    def validate_email(self, value):
        value = value.lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('User already exists')
        return value

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(
            username=validated_data['email'],
            password=password,
            **validated_data,
        )


class LoginSerializer(AuthResponseMixin, serializers.Serializer):
    """
    Serializer for user login.

    Validates email and password.
    """
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Authenticate user with provided credentials."""
        user = authenticate(
            request=self.context.get('request'),
            email=attrs['email'].lower(),
            password=attrs['password'],
        )
        if not user:
            raise serializers.ValidationError('Invalid email or password')
        attrs['user'] = user
        return attrs


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, min_length=6)

    def validate_current_password(self, value):
        user = self.context['request'].user
        if not user.check_password(value):
            raise serializers.ValidationError('Current password is incorrect.')
        return value
