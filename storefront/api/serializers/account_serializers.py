from rest_framework import serializers

from storefront.services.account_service import OAUTH_PROVIDERS


class SignInRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class SignUpRequestSerializer(serializers.Serializer):
    full_name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    user_type = serializers.CharField(required=False, allow_blank=True, default="customer")


class ResetPasswordRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    redirect_to = serializers.URLField(required=False, allow_null=True, default=None)


class OAuthResponseSerializer(serializers.Serializer):
    provider = serializers.ChoiceField(choices=OAUTH_PROVIDERS)
    url = serializers.URLField()


class IdentitySerializer(serializers.Serializer):
    user_id = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    full_name = serializers.CharField(read_only=True)
    role = serializers.CharField(source="role.value", read_only=True)


class DeveloperSettingsSerializer(serializers.Serializer):
    full_name = serializers.CharField(required=False, allow_blank=True, default="")
    company_name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    mobile_no = serializers.CharField(required=False, allow_blank=True, default="")
    address = serializers.CharField(required=False, allow_blank=True, default="")
    pan_no = serializers.CharField(required=False, allow_blank=True, default="")
    aadhaar_no = serializers.CharField(required=False, allow_blank=True, default="")
    qualification = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")


class ContactRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    message = serializers.CharField(required=False, allow_blank=True, default="")
    developer_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class ChatRequestSerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class NavigateRequestSerializer(serializers.Serializer):
    page = serializers.CharField()
    params = serializers.DictField(required=False, default=dict)


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    error = serializers.CharField(help_text="Error code identifier")
    detail = serializers.CharField(help_text="Human-readable error message")
