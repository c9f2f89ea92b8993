from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError

User = get_user_model()


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True)

    def validate_old_password(self, value):
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Old password is incorrect.")
        return value

    def validate_new_password(self, value):
        try:
            validate_password(value, self.context["request"].user)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        old_password = self.initial_data.get("old_password")
        if old_password is not None and value == old_password:
            raise serializers.ValidationError("New password must be different from the old password.")
        return value

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        # a temporary password is done with once replaced
        user.must_change_password = False
        user.save(update_fields=["password", "must_change_password"])
        return user


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()
