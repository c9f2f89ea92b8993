from rest_framework.permissions import AllowAny
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


class SessionSerializer(TokenObtainPairSerializer):
    """Token pair plus the flags the frontend needs right after login."""

    def validate(self, attrs):
        data = super().validate(attrs)
        data["identity"] = self.user.identity
        data["must_change_password"] = self.user.must_change_password
        return data


class LoginView(TokenObtainPairView):
    permission_classes = [AllowAny]
    serializer_class = SessionSerializer


class RefreshView(TokenRefreshView):
    permission_classes = [AllowAny]
