from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from .models import UserProfile

User = get_user_model()


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserProfile
        fields = ['registration', 'program', 'field_of_work']


class UserSerializer(serializers.ModelSerializer):
    profile = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'real_name', 'identity',
            'must_change_password', 'date_joined', 'profile',
        ]

    def get_profile(self, obj):
        try:
            p = obj.profile
        except UserProfile.DoesNotExist:
            return None
        return ProfileSerializer(p).data


class AccountCreateSerializer(serializers.Serializer):
    """
    Shared write side of the student / professor registration forms.

    Subclasses set `identity` and list the profile fields they accept.
    """
    identity = None
    profile_fields = ()

    name = serializers.CharField(max_length=150)
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True)
    password_confirmation = serializers.CharField(write_only=True)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already registered.")
        return value

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirmation']:
            raise serializers.ValidationError({'password_confirmation': "Passwords do not match."})
        try:
            validate_password(attrs['password'])
        except DjangoValidationError as e:
            raise serializers.ValidationError({'password': e.messages})
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        profile_data = {f: validated_data.pop(f) for f in self.profile_fields if f in validated_data}
        validated_data.pop('password_confirmation')
        password = validated_data.pop('password')
        email = validated_data['email']

        user = User(
            username=email,
            email=email,
            real_name=validated_data['name'],
            identity=self.identity,
        )
        user.set_password(password)
        user.save()

        UserProfile.objects.create(user=user, **profile_data)
        return user


class StudentCreateSerializer(AccountCreateSerializer):
    identity = User.Identity.STUDENT
    profile_fields = ('registration', 'program')

    registration = serializers.CharField(max_length=50)
    program = serializers.CharField(max_length=150, required=False, allow_blank=True)

    def validate_registration(self, value):
        value = value.strip()
        if UserProfile.objects.filter(registration=value).exists():
            raise serializers.ValidationError("Registration already in use.")
        return value


class ProfessorCreateSerializer(AccountCreateSerializer):
    identity = User.Identity.TEACHER
    profile_fields = ('field_of_work',)

    field_of_work = serializers.CharField(max_length=150, required=False, allow_blank=True)


class AccountUpdateSerializer(serializers.Serializer):
    """Partial update of name / email / profile fields."""
    profile_fields = ()

    name = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(max_length=254, required=False)

    def validate_email(self, value):
        value = value.strip().lower()
        qs = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Email already registered.")
        return value

    @transaction.atomic
    def update(self, instance, validated_data):
        if 'name' in validated_data:
            instance.real_name = validated_data['name'].strip()
        if 'email' in validated_data:
            instance.email = validated_data['email']
            instance.username = validated_data['email']
        instance.save()

        profile, _ = UserProfile.objects.get_or_create(user=instance)
        for field in self.profile_fields:
            if field in validated_data:
                setattr(profile, field, validated_data[field])
        profile.save()
        return instance


class StudentUpdateSerializer(AccountUpdateSerializer):
    profile_fields = ('registration', 'program')

    registration = serializers.CharField(max_length=50, required=False)
    program = serializers.CharField(max_length=150, required=False, allow_blank=True)

    def validate_registration(self, value):
        value = value.strip()
        qs = UserProfile.objects.filter(registration=value)
        if self.instance is not None:
            qs = qs.exclude(user=self.instance)
        if qs.exists():
            raise serializers.ValidationError("Registration already in use.")
        return value


class ProfessorUpdateSerializer(AccountUpdateSerializer):
    profile_fields = ('field_of_work',)

    field_of_work = serializers.CharField(max_length=150, required=False, allow_blank=True)


class MeUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def update(self, instance, validated_data):
        instance.real_name = validated_data['name']
        instance.save(update_fields=['real_name'])
        return instance
