from typing import Any, Dict

from django.contrib.auth import get_user_model
from rest_framework import serializers

from ..models import Courses

User = get_user_model()


class TeacherSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "username", "real_name", "identity")


class CourseCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)

    def validate_name(self, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise serializers.ValidationError("Not allowed name.", code="invalid_course_name")
        return trimmed

    def create(self, validated_data: Dict[str, Any]) -> Courses:
        return Courses.objects.create(
            name=validated_data["name"],
            description=validated_data.get("description", ""),
            teacher=validated_data["teacher"],
        )


class CourseUpdateSerializer(CourseCreateSerializer):
    def update(self, instance: Courses, validated_data: Dict[str, Any]) -> Courses:
        instance.name = validated_data["name"]
        if "description" in validated_data:
            instance.description = validated_data["description"]
        instance.save(update_fields=["name", "description", "updated_at"])
        return instance


class CourseListSerializer(serializers.ModelSerializer):
    teacher = TeacherSerializer(read_only=True)

    class Meta:
        model = Courses
        fields = ("id", "name", "description", "teacher", "created_at")
