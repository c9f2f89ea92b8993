from django.db import transaction
from rest_framework import serializers

from ..models import Problems, Test_cases


class TestCaseSerializer(serializers.ModelSerializer):
    """Full test case (teachers and admins)."""

    class Meta:
        model = Test_cases
        fields = ["id", "idx", "input_data", "expected_output", "is_private"]
        read_only_fields = ["id", "idx"]


class ProblemSerializer(serializers.ModelSerializer):
    creator = serializers.PrimaryKeyRelatedField(read_only=True)
    creator_name = serializers.CharField(source="creator.real_name", read_only=True, default=None)
    test_cases = TestCaseSerializer(many=True)

    class Meta:
        model = Problems
        fields = [
            "id", "title", "description",
            "time_limit_ms", "memory_limit_mb", "is_private",
            "creator", "creator_name",
            "created_at", "updated_at",
            "test_cases",
        ]
        read_only_fields = ["creator", "created_at", "updated_at"]

    def validate_title(self, value):
        trimmed = value.strip()
        if not trimmed:
            raise serializers.ValidationError("Title is required.")
        return trimmed

    def validate_test_cases(self, value):
        if not value:
            raise serializers.ValidationError("At least one test case is required.")
        return value

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not self._sees_private_cases():
            data["test_cases"] = [tc for tc in data["test_cases"] if not tc["is_private"]]
        return data

    def _sees_private_cases(self) -> bool:
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return False
        return getattr(user, "identity", None) in ("teacher", "admin") or user.is_superuser

    @staticmethod
    def _replace_test_cases(problem, cases):
        Test_cases.objects.filter(problem=problem).delete()
        Test_cases.objects.bulk_create([
            Test_cases(problem=problem, idx=idx, **case)
            for idx, case in enumerate(cases, start=1)
        ])

    @transaction.atomic
    def create(self, validated_data):
        cases = validated_data.pop("test_cases")
        problem = Problems.objects.create(**validated_data)
        self._replace_test_cases(problem, cases)
        return problem

    @transaction.atomic
    def update(self, instance, validated_data):
        cases = validated_data.pop("test_cases", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        # an omitted list keeps the current cases (PATCH)
        if cases is not None:
            self._replace_test_cases(instance, cases)
        return instance
