from rest_framework import serializers

from assignments.models import Assignments
from courses.models import Courses
from problems.models import Problems
from problems.serializers import ProblemSerializer


class HomeworkWriteSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    course_id = serializers.UUIDField()
    problem_id = serializers.IntegerField()
    due_time = serializers.DateTimeField()

    def validate_title(self, value):
        trimmed = value.strip()
        if not trimmed:
            raise serializers.ValidationError("Title is required.")
        return trimmed

    def validate(self, attrs):
        instance = self.instance

        # resolve the course
        course_id = attrs.get("course_id", instance.course_id if instance else None)
        try:
            course = Courses.objects.get(pk=course_id)
        except Courses.DoesNotExist:
            raise serializers.ValidationError({"course_id": "Course not found."})
        attrs["_course"] = course

        problem_id = attrs.get("problem_id", instance.problem_id if instance else None)
        user = self.context["request"].user
        try:
            problem = Problems.objects.visible_to(user).get(pk=problem_id)
        except Problems.DoesNotExist:
            raise serializers.ValidationError({"problem_id": "Problem not found."})
        attrs["_problem"] = problem

        # title is unique per course
        title = attrs.get("title", instance.title if instance else None)
        duplicates = Assignments.objects.filter(course=course, title=title)
        if instance is not None:
            duplicates = duplicates.exclude(pk=instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError({"title": "Homework exists in this course."})

        return attrs

    def create(self, validated_data):
        return Assignments.objects.create(
            title=validated_data["title"],
            description=validated_data.get("description", ""),
            course=validated_data["_course"],
            problem=validated_data["_problem"],
            due_time=validated_data["due_time"],
            creator=validated_data["creator"],
        )

    def update(self, instance, validated_data):
        instance.course = validated_data["_course"]
        instance.problem = validated_data["_problem"]
        for field in ("title", "description", "due_time"):
            if field in validated_data:
                setattr(instance, field, validated_data[field])
        instance.save()
        return instance


class HomeworkListSerializer(serializers.ModelSerializer):
    course_id = serializers.UUIDField(source="course.id", read_only=True)
    course_name = serializers.CharField(source="course.name", read_only=True)
    problem_id = serializers.IntegerField(source="problem.id", read_only=True)
    problem_title = serializers.CharField(source="problem.title", read_only=True)

    class Meta:
        model = Assignments
        fields = [
            "id", "title", "description",
            "course_id", "course_name",
            "problem_id", "problem_title",
            "due_time", "created_at", "updated_at",
        ]


# ---------- detail output ----------
class HomeworkDetailSerializer(HomeworkListSerializer):
    problem = ProblemSerializer(read_only=True)

    class Meta(HomeworkListSerializer.Meta):
        fields = HomeworkListSerializer.Meta.fields + ["problem"]
