from django.contrib.auth import get_user_model
from rest_framework import serializers

from ..models import Courses
from .courses import TeacherSerializer

User = get_user_model()


class StudentSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "username", "real_name", "email")


class CourseDetailSerializer(serializers.ModelSerializer):
    teacher = TeacherSerializer(read_only=True)
    students = serializers.SerializerMethodField()

    class Meta:
        model = Courses
        fields = ("id", "name", "description", "teacher", "students", "created_at", "updated_at")

    def get_students(self, obj):
        students = obj.students.order_by("real_name")
        return StudentSerializer(students, many=True).data
