from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from ..models import Course_members, Courses

User = get_user_model()


class CourseAPITestCase(APITestCase):
    def setUp(self):
        self.teacher = User.objects.create_user(
            username="teacher_one",
            email="teacher@example.com",
            password="pass1234",
            real_name="Teacher One",
            identity="teacher",
        )
        self.another_teacher = User.objects.create_user(
            username="teacher_two",
            email="teacher2@example.com",
            password="pass1234",
            real_name="Teacher Two",
            identity="teacher",
        )
        self.admin = User.objects.create_user(
            username="admin_user",
            email="admin@example.com",
            password="pass1234",
            real_name="Admin",
            identity="admin",
        )
        self.student = User.objects.create_user(
            username="student_one",
            email="student@example.com",
            password="pass1234",
            real_name="Student One",
            identity="student",
        )
        self.url = reverse("courses:list")

    def _create_course(self, *, name="SampleCourse", teacher=None):
        return Courses.objects.create(name=name, teacher=teacher or self.teacher)

    def _detail_url(self, course):
        return reverse("courses:detail", kwargs={"course_id": course.id})

    def test_teacher_can_create_course(self):
        self.client.force_authenticate(user=self.teacher)

        response = self.client.post(self.url, {"name": "Algoritmos I"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Success.")
        course = Courses.objects.get()
        self.assertEqual(course.name, "Algoritmos I")
        self.assertEqual(course.teacher, self.teacher)

    def test_student_cannot_create_course(self):
        self.client.force_authenticate(user=self.student)

        response = self.client.post(self.url, {"name": "StudentCourse"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Forbidden.")
        self.assertEqual(Courses.objects.count(), 0)

    def test_blank_name_returns_error(self):
        self.client.force_authenticate(user=self.teacher)

        response = self.client.post(self.url, {"name": "   "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Courses.objects.count(), 0)

    def test_get_returns_courses_for_teacher(self):
        self._create_course(name="Course A")
        self._create_course(name="Course B")
        self._create_course(name="Other", teacher=self.another_teacher)

        self.client.force_authenticate(user=self.teacher)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [c["name"] for c in response.data["data"]["courses"]]
        self.assertCountEqual(names, ["Course A", "Course B"])

    def test_get_returns_courses_for_student_memberships(self):
        course = self._create_course(name="Course A")
        Course_members.objects.create(course=course, user=self.student)
        self._create_course(name="Course B")

        self.client.force_authenticate(user=self.student)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        courses = response.data["data"]["courses"]
        self.assertEqual(len(courses), 1)
        self.assertEqual(courses[0]["name"], "Course A")

    def test_admin_sees_every_course(self):
        self._create_course(name="Course A")
        self._create_course(name="Course B", teacher=self.another_teacher)

        self.client.force_authenticate(user=self.admin)
        response = self.client.get(self.url)

        self.assertEqual(len(response.data["data"]["courses"]), 2)

    def test_unauthenticated_access_denied(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_show_course_with_students(self):
        course = self._create_course()
        Course_members.objects.create(course=course, user=self.student)

        self.client.force_authenticate(user=self.teacher)
        response = self.client.get(self._detail_url(course))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        students = response.data["data"]["students"]
        self.assertEqual([s["email"] for s in students], ["student@example.com"])

    def test_show_missing_course_returns_not_found(self):
        self.client.force_authenticate(user=self.teacher)
        response = self.client.get(
            reverse("courses:detail", kwargs={"course_id": "00000000-0000-0000-0000-000000000000"})
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Course not found.")

    def test_outsider_cannot_show_course(self):
        course = self._create_course()

        self.client.force_authenticate(user=self.student)
        response = self.client.get(self._detail_url(course))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_owner_can_rename_course(self):
        course = self._create_course(name="Old")

        self.client.force_authenticate(user=self.teacher)
        response = self.client.put(self._detail_url(course), {"name": "New"}, format="json")

        course.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(course.name, "New")

    def test_other_teacher_cannot_rename_course(self):
        course = self._create_course(name="Old")

        self.client.force_authenticate(user=self.another_teacher)
        response = self.client.put(self._detail_url(course), {"name": "New"}, format="json")

        course.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(course.name, "Old")

    def test_owner_can_delete_course(self):
        course = self._create_course()

        self.client.force_authenticate(user=self.teacher)
        response = self.client.delete(self._detail_url(course))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Courses.objects.filter(pk=course.pk).exists())
