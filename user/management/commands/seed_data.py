"""
Django management command to seed the database with demo data.

Usage:
    python manage.py seed_data           # Seed with default data
    python manage.py seed_data --clear   # Clear existing data before seeding
    python manage.py seed_data --minimal # Seed with minimal data set
"""

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from assignments.models import Assignments
from courses.models import Course_members, Courses
from problems.models import Problems, Test_cases
from submissions.models import Submission
from user.models import User, UserProfile

DEMO_PROBLEMS = [
    {
        'title': 'Sum of two integers',
        'description': '<p>Read two integers and print their sum.</p>',
        'cases': [('1 2', '3'), ('10 -4', '6'), ('0 0', '0')],
    },
    {
        'title': 'Reverse a string',
        'description': '<p>Read one line and print it reversed.</p>',
        'cases': [('abc', 'cba'), ('racecar', 'racecar')],
    },
    {
        'title': 'Largest of N numbers',
        'description': '<p>The first line holds N, the second N integers. Print the largest.</p>',
        'cases': [('3\n1 9 4', '9'), ('1\n-7', '-7')],
    },
]


class Command(BaseCommand):
    help = 'Seed the database with demo data for development and demos'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before seeding',
        )
        parser.add_argument(
            '--minimal',
            action='store_true',
            help='Seed with minimal data set',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.NOTICE('Starting database seeding...'))

        with transaction.atomic():
            if options['clear']:
                self.clear_data()
            if options['minimal']:
                self.seed(teacher_count=1, student_count=3)
            else:
                self.seed(teacher_count=3, student_count=20)

        self.stdout.write(self.style.SUCCESS('Database seeding completed!'))

    def clear_data(self):
        """Delete demo rows in reverse dependency order; superusers stay."""
        self.stdout.write(self.style.WARNING('Clearing existing data...'))
        Submission.objects.all().delete()
        Assignments.objects.all().delete()
        Course_members.objects.all().delete()
        Courses.objects.all().delete()
        Problems.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def seed(self, teacher_count, student_count):
        self.create_admin()
        teachers = [self.create_account(User.Identity.TEACHER, i) for i in range(1, teacher_count + 1)]
        students = [self.create_account(User.Identity.STUDENT, i) for i in range(1, student_count + 1)]

        problems = [self.create_problem(teachers[0], data) for data in DEMO_PROBLEMS]

        for number, teacher in enumerate(teachers, start=1):
            course, created = Courses.objects.get_or_create(
                name=f'Programming {number}',
                teacher=teacher,
                defaults={'description': f'Demo class {number}'},
            )
            for student in random.sample(students, min(10, len(students))):
                Course_members.objects.get_or_create(course=course, user=student)
            if created:
                self.stdout.write(f'   Created course: {course.name}')
            self.create_assignment(course, teacher, problems[(number - 1) % len(problems)])

    def create_admin(self):
        admin, created = User.objects.get_or_create(
            username='admin@demo.codejudge.local',
            defaults={
                'email': 'admin@demo.codejudge.local',
                'real_name': 'Administrator',
                'identity': User.Identity.ADMIN,
                'is_staff': True,
                'is_superuser': True,
            },
        )
        if created:
            admin.set_password('admin123')
            admin.save()
            self.stdout.write(f'   Created admin: {admin.username}')
        return admin

    def create_account(self, identity, number):
        email = f'{identity}{number}@demo.codejudge.local'
        user, created = User.objects.get_or_create(
            username=email,
            defaults={
                'email': email,
                'real_name': f'{identity.title()} {number:02d}',
                'identity': identity,
            },
        )
        if created:
            user.set_password(f'{identity}123')
            user.save()
            if identity == User.Identity.STUDENT:
                UserProfile.objects.create(user=user, registration=f'2024{number:05d}', program='Computer Science')
            else:
                UserProfile.objects.create(user=user, field_of_work='Algorithms')
            self.stdout.write(f'   Created {identity}: {user.username}')
        return user

    def create_problem(self, creator, data):
        problem, created = Problems.objects.get_or_create(
            title=data['title'],
            defaults={
                'description': data['description'],
                'time_limit_ms': 1000,
                'memory_limit_mb': 128,
                'is_private': False,
                'creator': creator,
            },
        )
        if created:
            Test_cases.objects.bulk_create([
                Test_cases(problem=problem, idx=idx, input_data=stdin, expected_output=stdout)
                for idx, (stdin, stdout) in enumerate(data['cases'], start=1)
            ])
            self.stdout.write(f'   Created problem: {problem.title}')
        return problem

    def create_assignment(self, course, teacher, problem):
        assignment, created = Assignments.objects.get_or_create(
            course=course,
            title=f'Homework: {problem.title}',
            defaults={
                'description': 'Solve the problem before the deadline.',
                'problem': problem,
                'creator': teacher,
                'due_time': timezone.now() + timedelta(days=7),
            },
        )
        if created:
            self.stdout.write(f'   Created homework: {assignment.title}')
        return assignment
