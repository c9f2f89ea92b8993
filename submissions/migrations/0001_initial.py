import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


STATUS_CHOICES = [
    (1, 'In Queue'),
    (2, 'Processing'),
    (3, 'Accepted'),
    (4, 'Wrong Answer'),
    (5, 'Time Limit Exceeded'),
    (6, 'Compilation Error'),
    (7, 'Runtime Error (SIGSEGV)'),
    (8, 'Runtime Error (SIGXFSZ)'),
    (9, 'Runtime Error (SIGFPE)'),
    (10, 'Runtime Error (SIGABRT)'),
    (11, 'Runtime Error (NZEC)'),
    (12, 'Runtime Error (Other)'),
    (13, 'Internal Error'),
    (14, 'Exec Format Error'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('assignments', '0001_initial'),
        ('problems', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Submission',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('language_type', models.IntegerField(choices=[(0, 'C'), (1, 'C++'), (2, 'Python'), (3, 'Java'), (4, 'JavaScript')])),
                ('source_code', models.TextField()),
                ('status', models.IntegerField(blank=True, choices=STATUS_CHOICES, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('judged_at', models.DateTimeField(blank=True, null=True)),
                ('assignment', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='submissions', to='assignments.assignments')),
                ('problem', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='submissions', to='problems.problems')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='submissions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'submissions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'problem', 'created_at'], name='submissions_user_id_3b1c2d_idx'),
                    models.Index(fields=['status', 'created_at'], name='submissions_status_8f0a4e_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Correction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('token', models.CharField(db_index=True, max_length=64)),
                ('status', models.IntegerField(choices=STATUS_CHOICES, default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('judged_at', models.DateTimeField(blank=True, null=True)),
                ('submission', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='corrections', to='submissions.submission')),
                ('test_case', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='corrections', to='problems.test_cases')),
            ],
            options={
                'db_table': 'submission_corrections',
                'ordering': ['id'],
            },
        ),
    ]
