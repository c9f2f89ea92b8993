"""
Celery configuration

Creates the Celery app and wires it to Django settings.
"""

import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'codejudge.settings')

app = Celery('codejudge')

# every CELERY_* entry in settings.py
app.config_from_object('django.conf:settings', namespace='CELERY')

# picks up submissions/tasks.py
app.autodiscover_tasks()
