"""Celery application for the Amazon Fresh orders project.

``DJANGO_SETTINGS_MODULE`` is set before the app is created so Celery
reads its configuration from Django settings (``CELERY_`` prefix).
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("amazon_fresh")

app.config_from_object("django.conf:settings", namespace="CELERY")

# Picks up modules/orders/tasks.py
app.autodiscover_tasks()
