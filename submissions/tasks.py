"""
Submissions asynchronous tasks

Celery tasks that hand code to Judge0 and poll it for verdicts.
"""

import logging

import requests
from celery import shared_task
from django.conf import settings
from django.utils import timezone

from .judge0_client import Judge0Client, Judge0Error, build_batch_item
from .locks import SubmissionLock
from .models import Correction, Status, Submission
from .poller import MAX_ATTEMPTS, POLLING_DELAY_SECONDS, SubmissionStatusPoller

logger = logging.getLogger(__name__)


def max_polling_attempts():
    return getattr(settings, 'JUDGE0_MAX_POLLING_ATTEMPTS', MAX_ATTEMPTS)


def polling_delay_seconds():
    return getattr(settings, 'JUDGE0_POLLING_DELAY_SECONDS', POLLING_DELAY_SECONDS)


def mark_internal_error(submission_id):
    """Settles a still-pending submission as Internal Error."""
    return Submission.objects.filter(pk=submission_id, status__isnull=True).update(
        status=Status.INTERNAL_ERROR, judged_at=timezone.now(),
    )


def enqueue_status_check(submission_id, remaining_attempts, delay_seconds):
    """Scheduling port handed to the poller: a fresh task after ``delay_seconds``."""
    check_submission_status_task.apply_async(
        args=(str(submission_id), remaining_attempts),
        countdown=delay_seconds,
    )


def build_poller(schedule=enqueue_status_check):
    return SubmissionStatusPoller(
        client=Judge0Client.from_settings(),
        schedule=schedule,
        delay_seconds=polling_delay_seconds(),
    )


@shared_task(bind=True, max_retries=3, default_retry_delay=1)
def check_submission_status_task(self, submission_id, remaining_attempts=None):
    """
    One polling round for a submission.

    Args:
        submission_id: Submission UUID
        remaining_attempts: re-polls left before giving up; defaults to
            JUDGE0_MAX_POLLING_ATTEMPTS

    Returns:
        dict: the poller's outcome
    """
    if remaining_attempts is None:
        remaining_attempts = max_polling_attempts()

    lock = SubmissionLock(submission_id)
    if not lock.acquire():
        # the running round re-schedules itself when needed
        logger.info(f'Status check already running for {submission_id}, skipping')
        return {'status': 'skipped', 'reason': 'locked'}

    # the next round is queued only once the lock is free, or it would find it taken
    next_rounds = []
    try:
        outcome = build_poller(schedule=lambda *args: next_rounds.append(args)).poll_once(
            submission_id, remaining_attempts,
        )
    except requests.RequestException as exc:
        # exponential backoff: 1s, 2s, 4s
        raise self.retry(exc=exc, countdown=2 ** self.request.retries)
    finally:
        lock.release()

    for args in next_rounds:
        enqueue_status_check(*args)
    return outcome


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def submit_to_judge0_task(self, submission_id):
    """
    Send a submission to Judge0, one run per test case, and start polling.

    Args:
        submission_id: Submission UUID

    Returns:
        dict: tokens on success, otherwise the reason of the failure
    """
    try:
        submission = Submission.objects.select_related('problem').get(id=submission_id)
    except Submission.DoesNotExist:
        logger.error(f'Submission not found: {submission_id}')
        return {'status': 'error', 'reason': 'submission_not_found'}

    # avoid a second batch for the same submission
    if submission.is_judged or submission.corrections.exists():
        logger.warning(f'Submission {submission_id} already sent to Judge0, skipping')
        return {'status': 'skipped', 'reason': 'already_submitted'}

    test_cases = list(submission.problem.test_cases.order_by('idx'))
    if not test_cases:
        logger.error(f'Problem {submission.problem_id} has no test cases: {submission_id}')
        mark_internal_error(submission.id)
        return {'status': 'error', 'reason': 'no_test_cases'}

    try:
        items = [build_batch_item(submission, test_case) for test_case in test_cases]
        logger.info(f'Submitting to Judge0: {submission_id}')
        tokens = Judge0Client.from_settings().submit_batch(items)
    except requests.RequestException as exc:
        logger.error(f'Error submitting to Judge0: {exc}')
        if self.request.retries >= self.max_retries:
            logger.error(f'Max retries exceeded for {submission_id}')
            mark_internal_error(submission.id)
            return {'status': 'error', 'reason': 'max_retries_exceeded'}
        raise self.retry(exc=exc, countdown=60 * (2 ** self.request.retries))
    except Judge0Error as exc:
        logger.error(f'Judge0 refused submission {submission_id}: {exc}')
        mark_internal_error(submission.id)
        return {'status': 'error', 'reason': str(exc)}

    Correction.objects.bulk_create([
        Correction(submission=submission, test_case=test_case, token=token, status=Status.IN_QUEUE)
        for test_case, token in zip(test_cases, tokens)
    ])
    logger.info(f'Submitted successfully: {submission_id} ({len(tokens)} run(s))')

    enqueue_status_check(submission.id, max_polling_attempts(), polling_delay_seconds())
    return {'status': 'submitted', 'tokens': tokens}
