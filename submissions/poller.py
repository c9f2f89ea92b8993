"""
Submission status poller

Asks Judge0 for the verdicts of a submission's pending corrections, stores
the terminal ones, then either schedules another look or settles the
submission's overall status.

The poller owns no queue. It is handed a Judge0 client (anything with
``fetch_results(tokens)``) and a ``schedule(submission_id,
remaining_attempts, delay_seconds)`` callable, so one call is a function of
stored state and Judge0's answer.
"""

import logging

from django.db import transaction
from django.utils import timezone

from .models import Correction, Status, Submission, TRANSIENT_STATUSES, is_transient

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 15
POLLING_DELAY_SECONDS = 1


def judged_order(correction):
    """Sort key for settled corrections: judged time, then id; unstamped ones first."""
    judged_at = correction.judged_at
    return (judged_at is not None, judged_at.timestamp() if judged_at else 0.0, correction.id)


class SubmissionStatusPoller:
    def __init__(self, client, schedule, delay_seconds=POLLING_DELAY_SECONDS):
        self.client = client
        self.schedule = schedule
        self.delay_seconds = delay_seconds

    def poll_once(self, submission_id, remaining_attempts=MAX_ATTEMPTS):
        """
        Run one polling round for ``submission_id``.

        Returns:
            dict: ``status`` is one of not_found, skipped, pending, timeout, judged

        Raises:
            whatever the client raised while fetching results
        """
        submission = Submission.objects.filter(pk=submission_id).first()
        if submission is None:
            logger.warning(f'Submission not found while checking status: {submission_id}')
            return {'status': 'not_found'}

        if submission.is_judged:
            logger.info(f'Submission {submission_id} already judged, skipping')
            return {'status': 'skipped', 'reason': 'already_judged'}

        corrections = list(submission.corrections.order_by('id'))
        pending_tokens = [c.token for c in corrections if c.is_pending]

        try:
            results = self.client.fetch_results(pending_tokens) if pending_tokens else []
        except Exception as exc:
            logger.error(f'Error fetching Judge0 results for {submission_id}: {exc}')
            raise

        # corrections settled by earlier rounds come first, in the order they were judged
        settled = sorted((c for c in corrections if not c.is_pending), key=judged_order)
        first_failure = next((c.status for c in settled if c.status != Status.ACCEPTED), None)
        by_token = {c.token: c for c in corrections}
        now = timezone.now()

        with transaction.atomic():
            for result in results:
                correction = by_token.get(result.token)
                if correction is None:
                    logger.warning(
                        f'Correction not found for Judge0 token {result.token} '
                        f'(submission {submission_id})'
                    )
                    continue
                if not correction.is_pending or is_transient(result.status_id):
                    continue

                self._store(correction, result.status_id, now)
                if first_failure is None and correction.status != Status.ACCEPTED:
                    first_failure = correction.status

            # unreported tokens and transient answers both leave a correction pending
            has_pending = any(c.is_pending for c in corrections)

            if not has_pending:
                final_status = first_failure if first_failure is not None else Status.ACCEPTED
                self._settle(submission, final_status, now)
            elif remaining_attempts <= 0:
                logger.error(f'Timed out waiting for Judge0 verdicts: {submission_id}')
                self._settle(submission, Status.INTERNAL_ERROR, now)

        if not has_pending:
            return {'status': 'judged', 'result': int(submission.status)}
        if remaining_attempts <= 0:
            return {'status': 'timeout', 'result': int(submission.status)}

        self.schedule(submission.id, remaining_attempts - 1, self.delay_seconds)
        return {'status': 'pending', 'remaining_attempts': remaining_attempts - 1}

    @staticmethod
    def _store(correction, status_id, now):
        updated = Correction.objects.filter(
            pk=correction.pk, status__in=TRANSIENT_STATUSES,
        ).update(status=status_id, judged_at=now)
        if updated:
            correction.status = status_id
            correction.judged_at = now
        else:
            # another round got there first; keep its verdict
            correction.refresh_from_db(fields=['status', 'judged_at'])

    @staticmethod
    def _settle(submission, status_id, now):
        updated = Submission.objects.filter(
            pk=submission.pk, status__isnull=True,
        ).update(status=status_id, judged_at=now)
        if updated:
            submission.status = status_id
            submission.judged_at = now
        else:
            submission.refresh_from_db(fields=['status', 'judged_at'])
