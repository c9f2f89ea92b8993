import uuid
from datetime import timedelta
from unittest.mock import Mock

import requests
from django.test import TestCase
from django.utils import timezone
from hypothesis import given, settings, strategies as st
from hypothesis.extra.django import TestCase as HypothesisTestCase

from submissions.judge0_client import Judge0Result
from submissions.models import Correction, Status, Submission
from submissions.poller import SubmissionStatusPoller
from .factories import PENDING, make_problem, make_submission, make_user

TERMINAL_STATUSES = [s for s in Status if s not in (Status.IN_QUEUE, Status.PROCESSING)]


class FakeJudge0:
    """Answers each fetch with the next scripted round of (token, status_id)."""

    def __init__(self, *rounds):
        self.rounds = list(rounds)
        self.calls = []

    def fetch_results(self, tokens):
        self.calls.append(list(tokens))
        return [Judge0Result(token, status_id) for token, status_id in self.rounds.pop(0)]


def corrections_of(submission):
    return list(
        Correction.objects.filter(submission=submission).order_by("id").values_list("status", flat=True)
    )


class SubmissionStatusPollerTests(TestCase):
    def setUp(self):
        self.teacher = make_user("teacher")
        self.student = make_user("student")
        self.problem = make_problem(self.teacher, cases=3)
        self.schedule = Mock()

    def _poller(self, *rounds):
        self.client = FakeJudge0(*rounds)
        return SubmissionStatusPoller(self.client, self.schedule, delay_seconds=1)

    def test_two_rounds_until_wrong_answer(self):
        submission = make_submission(self.student, self.problem, [PENDING, PENDING, PENDING])
        poller = self._poller(
            [("tok-0", 3), ("tok-1", 2), ("tok-2", 3)],
            [("tok-1", 4)],
        )

        outcome = poller.poll_once(submission.id, 15)

        submission.refresh_from_db()
        self.assertEqual(outcome, {"status": "pending", "remaining_attempts": 14})
        self.assertEqual(corrections_of(submission), [Status.ACCEPTED, PENDING, Status.ACCEPTED])
        self.assertIsNone(submission.status)
        self.schedule.assert_called_once_with(submission.id, 14, 1)

        self.schedule.reset_mock()
        outcome = poller.poll_once(submission.id, 14)

        submission.refresh_from_db()
        self.assertEqual(self.client.calls[1], ["tok-1"])
        self.assertEqual(outcome, {"status": "judged", "result": Status.WRONG_ANSWER})
        self.assertEqual(submission.status, Status.WRONG_ANSWER)
        self.assertIsNotNone(submission.judged_at)
        self.schedule.assert_not_called()

    def test_exhausted_attempts_mark_internal_error(self):
        submission = make_submission(self.student, self.problem, [PENDING])
        poller = self._poller([("tok-0", 1)])

        with self.assertLogs("submissions.poller", level="ERROR"):
            outcome = poller.poll_once(submission.id, 0)

        submission.refresh_from_db()
        self.assertEqual(outcome["status"], "timeout")
        self.assertEqual(submission.status, Status.INTERNAL_ERROR)
        self.schedule.assert_not_called()

    def test_exhausted_attempts_ignore_other_verdicts(self):
        submission = make_submission(
            self.student, self.problem, [PENDING, Status.WRONG_ANSWER, PENDING]
        )
        poller = self._poller([("tok-0", 3), ("tok-2", 2)])

        with self.assertLogs("submissions.poller", level="ERROR"):
            poller.poll_once(submission.id, 0)

        submission.refresh_from_db()
        self.assertEqual(submission.status, Status.INTERNAL_ERROR)
        self.assertEqual(corrections_of(submission), [Status.ACCEPTED, Status.WRONG_ANSWER, PENDING])

    def test_all_accepted(self):
        submission = make_submission(self.student, self.problem, [PENDING, PENDING, PENDING])
        poller = self._poller([("tok-0", 3), ("tok-1", 3), ("tok-2", 3)])

        outcome = poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertEqual(outcome["status"], "judged")
        self.assertEqual(submission.status, Status.ACCEPTED)
        self.assertEqual(corrections_of(submission), [Status.ACCEPTED] * 3)
        self.schedule.assert_not_called()

    def test_first_failure_in_returned_order_wins(self):
        submission = make_submission(self.student, self.problem, [PENDING, PENDING, PENDING])
        poller = self._poller([("tok-0", 3), ("tok-1", 5), ("tok-2", 4)])

        poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertEqual(submission.status, Status.TIME_LIMIT_EXCEEDED)

    def test_earlier_round_failures_come_first(self):
        submission = make_submission(
            self.student, self.problem, [PENDING, Status.COMPILATION_ERROR, PENDING]
        )
        poller = self._poller([("tok-0", 4), ("tok-2", 3)])

        poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertEqual(self.client.calls[0], ["tok-0", "tok-2"])
        self.assertEqual(submission.status, Status.COMPILATION_ERROR)

    def test_earlier_failures_follow_judging_time(self):
        submission = make_submission(
            self.student, self.problem, [Status.WRONG_ANSWER, Status.TIME_LIMIT_EXCEEDED, PENDING]
        )
        first_round = timezone.now() - timedelta(seconds=5)
        Correction.objects.filter(submission=submission, token="tok-1").update(judged_at=first_round)
        Correction.objects.filter(submission=submission, token="tok-0").update(
            judged_at=first_round + timedelta(seconds=1)
        )
        poller = self._poller([("tok-2", 3)])

        poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertEqual(submission.status, Status.TIME_LIMIT_EXCEEDED)

    def test_terminal_correction_is_never_rewritten(self):
        submission = make_submission(self.student, self.problem, [Status.WRONG_ANSWER, PENDING])
        poller = self._poller([("tok-0", 3), ("tok-1", 3)])

        poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertEqual(corrections_of(submission), [Status.WRONG_ANSWER, Status.ACCEPTED])
        self.assertEqual(submission.status, Status.WRONG_ANSWER)

    def test_unknown_token_is_skipped(self):
        submission = make_submission(self.student, self.problem, [PENDING])
        poller = self._poller([("stranger", 4), ("tok-0", 3)])

        with self.assertLogs("submissions.poller", level="WARNING") as logs:
            poller.poll_once(submission.id)

        submission.refresh_from_db()
        self.assertIn("stranger", "\n".join(logs.output))
        self.assertEqual(submission.status, Status.ACCEPTED)

    def test_unreported_token_stays_pending(self):
        submission = make_submission(self.student, self.problem, [PENDING, PENDING])
        poller = self._poller([("tok-0", 3)])

        outcome = poller.poll_once(submission.id, 3)

        submission.refresh_from_db()
        self.assertEqual(outcome["status"], "pending")
        self.assertEqual(corrections_of(submission), [Status.ACCEPTED, PENDING])
        self.assertIsNone(submission.status)
        self.schedule.assert_called_once_with(submission.id, 2, 1)

    def test_missing_submission_is_a_no_op(self):
        poller = self._poller()

        with self.assertLogs("submissions.poller", level="WARNING"):
            outcome = poller.poll_once(uuid.uuid4())

        self.assertEqual(outcome, {"status": "not_found"})
        self.assertEqual(self.client.calls, [])
        self.schedule.assert_not_called()

    def test_judged_submission_is_left_alone(self):
        submission = make_submission(self.student, self.problem, [Status.ACCEPTED])
        Submission.objects.filter(pk=submission.pk).update(status=Status.ACCEPTED)
        poller = self._poller()

        outcome = poller.poll_once(submission.id)

        self.assertEqual(outcome["status"], "skipped")
        self.assertEqual(self.client.calls, [])

    def test_client_failure_is_logged_and_reraised(self):
        submission = make_submission(self.student, self.problem, [PENDING])
        error = requests.ConnectionError("judge0 down")
        client = Mock()
        client.fetch_results.side_effect = error
        poller = SubmissionStatusPoller(client, self.schedule)

        with self.assertLogs("submissions.poller", level="ERROR"):
            with self.assertRaises(requests.ConnectionError) as ctx:
                poller.poll_once(submission.id)

        self.assertIs(ctx.exception, error)
        submission.refresh_from_db()
        self.assertIsNone(submission.status)
        self.assertEqual(corrections_of(submission), [PENDING])
        self.schedule.assert_not_called()


class SubmissionStatusPollerPropertyTests(HypothesisTestCase):
    @given(statuses=st.lists(st.sampled_from(TERMINAL_STATUSES), min_size=1, max_size=6))
    @settings(max_examples=25, deadline=None)
    def test_overall_status_is_first_failure_or_accepted(self, statuses):
        teacher = make_user("teacher")
        problem = make_problem(teacher, cases=len(statuses))
        submission = make_submission(make_user("student"), problem, [PENDING] * len(statuses))
        round_ = [(f"tok-{i}", int(s)) for i, s in enumerate(statuses)]
        poller = SubmissionStatusPoller(FakeJudge0(round_), Mock())

        poller.poll_once(submission.id)

        submission.refresh_from_db()
        expected = next((s for s in statuses if s != Status.ACCEPTED), Status.ACCEPTED)
        self.assertEqual(submission.status, expected)
        self.assertEqual(corrections_of(submission), [int(s) for s in statuses])

    @given(
        first=st.lists(st.sampled_from(TERMINAL_STATUSES), min_size=1, max_size=4),
        second=st.lists(st.sampled_from(TERMINAL_STATUSES), min_size=1, max_size=4),
    )
    @settings(max_examples=25, deadline=None)
    def test_repolling_never_changes_terminal_corrections(self, first, second):
        teacher = make_user("teacher")
        problem = make_problem(teacher, cases=len(first) + 1)
        submission = make_submission(make_user("student"), problem, [PENDING] * (len(first) + 1))
        pending_token = f"tok-{len(first)}"
        poller = SubmissionStatusPoller(
            FakeJudge0(
                [(f"tok-{i}", int(s)) for i, s in enumerate(first)] + [(pending_token, 2)],
                [(f"tok-{i}", int(s)) for i, s in enumerate(second)],
            ),
            Mock(),
        )

        poller.poll_once(submission.id, 5)
        before = corrections_of(submission)[:len(first)]
        poller.poll_once(submission.id, 4)

        self.assertEqual(corrections_of(submission)[:len(first)], before)
