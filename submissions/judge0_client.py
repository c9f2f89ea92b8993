"""
Judge0 API Client

Wraps the batch endpoints of the Judge0 code-execution service.
"""

import logging
from typing import Iterable, List, NamedTuple

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


# Django language code -> Judge0 language id
LANGUAGE_IDS = {
    0: 50,  # C (GCC 9.2.0)
    1: 54,  # C++ (GCC 9.2.0)
    2: 71,  # Python (3.8.1)
    3: 62,  # Java (OpenJDK 13.0.1)
    4: 63,  # JavaScript (Node.js 12.14.0)
}


class Judge0Error(Exception):
    """Judge0 answered, but not with something we can use."""


class Judge0Result(NamedTuple):
    token: str
    status_id: int


def convert_language_code(language_type):
    """
    Django: 0=C, 1=C++, 2=Python, 3=Java, 4=JavaScript
    Judge0: 50, 54, 71, 62, 63
    """
    try:
        return LANGUAGE_IDS[language_type]
    except KeyError:
        raise Judge0Error(f'Unsupported language type: {language_type}')


def build_batch_item(submission, test_case):
    """One Judge0 run of ``submission`` against ``test_case``."""
    problem = submission.problem
    return {
        'language_id': convert_language_code(submission.language_type),
        'source_code': submission.source_code,
        'stdin': test_case.input_data,
        'expected_output': test_case.expected_output,
        'cpu_time_limit': problem.time_limit_ms / 1000.0,  # seconds
        'memory_limit': problem.memory_limit_mb * 1024,  # KB
    }


class Judge0Client:
    def __init__(self, base_url, auth_token='', timeout=30):
        self.base_url = base_url.rstrip('/')
        self.auth_token = auth_token
        self.timeout = timeout

    @classmethod
    def from_settings(cls):
        return cls(
            base_url=settings.JUDGE0_API_URL,
            auth_token=getattr(settings, 'JUDGE0_AUTH_TOKEN', ''),
            timeout=getattr(settings, 'JUDGE0_TIMEOUT', 30),
        )

    def _headers(self):
        headers = {'Content-Type': 'application/json'}
        if self.auth_token:
            headers['X-Auth-Token'] = self.auth_token
        return headers

    def submit_batch(self, items: List[dict]) -> List[str]:
        """
        Create one Judge0 submission per item.

        Returns:
            list: tokens, in the order of ``items``

        Raises:
            requests.RequestException: transport or HTTP failure
            Judge0Error: an item was answered with an error instead of a token
        """
        url = f'{self.base_url}/submissions/batch'
        logger.info(f'Submitting {len(items)} item(s) to Judge0')

        response = requests.post(
            url,
            params={'base64_encoded': 'false'},
            json={'submissions': items},
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()

        answers = response.json()
        if not isinstance(answers, list) or len(answers) != len(items):
            raise Judge0Error(f'Unexpected batch answer: {answers!r}')

        tokens = []
        for index, answer in enumerate(answers):
            token = answer.get('token') if isinstance(answer, dict) else None
            if not token:
                raise Judge0Error(f'Judge0 rejected item {index}: {answer!r}')
            tokens.append(token)
        return tokens

    def fetch_results(self, tokens: Iterable[str]) -> List[Judge0Result]:
        """
        Current status of each token. Tokens Judge0 does not know come back
        as ``null`` and are dropped.

        Raises:
            requests.RequestException: transport or HTTP failure
        """
        tokens = list(tokens)
        if not tokens:
            return []

        url = f'{self.base_url}/submissions/batch'
        response = requests.get(
            url,
            params={
                'tokens': ','.join(tokens),
                'base64_encoded': 'false',
                'fields': 'token,status_id',
            },
            headers=self._headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()

        results = []
        for entry in response.json().get('submissions', []):
            if entry is None:
                continue
            results.append(Judge0Result(token=entry['token'], status_id=int(entry['status_id'])))
        logger.debug(f'Judge0 returned {len(results)} result(s) for {len(tokens)} token(s)')
        return results
