from unittest.mock import Mock, patch

import pytest
import requests

from submissions.judge0_client import (
    Judge0Client,
    Judge0Error,
    Judge0Result,
    convert_language_code,
)


def fake_response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def client():
    return Judge0Client("http://judge0.local/", auth_token="secret", timeout=5)


@pytest.mark.parametrize("language_type,expected", [(0, 50), (1, 54), (2, 71), (3, 62), (4, 63)])
def test_convert_language_code(language_type, expected):
    assert convert_language_code(language_type) == expected


def test_convert_language_code_rejects_unknown():
    with pytest.raises(Judge0Error):
        convert_language_code(9)


def test_fetch_results_drops_null_entries(client):
    payload = {"submissions": [{"token": "a", "status_id": 3}, None, {"token": "c", "status_id": 2}]}

    with patch("submissions.judge0_client.requests.get", return_value=fake_response(payload)) as get:
        results = client.fetch_results(["a", "b", "c"])

    assert results == [Judge0Result("a", 3), Judge0Result("c", 2)]
    args, kwargs = get.call_args
    assert args[0] == "http://judge0.local/submissions/batch"
    assert kwargs["params"]["tokens"] == "a,b,c"
    assert kwargs["params"]["fields"] == "token,status_id"
    assert kwargs["headers"]["X-Auth-Token"] == "secret"
    assert kwargs["timeout"] == 5


def test_fetch_results_without_tokens_skips_http(client):
    with patch("submissions.judge0_client.requests.get") as get:
        assert client.fetch_results([]) == []
    get.assert_not_called()


def test_fetch_results_http_error_propagates(client):
    with patch("submissions.judge0_client.requests.get", return_value=fake_response({}, 503)):
        with pytest.raises(requests.HTTPError):
            client.fetch_results(["a"])


def test_submit_batch_returns_tokens_in_order(client):
    items = [{"language_id": 71, "source_code": "print(1)"}, {"language_id": 71, "source_code": "print(2)"}]

    with patch(
        "submissions.judge0_client.requests.post",
        return_value=fake_response([{"token": "t1"}, {"token": "t2"}], 201),
    ) as post:
        tokens = client.submit_batch(items)

    assert tokens == ["t1", "t2"]
    kwargs = post.call_args[1]
    assert kwargs["json"] == {"submissions": items}
    assert kwargs["params"] == {"base64_encoded": "false"}


def test_submit_batch_item_error_raises(client):
    answer = [{"token": "t1"}, {"language_id": ["language with id 999 doesn't exist"]}]

    with patch("submissions.judge0_client.requests.post", return_value=fake_response(answer, 201)):
        with pytest.raises(Judge0Error):
            client.submit_batch([{}, {}])


def test_headers_without_token_have_no_auth():
    anonymous = Judge0Client("http://judge0.local")
    assert "X-Auth-Token" not in anonymous._headers()
