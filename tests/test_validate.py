import json

import pytest

from palindrome_policy.validate import (
    HTTP_BAD_REQUEST,
    accept_request,
    accept_settings,
    reject_request,
    reject_settings,
    validate,
    validate_settings,
)


def _pod(labels=None):
    metadata = {"name": "test-pod", "namespace": "default"}
    if labels is not None:
        metadata["labels"] = labels
    return {"metadata": metadata}


def _request(pod, allowed=None):
    return json.dumps(
        {
            "request": {
                "uid": "1299d386-525b-4032-98ae-1949f69f9cfc",
                "kind": {"group": "", "version": "v1", "kind": "Pod"},
                "operation": "CREATE",
                "object": pod,
            },
            "settings": {"allowed_palindromes": allowed},
        }
    ).encode()


def test_validate_settings_success():
    result = json.loads(validate_settings(b'{"allowed_palindromes": ["bob", "aba"]}'))
    assert result["valid"] is True


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (b"{", "policy settings not valid, error during the unmarshal"),
        (b'{"allowed_palindromes": ["rancher"]}', "provided settings are not valid"),
    ],
)
def test_validate_settings_errors(payload, expected):
    result = json.loads(validate_settings(payload))
    assert result["valid"] is False
    assert expected in result["message"]


def test_validate_settings_wrong_type_is_unmarshal_error():
    result = json.loads(validate_settings(b'{"allowed_palindromes": 5}'))
    assert result["valid"] is False
    assert "error during the unmarshal" in result["message"]


@pytest.mark.parametrize(
    ("pod", "allowed"),
    [
        (_pod({"env": "development"}), None),
        (_pod(), None),
        (_pod({"level": "error"}), ["level"]),
    ],
)
def test_validate_success(pod, allowed):
    result = json.loads(validate(_request(pod, allowed)))
    assert result["accepted"] is True


@pytest.mark.parametrize("allowed", [None, ["aba"]])
def test_validate_pod_labels_error(allowed):
    result = json.loads(validate(_request(_pod({"level": "error"}), allowed)))
    assert result["accepted"] is False
    assert "code" not in result
    assert "pod label with key level not allowed, the word is a palindrome" in result["message"]


def test_validate_reports_first_offending_label():
    result = json.loads(validate(_request(_pod({"env": "x", "aba": "1", "level": "2"}))))
    assert result["message"] == "pod label with key aba not allowed, the word is a palindrome"


def test_validate_invalid_json_is_bad_request():
    result = json.loads(validate(b"{"))
    assert result["accepted"] is False
    assert result["code"] == HTTP_BAD_REQUEST


def test_validate_missing_settings_is_bad_request():
    result = json.loads(validate(json.dumps({"request": {"object": _pod()}})))
    assert result["accepted"] is False
    assert result["code"] == HTTP_BAD_REQUEST
    assert "could not create a settings from a validation request" in result["message"]


def test_validate_without_object_accepts():
    result = json.loads(validate(json.dumps({"settings": {}})))
    assert result["accepted"] is True


def test_accept_and_reject_request_encoding():
    assert accept_request() == b'{"accepted":true}'
    assert reject_request("no", 400) == b'{"accepted":false,"message":"no","code":400}'
    assert reject_request("no", None) == b'{"accepted":false,"message":"no"}'


def test_accept_and_reject_settings_encoding():
    assert accept_settings() == b'{"valid":true}'
    assert reject_settings("bad") == b'{"valid":false,"message":"bad"}'