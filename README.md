# palindrome-policy

An admission policy for pods. A pod is rejected when one of its label keys is a
palindrome, unless the policy settings list that key as an allowed palindrome.
Case is ignored, so `level`, `aBA` and `aba-aba` all count as palindromes.

## Settings

The policy takes a JSON object with one optional key:

```json
{
  "allowed_palindromes": ["level", "bob"]
}
```

Every entry must be a palindrome itself; settings that break this rule are
reported as invalid. A missing key or `null` means no palindrome is allowed.

## Responses

Both operations take a JSON payload as bytes (or text) and return a compact
JSON document as UTF-8 bytes.

- `validate` expects a validation request with a `settings` object and a
  `request.object` holding the pod. It answers `{"accepted":true}`, or
  `{"accepted":false,"message":...}` when a label key is a palindrome that is
  not allowed. A payload that cannot be decoded, or has no `settings`, is
  rejected with `"code":400` and the decoding error as message.
- `validate_settings` expects the settings object alone. It answers
  `{"valid":true}`, or `{"valid":false,"message":...}` where the message starts
  with `policy settings not valid, error during the unmarshal` or
  `provided settings are not valid`.

## Using it from Python

```python
import json
from palindrome_policy.validate import validate, validate_settings

settings_response = json.loads(
    validate_settings(b'{"allowed_palindromes": ["level"]}')
)
print(settings_response["valid"])  # True

request = {
    "request": {
        "object": {
            "metadata": {"name": "test-pod", "labels": {"level": "error"}}
        }
    },
    "settings": {},
}
response = json.loads(validate(json.dumps(request).encode()))
print(response["accepted"])  # False
print(response["message"])
# pod label with key level not allowed, the word is a palindrome
```

The building blocks can be used directly as well:

```python
from palindrome_policy.palindrome import is_palindrome
from palindrome_policy.settings import AllowedPalindromeError, Settings

is_palindrome("aBA")  # True

settings = Settings.from_mapping({"allowed_palindromes": ["rancher"]})
settings.is_allowed_palindrome("rancher")  # True
try:
    settings.validate()
except AllowedPalindromeError as err:
    print(err)
    # rancher is not a palindrome, it could not be used as allowed palindrome
```

`settings_from_validation_request` pulls the settings out of a decoded
validation request and raises `SettingsError` when they are missing or
malformed. The response builders `accept_request`, `reject_request`,
`accept_settings` and `reject_settings` are available from
`palindrome_policy.validate`.

## Command line

Installing the package provides the `palindrome-policy` command. It runs one
operation, `validate` or `validate_settings`, on a JSON payload read from a file
given with `-i`/`--input`, or from standard input, and prints the JSON response.
Log messages go to standard error.

```
palindrome-policy --help
palindrome-policy validate_settings -i settings.json
echo '{"allowed_palindromes": ["bob"]}' | palindrome-policy validate_settings
```

## What it does not do

The package evaluates payloads handed to it from Python or the command line. It
does not serve admission requests over the network and does not connect to a
cluster; wiring it into an admission controller is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```