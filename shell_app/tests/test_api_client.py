# shell_app/tests/test_api_client.py
import json as jsonlib

import pytest
import requests

from shell_app.api.api_client import ItqUtilsClient, MethodNotImplementedError


class StubResponse:
    def __init__(self, status_code, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ("" if body is None else jsonlib.dumps(body))

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def make_client(response=None, error=None):
    session = StubSession(response, error)
    return ItqUtilsClient("http://svc.test/", session=session), session


def test_get_platform_version_posts_method_call():
    client, session = make_client(StubResponse(200, {"method": "getPlatformVersion", "result": "iOS 17.0"}))

    assert client.get_platform_version() == "iOS 17.0"
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://svc.test/api/v1/itq_utils/invoke"
    assert call["json"] == {"method": "getPlatformVersion", "arguments": None}
    assert call["timeout"] == 8


def test_package_info_returns_record():
    record = {"appName": "Demo", "packageName": "com.example.demo",
              "versionCode": "42", "versionName": "1.2.3"}
    client, _ = make_client(StubResponse(200, {"method": "packageInfo", "result": record}))
    assert client.package_info() == record


def test_not_implemented_raises_dedicated_error():
    detail = {"code": "notImplemented", "method": "unknownMethod",
              "message": "Method 'unknownMethod' is not implemented"}
    client, _ = make_client(StubResponse(501, {"detail": detail}))

    with pytest.raises(MethodNotImplementedError) as exc_info:
        client.invoke_method("unknownMethod")
    assert exc_info.value.method == "unknownMethod"
    assert isinstance(exc_info.value, RuntimeError)


def test_http_error_carries_detail():
    client, _ = make_client(StubResponse(500, {"detail": "Failed to handle method call"}))
    with pytest.raises(RuntimeError, match="HTTP 500: Failed to handle method call"):
        client.package_info()


def test_http_error_without_json_uses_text():
    client, _ = make_client(StubResponse(502, text="Bad Gateway"))
    with pytest.raises(RuntimeError, match="HTTP 502: Bad Gateway"):
        client.get_platform_version()


@pytest.mark.parametrize("body", [["oops"], "oops", {"error": "upstream down"}])
def test_http_error_with_non_object_json_uses_text(body):
    client, _ = make_client(StubResponse(500, body))
    with pytest.raises(RuntimeError, match="HTTP 500: ") as exc_info:
        client.get_platform_version()
    assert not isinstance(exc_info.value, MethodNotImplementedError)
    assert jsonlib.dumps(body) in str(exc_info.value)


def test_501_without_detail_object_is_plain_runtime_error():
    client, _ = make_client(StubResponse(501, ["not", "here"]))
    with pytest.raises(RuntimeError, match="HTTP 501") as exc_info:
        client.invoke_method("unknownMethod")
    assert not isinstance(exc_info.value, MethodNotImplementedError)


def test_network_error():
    client, _ = make_client(error=requests.ConnectionError("refused"))
    with pytest.raises(RuntimeError, match="Network error: refused"):
        client.get_platform_version()


def test_list_methods_and_custom_channel():
    session = StubSession(StubResponse(200, {"channel": "nb_utils", "methods": ["packageInfo"]}))
    client = ItqUtilsClient("http://svc.test", session=session, channel="nb_utils", timeout=2)

    assert client.list_methods()["methods"] == ["packageInfo"]
    assert session.calls[0]["url"] == "http://svc.test/api/v1/nb_utils/methods"
    assert session.calls[0]["timeout"] == 2


def test_empty_body_is_empty_result():
    client, _ = make_client(StubResponse(200, text="  "))
    assert client.invoke_method("getPlatformVersion") is None
