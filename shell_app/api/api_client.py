# shell_app/api/api_client.py
"""
Small ItqUtilsClient wrapper around requests.Session for the application shell.
Centralizes timeouts, error messages and the itq_utils endpoints.
"""
import requests
from typing import Optional, Dict, Any

DEFAULT_TIMEOUT = 8     # seconds
DEFAULT_CHANNEL = "itq_utils"


class MethodNotImplementedError(RuntimeError):
    """
    The service answered 'notImplemented' for the requested method.
    """
    def __init__(self, method: str, message: Optional[str] = None):
        self.method = method
        super().__init__(message or f"Method '{method}' is not implemented")


class ItqUtilsClient:
    """
    Client side of the itq_utils channel.
    All HTTP traffic MUST go through _request().
    """
    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 timeout: int = DEFAULT_TIMEOUT, channel: str = DEFAULT_CHANNEL):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.channel = channel

    # --------------------------------------------------
    # Core request handler (single source of truth)
    # --------------------------------------------------
    def _request(self, method: str, path: str, *, json: Optional[dict] = None,
                 params: Optional[dict] = None, headers: Optional[dict] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/api/v1/{self.channel}{path}"
        try:
            resp = self.session.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            if resp.text.strip() == "":
                return {}
            return resp.json()

        except requests.HTTPError as e:
            # Try extracting FastAPI error message
            try:
                body = resp.json()
            except ValueError:
                body = None

            if isinstance(body, dict) and "detail" in body:
                detail = body["detail"]
            else:
                detail = resp.text or "HTTP Error"

            if resp.status_code == 501 and isinstance(detail, dict):
                raise MethodNotImplementedError(detail.get("method", ""), detail.get("message")) from e

            raise RuntimeError(f"HTTP {resp.status_code}: {detail}") from e

        except requests.RequestException as e:
            raise RuntimeError(f"Network error: {str(e)}") from e

    # --------------------------------------------------
    # Channel methods
    # --------------------------------------------------

    def invoke_method(self, name: str, arguments: Any = None) -> Any:
        body = self._request(
            method="POST",
            path="/invoke",
            json={
                "method": name,
                "arguments": arguments,
            },
        )
        return body.get("result")


    def get_platform_version(self) -> str:
        return self.invoke_method("getPlatformVersion")


    def package_info(self) -> Dict[str, str]:
        return self.invoke_method("packageInfo")


    def list_methods(self) -> Dict[str, Any]:
        return self._request(
            method="GET",
            path="/methods",
        )
