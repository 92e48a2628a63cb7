import asyncio
import contextlib
import io
import unittest
from unittest.mock import patch

import httpx

from nextcloud_search import __main__ as cli
from nextcloud_search.app_config import RuntimeEnv
from nextcloud_search.client import NextcloudClient

_PROVIDERS_BODY = {
    "ocs": {
        "meta": {"status": "ok", "statuscode": 200, "message": "OK"},
        "data": [
            {"id": "files", "name": "Files", "order": 5},
            {"id": "contacts", "name": "Contacts", "order": 7},
        ],
    }
}


def _server(version: str = "22.2.0", providers_status: int = 200, status_response: httpx.Response | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/status.php":
            if status_response is not None:
                return status_response
            return httpx.Response(200, json={"versionstring": version, "version": f"{version}.2"})
        if request.url.path == "/ocs/v2.php/search/providers":
            if providers_status != 200:
                return httpx.Response(providers_status)
            return httpx.Response(200, headers={"ETag": '"etag-1"'}, json=_PROVIDERS_BODY)
        return httpx.Response(404)

    return handler


def _run_main(handler) -> tuple[int, str]:
    client = NextcloudClient(
        "https://cloud.example.com",
        "alice",
        "pw",
        transport=httpx.MockTransport(handler),
    )
    out = io.StringIO()
    with (
        patch.object(cli, "load_dotenv"),
        patch.object(cli, "load_json_config", return_value={}),
        patch.object(cli, "setup_logging"),
        patch.object(cli, "create_client", return_value=client),
        contextlib.redirect_stdout(out),
    ):
        code = asyncio.run(cli.main())
    return code, out.getvalue()


class MainTests(unittest.TestCase):
    def test_prints_providers(self) -> None:
        code, output = _run_main(_server())

        self.assertEqual(0, code)
        self.assertIn("Nextcloud 22.2.0", output)
        self.assertIn('ETag: "etag-1"', output)
        self.assertIn("Providers (2):", output)
        self.assertIn("  - files: Files", output)
        self.assertIn("  - contacts: Contacts", output)

    def test_old_server_exits_with_error(self) -> None:
        code, output = _run_main(_server(version="19.0.10"))

        self.assertEqual(1, code)
        self.assertEqual("", output)

    def test_failed_fetch_exits_with_error(self) -> None:
        code, output = _run_main(_server(providers_status=500))

        self.assertEqual(1, code)
        self.assertNotIn("ETag", output)

    def test_missing_credentials(self) -> None:
        with (
            patch.object(cli, "load_dotenv"),
            patch.object(cli, "load_json_config", return_value={}),
            patch.object(cli, "setup_logging"),
            patch.object(cli, "resolve_runtime_env", return_value=RuntimeEnv(None, None, None)),
        ):
            code = asyncio.run(cli.main())

        self.assertEqual(1, code)

    def test_html_status_page_exits_with_error(self) -> None:
        code, output = _run_main(_server(status_response=httpx.Response(200, text="<html>login</html>")))

        self.assertEqual(1, code)
        self.assertEqual("", output)

    def test_list_status_body_exits_with_error(self) -> None:
        code, output = _run_main(_server(status_response=httpx.Response(200, json=[1])))

        self.assertEqual(1, code)
        self.assertEqual("", output)
