import unittest
from unittest.mock import patch

from gdrivecheck.auth import ApiKeyClient, AuthInfo
from gdrivecheck.errors import AuthError


class TestApiKeyClient(unittest.TestCase):
    def test_build_drive_service_uses_developer_key(self) -> None:
        client = ApiKeyClient(AuthInfo.from_api_key("AIza-test"))

        with patch("googleapiclient.discovery.build") as build:
            build.return_value = "service"
            service = client.build_drive_service()

        self.assertEqual(service, "service")
        args, kwargs = build.call_args
        self.assertEqual(args, ("drive", "v3"))
        self.assertEqual(kwargs["developerKey"], "AIza-test")
        self.assertFalse(kwargs["cache_discovery"])

    def test_build_failure_is_auth_error(self) -> None:
        client = ApiKeyClient(AuthInfo.from_api_key("AIza-test"))

        with patch("googleapiclient.discovery.build", side_effect=RuntimeError("boom")):
            with self.assertRaises(AuthError) as ctx:
                client.build_drive_service()

        self.assertIsInstance(ctx.exception.cause, RuntimeError)


if __name__ == "__main__":
    unittest.main()
