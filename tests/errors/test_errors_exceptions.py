import unittest

from gdrivecheck.errors.exceptions import (
    ApiError,
    AuthError,
    GDriveCheckError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidCategoryError,
    InvalidLinkError,
    InvalidRequestError,
    NotFoundError,
    PermissionError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveCheckError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.message, "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_request_and_provider_branches_are_disjoint(self) -> None:
        self.assertTrue(issubclass(InvalidCategoryError, InvalidRequestError))
        self.assertTrue(issubclass(InvalidRequestError, RequestError))
        self.assertTrue(issubclass(InvalidLinkError, RequestError))
        for cls in (AuthError, NotFoundError, RateLimitError, ApiError):
            self.assertTrue(issubclass(cls, ProviderError))
            self.assertFalse(issubclass(cls, RequestError))

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="File not found: X."))
        self.assertIsInstance(err, NotFoundError)
        self.assertEqual(str(err), "File not found: X.")

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=409, message="conflict"))
        self.assertIsInstance(err, ApiError)

        err = map_http_error(HttpErrorInfo(status_code=412, message="precondition"))
        self.assertIsInstance(err, ApiError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="dailyLimitExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_default_message_and_details(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=503, reason="backendError", details={"domain": "global"})
        )
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "HTTP error 503")
        self.assertEqual(err.details["status_code"], 503)
        self.assertEqual(err.details["reason"], "backendError")
        self.assertEqual(err.details["domain"], "global")

    def test_map_http_error_other_is_api_error(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=418, message="teapot"))
        self.assertIsInstance(err, ApiError)


if __name__ == "__main__":
    unittest.main()
