import os
import unittest

from gdrivecheck import AuthInfo, RequestDispatcher


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()


@unittest.skipUnless(
    _env("GDRIVECHECK_API_KEY") and _env("GDRIVECHECK_TEST_PDF_LINK"),
    "GDRIVECHECK_API_KEY / GDRIVECHECK_TEST_PDF_LINK not set",
)
class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive.

    Required env vars:
        - GDRIVECHECK_API_KEY: Google API key with the Drive API enabled
        - GDRIVECHECK_TEST_PDF_LINK: "anyone with the link" URL of a PDF file

    Optional:
        - GDRIVECHECK_TEST_FOLDER_LINK: public folder link containing an image
    """

    @classmethod
    def setUpClass(cls) -> None:
        auth_info = AuthInfo.from_api_key(_env("GDRIVECHECK_API_KEY"))
        cls.dispatcher = RequestDispatcher(auth_info)

    def test_public_pdf_file(self) -> None:
        link = _env("GDRIVECHECK_TEST_PDF_LINK")
        self.assertTrue(self.dispatcher.dispatch(link, "pdf"))
        self.assertFalse(self.dispatcher.dispatch(link, "video"))

    def test_public_folder(self) -> None:
        link = _env("GDRIVECHECK_TEST_FOLDER_LINK")
        if not link:
            self.skipTest("GDRIVECHECK_TEST_FOLDER_LINK not set")
        self.assertTrue(self.dispatcher.dispatch(link, "image"))


if __name__ == "__main__":
    unittest.main()
