import pytest
from pydantic import ValidationError

from cedulas.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_ocr_limits(self) -> None:
        s = Settings()
        assert s.ocr_max_pages == 5
        assert s.ocr_min_text_length == 50
        assert s.ocr_language == "spa"

    def test_default_upload_limit(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 50 * 1024 * 1024

    def test_default_pdf_extractor_timeout(self) -> None:
        s = Settings()
        assert s.pdf_extractor_timeout_seconds == 30

    def test_default_storage_bucket(self) -> None:
        s = Settings()
        assert s.storage_bucket == "cedulas"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_pdf_extractor_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_EXTRACTOR_URL", "http://extractor:3000/extract")
        s = Settings()
        assert s.pdf_extractor_url == "http://extractor:3000/extract"

    def test_loads_ocr_max_pages(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MAX_PAGES", "3")
        s = Settings()
        assert s.ocr_max_pages == 3


class TestSettingsValidation:
    def test_invalid_ocr_max_pages_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_MAX_PAGES", "many")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_api_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()
