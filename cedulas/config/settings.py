from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    ocr_service_port: int = 3000

    pdf_engine: str = "pdfplumber"

    pdf_extractor_url: str = ""
    pdf_extractor_timeout_seconds: int = 30

    ocr_max_pages: int = 5
    ocr_min_text_length: int = 50
    ocr_language: str = "spa"
    ocr_dpi: int = 150
    ocr_page_timeout_seconds: int = 12
    ocr_endpoint_timeout_seconds: int = 28
    max_upload_bytes: int = 50 * 1024 * 1024
    raw_preview_length: int = 500

    supabase_url: str = ""
    supabase_service_role_key: str = ""
    storage_bucket: str = "cedulas"
    storage_timeout_seconds: int = 30
