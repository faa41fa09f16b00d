class OcrError(Exception):
    """Raised when a PDF cannot be rasterized for OCR."""
