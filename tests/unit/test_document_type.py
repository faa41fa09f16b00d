import pytest

from cedulas.extractors import (
    DocumentType,
    detect_type,
    detect_type_from_filename,
    detect_type_from_text,
)


class TestDetectTypeFromText:
    def test_detects_cedula(self) -> None:
        assert detect_type_from_text("CEDULA DE NOTIFICACION Señor: ...") is DocumentType.CEDULA

    def test_detection_is_case_insensitive(self) -> None:
        assert detect_type_from_text("cedula de notificacion") is DocumentType.CEDULA

    def test_detects_oficio_at_start(self) -> None:
        assert detect_type_from_text("OFICIO\nSeñor Director del Banco") is DocumentType.OFICIO

    def test_oficio_wins_over_cedula(self) -> None:
        text = "OFICIO en reemplazo de CEDULA DE NOTIFICACION"
        assert detect_type_from_text(text) is DocumentType.OFICIO

    def test_oficio_inside_first_200_chars_wins(self) -> None:
        text = "CEDULA " + "x" * 100 + " OFICIO"
        assert detect_type_from_text(text) is DocumentType.OFICIO

    def test_oficio_after_200_chars_is_ignored(self) -> None:
        text = "CEDULA " + "x" * 250 + " OFICIO"
        assert detect_type_from_text(text) is DocumentType.CEDULA

    def test_cedula_after_500_chars_is_ignored(self) -> None:
        text = "x" * 510 + " CEDULA"
        assert detect_type_from_text(text) is None

    def test_requires_whole_word(self) -> None:
        assert detect_type_from_text("OFICIOSO CEDULAR") is None

    def test_window_applies_after_whitespace_collapse(self) -> None:
        text = " " * 400 + "\n\n" + "CEDULA"
        assert detect_type_from_text(text) is DocumentType.CEDULA

    @pytest.mark.parametrize("text", ["", "   ", "\n\r\t"])
    def test_empty_text_is_unknown(self, text: str) -> None:
        assert detect_type_from_text(text) is None


class TestDetectTypeFromFilename:
    def test_oficio_substring_wins(self) -> None:
        assert detect_type_from_filename("oficio_cedula_banco.pdf") is DocumentType.OFICIO

    def test_cedula_substring(self) -> None:
        assert detect_type_from_filename("Cedula-Perez.pdf") is DocumentType.CEDULA

    def test_substring_match_inside_words(self) -> None:
        assert detect_type_from_filename("notificacionCEDULAS.pdf") is DocumentType.CEDULA

    def test_unknown_filename(self) -> None:
        assert detect_type_from_filename("escrito.pdf") is None

    def test_empty_filename(self) -> None:
        assert detect_type_from_filename("") is None


class TestDetectType:
    def test_uses_text_when_present(self) -> None:
        assert detect_type("CEDULA DE NOTIFICACION", "oficio.docx") is DocumentType.CEDULA

    def test_text_without_match_does_not_use_filename(self) -> None:
        assert detect_type("escrito sin tipo", "oficio.docx") is None

    def test_falls_back_to_filename_without_text(self) -> None:
        assert detect_type("  ", "oficio_cedula_banco.pdf") is DocumentType.OFICIO
