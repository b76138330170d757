"""
Test base text extraction from files
"""
import docx
import pytest

from file_utils import extract_text, extract_text_from_docx, extract_text_from_pdf, extract_text_from_txt
from utils import InvalidInput


def test_reads_txt(tmp_path) -> None:
    path = tmp_path / "base.txt"
    path.write_text("Sampletestsampletestingsample.", encoding="utf-8")
    assert extract_text_from_txt(path) == "Sampletestsampletestingsample."


def test_missing_txt_returns_none(tmp_path) -> None:
    assert extract_text_from_txt(tmp_path / "missing.txt") is None


def test_reads_docx_paragraphs(tmp_path) -> None:
    path = tmp_path / "base.docx"
    document = docx.Document()
    document.add_paragraph("first paragraph")
    document.add_paragraph("second paragraph")
    document.save(str(path))
    assert extract_text_from_docx(str(path)) == "first paragraph\nsecond paragraph"


def test_broken_pdf_returns_none(tmp_path) -> None:
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")
    assert extract_text_from_pdf(path) is None


def test_dispatches_on_extension(tmp_path) -> None:
    path = tmp_path / "BASE.TXT"
    path.write_text("abc", encoding="utf-8")
    assert extract_text(path) == "abc"


def test_unsupported_extension_is_rejected(tmp_path) -> None:
    with pytest.raises(InvalidInput):
        extract_text(tmp_path / "table.csv")
