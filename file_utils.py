# file_utils.py
# Contains utility functions for extracting a base text from files.

import os

import docx
import pdfplumber
from loguru import logger

from utils import InvalidInput


def extract_text_from_pdf(pdf_file_path):
    """Extracts all text from a PDF file."""
    text = ""
    try:
        with pdfplumber.open(pdf_file_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text
    except Exception as e:
        logger.error(f"PDF Error: {pdf_file_path} -> {e}")
        return None


def extract_text_from_docx(docx_file_path):
    """Extracts all text from a DOCX file."""
    try:
        doc = docx.Document(docx_file_path)
        return "\n".join(para.text for para in doc.paragraphs)
    except Exception as e:
        logger.error(f"DOCX Error: {docx_file_path} -> {e}")
        return None


def extract_text_from_txt(txt_file_path):
    try:
        with open(txt_file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"TXT Error: {txt_file_path} -> {e}")
        return None


EXTRACTORS = {
    ".pdf": extract_text_from_pdf,
    ".docx": extract_text_from_docx,
    ".txt": extract_text_from_txt,
}


def extract_text(file_path):
    """Picks the extractor by file extension. Returns None if the file could not be read."""
    ext = os.path.splitext(str(file_path))[1].lower()
    if ext not in EXTRACTORS:
        raise InvalidInput(f"unsupported file type {ext or '(none)'!r}, expected one of {', '.join(EXTRACTORS)}")
    logger.info(f"Reading base text from {file_path}")
    return EXTRACTORS[ext](file_path)
