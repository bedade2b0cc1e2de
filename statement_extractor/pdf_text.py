# statement_extractor/pdf_text.py
import logging
import os

import pdfplumber

from statement_extractor.errors import UnknownFileType

logger = logging.getLogger(__name__)


def pdf_to_text(path):
    """Linearize a PDF keeping the column layout of its tables."""
    pages = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text(layout=True) or "")
    logger.debug("Extracted %d page(s) from %s", len(pages), path)
    return "\n".join(pages)


def plain_to_text(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


READERS = {
    '.pdf': pdf_to_text,
    '.txt': plain_to_text,
}


def read_statement_text(path):
    ext = os.path.splitext(str(path))[1].lower()
    reader = READERS.get(ext)
    if reader is None:
        raise UnknownFileType(path)
    return reader(path)
