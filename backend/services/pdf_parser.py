import io
import logging

import pdfplumber

from services.errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract the text of every page, in page order, joined by a single space.

    Raises ExtractionError if the payload is not a readable PDF. A PDF
    without any text layer yields an empty string.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        raise ExtractionError("Could not parse PDF file") from e

    logger.debug("Extracted %d page(s) from PDF", len(pages))
    return " ".join(pages)
