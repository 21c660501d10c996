from __future__ import annotations

from typing import Dict, List

from .models import Document, ReadabilityReport
from .readability import Readability


def process_document(doc: Document, readability: Readability) -> ReadabilityReport:
    """Score a single document with every readability formula."""
    return readability.report(doc.text, doc_id=doc.doc_id)


def process_corpus(
    documents: List[Document], readability: Readability
) -> Dict[str, ReadabilityReport]:
    """Process all documents and return the per-document reports."""
    results: Dict[str, ReadabilityReport] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, readability)
    return results
