from readability_consensus.models import Document
from readability_consensus.pipeline import process_corpus, process_document
from tests.utils import SIMPLE_PARAGRAPH, make_readability


def test_process_document_builds_report():
    doc = Document(doc_id="doc", text=SIMPLE_PARAGRAPH)
    report = process_document(doc, make_readability())
    assert report.doc_id == "doc"
    assert report.text_standard_label == "2nd and 3rd grade"


def test_process_corpus_keys_reports_by_doc_id():
    documents = [
        Document(doc_id="a.txt", text=SIMPLE_PARAGRAPH),
        Document(doc_id="b.txt", text=""),
    ]
    results = process_corpus(documents, make_readability())
    assert sorted(results) == ["a.txt", "b.txt"]
    assert results["b.txt"].counts.lexicon_count == 0
    assert results["b.txt"].counts.sentence_count == 1
    assert results["b.txt"].gunning_fog == 0.0
