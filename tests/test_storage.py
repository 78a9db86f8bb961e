from lawyeredup import config, storage
from lawyeredup.data import SAMPLE_DOCUMENT
from lawyeredup.models import DocumentAnalysis, DocumentClause


def _document(title="My Lease"):
    return DocumentAnalysis(
        title=title,
        summary="Short lease.",
        clauses=[DocumentClause(id="C1", clauseTitle="Rent", text="Rent is $1.", risk="negotiable",
                                summary_eli5="Pay rent.", summary_eli15="Pay the monthly rent.",
                                counterProposal="Lower rent.")],
    )


def test_empty_store_returns_sample():
    assert not storage.has_document()
    doc = storage.load_document()
    assert doc.title == "Standard Residential Lease Agreement"
    assert len(doc.clauses) == 10


def test_sample_is_not_shared():
    storage.load_document().clauses.clear()
    assert len(SAMPLE_DOCUMENT.clauses) == 10


def test_save_and_load_round_trip(tmp_db):
    storage.save_document(_document())
    assert tmp_db.exists()
    assert storage.load_document() == _document()


def test_save_replaces_previous():
    storage.save_document(_document("First"))
    storage.save_document(_document("Second"))
    assert storage.load_document().title == "Second"


def test_clear_document():
    storage.save_document(_document())
    storage.clear_document()
    assert not storage.has_document()
    assert storage.load_document().title == SAMPLE_DOCUMENT.title


def test_stored_under_document_key():
    storage.save_document(_document())
    assert '"title":"My Lease"' in storage.get_item(config.DOCUMENT_KEY)


def test_unreadable_document_falls_back_to_sample():
    storage.set_item(config.DOCUMENT_KEY, '{"title": 5}')
    assert storage.load_document().title == SAMPLE_DOCUMENT.title


def test_sample_counts():
    risks = [c.risk for c in SAMPLE_DOCUMENT.clauses]
    assert risks.count("risky") == 1
    assert risks.count("negotiable") == 2
    assert len(SAMPLE_DOCUMENT.counter_proposals()) == 3
