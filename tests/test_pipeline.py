import io

import pytest

from conftest import parse_response, risk_response
from lawyeredup import pipeline, storage
from lawyeredup.errors import EmptyDocumentError, FlowOutputError, UnsupportedFileTypeError
from lawyeredup.schemas import ParseUploadedDocumentOutput, RiskObject


def _parsed(**kwargs):
    return ParseUploadedDocumentOutput.model_validate(parse_response(**kwargs))


def _risk(clause_id, level="HIGH", risky=True, issue="Issue.", change="Change."):
    return RiskObject(clauseId=clause_id, riskLevel=level, issue=issue, suggestedChange=change, isRisky=risky)


# ---------------------------------------------------------------------------
# Merge rules
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("entry, expected", [
    (None, "standard"),
    (_risk("C1", "HIGH"), "risky"),
    (_risk("C1", "MEDIUM"), "negotiable"),
    (_risk("C1", "LOW"), "negotiable"),
    (_risk("C1", "HIGH", risky=False), "standard"),
])
def test_classify_risk(entry, expected):
    assert pipeline.classify_risk(entry) == expected


def test_build_document_merges_by_clause_id():
    doc = pipeline.build_document(_parsed(), [RiskObject.model_validate(r) for r in risk_response()])

    assert doc.title == "Residential Lease"
    assert [c.id for c in doc.clauses] == ["C1", "C2", "C3"]
    c1, c2, c3 = doc.clauses

    assert c1.risk == "standard"
    assert c1.clauseTitle == "Parties"
    assert c1.summary_eli5 == pipeline.DEFAULT_ELI5
    assert c1.summary_eli15 == pipeline.DEFAULT_ELI15
    assert c1.counterProposal is None

    assert c2.risk == "risky"
    assert c2.summary_eli5 == c2.summary_eli15 == "The deposit is unusually large."
    assert c2.counterProposal == "Limit the deposit to one month's rent."

    assert c3.risk == "negotiable"


def test_build_document_uses_explanation_without_risk_entry():
    doc = pipeline.build_document(_parsed(), [])
    c2 = doc.clauses[1]
    assert c2.risk == "standard"
    assert c2.summary_eli5 == c2.summary_eli15 == "Deposit is twice the monthly rent."


def test_non_risky_entry_still_supplies_text():
    doc = pipeline.build_document(_parsed(), [_risk("C1", "LOW", risky=False, issue="Fine.", change="None needed.")])
    c1 = doc.clauses[0]
    assert c1.risk == "standard"
    assert c1.summary_eli5 == "Fine."
    assert c1.counterProposal == "None needed."


def test_last_duplicate_risk_entry_wins():
    risks = [_risk("C2", "HIGH", issue="first"), _risk("C2", "MEDIUM", issue="second")]
    c2 = pipeline.build_document(_parsed(), risks).clauses[1]
    assert c2.risk == "negotiable"
    assert c2.summary_eli5 == "second"


def test_unknown_clause_ids_are_ignored():
    doc = pipeline.build_document(_parsed(), [_risk("C99")])
    assert [c.risk for c in doc.clauses] == ["standard"] * 3
    assert len(doc.clauses) == 3


def test_empty_title_uses_fallback():
    doc = pipeline.build_document(_parsed(title=""), [], fallback_title="lease.pdf")
    assert doc.title == "lease.pdf"


# ---------------------------------------------------------------------------
# run_pipeline
# ---------------------------------------------------------------------------

def test_run_pipeline_saves_document(fake_llm, lease_text):
    fake_llm.queue(parse_response(), risk_response())
    steps = []

    doc = pipeline.run_pipeline(lease_text, progress_callback=lambda s, t, m: steps.append((s, t)))

    assert len(fake_llm.calls) == 2
    assert [s for s, _ in steps] == [1, 2, 3, 4]
    assert storage.has_document()
    assert storage.load_document() == doc
    assert [c.risk for c in doc.clauses] == ["standard", "risky", "negotiable"]


def test_risk_flow_receives_parsed_clauses(fake_llm, lease_text):
    fake_llm.queue(parse_response(), [])
    pipeline.run_pipeline(lease_text)
    assert "Security Deposit" in fake_llm.user_text(1)


def test_pasted_title_fallback(fake_llm, lease_text):
    fake_llm.queue(parse_response(title=""), [])
    doc = pipeline.run_pipeline(lease_text)
    assert doc.title == "Pasted Document"


@pytest.mark.parametrize("text", ["", "   \n\t  "])
def test_empty_text_rejected_without_llm_call(fake_llm, text):
    with pytest.raises(EmptyDocumentError):
        pipeline.run_pipeline(text)
    assert fake_llm.calls == []


def test_failed_risk_step_saves_nothing(fake_llm, lease_text):
    fake_llm.queue(parse_response(), "not json")
    with pytest.raises(FlowOutputError):
        pipeline.run_pipeline(lease_text)
    assert not storage.has_document()


def test_store_false_leaves_storage_alone(fake_llm, lease_text):
    fake_llm.queue(parse_response(), [])
    pipeline.run_pipeline(lease_text, store=False)
    assert not storage.has_document()


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

def test_analyze_txt_upload(fake_llm, lease_text):
    fake_llm.queue(parse_response(title=""), risk_response())
    doc = pipeline.analyze_upload(lease_text.encode(), "lease.txt", "text/plain")
    assert doc.title == "lease.txt"
    assert "John Landlord" in fake_llm.user_text(0)


def test_analyze_docx_upload(fake_llm):
    from docx import Document

    buf = io.BytesIO()
    d = Document()
    d.add_paragraph("Tenant shall pay rent of $2,000 on the 1st of each month.")
    d.save(buf)

    fake_llm.queue(parse_response(), [])
    pipeline.analyze_upload(buf.getvalue(), "lease.docx")
    assert "$2,000 on the 1st" in fake_llm.user_text(0)


def test_unsupported_upload(fake_llm):
    with pytest.raises(UnsupportedFileTypeError):
        pipeline.analyze_upload(b"PK\x03\x04", "lease.zip", "application/zip")
    assert fake_llm.calls == []


def test_scanned_pdf_goes_through_ocr(fake_llm, monkeypatch):
    monkeypatch.setattr(pipeline, "extract_text_from_bytes", lambda data, name, mime: "  p. 1  ")
    ocr_clauses = [
        {"clauseId": "C1", "type": "Rent", "text": "Rent is $900.", "riskFlag": "standard"},
        {"clauseId": "C2", "type": "Pets", "text": "No pets allowed.", "riskFlag": "standard"},
    ]
    fake_llm.queue(parse_response(clauses=ocr_clauses), parse_response(title=""), [])

    doc = pipeline.analyze_upload(b"%PDF-1.4 scanned", "scan.pdf", "application/pdf")

    assert len(fake_llm.calls) == 3
    ocr_call = fake_llm.calls[0]["messages"][0]["content"]
    assert ocr_call[0]["type"] == "document"
    assert 'Document Text: "Rent is $900.\n\nNo pets allowed."' in fake_llm.user_text(1)
    assert doc.title == "scan.pdf"


def test_text_pdf_skips_ocr(fake_llm, monkeypatch, lease_text):
    monkeypatch.setattr(pipeline, "extract_text_from_bytes", lambda data, name, mime: lease_text * 2)
    fake_llm.queue(parse_response(), [])
    pipeline.analyze_upload(b"%PDF-1.4", "lease.pdf")
    assert len(fake_llm.calls) == 2


def test_analyze_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        pipeline.analyze_file(tmp_path / "nope.txt")
