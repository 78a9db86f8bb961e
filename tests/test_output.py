import io

from docx import Document

from lawyeredup import output
from lawyeredup.data import SAMPLE_DOCUMENT
from lawyeredup.models import DocumentAnalysis


def _paragraphs(target) -> list[str]:
    return [p.text for p in Document(target).paragraphs]


def test_report_sections(tmp_path):
    path = tmp_path / "report.docx"
    output.generate_report_docx(SAMPLE_DOCUMENT, path)
    texts = _paragraphs(str(path))

    assert "Summary of Standard Residential Lease Agreement" in texts
    assert "Overall Summary" in texts
    assert SAMPLE_DOCUMENT.summary in texts

    risks_at = texts.index("Risks Identified")
    appendix_at = texts.index("Appendix: Suggested Counter-Proposals")
    assert risks_at < appendix_at
    risk_headings = [t for t in texts[risks_at:appendix_at] if "(Risk:" in t]
    assert risk_headings == [
        "Security Deposit (Risk: risky)",
        "Maintenance and Repairs (Risk: negotiable)",
        "Termination (Risk: negotiable)",
    ]
    assert 'For clause "Termination":' in texts[appendix_at:]


def test_report_without_risks_has_no_risk_sections():
    doc = DocumentAnalysis(title="Clean", summary="Nothing to see.", clauses=[])
    buf = io.BytesIO()
    output.generate_report_docx(doc, buf)
    buf.seek(0)
    texts = _paragraphs(buf)
    assert "Risks Identified" not in texts
    assert "Appendix: Suggested Counter-Proposals" not in texts


def test_report_filename():
    assert output.report_filename(SAMPLE_DOCUMENT) == "Standard_Residential_Lease_Agreement_Report.docx"


def test_summarize_risks():
    summary = output.summarize_risks(SAMPLE_DOCUMENT)
    assert summary["total_clauses"] == 10
    assert summary["risk_breakdown"] == {"risky": 1, "negotiable": 2, "standard": 7}
    assert summary["counter_proposals"] == 3
    assert summary["top_risks"][0]["clause"] == "Security Deposit"


def test_print_rich_summary(capsys):
    output.print_rich_summary(SAMPLE_DOCUMENT)
    out = capsys.readouterr().out
    assert "Document Analysis" in out
    assert "Security" in out


def test_plain_summary(capsys):
    output._print_plain_summary(output.summarize_risks(SAMPLE_DOCUMENT))
    out = capsys.readouterr().out
    assert "Standard Residential Lease Agreement" in out
    assert "[risky     ] Security Deposit" in out
