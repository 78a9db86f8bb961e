"""Document analysis pipeline: parse flow, then risk flow, merged into the viewer's document."""

import logging
import time
from pathlib import Path

from . import storage
from .config import OCR_TEXT_THRESHOLD
from .errors import EmptyDocumentError
from .extractors import MIME_PDF, detect_mime_type, extract_text_from_bytes
from .flows import identify_risks, parse_uploaded_document
from .llm import to_data_uri
from .models import DocumentAnalysis, DocumentClause, RiskLabel
from .schemas import ParseUploadedDocumentOutput, RiskObject

logger = logging.getLogger(__name__)

PASTED_TITLE = "Pasted Document"
DEFAULT_ELI5 = "This is a standard clause."
DEFAULT_ELI15 = "This clause follows typical patterns and does not contain unusual language."

TOTAL_STEPS = 4


def classify_risk(entry: RiskObject | None) -> RiskLabel:
    if entry is None or not entry.isRisky:
        return "standard"
    return "risky" if entry.riskLevel == "HIGH" else "negotiable"


def build_document(
    parse_result: ParseUploadedDocumentOutput,
    risks: list[RiskObject],
    fallback_title: str = PASTED_TITLE,
) -> DocumentAnalysis:
    """Merge parse and risk output by clause id into the viewer's document.

    When several risk entries share a clauseId the last one wins; entries for
    unknown clauses are dropped.
    """
    risk_map = {r.clauseId: r for r in risks}

    clauses = []
    for c in parse_result.clauses:
        entry = risk_map.get(c.clauseId)
        clauses.append(DocumentClause(
            id=c.clauseId,
            clauseTitle=c.type,
            text=c.text,
            risk=classify_risk(entry),
            summary_eli5=entry.issue if entry else (c.explanation or DEFAULT_ELI5),
            summary_eli15=entry.issue if entry else (c.explanation or DEFAULT_ELI15),
            counterProposal=entry.suggestedChange if entry else None,
        ))

    return DocumentAnalysis(
        title=parse_result.title or fallback_title,
        summary=parse_result.summary,
        clauses=clauses,
    )


def run_pipeline(
    text: str,
    title: str = PASTED_TITLE,
    progress_callback=None,
    store: bool = True,
) -> DocumentAnalysis:
    """
    Analyze document text: parse into clauses, identify risks, merge, save.

    Any flow failure propagates and nothing is saved.
    """
    def progress(step, total, msg):
        if progress_callback:
            progress_callback(step, total, msg)
        logger.info(msg)

    if not text or not text.strip():
        raise EmptyDocumentError("The provided document has no text content.")

    t0 = time.time()

    progress(1, TOTAL_STEPS, "[Step 1/4] Parsing document...")
    parse_result = parse_uploaded_document(document_text=text)
    logger.info("  Parsed %d clauses from '%s'", len(parse_result.clauses), parse_result.title or title)

    progress(2, TOTAL_STEPS, "[Step 2/4] Identifying risks...")
    risks = identify_risks(parse_result.clauses)
    logger.info("  %d risk entries returned", len(risks))

    progress(3, TOTAL_STEPS, "[Step 3/4] Building document view...")
    document = build_document(parse_result, risks, fallback_title=title)

    if store:
        progress(4, TOTAL_STEPS, "[Step 4/4] Saving document...")
        storage.save_document(document)
    else:
        progress(4, TOTAL_STEPS, "[Step 4/4] Skipping save...")

    logger.info("Done in %.1fs (%d flagged clauses)", time.time() - t0, len(document.flagged_clauses()))
    return document


def analyze_upload(
    data: bytes,
    filename: str,
    content_type: str | None = None,
    progress_callback=None,
    store: bool = True,
) -> DocumentAnalysis:
    """Extract text from an uploaded file and run the pipeline on it.

    PDFs with almost no selectable text are scanned documents: the whole file
    goes to the parse flow as a data URI, and its clause texts become the
    document text for the regular run.
    """
    mime = detect_mime_type(filename, content_type)
    if progress_callback:
        progress_callback(0, TOTAL_STEPS, f"Reading {filename}...")

    text = extract_text_from_bytes(data, filename, mime)

    if mime == MIME_PDF and len(text.strip()) < OCR_TEXT_THRESHOLD:
        logger.info("'%s' has %d chars of text, sending the file for OCR", filename, len(text.strip()))
        if progress_callback:
            progress_callback(0, TOTAL_STEPS, "Scanned PDF detected, running OCR...")
        ocr_result = parse_uploaded_document(document_data_uri=to_data_uri(data, mime))
        text = "\n\n".join(c.text for c in ocr_result.clauses)

    return run_pipeline(text, title=filename, progress_callback=progress_callback, store=store)


def analyze_file(path: Path, progress_callback=None, store: bool = True) -> DocumentAnalysis:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return analyze_upload(path.read_bytes(), path.name, progress_callback=progress_callback, store=store)
