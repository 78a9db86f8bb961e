"""Streamlit Web App for LawyeredUp."""

import html
import io
import json
import logging

import streamlit as st

from lawyeredup import storage
from lawyeredup.config import ANTHROPIC_API_KEY, LLM_MODEL, LOG_LEVEL
from lawyeredup.errors import EmptyDocumentError, FlowError, UnsupportedFileTypeError
from lawyeredup.flows import FLOWS
from lawyeredup.models import Clause
from lawyeredup.output import RISK_COLORS, RISK_ICONS, generate_report_docx, report_filename
from lawyeredup.pipeline import PASTED_TITLE, analyze_upload, run_pipeline

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="LawyeredUp",
    page_icon="⚖️",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .clause { padding: 10px 14px; border-radius: 8px; margin-bottom: 6px; line-height: 1.6; }
    .badge { padding: 2px 10px; border-radius: 12px; color: white; font-size: 0.8em; font-weight: 600; display: inline-block; }
    .risky-badge { background: #e74c3c; }
    .negotiable-badge { background: #f39c12; }
    .standard-badge { background: #27ae60; }
</style>
""", unsafe_allow_html=True)

ANALYSIS_FAILED = "Something went wrong while analyzing the document."

# Inputs for the Ask AI tab. "document" fields are filled with the stored document's text.
ASK_AI_FEATURES = [
    ("Summarize Document", "summarize-document", "Get a TL;DR summary of the entire document.",
     {"documentText": "document"}),
    ("Explain Legal Clause in Plain Language", "explain-clause", "Explain a clause in simple terms.",
     {"clause": "first_clause"}),
    ("Personalize Analysis with Role Lens", "personalize-role-lens", "See the contract from one party's side.",
     {"documentText": "document", "role": "Tenant"}),
    ("Identify Risks & Suggest Counter-Proposals", "identify-risks", "Re-run risk detection on every clause.",
     {"clauses": "clauses"}),
    ("Answer Question from Document", "answer-question", "Ask anything about the contract.",
     {"user_question": "What is the late fee for rent?", "contract_text": "document"}),
    ("Compare Contract Versions", "compare-documents", "Find what changed between two versions.",
     {"docText1": "document", "docText2": "document"}),
    ("Predict Risk", "predict-risk", "Predict how clauses could cause trouble later.",
     {"documentText": "document"}),
    ("Predict Outcome", "predict-outcome", "Estimate how a case is likely to end.",
     {"caseType": "Employment Dispute", "jurisdiction": "Bangalore", "involvedParties": "Employee vs. Company",
      "evidenceStrength": "Strong email trails", "pastJudgments": "Similar cases favor employee"}),
    ("Personalize Legal Advice", "personalize-legal-advice", "Advice tailored to where you live and work.",
     {"location": "Pune", "profession": "Small Business Owner", "profileSummary": "Signs frequent vendor contracts"}),
    ("Translate Legal Text", "translate-legal-text", "Translate with a back-translation check.",
     {"text_to_translate": "Tenant must vacate within 30 days due to non-payment.", "target_language": "Hindi"}),
    ("Generate Case Timeline", "generate-case-timeline", "Upcoming milestones and expected duration.",
     {"caseId": "EMP2025-123", "caseType": "Employment Dispute", "jurisdiction": "Bangalore District Court",
      "lastKnownStatus": "Last hearing July 2025"}),
    ("Generate Cost Forecast", "generate-cost-forecast", "Estimate what a case will cost.",
     {"caseType": "Divorce", "jurisdiction": "Bangalore", "complexity": "Contested with child custody",
      "lawyerType": "Mid-tier"}),
    ("Check Missing Contracts", "check-missing-contracts", "Suggest other contracts that might be needed.",
     {"mainContractContent": "document"}),
    ("Generate Legal Lens Summary", "generate-legal-lens-summary",
     "Summaries for a lawyer, a layman, and a risk reviewer.", {"documentText": "document"}),
    ("Track Compliance", "track-compliance", "Extract key dates and obligations.",
     {"documentText": "document"}),
    ("Compare to Market Standards", "compare-to-market-standards", "Compare clauses against typical terms.",
     {"documentText": "document"}),
    ("Confidence Alerts", "flag-uncertain-clauses", "Identify ambiguous clauses and get confidence scores.",
     {"documentText": "document"}),
    ("Process Batch Contracts", "process-batch-contracts", "Portfolio view across several contracts.",
     {"contracts": "contracts"}),
    ("Parse Uploaded Document", "parse-uploaded-document", "Extract structured data from the document.",
     {"documentText": "document"}),
]

_LONG_FIELDS = {"documentText", "contract_text", "docText1", "docText2", "mainContractContent",
                "clause", "text_to_translate", "clauses", "contracts"}


def _document_clauses(document) -> list[dict]:
    return [
        Clause(
            clauseId=c.id, type=c.clauseTitle or c.id, text=c.text,
            riskFlag="standard" if c.risk == "standard" else "unusual",
        ).model_dump()
        for c in document.clauses
    ]


def _default_value(source: str, document) -> str:
    if source == "document":
        return document.full_text()
    if source == "first_clause":
        return document.clauses[0].text if document.clauses else ""
    if source == "clauses":
        return json.dumps(_document_clauses(document), indent=2)
    if source == "contracts":
        return json.dumps([{"docId": document.title, "content": document.full_text()}], indent=2)
    return source


def _render_clause(clause, summary_type: str):
    color = RISK_COLORS.get(clause.risk, "")
    style = f"background: {color};" if color else ""
    title = html.escape(clause.clauseTitle or clause.id)
    st.markdown(
        f'<div class="clause" style="{style}"><strong>{title}.</strong> {html.escape(clause.text)}</div>',
        unsafe_allow_html=True,
    )
    if clause.risk != "standard":
        summary = clause.summary_eli5 if summary_type == "eli5" else clause.summary_eli15
        with st.expander(f"{RISK_ICONS[clause.risk]} {clause.risk.title()}: {clause.clauseTitle or clause.id}"):
            st.markdown(summary)
            if clause.counterProposal:
                st.markdown("**Suggested counter-proposal:**")
                st.info(clause.counterProposal)


# ---------------------------------------------------------------------------
# SIDEBAR
# ---------------------------------------------------------------------------
# Page switches requested by buttons are applied before the radio is drawn
if "next_page" in st.session_state:
    st.session_state["page"] = st.session_state.pop("next_page")
page = st.sidebar.radio("Navigation", ["Upload & Analyze", "Document"], key="page")
st.sidebar.markdown("---")
st.sidebar.markdown("**LawyeredUp**")
st.sidebar.caption(f"LLM: {LLM_MODEL if ANTHROPIC_API_KEY else 'Not configured'}")


# ---------------------------------------------------------------------------
# PAGE 1: UPLOAD & ANALYZE
# ---------------------------------------------------------------------------
if page == "Upload & Analyze":
    st.title("Upload & Analyze")
    st.markdown("Upload a contract or paste its text. Every clause is explained and risky terms are flagged.")

    if not ANTHROPIC_API_KEY:
        st.warning("ANTHROPIC_API_KEY not set in .env. Analysis will fail until it is configured.")

    input_method = st.radio("Input Method", ["Upload file", "Paste text"], horizontal=True)
    uploaded_file = None
    pasted_text = ""
    if input_method == "Upload file":
        uploaded_file = st.file_uploader("Upload document", type=["txt", "pdf", "docx"])
    else:
        pasted_text = st.text_area("Paste your document text", height=300)

    col1, col2 = st.columns([3, 1])
    analyze_clicked = col1.button("Analyze Document", type="primary", use_container_width=True)
    if col2.button("Use Sample Document", use_container_width=True):
        storage.clear_document()
        st.session_state["next_page"] = "Document"
        st.rerun()

    if analyze_clicked:
        if input_method == "Upload file" and uploaded_file is None:
            st.error("Please drop or select a file to analyze.")
            st.stop()
        if input_method == "Paste text" and not pasted_text.strip():
            st.error("Please paste some text to analyze.")
            st.stop()

        progress_bar = st.progress(0, text="Starting analysis...")
        status_text = st.empty()

        def progress_callback(step, total, msg):
            pct = min(step / total, 1.0) if total > 0 else 0
            progress_bar.progress(pct, text=msg)
            status_text.markdown(f"**{msg}**")

        try:
            if uploaded_file is not None:
                analyze_upload(
                    uploaded_file.getvalue(), uploaded_file.name, uploaded_file.type,
                    progress_callback=progress_callback,
                )
            else:
                run_pipeline(pasted_text, title=PASTED_TITLE, progress_callback=progress_callback)
        except (EmptyDocumentError, UnsupportedFileTypeError) as e:
            progress_bar.empty()
            status_text.empty()
            st.error(str(e))
            st.stop()
        except Exception:
            logger.exception("Analysis failed")
            progress_bar.empty()
            status_text.empty()
            st.error(f"Analysis Failed. {ANALYSIS_FAILED}")
            st.stop()

        progress_bar.progress(1.0, text="Analysis complete!")
        st.session_state.pop("ask_ai_results", None)
        st.session_state["next_page"] = "Document"
        st.rerun()


# ---------------------------------------------------------------------------
# PAGE 2: DOCUMENT VIEW
# ---------------------------------------------------------------------------
elif page == "Document":
    document = storage.load_document()
    if not storage.has_document():
        st.caption("Showing the sample document. Upload your own on the **Upload & Analyze** page.")

    hcol1, hcol2, hcol3 = st.columns([6, 2, 2])
    hcol1.title(document.title)
    if hcol2.button("New Upload", use_container_width=True):
        storage.clear_document()
        st.session_state.pop("ask_ai_results", None)
        st.session_state["next_page"] = "Upload & Analyze"
        st.rerun()
    report_buf = io.BytesIO()
    generate_report_docx(document, report_buf)
    hcol3.download_button(
        "Download Report", report_buf.getvalue(), file_name=report_filename(document),
        mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        use_container_width=True,
    )

    # Right-hand panel lives in the sidebar
    st.sidebar.markdown("### TL;DR Summary")
    st.sidebar.write(document.summary)
    st.sidebar.markdown("### Risks Identified")
    flagged = document.flagged_clauses()
    if flagged:
        for c in flagged:
            st.sidebar.markdown(
                f'<span class="badge {c.risk}-badge">{c.risk.title()}</span> {html.escape(c.clauseTitle or c.id)}',
                unsafe_allow_html=True,
            )
    else:
        st.sidebar.caption("No risky or negotiable clauses found.")

    tab_doc, tab_ai = st.tabs(["Document", "Ask AI"])

    with tab_doc:
        summary_type = st.radio(
            "Explain like I'm", ["eli5", "eli15"], horizontal=True,
            format_func=lambda v: "5" if v == "eli5" else "15",
        )
        for clause in document.clauses:
            _render_clause(clause, summary_type)

    with tab_ai:
        results = st.session_state.setdefault("ask_ai_results", {})
        for n, (title, slug, description, fields) in enumerate(ASK_AI_FEATURES, start=1):
            with st.expander(f"{n}. {title}"):
                st.caption(description)
                values = {}
                for name, source in fields.items():
                    default = _default_value(source, document)
                    key = f"{slug}_{name}"
                    if name in _LONG_FIELDS:
                        values[name] = st.text_area(name, default, height=150, key=key)
                    else:
                        values[name] = st.text_input(name, default, key=key)

                if st.button("Run", key=f"run_{slug}"):
                    payload = dict(values)
                    for name in ("clauses", "contracts"):
                        if name in payload:
                            try:
                                payload[name] = json.loads(payload[name])
                            except json.JSONDecodeError:
                                st.error(f"{name} must be valid JSON.")
                                st.stop()
                    flow = FLOWS[slug]
                    with st.spinner(f"Running {title}..."):
                        try:
                            results[slug] = flow.dump(flow.run(payload))
                        except FlowError:
                            logger.exception("Flow %s failed", slug)
                            st.error(f"An error occurred. Failed to run {slug}.")

                if results.get(slug) is not None:
                    st.json(results[slug])
