"""Every LLM-backed flow, registered by slug, with a thin function per flow."""

from pydantic import BaseModel

from . import prompts
from .llm import Flow, data_uri_to_block
from .models import Clause
from .schemas import (
    AnswerQuestionInput, AnswerQuestionOutput,
    BatchContractsInput, BatchContractsOutput,
    CaseTimelineInput, CaseTimelineOutput,
    CheckMissingContractsInput, CheckMissingContractsOutput,
    CompareDocumentsInput, CompareDocumentsOutput,
    CompareToMarketStandardsOutput,
    CostForecastInput, CostForecastOutput,
    DocumentTextInput,
    ExplainLegalClauseInput, ExplainLegalClauseOutput,
    FlagUncertainClausesOutput,
    IdentifyRisksInput, IdentifyRisksOutput,
    LegalAdviceInput, LegalAdviceOutput,
    LegalLensSummaryOutput,
    ParseUploadedDocumentInput, ParseUploadedDocumentOutput,
    PredictOutcomeInput, PredictOutcomeOutput,
    PredictRiskOutput,
    RoleLensInput, RoleLensOutput,
    SuggestedQuestionsOutput,
    SummarizeDocumentOutput,
    TrackComplianceOutput,
    TranslateLegalTextInput, TranslateLegalTextOutput,
)


class ParseDocumentFlow(Flow):
    """Parse flow: text goes inline, a scanned file goes as an attachment."""

    def render(self, data: BaseModel) -> list[dict]:
        if data.documentDataUri:
            attachment = data_uri_to_block(self.name, data.documentDataUri)
            text = self.template.format(documentInput=prompts.PARSE_FILE_INPUT)
            return [attachment, {"type": "text", "text": text}]
        document_input = prompts.PARSE_TEXT_INPUT.format(documentText=data.documentText)
        return [{"type": "text", "text": self.template.format(documentInput=document_input)}]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

PARSE_UPLOADED_DOCUMENT = ParseDocumentFlow(
    "parse-uploaded-document", ParseUploadedDocumentInput, ParseUploadedDocumentOutput,
    prompts.PARSE_UPLOADED_DOCUMENT, max_tokens=16384,
)
IDENTIFY_RISKS = Flow(
    "identify-risks", IdentifyRisksInput, IdentifyRisksOutput, prompts.IDENTIFY_RISKS,
)
SUMMARIZE_DOCUMENT = Flow(
    "summarize-document", DocumentTextInput, SummarizeDocumentOutput, prompts.SUMMARIZE_DOCUMENT,
)
EXPLAIN_CLAUSE = Flow(
    "explain-clause", ExplainLegalClauseInput, ExplainLegalClauseOutput, prompts.EXPLAIN_LEGAL_CLAUSE,
)
PERSONALIZE_ROLE_LENS = Flow(
    "personalize-role-lens", RoleLensInput, RoleLensOutput, prompts.PERSONALIZE_ROLE_LENS,
)
ANSWER_QUESTION = Flow(
    "answer-question", AnswerQuestionInput, AnswerQuestionOutput, prompts.ANSWER_QUESTION,
)
COMPARE_DOCUMENTS = Flow(
    "compare-documents", CompareDocumentsInput, CompareDocumentsOutput, prompts.COMPARE_DOCUMENTS,
)
PREDICT_RISK = Flow(
    "predict-risk", DocumentTextInput, PredictRiskOutput, prompts.PREDICT_RISK,
)
PREDICT_OUTCOME = Flow(
    "predict-outcome", PredictOutcomeInput, PredictOutcomeOutput, prompts.PREDICT_OUTCOME,
)
PERSONALIZE_LEGAL_ADVICE = Flow(
    "personalize-legal-advice", LegalAdviceInput, LegalAdviceOutput, prompts.PERSONALIZE_LEGAL_ADVICE,
)
TRANSLATE_LEGAL_TEXT = Flow(
    "translate-legal-text", TranslateLegalTextInput, TranslateLegalTextOutput, prompts.TRANSLATE_LEGAL_TEXT,
)
GENERATE_CASE_TIMELINE = Flow(
    "generate-case-timeline", CaseTimelineInput, CaseTimelineOutput, prompts.GENERATE_CASE_TIMELINE,
)
GENERATE_COST_FORECAST = Flow(
    "generate-cost-forecast", CostForecastInput, CostForecastOutput, prompts.GENERATE_COST_FORECAST,
)
CHECK_MISSING_CONTRACTS = Flow(
    "check-missing-contracts", CheckMissingContractsInput, CheckMissingContractsOutput,
    prompts.CHECK_MISSING_CONTRACTS,
)
GENERATE_LEGAL_LENS_SUMMARY = Flow(
    "generate-legal-lens-summary", DocumentTextInput, LegalLensSummaryOutput, prompts.LEGAL_LENS_SUMMARY,
)
TRACK_COMPLIANCE = Flow(
    "track-compliance", DocumentTextInput, TrackComplianceOutput, prompts.TRACK_COMPLIANCE,
)
COMPARE_TO_MARKET_STANDARDS = Flow(
    "compare-to-market-standards", DocumentTextInput, CompareToMarketStandardsOutput,
    prompts.COMPARE_TO_MARKET_STANDARDS,
)
FLAG_UNCERTAIN_CLAUSES = Flow(
    "flag-uncertain-clauses", DocumentTextInput, FlagUncertainClausesOutput, prompts.FLAG_UNCERTAIN_CLAUSES,
)
GENERATE_SUGGESTED_QUESTIONS = Flow(
    "generate-suggested-questions", DocumentTextInput, SuggestedQuestionsOutput, prompts.SUGGESTED_QUESTIONS,
)
PROCESS_BATCH_CONTRACTS = Flow(
    "process-batch-contracts", BatchContractsInput, BatchContractsOutput, prompts.PROCESS_BATCH_CONTRACTS,
    max_tokens=16384,
)

FLOWS: dict[str, Flow] = {
    f.name: f
    for f in (
        PARSE_UPLOADED_DOCUMENT, IDENTIFY_RISKS, SUMMARIZE_DOCUMENT, EXPLAIN_CLAUSE,
        PERSONALIZE_ROLE_LENS, ANSWER_QUESTION, COMPARE_DOCUMENTS, PREDICT_RISK,
        PREDICT_OUTCOME, PERSONALIZE_LEGAL_ADVICE, TRANSLATE_LEGAL_TEXT,
        GENERATE_CASE_TIMELINE, GENERATE_COST_FORECAST, CHECK_MISSING_CONTRACTS,
        GENERATE_LEGAL_LENS_SUMMARY, TRACK_COMPLIANCE, COMPARE_TO_MARKET_STANDARDS,
        FLAG_UNCERTAIN_CLAUSES, GENERATE_SUGGESTED_QUESTIONS, PROCESS_BATCH_CONTRACTS,
    )
}


def get_flow(name: str) -> Flow:
    try:
        return FLOWS[name]
    except KeyError:
        raise KeyError(f"Unknown flow: {name}") from None


# ---------------------------------------------------------------------------
# Thin wrappers
# ---------------------------------------------------------------------------

def parse_uploaded_document(document_text: str | None = None, document_data_uri: str | None = None):
    return PARSE_UPLOADED_DOCUMENT.run(documentText=document_text, documentDataUri=document_data_uri)


def identify_risks(clauses: list[Clause]):
    return IDENTIFY_RISKS.run(clauses=clauses)


def summarize_document(document_text: str):
    return SUMMARIZE_DOCUMENT.run(documentText=document_text)


def explain_legal_clause(clause: str):
    return EXPLAIN_CLAUSE.run(clause=clause)


def personalize_analysis_with_role_lens(document_text: str, role: str):
    return PERSONALIZE_ROLE_LENS.run(documentText=document_text, role=role)


def answer_question_from_document(user_question: str, contract_text: str):
    return ANSWER_QUESTION.run(user_question=user_question, contract_text=contract_text)


def compare_documents(old_text: str, new_text: str):
    return COMPARE_DOCUMENTS.run(docText1=old_text, docText2=new_text)


def predict_risk(document_text: str):
    return PREDICT_RISK.run(documentText=document_text)


def predict_outcome(case_type: str, jurisdiction: str, involved_parties: str,
                    evidence_strength: str, past_judgments: str):
    return PREDICT_OUTCOME.run(
        caseType=case_type, jurisdiction=jurisdiction, involvedParties=involved_parties,
        evidenceStrength=evidence_strength, pastJudgments=past_judgments,
    )


def personalize_legal_advice(location: str, profession: str, profile_summary: str):
    return PERSONALIZE_LEGAL_ADVICE.run(location=location, profession=profession, profileSummary=profile_summary)


def translate_legal_text(text_to_translate: str, target_language: str):
    return TRANSLATE_LEGAL_TEXT.run(text_to_translate=text_to_translate, target_language=target_language)


def generate_case_timeline(case_id: str, case_type: str, jurisdiction: str, last_known_status: str):
    return GENERATE_CASE_TIMELINE.run(
        caseId=case_id, caseType=case_type, jurisdiction=jurisdiction, lastKnownStatus=last_known_status,
    )


def generate_cost_forecast(case_type: str, jurisdiction: str, complexity: str, lawyer_type: str):
    return GENERATE_COST_FORECAST.run(
        caseType=case_type, jurisdiction=jurisdiction, complexity=complexity, lawyerType=lawyer_type,
    )


def check_missing_contracts(main_contract_content: str):
    return CHECK_MISSING_CONTRACTS.run(mainContractContent=main_contract_content)


def generate_legal_lens_summary(document_text: str):
    return GENERATE_LEGAL_LENS_SUMMARY.run(documentText=document_text)


def track_compliance(document_text: str):
    return TRACK_COMPLIANCE.run(documentText=document_text)


def compare_to_market_standards(document_text: str):
    return COMPARE_TO_MARKET_STANDARDS.run(documentText=document_text)


def flag_uncertain_clauses(document_text: str):
    return FLAG_UNCERTAIN_CLAUSES.run(documentText=document_text)


def generate_suggested_questions(document_text: str):
    return GENERATE_SUGGESTED_QUESTIONS.run(documentText=document_text)


def process_batch_contracts(contracts: list[dict]):
    return PROCESS_BATCH_CONTRACTS.run(contracts=contracts)
