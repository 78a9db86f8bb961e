"""Input and output schemas for every flow.

Field names are the JSON names exchanged with the model and the UI, so they
keep the mixed camelCase/snake_case of those payloads.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .models import Clause


# ---------------------------------------------------------------------------
# Parse uploaded document
# ---------------------------------------------------------------------------

class ParseUploadedDocumentInput(BaseModel):
    documentText: Optional[str] = Field(
        default=None, description="The full text content of the legal document to be parsed.",
    )
    documentDataUri: Optional[str] = Field(
        default=None,
        description=(
            "A document file (like a scanned PDF) as a data URI that must include a MIME type "
            "and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        ),
    )

    @model_validator(mode="after")
    def _require_source(self):
        if not self.documentText and not self.documentDataUri:
            raise ValueError("Either documentText or documentDataUri is required")
        return self


class DocumentDates(BaseModel):
    startDate: str = Field(description="The effective or start date of the document.")
    endDate: str = Field(description="The expiry or end date of the document, if specified.")


class ParseUploadedDocumentOutput(BaseModel):
    title: str = Field(description="The main title of the legal document.")
    docType: str = Field(description='The type of document, e.g., "Rental Agreement", "Employment Contract".')
    parties: list[str] = Field(description='The parties involved, like "Landlord", "Tenant", "Employer", "Employee".')
    dates: DocumentDates
    financialTerms: list[str] = Field(
        description="A list of key financial obligations, such as rent, salary, or penalties.",
    )
    clauses: list[Clause]
    summary: str = Field(description="A one-paragraph summary of the document's key points, risks, and purpose.")
    structuralIssues: list[str] = Field(
        description="A list of any detected structural issues, like missing signatures or undefined terms.",
    )


# ---------------------------------------------------------------------------
# Identify risks and suggest counter-proposals
# ---------------------------------------------------------------------------

class IdentifyRisksInput(BaseModel):
    clauses: list[Clause] = Field(description="An array of clauses from the legal document, already parsed.")


class RiskObject(BaseModel):
    clauseId: str = Field(description="The unique identifier for the clause that contains the risk, e.g., 'C1'.")
    riskLevel: Literal["LOW", "MEDIUM", "HIGH"] = Field(description="The assessed risk level for the clause.")
    issue: str = Field(description="A clear description of the identified issue or risk.")
    suggestedChange: str = Field(description="The suggested wording or change to mitigate the risk.")
    isRisky: bool = Field(description="A boolean flag indicating if the clause is risky.")


IdentifyRisksOutput = list[RiskObject]


# ---------------------------------------------------------------------------
# Single-document flows
# ---------------------------------------------------------------------------

class DocumentTextInput(BaseModel):
    documentText: str = Field(description="The full text content of the legal document.")


class KeyRisk(BaseModel):
    risk: str = Field(description="A key risk identified in the document.")
    impact: str = Field(description="The potential impact of the risk.")


class SummarizeDocumentOutput(BaseModel):
    overview: str = Field(
        description="A one-page summary of the contract's obligations, payments, rights, and risks "
                    "at a Grade 10 reading level.",
    )
    keyRisks: list[KeyRisk] = Field(description="An array of 3-5 key risks with plain explanations.")
    recommendedActions: list[str] = Field(
        description="A list of recommended next steps, such as negotiations or adding clauses.",
    )


class ExplainLegalClauseInput(BaseModel):
    clause: str = Field(description="The legal clause to explain.")


class ExplainLegalClauseOutput(BaseModel):
    original_clause: str = Field(description="The original clause text.")
    simple_explanation: str = Field(
        description="A very simple explanation of the clause, as if for a 10-year-old, using analogies where possible.",
    )
    detailed_explanation: str = Field(description="A more detailed, but still jargon-free, explanation of the clause.")
    disclaimer: str = Field(description="A standard disclaimer that this is not legal advice.")


class RoleLensInput(BaseModel):
    documentText: str = Field(description="The text content of the legal document.")
    role: str = Field(description="The role of the user (e.g., Tenant, Landlord, Employer).")


class RoleLensOutput(BaseModel):
    personalizedAnalysis: str = Field(
        description="The personalized analysis of the legal document based on the selected role.",
    )


class AnswerQuestionInput(BaseModel):
    user_question: str = Field(description="The user's question about the contract.")
    contract_text: str = Field(description="The full text of the contract.")


class AnswerQuestionOutput(BaseModel):
    user_question: str = Field(description="The original user question.")
    answer: str = Field(description="The answer to the user's question, based only on the contract text.")
    sourceClauseText: str = Field(
        description="The specific clause from the contract that supports the answer. "
                    "If not found, this will be an empty string.",
    )


class CompareDocumentsInput(BaseModel):
    docText1: str = Field(description="The text content of the old version of the contract.")
    docText2: str = Field(description="The text content of the new version of the contract.")


class DocumentChange(BaseModel):
    clauseType: str = Field(description='The type of clause that has changed (e.g., "Termination").')
    oldText: str = Field(description="The relevant text from the old version.")
    newText: str = Field(description="The relevant text from the new version.")
    changeImpact: str = Field(description="A plain-language explanation of the change and its potential impact.")


CompareDocumentsOutput = list[DocumentChange]


class PredictedRisk(BaseModel):
    clauseId: str = Field(description='An identifier for the clause being analyzed (e.g., "C5").')
    clauseText: str = Field(description="The full text of the risky clause.")
    riskCategory: str = Field(description='The category of the risk (e.g., "Financial", "Liability", "Compliance").')
    riskDescription: str = Field(description="A plain-language explanation of what the risk is.")
    predictedImpact: str = Field(description="A prediction of how this clause could create future issues.")
    severity: Literal["Low", "Medium", "High"] = Field(description="The severity of the potential risk.")


class PredictRiskOutput(BaseModel):
    risks: list[PredictedRisk] = Field(description="An array of identified risks in the document.")


class CheckMissingContractsInput(BaseModel):
    mainContractContent: str = Field(description="The full text content of the main contract.")


class ContractReason(BaseModel):
    contract: str = Field(description="The name of the recommended contract.")
    reason: str = Field(description="The explanation for why this contract is needed.")


class CheckMissingContractsOutput(BaseModel):
    mainContract: str = Field(description="The type of the main contract analyzed.")
    recommendedAdditionalContracts: list[str] = Field(
        description="A list of other contracts that are typically associated with the main one.",
    )
    reasoning: list[ContractReason] = Field(
        description="An array of objects, each explaining why a recommended contract is needed.",
    )


class LegalLensSummaryOutput(BaseModel):
    professional: str = Field(
        description="A summary for a professional lawyer, using precise legal terminology "
                    "and focusing on enforceability and compliance.",
    )
    layman: str = Field(description="A simplified summary in plain English, explaining obligations for a non-lawyer.")
    riskSummary: str = Field(
        description="A summary that highlights risks and potential financial or operational consequences.",
    )


class ComplianceObligation(BaseModel):
    obligationId: str = Field(description='A unique identifier for the obligation, e.g., "O1".')
    description: str = Field(description="A clear description of the obligation.")
    dueDate: str = Field(description="The due date for the obligation, formatted as YYYY-MM-DD.")
    frequency: Literal["one-time", "monthly", "yearly", "recurring"] = Field(
        description="The frequency of the obligation.",
    )


TrackComplianceOutput = list[ComplianceObligation]


class MarketComparison(BaseModel):
    clauseId: str = Field(description='An identifier for the clause being analyzed (e.g., "C2").')
    type: str = Field(description='The type of clause, e.g., "Deposit", "Notice Period".')
    standard: str = Field(description="The typical market standard for this type of clause.")
    contractValue: str = Field(description="The specific value or term found in the user's contract.")
    comment: str = Field(
        description="A comment on how the contract's clause deviates from the standard and the potential impact.",
    )


CompareToMarketStandardsOutput = list[MarketComparison]


class UncertainClause(BaseModel):
    clauseId: str = Field(description='An identifier for the clause being analyzed (e.g., "C7").')
    confidence: float = Field(
        ge=0, le=100, description="A confidence score from 0 to 100 on the clarity of the clause.",
    )
    warning: str = Field(description="A warning message if the confidence score is low, advising legal consultation.")


FlagUncertainClausesOutput = list[UncertainClause]


class SuggestedQuestionsOutput(BaseModel):
    questions: list[str] = Field(description="An array of 3-4 suggested questions about the document.")


# ---------------------------------------------------------------------------
# Case and profile flows
# ---------------------------------------------------------------------------

class PredictOutcomeInput(BaseModel):
    caseType: str = Field(description='The type of legal case, e.g., "Employment Dispute".')
    jurisdiction: str = Field(description='The jurisdiction where the case is filed, e.g., "Bangalore".')
    involvedParties: str = Field(description='Description of the parties involved, e.g., "Employee vs. Company".')
    evidenceStrength: str = Field(description="Summary of the strength of evidence for the user.")
    pastJudgments: str = Field(description="Notes on relevant past judgments or precedents.")


class PredictOutcomeOutput(BaseModel):
    predicted_outcomes: list[str] = Field(
        description='A list of probable outcomes, e.g., "Win", "Lose", "Settlement".',
    )
    probabilities: dict[str, float] = Field(
        description="A dictionary mapping each outcome to a probability percentage.",
    )
    reasoning: list[str] = Field(description="The reasoning behind the prediction, citing relevant factors.")
    recommended_action: str = Field(description="The suggested next best step for the user.")


class LegalAdviceInput(BaseModel):
    location: str = Field(description="The user's geographical location, e.g., 'Pune'.")
    profession: str = Field(description="The user's profession or business type, e.g., 'small business owner'.")
    profileSummary: str = Field(description="A summary of the user's activities and history.")


class LegalAdviceOutput(BaseModel):
    personalized_insights: list[str] = Field(
        description="Common risks or insights relevant to the user's field and history.",
    )
    region_updates: list[str] = Field(description="Region-specific legal updates relevant to the user.")
    red_flags: list[str] = Field(description="Contractual red flags to watch out for, tailored to the user profile.")
    proactive_strategies: list[str] = Field(
        description="Proactive legal strategies like insurance, contract modifications, etc.",
    )


class TranslateLegalTextInput(BaseModel):
    text_to_translate: str = Field(description="The legal text to be translated.")
    target_language: str = Field(description='The language to translate the text into, e.g., "Hindi".')


class TranslateLegalTextOutput(BaseModel):
    original_text: str = Field(description="The original text that was provided for translation.")
    translated_text: str = Field(description="The translated text in the target language, using native script.")
    back_translation: str = Field(
        description="The English back-translation of the translated text to verify accuracy.",
    )
    accuracy_notes: str = Field(description="Notes on the precision and legal accuracy of the translation.")


class CaseTimelineInput(BaseModel):
    caseId: str = Field(description="The unique identifier for the case.")
    caseType: str = Field(description='The type of legal case, e.g., "Employment Dispute".')
    jurisdiction: str = Field(description='The jurisdiction where the case is filed, e.g., "Bangalore District Court".')
    lastKnownStatus: str = Field(description='The last known status or event in the case.')


class Milestone(BaseModel):
    event: str = Field(description="The name of the upcoming milestone.")
    expected_date: str = Field(description="The expected date for this milestone.")


class ExpectedTimeline(BaseModel):
    best_case: str = Field(description="The best-case resolution timeline.")
    average_case: str = Field(description="The average or most likely resolution timeline.")
    worst_case: str = Field(description="The worst-case resolution timeline, considering potential delays.")


class HistoricalPrecedent(BaseModel):
    similar_cases_in_jurisdiction: str = Field(
        description="The average duration of similar cases in the same jurisdiction.",
    )
    fastest_case: str = Field(description="The fastest recorded resolution for a similar case.")
    longest_case: str = Field(description="The longest recorded resolution for a similar case.")


class CaseTimelineOutput(BaseModel):
    current_stage: str = Field(description="The current stage of the case lifecycle.")
    context_notes: str = Field(description="Contextual notes about the current stage.")
    next_milestones: list[Milestone] = Field(
        description="A list of upcoming milestones with deadlines and dependencies.",
    )
    expected_timeline: ExpectedTimeline
    delay_risks: list[str] = Field(description="A list of potential risks that could delay the case.")
    acceleration_tips: list[str] = Field(
        description="Suggested actions the user can take to potentially speed up the process.",
    )
    required_documents: list[str] = Field(
        description="A list of documents or actions the user should prepare for the next stage.",
    )
    historical_precedent: HistoricalPrecedent


class CostForecastInput(BaseModel):
    caseType: str = Field(description='The type of legal case, e.g., "Divorce".')
    jurisdiction: str = Field(description='The jurisdiction where the case is filed, e.g., "Bangalore".')
    complexity: str = Field(description='The complexity of the case, e.g., "Contested with child custody claim".')
    lawyerType: str = Field(description='The tier of lawyer hired, e.g., "mid-tier".')


class CostBreakdown(BaseModel):
    Lawyer_fees: str = Field(description="Estimated lawyer fees.")
    Court_fees: str = Field(description="Estimated court fees.")
    Documentation: str = Field(description="Estimated documentation costs.")
    Travel: str = Field(description="Estimated travel expenses.")
    Expert_witnesses: str = Field(description="Estimated costs for expert witnesses.")
    Miscellaneous: str = Field(description="Estimated miscellaneous costs.")


class BillingModel(BaseModel):
    type: str = Field(description='The assumed billing model (e.g., "Mixed (retainer + hourly)").')
    retainer_amount: str = Field(description="The upfront retainer amount, if any.")
    hourly_rate: str = Field(description="The hourly rate for hearings or other work.")


class CostReductionTip(BaseModel):
    tip: str = Field(description="A specific cost-reduction strategy.")
    practicality: str = Field(description='The practicality of the tip (e.g., "High", "Medium", "Low").')


class CostForecastOutput(BaseModel):
    estimated_expenses: str = Field(description="The total estimated expense range.")
    breakdown: CostBreakdown
    billing_model: BillingModel
    cost_escalators: list[str] = Field(description="A list of possible cost escalators.")
    cost_reduction_tips: list[CostReductionTip]
    funding_options: list[str] = Field(description="A list of potential funding or aid options.")
    confidence_level: str = Field(description='The confidence level of the estimate (e.g., "High", "Medium", "Low").')
    data_sources: list[str] = Field(description="The data sources used for the estimates.")


# ---------------------------------------------------------------------------
# Portfolio
# ---------------------------------------------------------------------------

class ContractInput(BaseModel):
    docId: str = Field(description="A unique identifier for the contract.")
    content: str = Field(description="The full text content of the contract.")


class BatchContractsInput(BaseModel):
    contracts: list[ContractInput] = Field(description="An array of contract objects to be processed.")


class CommonRisk(BaseModel):
    risk: str = Field(description="The description of a common risk found.")
    count: int = Field(description="The number of contracts with this risk.")


class AggregateTrends(BaseModel):
    jurisdiction: dict[str, int] = Field(
        description="A key-value map where the key is the jurisdiction and the value is the count of contracts.",
    )


class BatchContractsOutput(BaseModel):
    totalContracts: int = Field(description="The total number of contracts processed.")
    commonRisks: list[CommonRisk] = Field(description="A list of the most common risks found across all contracts.")
    aggregateTrends: AggregateTrends
    highestRiskContracts: list[str] = Field(
        description="A list of document IDs for the contracts identified as having the highest overall risk.",
    )
