"""Data classes for the analysis pipeline."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


RiskLabel = Literal["risky", "negotiable", "standard"]


class Clause(BaseModel):
    """One clause as extracted by the parse flow."""

    model_config = ConfigDict(frozen=True)

    clauseId: str = Field(description='A unique identifier for the clause, e.g., "C1", "C2".')
    type: str = Field(description='The type of clause, e.g., "Termination", "Payment", "Confidentiality".')
    text: str = Field(description="The full body text of the clause.")
    riskFlag: Literal["standard", "unusual"] = Field(
        description="A flag indicating if the clause is standard or unusual.",
    )
    explanation: str = Field(
        default="",
        description="A brief explanation if the clause is flagged as unusual.",
    )


class DocumentClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    clauseTitle: Optional[str] = None
    text: str
    risk: RiskLabel = "standard"
    summary_eli5: str
    summary_eli15: str
    counterProposal: Optional[str] = None


class DocumentAnalysis(BaseModel):
    """The analyzed document as shown in the viewer."""

    title: str
    summary: str
    clauses: list[DocumentClause] = Field(default_factory=list)

    def full_text(self) -> str:
        return "\n\n".join(c.text for c in self.clauses)

    def flagged_clauses(self) -> list[DocumentClause]:
        return [c for c in self.clauses if c.risk != "standard"]

    def counter_proposals(self) -> list[DocumentClause]:
        return [c for c in self.clauses if c.counterProposal]
