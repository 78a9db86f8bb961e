import json

import pytest

from lawyeredup import config, llm


class StreamFailure:
    """Queued in place of a response: the stream opens, then raises partway through."""

    def __init__(self, error, partial='{"overview": '):
        self.error = error
        self.partial = partial


class FakeStream:
    def __init__(self, text, stop_reason, error=None):
        self._text = text
        self._stop_reason = stop_reason
        self._error = error

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    @property
    def text_stream(self):
        # Deliver in a few chunks like the real SDK
        step = max(1, len(self._text) // 3)
        for i in range(0, len(self._text), step):
            yield self._text[i:i + step]
        if self._error is not None:
            raise self._error

    def get_final_message(self):
        return type("Message", (), {"stop_reason": self._stop_reason})()


class FakeMessages:
    def __init__(self, client):
        self._client = client

    def stream(self, **kwargs):
        self._client.calls.append(kwargs)
        if not self._client.responses:
            raise AssertionError("Unexpected LLM call")
        response = self._client.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, StreamFailure):
            return FakeStream(response.partial, self._client.stop_reason, error=response.error)
        if not isinstance(response, str):
            response = json.dumps(response)
        return FakeStream(response, self._client.stop_reason)


class FakeAnthropic:
    """Stands in for anthropic.Anthropic; replies with queued responses in order."""

    def __init__(self):
        self.responses = []
        self.calls = []
        self.stop_reason = "end_turn"
        self.messages = FakeMessages(self)

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    def user_text(self, index=-1) -> str:
        blocks = self.calls[index]["messages"][0]["content"]
        return "\n".join(b["text"] for b in blocks if b["type"] == "text")


@pytest.fixture
def fake_llm(monkeypatch):
    client = FakeAnthropic()
    monkeypatch.setattr(llm, "ANTHROPIC_API_KEY", "test-key")
    monkeypatch.setattr(llm, "_get_llm_client", lambda: client)
    return client


@pytest.fixture(autouse=True)
def tmp_db(tmp_path, monkeypatch):
    db_path = tmp_path / "lawyeredup-test.db"
    monkeypatch.setattr(config, "DB_PATH", db_path)
    return db_path


# ---------------------------------------------------------------------------
# Canned model responses
# ---------------------------------------------------------------------------

LEASE_TEXT = (
    "This Lease is made between John Landlord and Jane Tenant.\n\n"
    "Tenant shall deposit $4,000 as a security deposit, returned within 60 days.\n\n"
    "Tenant shall pay rent of $2,000 on the 1st of each month."
)


def parse_response(title="Residential Lease", clauses=None, summary="A one-year residential lease."):
    if clauses is None:
        clauses = [
            {"clauseId": "C1", "type": "Parties", "text": "This Lease is made between John Landlord and Jane Tenant.",
             "riskFlag": "standard"},
            {"clauseId": "C2", "type": "Security Deposit",
             "text": "Tenant shall deposit $4,000 as a security deposit, returned within 60 days.",
             "riskFlag": "unusual", "explanation": "Deposit is twice the monthly rent."},
            {"clauseId": "C3", "type": "Rent", "text": "Tenant shall pay rent of $2,000 on the 1st of each month.",
             "riskFlag": "standard"},
        ]
    return {
        "title": title,
        "docType": "Rental Agreement",
        "parties": ["Landlord", "Tenant"],
        "dates": {"startDate": "2024-09-01", "endDate": "2025-08-31"},
        "financialTerms": ["Rent $2,000/month", "Deposit $4,000"],
        "clauses": clauses,
        "summary": summary,
        "structuralIssues": [],
    }


def risk_response():
    return [
        {"clauseId": "C2", "riskLevel": "HIGH", "issue": "The deposit is unusually large.",
         "suggestedChange": "Limit the deposit to one month's rent.", "isRisky": True},
        {"clauseId": "C3", "riskLevel": "MEDIUM", "issue": "No grace period for rent.",
         "suggestedChange": "Add a five day grace period.", "isRisky": True},
    ]


@pytest.fixture
def lease_text():
    return LEASE_TEXT
