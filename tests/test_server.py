import io
import json
import time
from queue import Empty, Queue

import httpx
import pytest
from fastapi.testclient import TestClient

import server
from conftest import StreamFailure, parse_response, risk_response
from lawyeredup import storage
from lawyeredup.data import SAMPLE_DOCUMENT


@pytest.fixture
def client():
    return TestClient(server.app)


def _events(response) -> list[dict]:
    return [
        json.loads(line[len("data: "):])
        for line in response.text.splitlines()
        if line.startswith("data: ")
    ]


def test_config(client, monkeypatch):
    monkeypatch.setattr(server, "ANTHROPIC_API_KEY", "")
    data = client.get("/api/config").json()
    assert data["llm_available"] is False
    assert data["llm_model"]


def test_list_flows(client):
    slugs = client.get("/api/flows").json()
    assert len(slugs) == 20
    assert "summarize-document" in slugs


# ---------------------------------------------------------------------------
# /api/flows/{slug}
# ---------------------------------------------------------------------------

def test_run_flow(client, fake_llm):
    fake_llm.queue({
        "professional": "Enforceable.", "layman": "Fair lease.", "riskSummary": "Deposit risk.",
    })
    resp = client.post("/api/flows/generate-legal-lens-summary", json={"documentText": "lease"})
    assert resp.status_code == 200
    assert resp.json()["layman"] == "Fair lease."


def test_run_list_flow(client, fake_llm):
    fake_llm.queue([{"clauseId": "C1", "confidence": 42.5, "warning": "Ambiguous."}])
    resp = client.post("/api/flows/flag-uncertain-clauses", json={"documentText": "lease"})
    assert resp.json() == [{"clauseId": "C1", "confidence": 42.5, "warning": "Ambiguous."}]


def test_unknown_flow(client, fake_llm):
    resp = client.post("/api/flows/draft-my-will", json={})
    assert resp.status_code == 404


def test_invalid_flow_input(client, fake_llm):
    resp = client.post("/api/flows/translate-legal-text", json={"text_to_translate": "hello"})
    assert resp.status_code == 422
    assert fake_llm.calls == []


def test_flow_failure_is_generic(client, fake_llm):
    fake_llm.queue("I cannot help with that.")
    resp = client.post("/api/flows/summarize-document", json={"documentText": "lease"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to run summarize-document."


def test_flow_stream_timeout_is_generic(client, fake_llm):
    fake_llm.queue(StreamFailure(httpx.ReadTimeout("timed out")))
    resp = client.post("/api/flows/summarize-document", json={"documentText": "lease"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to run summarize-document."


# ---------------------------------------------------------------------------
# Document endpoints
# ---------------------------------------------------------------------------

def test_document_defaults_to_sample(client):
    data = client.get("/api/document").json()
    assert data["title"] == SAMPLE_DOCUMENT.title
    assert len(data["clauses"]) == 10


def test_clear_and_sample(client, fake_llm, lease_text):
    fake_llm.queue(parse_response(), [])
    from lawyeredup.pipeline import run_pipeline
    run_pipeline(lease_text)
    assert client.get("/api/document").json()["title"] == "Residential Lease"

    assert client.delete("/api/document").json() == {"status": "cleared"}
    assert not storage.has_document()

    fake_llm.queue(parse_response(), [])
    run_pipeline(lease_text)
    assert client.post("/api/sample").json()["title"] == SAMPLE_DOCUMENT.title
    assert not storage.has_document()


def test_report_download(client):
    from docx import Document

    resp = client.get("/api/document/report")
    assert resp.status_code == 200
    assert "Standard_Residential_Lease_Agreement_Report.docx" in resp.headers["content-disposition"]
    texts = [p.text for p in Document(io.BytesIO(resp.content)).paragraphs]
    assert "Risks Identified" in texts


# ---------------------------------------------------------------------------
# /api/analyze
# ---------------------------------------------------------------------------

def test_analyze_text_streams_progress(client, fake_llm, lease_text):
    fake_llm.queue(parse_response(), risk_response())
    resp = client.post("/api/analyze", data={"text": lease_text})
    assert resp.headers["content-type"].startswith("text/event-stream")

    events = _events(resp)
    assert [e["type"] for e in events[:-1]] == ["progress"] * 4
    assert events[-1]["type"] == "complete"
    assert events[-1]["data"]["clauses"][1]["risk"] == "risky"
    assert storage.load_document().title == "Residential Lease"


def test_analyze_file_upload(client, fake_llm, lease_text):
    fake_llm.queue(parse_response(title=""), [])
    resp = client.post("/api/analyze", files={"file": ("lease.txt", lease_text.encode(), "text/plain")})
    events = _events(resp)
    assert events[-1]["type"] == "complete"
    assert events[-1]["data"]["title"] == "lease.txt"


def test_analyze_needs_input(client):
    resp = client.post("/api/analyze", data={"text": "   "})
    assert resp.status_code == 400


def test_analyze_unsupported_file(client, fake_llm):
    resp = client.post("/api/analyze", files={"file": ("lease.zip", b"PK\x03\x04", "application/zip")})
    assert resp.status_code == 415
    assert fake_llm.calls == []


def test_analyze_empty_file_reports_reason(client, fake_llm):
    resp = client.post("/api/analyze", files={"file": ("blank.txt", b"  \n ", "text/plain")})
    events = _events(resp)
    assert events[-1] == {"type": "error", "message": "The provided document has no text content."}


def test_analyze_flow_failure_is_generic(client, fake_llm, lease_text):
    fake_llm.queue("garbage")
    resp = client.post("/api/analyze", data={"text": lease_text})
    events = _events(resp)
    assert events[-1] == {"type": "error", "message": server.ANALYSIS_FAILED}
    assert not storage.has_document()


class LateQueue(Queue):
    """The first timed get misses, and returns only once the worker has finished."""

    missed = False

    def _has_complete(self):
        with self.mutex:
            return any(e["type"] == "complete" for e in self.queue)

    def get(self, block=True, timeout=None):
        if timeout is not None and not self.missed:
            self.missed = True
            deadline = time.time() + 5
            while time.time() < deadline and not self._has_complete():
                time.sleep(0.01)
            # Let the worker thread exit after its final put
            time.sleep(0.2)
            raise Empty
        return super().get(block, timeout)


def test_analyze_events_queued_after_keepalive_are_delivered(client, fake_llm, lease_text, monkeypatch):
    monkeypatch.setattr(server, "Queue", LateQueue)
    fake_llm.queue(parse_response(), risk_response())

    resp = client.post("/api/analyze", data={"text": lease_text})
    assert ": keepalive" in resp.text
    events = _events(resp)
    assert [e["type"] for e in events] == ["progress"] * 4 + ["complete"]
    assert storage.load_document().title == "Residential Lease"
