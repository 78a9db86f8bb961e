import json

import pytest

import main
from conftest import parse_response, risk_response
from lawyeredup import storage


@pytest.fixture(autouse=True)
def _key(monkeypatch):
    monkeypatch.setattr(main, "ANTHROPIC_API_KEY", "test-key")


def test_usage(capsys):
    assert main.main([]) == 0
    assert "analyze <file" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert main.main(["frobnicate"]) == 1
    assert "Unknown command" in capsys.readouterr().out


def test_flows_lists_slugs(capsys):
    assert main.main(["flows"]) == 0
    lines = capsys.readouterr().out.split()
    assert "process-batch-contracts" in lines
    assert len(lines) == 20


def test_analyze_file(tmp_path, fake_llm, lease_text, capsys):
    path = tmp_path / "lease.txt"
    path.write_text(lease_text, encoding="utf-8")
    fake_llm.queue(parse_response(), risk_response())

    assert main.main(["analyze", str(path)]) == 0
    assert storage.load_document().clauses[1].risk == "risky"
    assert "Document Analysis" in capsys.readouterr().out


def test_analyze_as_text_ignores_extension(tmp_path, fake_llm, lease_text):
    path = tmp_path / "lease.md"
    path.write_text(lease_text, encoding="utf-8")
    fake_llm.queue(parse_response(title=""), [])

    assert main.main(["analyze", "--text", str(path)]) == 0
    assert storage.load_document().title == "lease.md"


def test_analyze_unsupported(tmp_path, fake_llm, capsys):
    path = tmp_path / "lease.md"
    path.write_text("Rent is due.", encoding="utf-8")
    assert main.main(["analyze", str(path)]) == 1
    assert "Unsupported file type" in capsys.readouterr().out


def test_analyze_missing_file(tmp_path, capsys):
    assert main.main(["analyze", str(tmp_path / "nope.txt")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_analyze_corrupt_pdf(tmp_path, fake_llm, capsys):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf at all")

    assert main.main(["analyze", str(path)]) == 1
    assert "Failed to process file: broken.pdf" in capsys.readouterr().out
    assert fake_llm.calls == []
    assert not storage.has_document()


def test_flow_from_file(tmp_path, fake_llm, capsys):
    payload = tmp_path / "in.json"
    payload.write_text(json.dumps({"text_to_translate": "Pay rent.", "target_language": "Hindi"}))
    fake_llm.queue({
        "original_text": "Pay rent.", "translated_text": "किराया दें।",
        "back_translation": "Pay rent.", "accuracy_notes": "Exact.",
    })

    assert main.main(["flow", "translate-legal-text", str(payload)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["translated_text"] == "किराया दें।"


def test_flow_invalid_input(tmp_path, fake_llm, capsys):
    payload = tmp_path / "in.json"
    payload.write_text("{}")
    assert main.main(["flow", "translate-legal-text", str(payload)]) == 1
    assert "Failed to run translate-legal-text" in capsys.readouterr().out


def test_flow_missing_input_file(tmp_path, fake_llm, capsys):
    assert main.main(["flow", "translate-legal-text", str(tmp_path / "nope.json")]) == 1
    assert "File not found" in capsys.readouterr().out
    assert fake_llm.calls == []


def test_report_and_clear(tmp_path, capsys):
    out = tmp_path / "out.docx"
    assert main.main(["report", str(out)]) == 0
    assert out.exists()
    assert main.main(["clear"]) == 0
    assert not storage.has_document()
