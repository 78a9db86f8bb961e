"""Output generation: risk summary, .docx report, rich terminal output."""

import re
from pathlib import Path

from .models import DocumentAnalysis

RISK_ORDER = {"risky": 0, "negotiable": 1, "standard": 2}

# Highlight colours shared by the Streamlit viewer
RISK_COLORS = {
    "risky": "#fde2e1",
    "negotiable": "#fef3c7",
    "standard": "",
}

RISK_ICONS = {
    "risky": "⚠️",
    "negotiable": "🤝",
    "standard": "✅",
}


def summarize_risks(document: DocumentAnalysis) -> dict:
    by_risk = {"risky": 0, "negotiable": 0, "standard": 0}
    for c in document.clauses:
        by_risk[c.risk] = by_risk.get(c.risk, 0) + 1

    ranked = sorted(document.flagged_clauses(), key=lambda c: RISK_ORDER.get(c.risk, 9))
    return {
        "title": document.title,
        "total_clauses": len(document.clauses),
        "risk_breakdown": by_risk,
        "counter_proposals": len(document.counter_proposals()),
        "top_risks": [
            {"id": c.id, "clause": c.clauseTitle or c.id, "risk": c.risk, "summary": c.summary_eli15[:200]}
            for c in ranked[:10]
        ],
    }


def report_filename(document: DocumentAnalysis) -> str:
    stem = re.sub(r"\s+", "_", document.title)
    return f"{stem}_Report.docx"


# ---------------------------------------------------------------------------
# .docx report
# ---------------------------------------------------------------------------

def generate_report_docx(document: DocumentAnalysis, target):
    """Write the downloadable report to a path or a binary file object.

    Sections: overall summary, risks identified (non-standard clauses with
    their issue text), and an appendix of suggested counter-proposals.
    """
    from docx import Document

    doc = Document()
    doc.add_heading(f"Summary of {document.title}", level=0)

    doc.add_heading("Overall Summary", level=2)
    doc.add_paragraph(document.summary)

    risks = [c for c in document.flagged_clauses() if c.clauseTitle and c.summary_eli15]
    if risks:
        doc.add_heading("Risks Identified", level=1)
        for c in risks:
            doc.add_heading(f"{c.clauseTitle} (Risk: {c.risk})", level=3)
            doc.add_paragraph(f"Issue: {c.summary_eli15}")

    proposals = [c for c in document.counter_proposals() if c.clauseTitle]
    if proposals:
        doc.add_heading("Appendix: Suggested Counter-Proposals", level=1)
        for c in proposals:
            doc.add_heading(f'For clause "{c.clauseTitle}":', level=3)
            doc.add_paragraph(c.counterProposal)

    if isinstance(target, (str, Path)):
        target = str(target)
    doc.save(target)
    return target


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------

def print_rich_summary(document: DocumentAnalysis) -> None:
    summary = summarize_risks(document)
    try:
        from rich.console import Console
        from rich.table import Table
        from rich.panel import Panel
        from rich import box
    except ImportError:
        return _print_plain_summary(summary)

    console = Console()
    console.print()
    risk_bd = summary["risk_breakdown"]
    summary_text = (
        f"[bold]Document:[/bold] {summary['title']}\n"
        f"[bold]Clauses:[/bold] {summary['total_clauses']}\n"
        f"[bold red]Risky:[/bold red] {risk_bd.get('risky', 0)}  "
        f"[bold yellow]Negotiable:[/bold yellow] {risk_bd.get('negotiable', 0)}  "
        f"[bold green]Standard:[/bold green] {risk_bd.get('standard', 0)}\n"
        f"[bold]Counter-proposals:[/bold] {summary['counter_proposals']}"
    )
    console.print(Panel(summary_text, title="Document Analysis", border_style="blue", expand=False))

    if summary["top_risks"]:
        table = Table(title="Clauses to Review", box=box.ROUNDED, show_lines=True)
        table.add_column("Clause", style="bold", width=24)
        table.add_column("Risk", width=11)
        table.add_column("Issue", width=70)
        risk_style = {"risky": "bold red", "negotiable": "bold yellow"}
        for r in summary["top_risks"]:
            table.add_row(
                r["clause"],
                f"[{risk_style.get(r['risk'], '')}]{r['risk']}[/]",
                r["summary"][:100] + "..." if len(r["summary"]) > 100 else r["summary"],
            )
        console.print(table)
    console.print()


def _print_plain_summary(summary: dict) -> None:
    print(f"\n{'='*60}")
    print(f"  {summary['title']}")
    print(f"{'='*60}")
    print(f"  Clauses           : {summary['total_clauses']}")
    print(f"  Risk breakdown    : {summary['risk_breakdown']}")
    print(f"  Counter-proposals : {summary['counter_proposals']}")
    if summary["top_risks"]:
        print(f"\n  CLAUSES TO REVIEW:")
        for r in summary["top_risks"]:
            print(f"    [{r['risk']:10s}] {r['clause']}")
    print()
