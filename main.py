#!/usr/bin/env python3
"""
LawyeredUp command line

Analyzes a contract (parse into clauses, then flag risks), runs any single
flow by slug, and manages the stored document.

Usage:
    python main.py analyze <file.txt|file.pdf|file.docx>
    python main.py analyze --text <file>           # analyze raw text, whatever the extension
    python main.py flow <slug> <input.json|->      # run one flow, JSON input from a file or stdin
    python main.py flows                           # list flow slugs
    python main.py show                            # summary of the stored document
    python main.py report <out.docx>               # write the report for the stored document
    python main.py clear                           # forget the stored document
"""

import json
import logging
import sys
from pathlib import Path

from lawyeredup import storage
from lawyeredup.config import ANTHROPIC_API_KEY, LOG_LEVEL
from lawyeredup.errors import EmptyDocumentError, FlowError, UnsupportedFileTypeError
from lawyeredup.flows import FLOWS
from lawyeredup.output import generate_report_docx, print_rich_summary
from lawyeredup.pipeline import analyze_file, run_pipeline

logger = logging.getLogger("lawyeredup")


def _usage() -> int:
    print(__doc__.split("Usage:", 1)[1].rstrip())
    return 0


def cmd_analyze(args: list[str]) -> int:
    as_text = False
    path_arg = None
    for a in args:
        if a == "--text":
            as_text = True
        else:
            path_arg = a
    if not path_arg:
        print("Error: analyze needs a file")
        return 1

    path = Path(path_arg)
    if not path.exists():
        print(f"Error: File not found: {path}")
        return 1
    if not ANTHROPIC_API_KEY:
        print("Error: ANTHROPIC_API_KEY not set. Add it to .env or the environment.")
        return 1

    try:
        if as_text:
            document = run_pipeline(path.read_text(encoding="utf-8", errors="replace"), title=path.name)
        else:
            document = analyze_file(path)
    except (EmptyDocumentError, UnsupportedFileTypeError) as e:
        print(f"Error: {e}")
        return 1
    except FlowError as e:
        logger.debug("Analysis failed", exc_info=True)
        print(f"Error: Something went wrong while analyzing the document ({e}).")
        return 1
    except Exception:
        logger.error("Analysis of %s failed", path, exc_info=True)
        print(f"Error: Failed to process file: {path.name}. Something went wrong while analyzing the document.")
        return 1

    print_rich_summary(document)
    return 0


def cmd_flow(args: list[str]) -> int:
    if len(args) < 2:
        print("Usage: python main.py flow <slug> <input.json|->")
        return 1
    slug, source = args[0], args[1]
    flow = FLOWS.get(slug)
    if flow is None:
        print(f"Error: Unknown flow '{slug}'. Run 'python main.py flows' for the list.")
        return 1

    if source == "-":
        raw = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            print(f"Error: File not found: {path}")
            return 1
        raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Error: Input is not valid JSON: {e}")
        return 1

    try:
        result = flow.run(payload)
    except FlowError as e:
        print(f"Error: Failed to run {slug}: {e.message}")
        return 1

    print(json.dumps(flow.dump(result), indent=2, ensure_ascii=False))
    return 0


def cmd_flows(args: list[str]) -> int:
    for slug in sorted(FLOWS):
        print(slug)
    return 0


def cmd_show(args: list[str]) -> int:
    if not storage.has_document():
        print("No stored document, showing the sample.")
    print_rich_summary(storage.load_document())
    return 0


def cmd_report(args: list[str]) -> int:
    out = Path(args[0]) if args else Path("report.docx")
    document = storage.load_document()
    generate_report_docx(document, out)
    print(f"Report written to: {out}")
    return 0


def cmd_clear(args: list[str]) -> int:
    storage.clear_document()
    print("Stored document cleared.")
    return 0


COMMANDS = {
    "analyze": cmd_analyze,
    "flow": cmd_flow,
    "flows": cmd_flows,
    "show": cmd_show,
    "report": cmd_report,
    "clear": cmd_clear,
}


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(message)s")

    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ("-h", "--help"):
        return _usage()

    command = COMMANDS.get(args[0])
    if command is None:
        print(f"Error: Unknown command '{args[0]}'")
        _usage()
        return 1
    return command(args[1:])


if __name__ == "__main__":
    sys.exit(main())
