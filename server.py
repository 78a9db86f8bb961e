"""FastAPI backend for LawyeredUp.

Exposes every flow by slug, the upload analysis pipeline with SSE progress,
and the stored document with its report download.
"""

import io
import json
import logging
import threading
from queue import Empty, Queue

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response, StreamingResponse

from lawyeredup import storage
from lawyeredup.config import ANTHROPIC_API_KEY, CORS_ORIGINS, LLM_MODEL, LOG_LEVEL
from lawyeredup.errors import EmptyDocumentError, FlowError, FlowInputError, UnsupportedFileTypeError
from lawyeredup.extractors import MIME_DOCX, detect_mime_type
from lawyeredup.flows import FLOWS
from lawyeredup.output import generate_report_docx, report_filename
from lawyeredup.pipeline import PASTED_TITLE, analyze_upload, run_pipeline

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="LawyeredUp API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

ANALYSIS_FAILED = "Something went wrong while analyzing the document."


# ---------------------------------------------------------------------------
# GET /api/config: LLM availability check
# ---------------------------------------------------------------------------
@app.get("/api/config")
def api_config():
    return {
        "llm_available": bool(ANTHROPIC_API_KEY),
        "llm_model": LLM_MODEL,
    }


# ---------------------------------------------------------------------------
# GET /api/flows: Registered flow slugs
# ---------------------------------------------------------------------------
@app.get("/api/flows")
def api_list_flows():
    return sorted(FLOWS)


# ---------------------------------------------------------------------------
# POST /api/flows/{slug}: Run one flow
# ---------------------------------------------------------------------------
@app.post("/api/flows/{slug}")
def api_run_flow(slug: str, body: dict):
    flow = FLOWS.get(slug)
    if flow is None:
        raise HTTPException(status_code=404, detail="Flow not found")
    try:
        result = flow.run(body)
    except FlowInputError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except FlowError:
        logger.exception("Flow %s failed", slug)
        raise HTTPException(status_code=502, detail=f"Failed to run {slug}.")
    return flow.dump(result)


# ---------------------------------------------------------------------------
# Stored document
# ---------------------------------------------------------------------------
@app.get("/api/document")
def api_get_document():
    return storage.load_document().model_dump(mode="json")


@app.delete("/api/document")
def api_clear_document():
    storage.clear_document()
    return {"status": "cleared"}


@app.post("/api/sample")
def api_load_sample():
    storage.clear_document()
    return storage.load_document().model_dump(mode="json")


@app.get("/api/document/report")
def api_document_report():
    document = storage.load_document()
    buf = io.BytesIO()
    generate_report_docx(document, buf)
    return Response(
        content=buf.getvalue(),
        media_type=MIME_DOCX,
        headers={"Content-Disposition": f'attachment; filename="{report_filename(document)}"'},
    )


# ---------------------------------------------------------------------------
# POST /api/analyze: Start analysis with SSE progress stream
# ---------------------------------------------------------------------------
@app.post("/api/analyze")
async def api_analyze(
    file: UploadFile | None = File(None),
    text: str = Form(""),
    title: str = Form(PASTED_TITLE),
):
    if not file and not text.strip():
        raise HTTPException(status_code=400, detail="Provide a file or some text")

    if file:
        try:
            detect_mime_type(file.filename, file.content_type)
        except UnsupportedFileTypeError as e:
            raise HTTPException(status_code=415, detail=str(e))
        content = await file.read()
        filename = file.filename
        content_type = file.content_type

    q: Queue = Queue()

    def run_in_thread():
        def progress_callback(step, total, msg):
            q.put({"type": "progress", "step": step, "total": total, "message": msg})

        try:
            if file:
                document = analyze_upload(content, filename, content_type, progress_callback=progress_callback)
            else:
                document = run_pipeline(text, title=title.strip() or PASTED_TITLE,
                                        progress_callback=progress_callback)
            q.put({"type": "complete", "data": document.model_dump(mode="json")})
        except (EmptyDocumentError, UnsupportedFileTypeError) as e:
            q.put({"type": "error", "message": str(e)})
        except Exception:
            logger.exception("Analysis failed")
            q.put({"type": "error", "message": ANALYSIS_FAILED})

    thread = threading.Thread(target=run_in_thread, daemon=True)
    thread.start()

    def event_stream():
        while True:
            try:
                # Short timeout so we can send keepalive pings while the LLM thinks
                event = q.get(timeout=15)
            except Empty:
                yield ": keepalive\n\n"
                if thread.is_alive():
                    continue
                # The worker may have queued its last events after the timeout
                try:
                    event = q.get_nowait()
                except Empty:
                    yield f"data: {json.dumps({'type': 'error', 'message': ANALYSIS_FAILED})}\n\n"
                    break
            yield f"data: {json.dumps(event)}\n\n"
            if event["type"] in ("complete", "error"):
                break

    return StreamingResponse(event_stream(), media_type="text/event-stream")
