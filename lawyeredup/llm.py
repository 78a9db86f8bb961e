"""Flow invoker: validated input, one Claude call, validated JSON output."""

import base64
import binascii
import json
import logging
import re
import time
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any

import anthropic
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import ANTHROPIC_API_KEY, LLM_MAX_TOKENS, LLM_MODEL, LLM_TIMEOUT
from .errors import FlowInputError, FlowOutputError, FlowProviderError
from .prompts import build_system_prompt

logger = logging.getLogger(__name__)

_llm_client = None


def _get_llm_client():
    global _llm_client
    if _llm_client is None:
        # No retries: a failed call fails the flow
        _llm_client = anthropic.Anthropic(
            api_key=ANTHROPIC_API_KEY, timeout=LLM_TIMEOUT, max_retries=0,
        )
    return _llm_client


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------

_DATA_URI_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(;[\w.+-]+=[^;,]*)*);base64,(?P<data>.*)$",
    re.DOTALL,
)

_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


def to_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def data_uri_to_block(flow_name: str, uri: str) -> dict:
    """Turn a base64 data URI into a Messages API content block."""
    m = _DATA_URI_RE.match(uri.strip())
    if not m:
        raise FlowInputError(flow_name, "document data URI must look like 'data:<mimetype>;base64,<data>'")

    mime = m.group("mime").lower()
    payload = re.sub(r"\s+", "", m.group("data"))
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FlowInputError(flow_name, f"document data URI is not valid base64: {e}") from e

    if mime == "application/pdf":
        return {
            "type": "document",
            "source": {"type": "base64", "media_type": mime, "data": payload},
        }
    if mime in _IMAGE_TYPES:
        return {
            "type": "image",
            "source": {"type": "base64", "media_type": mime, "data": payload},
        }
    if mime.startswith("text/"):
        return {"type": "text", "text": raw.decode("utf-8", errors="replace")}
    raise FlowInputError(flow_name, f"unsupported document type: {mime}")


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        first_newline = text.find("\n")
        text = text[first_newline + 1:] if first_newline != -1 else text[3:]
        text = text.rsplit("```", 1)[0]
    return text.strip()


def call_llm(flow_name: str, system: str, content: list[dict], max_tokens: int) -> tuple[str, str]:
    """Send one request to Claude. Returns (response_text, stop_reason)."""
    if not ANTHROPIC_API_KEY:
        raise FlowProviderError(flow_name, "ANTHROPIC_API_KEY not configured. Cannot run LLM analysis.")

    client = _get_llm_client()

    # Streaming is required by the SDK for large max_tokens
    text = ""
    try:
        with client.messages.stream(
            model=LLM_MODEL,
            max_tokens=max_tokens,
            system=system,
            messages=[{"role": "user", "content": content}],
        ) as stream:
            for chunk in stream.text_stream:
                text += chunk
            response = stream.get_final_message()
    except anthropic.APIError as e:
        raise FlowProviderError(flow_name, f"LLM call failed: {e}") from e
    # Transport errors while reading the stream are not wrapped by the SDK
    except httpx.HTTPError as e:
        raise FlowProviderError(flow_name, f"LLM stream failed: {e!r}") from e

    return text.strip(), response.stop_reason


# ---------------------------------------------------------------------------
# Flow
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Flow:
    """A named input schema -> prompt -> output schema unit of work."""

    name: str
    input_model: type[BaseModel]
    output_type: Any
    template: str
    max_tokens: int = LLM_MAX_TOKENS

    @cached_property
    def output_adapter(self) -> TypeAdapter:
        return TypeAdapter(self.output_type)

    @cached_property
    def system_prompt(self) -> str:
        return build_system_prompt(self.output_adapter.json_schema())

    def validate_input(self, payload=None, **fields) -> BaseModel:
        if isinstance(payload, self.input_model) and not fields:
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump()
        if payload is not None and not isinstance(payload, Mapping):
            raise FlowInputError(self.name, f"input must be an object, got {type(payload).__name__}")
        data = dict(payload or {})
        data.update(fields)
        try:
            return self.input_model.model_validate(data)
        except ValidationError as e:
            raise FlowInputError(self.name, str(e)) from e

    def render_fields(self, data: BaseModel) -> dict[str, str]:
        fields = {}
        for key, value in data.model_dump(mode="json").items():
            if value is None:
                fields[key] = ""
            elif isinstance(value, str):
                fields[key] = value
            else:
                fields[key] = json.dumps(value, ensure_ascii=False)
        return fields

    def render(self, data: BaseModel) -> list[dict]:
        """Build the user message content blocks for validated input."""
        return [{"type": "text", "text": self.template.format(**self.render_fields(data))}]

    def parse_output(self, text: str, stop_reason: str | None = None):
        text = _strip_code_fences(text)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            if stop_reason == "max_tokens":
                raise FlowOutputError(self.name, "response was truncated at max_tokens") from e
            raise FlowOutputError(self.name, f"response is not valid JSON: {e}") from e

        try:
            return self.output_adapter.validate_python(data)
        except ValidationError as e:
            raise FlowOutputError(
                self.name, f"response does not match the output schema ({e.error_count()} errors): {e}",
            ) from e

    def run(self, payload=None, **fields):
        """Validate, render, call the model once, and return the validated output."""
        data = self.validate_input(payload, **fields)
        content = self.render(data)

        logger.info("Running flow %s", self.name)
        t0 = time.time()
        text, stop_reason = call_llm(self.name, self.system_prompt, content, self.max_tokens)
        result = self.parse_output(text, stop_reason)
        logger.info("Flow %s finished in %.1fs", self.name, time.time() - t0)
        return result

    __call__ = run

    def dump(self, result) -> Any:
        """JSON-ready form of a flow result."""
        return self.output_adapter.dump_python(result, mode="json")
