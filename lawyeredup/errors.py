"""Exceptions raised by flows and the analysis pipeline."""


class FlowError(Exception):
    """A flow failed. Every flow failure is terminal for the user action."""

    def __init__(self, flow_name: str, message: str):
        super().__init__(f"{flow_name}: {message}")
        self.flow_name = flow_name
        self.message = message


class FlowInputError(FlowError):
    """The caller's input does not satisfy the flow's input schema."""


class FlowProviderError(FlowError):
    """The LLM provider call errored or timed out."""


class FlowOutputError(FlowError):
    """The model's response could not be parsed into the flow's output schema."""


class EmptyDocumentError(ValueError):
    """The document has no text content to analyze."""


class UnsupportedFileTypeError(ValueError):
    """The uploaded file is not a .txt, .pdf, or .docx file."""
