"""
Helix - LLM Client.

Streaming and structured generation over OpenAI, with classified errors.
"""

from helix.llm.client import call_llm, call_llm_chat_stream, get_client
from helix.llm.errors import GenerationError, GenerationErrorKind, classify_error
from helix.llm.model_router import ANALYSIS_MODES, get_model

__all__ = [
    "ANALYSIS_MODES",
    "GenerationError",
    "GenerationErrorKind",
    "call_llm",
    "call_llm_chat_stream",
    "classify_error",
    "get_client",
    "get_model",
]
