"""
Helix - LLM Client.

Two contracts over the OpenAI API:
- call_llm: schema-constrained generation via Instructor, returns a
  validated Pydantic instance
- call_llm_chat_stream: streaming text generation, yields fragments in
  arrival order

Every failure leaves this module as a GenerationError with a kind.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Any, TypeVar

import instructor
from openai import AsyncOpenAI
from pydantic import BaseModel

from helix.config import settings
from helix.llm.errors import GenerationError, GenerationErrorKind, to_generation_error
from helix.llm.model_router import AnalysisMode, ModelConfig, get_node_config
from helix.llm.prompt_logger import log_prompt

logger = logging.getLogger(__name__)

# Type variable for generic structured output
T = TypeVar("T", bound=BaseModel)

# Singleton clients
_raw_async_client: AsyncOpenAI | None = None
_client: instructor.AsyncInstructor | None = None


def get_raw_async_client() -> AsyncOpenAI:
    """
    Get the plain async OpenAI client (used for streaming).

    Raises GenerationError(API_KEY) when no key is configured.
    """
    global _raw_async_client

    if _raw_async_client is None:
        if not settings.openai_api_key:
            raise GenerationError(GenerationErrorKind.API_KEY, "OPENAI_API_KEY is not set")
        _raw_async_client = AsyncOpenAI(api_key=settings.openai_api_key)

    return _raw_async_client


def get_client() -> instructor.AsyncInstructor:
    """Get the Instructor-wrapped async client for structured outputs."""
    global _client

    if _client is None:
        _client = instructor.from_openai(get_raw_async_client())

    return _client


def reset_clients() -> None:
    """Drop cached clients (tests, key rotation)."""
    global _raw_async_client, _client
    _raw_async_client = None
    _client = None


def _api_kwargs(config: ModelConfig, messages: list[dict[str, str]]) -> dict[str, Any]:
    """Build create() kwargs; search models take web_search_options, not temperature."""
    api_kwargs: dict[str, Any] = {
        "model": config["model"],
        "messages": messages,
        "store": False,
    }
    if config.get("web_search"):
        api_kwargs["web_search_options"] = {}
    elif "temperature" in config:
        api_kwargs["temperature"] = config["temperature"]
    return api_kwargs


async def call_llm(
    *,
    response_model: type[T],
    system_prompt: str,
    user_prompt: str,
    mode: AnalysisMode | str = "standard",
    node_name: str = "structured",
    max_retries: int = 2,
) -> T:
    """
    Make a structured LLM call with guaranteed schema compliance.

    Args:
        response_model: Pydantic model class for the response
        system_prompt: System message setting context
        user_prompt: The actual request
        mode: Analysis mode for model selection
        node_name: Caller name for logging and temperature
        max_retries: Re-asks if the response doesn't match the schema

    Returns:
        Instance of response_model with validated data

    Raises:
        GenerationError: on any provider, transport or schema failure
    """
    config = get_node_config(node_name, mode)
    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
    api_kwargs = _api_kwargs(config, messages)
    api_kwargs["response_model"] = response_model
    api_kwargs["max_retries"] = max_retries

    try:
        client = get_client()
        response = await client.chat.completions.create(**api_kwargs)
    except Exception as e:
        error = to_generation_error(e)
        logger.error(f"Structured call failed ({node_name}, {error.kind.value}): {e}")
        log_prompt(
            node=node_name,
            model=config["model"],
            messages=messages,
            response_model=response_model.__name__,
            error=str(e),
        )
        raise error from e

    log_prompt(
        node=node_name,
        model=config["model"],
        messages=messages,
        response_model=response_model.__name__,
        response=response,
    )
    return response


async def call_llm_chat_stream(
    *,
    messages: list[dict[str, str]],
    mode: AnalysisMode | str = "standard",
    node_name: str = "chat",
) -> AsyncGenerator[str, None]:
    """
    Stream a chat completion, yielding text fragments as they arrive.

    Empty fragments (role-only deltas, the final chunk) are skipped.
    Fragments are never reordered; consumers concatenate them.

    Raises:
        GenerationError: on failure before or during streaming
    """
    config = get_node_config(node_name, mode)
    api_kwargs = _api_kwargs(config, messages)
    api_kwargs["stream"] = True

    received: list[str] = []
    try:
        client = get_raw_async_client()
        stream = await client.chat.completions.create(**api_kwargs)
        async for chunk in stream:
            if not chunk.choices:
                continue
            token = chunk.choices[0].delta.content
            if token:
                received.append(token)
                yield token
    except Exception as e:
        error = to_generation_error(e)
        logger.error(f"Streaming call failed ({node_name}, {error.kind.value}): {e}")
        log_prompt(node=node_name, model=config["model"], messages=messages, error=str(e))
        raise error from e

    log_prompt(node=node_name, model=config["model"], messages=messages, response="".join(received))
