"""
Helix - Prompt Logger.

Writes each generation call (prompt, mode, response or error) to a
markdown file for debugging. Enabled via HELIX_LOG_PROMPTS=1 or the
--log-prompts CLI flag.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from helix.config import settings

# None = follow settings.helix_log_prompts
_enabled_override: bool | None = None

# Session tracking
_session_id: str | None = None
_call_counter: int = 0


def enable_prompt_logging(enabled: bool = True) -> None:
    """Enable or disable prompt logging for this process."""
    global _enabled_override
    _enabled_override = enabled


def is_enabled() -> bool:
    if _enabled_override is not None:
        return _enabled_override
    return bool(settings.helix_log_prompts)


def _get_session_dir() -> Path:
    """Directory for this run's logs, created on first use."""
    global _session_id
    if _session_id is None:
        _session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_dir = Path(settings.helix_prompt_log_dir) / _session_id
    session_dir.mkdir(parents=True, exist_ok=True)
    return session_dir


def _format_response(response: Any) -> str:
    if hasattr(response, "model_dump"):
        return f"```json\n{json.dumps(response.model_dump(mode='json'), indent=2)}\n```\n"
    return f"```\n{response}\n```\n"


def log_prompt(
    *,
    node: str,
    model: str,
    messages: list[dict[str, str]],
    response_model: str | None = None,
    response: Any = None,
    error: str | None = None,
) -> Path | None:
    """
    Log a prompt and its response to a file.

    Args:
        node: Which lab or generator made the call
        model: The model used
        messages: Chat messages sent
        response_model: Name of the Pydantic model expected (structured calls)
        response: Parsed model or streamed text
        error: Error text if the call failed

    Returns:
        Path to the log file, or None if logging is disabled
    """
    if not is_enabled():
        return None

    global _call_counter
    _call_counter += 1

    filepath = _get_session_dir() / f"{_call_counter:02d}_{node}.md"

    lines = [
        f"# Generation Call: {node}",
        "",
        f"**Time:** {datetime.now().isoformat()}",
        f"**Model:** {model}",
    ]
    if response_model:
        lines.append(f"**Response Model:** {response_model}")

    for message in messages:
        lines += ["", "---", "", f"## {message['role'].title()}", "", "```", message["content"], "```"]

    lines += ["", "---", "", "## Response", ""]
    if error:
        lines.append(f"**ERROR:** {error}")
    elif response is not None:
        lines.append(_format_response(response))
    else:
        lines.append("(No response)")

    filepath.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return filepath


def get_session_log_dir() -> Path | None:
    """Get the current session's log directory, if logging is enabled."""
    if not is_enabled():
        return None
    return _get_session_dir()


def reset_session() -> None:
    """Reset the session (for testing)."""
    global _session_id, _call_counter, _enabled_override
    _session_id = None
    _call_counter = 0
    _enabled_override = None
