"""
Shared OpenAI-compatible chat helper for the generator backend.

Points at any OpenAI-compatible endpoint (Ollama by default, via its /v1 API).

Config (env):
  LLM_MODEL        default "llama3.2"
  LLM_BASE_URL     default "http://localhost:11434/v1"
  LLM_API_KEY      default "ollama"  (Ollama ignores it; OpenAI needs a real key)
  LLM_TEMPERATURE  default 0.8
  LLM_MAX_TOKENS   default 4096
"""

import logging
import os

from openai import OpenAI

log = logging.getLogger(__name__)

# ── Model config ───────────────────────────────────────────────────────────────
LLM_MODEL = os.getenv("LLM_MODEL", "llama3.2")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "http://localhost:11434/v1")
LLM_API_KEY = os.getenv("LLM_API_KEY", "ollama")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.8"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "4096"))

# Lazy singleton
_client: OpenAI | None = None


def _get_client() -> OpenAI:
    global _client
    if _client is None:
        if not LLM_API_KEY:
            raise RuntimeError("LLM_API_KEY is not set. Add it to your .env file.")
        _client = OpenAI(api_key=LLM_API_KEY, base_url=LLM_BASE_URL)
    return _client


def call_llm(
    prompt: str,
    system: str = "You are a quiz master specialized in coding topics. Output only what is asked.",
    temperature: float = LLM_TEMPERATURE,
    max_tokens: int = LLM_MAX_TOKENS,
) -> str:
    """
    Send one chat completion and return the assistant message text.

    No timeout, retry or cancellation here; callers catch failures.
    """
    client = _get_client()
    log.info(f"[LLM] model={LLM_MODEL} prompt_chars={len(prompt)}")
    response = client.chat.completions.create(
        model=LLM_MODEL,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ],
        temperature=temperature,
        max_tokens=max_tokens,
    )
    return response.choices[0].message.content or ""
