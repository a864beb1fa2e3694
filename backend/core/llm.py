"""
Azure OpenAI chat-completions client.

Provides consistent interface for:
- Text generation (structured JSON output for extraction)
- Availability checking
"""
import logging
import requests
from typing import Optional, Dict, Any

from .config import settings

logger = logging.getLogger(__name__)


def _headers() -> dict:
    """Build headers for Azure OpenAI requests."""
    return {
        "Content-Type": "application/json",
        "api-key": settings.AZURE_OPENAI_API_KEY,
    }


def completions_url(deployment: Optional[str] = None) -> str:
    """Chat-completions URL for a deployment."""
    return (
        f"{settings.AZURE_OPENAI_ENDPOINT}/openai/deployments/"
        f"{deployment or settings.AZURE_OPENAI_DEPLOYMENT}/chat/completions"
        f"?api-version={settings.AZURE_OPENAI_API_VERSION}"
    )


def check_available() -> bool:
    """Azure OpenAI is usable once an endpoint and key are configured."""
    return settings.llm_configured


def generate(
    prompt: str,
    system: Optional[str] = None,
    deployment: Optional[str] = None,
    max_tokens: int = 800,
    temperature: float = 0.3,
    top_p: float = 0.95,
    timeout: Optional[int] = None,
) -> Optional[str]:
    """
    Send a generation request to Azure OpenAI.

    Best for: structured output, extraction, JSON generation.
    Uses lower default temperature for more consistent/factual output.

    Args:
        prompt: The user message
        system: Optional system prompt
        deployment: Deployment to use (defaults to AZURE_OPENAI_DEPLOYMENT)
        max_tokens: Maximum tokens to generate
        temperature: Sampling temperature (0.0-1.0)
        top_p: Nucleus sampling cutoff
        timeout: Request timeout in seconds (defaults to LLM_TIMEOUT)

    Returns:
        Response content string, or None if request failed
    """
    if not check_available():
        logger.error("LLM generate request skipped: Azure OpenAI endpoint/key not configured")
        return None

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    payload: Dict[str, Any] = {
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "frequency_penalty": 0,
        "presence_penalty": 0,
        "top_p": top_p,
    }

    try:
        resp = requests.post(
            completions_url(deployment),
            headers=_headers(),
            json=payload,
            timeout=timeout or settings.LLM_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
        # Azure response: {"choices": [{"message": {"content": "..."}}]}
        choices = data.get("choices") or []
        if not choices:
            logger.error("LLM generate request returned no choices")
            return None
        return choices[0].get("message", {}).get("content") or ""
    except (requests.RequestException, ValueError) as e:
        logger.error(f"LLM generate request failed: {e}")
        return None
