# app/services/ai_service.py
"""Chat-completion proxy to OpenRouter.

OpenRouter speaks the OpenAI wire format, so the official ``openai`` client is
pointed at its base URL. One attempt per call; retry policy is left to the
client.
"""
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI, APIConnectionError, APIStatusError, APITimeoutError

from app.core.config import settings
from app.core.errors import ConfigError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a calm, empathetic mental-health support assistant named Calmora.
- Speak softly, be understanding, and supportive
- Never give medical advice or diagnose conditions
- Always encourage reaching out to real people or crisis lines if the user sounds distressed
- Be warm, non-judgmental, and helpful
- Focus on active listening, validation, and providing helpful resources
- Keep responses concise but meaningful (2-4 sentences when possible)
- If someone mentions suicide, self-harm, or immediate crisis, strongly encourage contacting 988 (Suicide Prevention Lifeline) or 911 immediately"""

FALLBACK_REPLY = "I apologize, but I could not generate a response. Please try again."

TIMEOUT_SECONDS = 30.0
TEMPERATURE = 0.7
MAX_TOKENS = 800


def build_messages(message: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]


def request_completion(message: str) -> Optional[str]:
    """Send one exchange upstream and return the first choice's text (may be None)."""
    client = OpenAI(
        api_key=settings.OPENROUTER_API_KEY,
        base_url=settings.OPENROUTER_BASE_URL,
        timeout=TIMEOUT_SECONDS,
        max_retries=0,
        default_headers={
            "HTTP-Referer": settings.FRONTEND_URL,
            "X-Title": "Calmora - Mental Health Support",
        },
    )
    response = client.chat.completions.create(
        model=settings.OPENROUTER_MODEL,
        messages=build_messages(message),
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
    )
    if not response.choices:
        return None
    return response.choices[0].message.content


def _upstream_message(body: Any) -> str:
    if isinstance(body, dict):
        err = body.get("error", body)
        if isinstance(err, dict):
            err = err.get("message")
        if isinstance(err, str) and err:
            return err
        msg = body.get("message")
        if isinstance(msg, str) and msg:
            return msg
    if isinstance(body, str) and body:
        return body
    return "AI service error"


def send_message(message: Any) -> str:
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("Message is required")

    if not settings.OPENROUTER_API_KEY:
        raise ConfigError("AI service not configured")

    try:
        reply = request_completion(message.strip())
    except APITimeoutError:
        # must precede APIConnectionError, which it subclasses
        logger.error("OpenRouter request timeout")
        raise UpstreamError(
            "Request timeout. The AI service took too long to respond. Please try again.",
            status_code=504,
        )
    except APIConnectionError as e:
        logger.error("OpenRouter unreachable: %s", e)
        raise UpstreamError(
            "AI service is temporarily unavailable. Please try again later.",
            status_code=503,
        )
    except APIStatusError as e:
        logger.error("OpenRouter API error status=%s body=%s", e.status_code, e.body)
        status = e.status_code if 400 <= e.status_code < 500 else 500
        raise UpstreamError(_upstream_message(e.body), status_code=status)
    except Exception:
        logger.exception("Unexpected AI proxy error")
        raise UpstreamError("An unexpected error occurred. Please try again.", status_code=500)

    return reply or FALLBACK_REPLY
