import logging
from typing import Any, NamedTuple

from .config import GEMINI_MODEL

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method Not Allowed"
API_KEY_MISSING = "API Key not configured on the server."
PROMPT_MISSING = "Prompt is missing in the request body."
UPSTREAM_FAILED = "An error occurred while contacting the Gemini service."


class RelayResponse(NamedTuple):
    status_code: int
    body: dict


class PromptRelay:
    """Relays one prompt to the generation service and normalizes the reply.

    ``generator`` is anything with ``generate(model, prompt) -> str``. When it
    is ``None`` the credential was never configured and every POST is refused
    with a 500 before the prompt is looked at.
    """

    def __init__(self, generator, model: str = GEMINI_MODEL):
        self.generator = generator
        self.model = model

    def handle(self, method: str, payload: Any) -> RelayResponse:
        if method != "POST":
            return RelayResponse(405, {"message": METHOD_NOT_ALLOWED})

        if self.generator is None:
            return RelayResponse(500, {"text": API_KEY_MISSING})

        prompt = payload.get("prompt") if isinstance(payload, dict) else None
        if not prompt or not isinstance(prompt, str):
            return RelayResponse(400, {"text": PROMPT_MISSING})

        logger.info("Received prompt: %s", prompt)

        try:
            text = self.generator.generate(self.model, prompt)
        except Exception as exc:
            logger.exception("Gemini API call failed: %s", exc)
            return RelayResponse(500, {"text": UPSTREAM_FAILED})

        return RelayResponse(200, {"text": text})
