from openai import OpenAI

from .config import Settings


class GeminiClient:
    """Text generation through Gemini's OpenAI-compatible endpoint."""

    def __init__(self, api_key: str, base_url: str):
        # Failures surface to the caller on the first attempt.
        self._client = OpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    def generate(self, model: str, prompt: str) -> str:
        completion = self._client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        return completion.choices[0].message.content or ""


def build_generator(settings: Settings):
    if not settings.gemini_api_key:
        return None
    return GeminiClient(api_key=settings.gemini_api_key, base_url=settings.base_url)
