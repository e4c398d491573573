import logging

from flask import Flask, request
from prompt_relay import api_bp
from prompt_relay.config import get_settings
from prompt_relay.gemini import build_generator
from prompt_relay.handler import PromptRelay
from vercel.headers import set_headers

logger = logging.getLogger(__name__)


def create_app(settings=None, generator=None):
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    if not settings.gemini_api_key:
        logger.error(
            "CRITICAL ERROR: GEMINI_API_KEY is not set in environment variables. "
            "Check Vercel project settings."
        )
        # No credential means no client, injected or not.
        generator = None
    elif generator is None:
        generator = build_generator(settings)

    app = Flask(__name__)
    app.extensions["prompt_relay"] = PromptRelay(generator, model=settings.model)
    app.register_blueprint(api_bp)

    @app.before_request
    def _vercel_set_headers():
        set_headers(request.headers)

    return app


app = create_app()
