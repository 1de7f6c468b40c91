"""Request and response interceptors for the Alexa skill."""

import logging

from ask_sdk_core.dispatch_components import (
    AbstractExceptionHandler,
    AbstractRequestInterceptor,
    AbstractResponseInterceptor,
)

from fact_skill.l10n import get_translator

logger = logging.getLogger(__name__)


def get_request_translator(handler_input):
    """
    Return the translate function bound to this request.

    Falls back to resolving the request locale directly when the
    localization interceptor did not run.
    """
    request_attr = handler_input.attributes_manager.request_attributes
    t = request_attr.get("t")
    if t is None:
        t = get_translator(getattr(handler_input.request_envelope.request, "locale", None))
    return t


class LocalizationInterceptor(AbstractRequestInterceptor):
    """
    Bind a translate function for the request locale.

    Handlers read it back as ``request_attributes["t"]``. Request attributes
    live for a single request, so locales never leak between requests.
    """

    def process(self, handler_input):
        locale = getattr(handler_input.request_envelope.request, "locale", None)
        request_attr = handler_input.attributes_manager.request_attributes
        request_attr["t"] = get_translator(locale)


class RequestLogger(AbstractRequestInterceptor):
    """Log incoming requests."""

    def process(self, handler_input):
        logger.info(f"Request Envelope: {handler_input.request_envelope}")


class ResponseLogger(AbstractResponseInterceptor):
    """Log outgoing responses."""

    def process(self, handler_input, response):
        logger.info(f"Response: {response}")


class CatchAllExceptionHandler(AbstractExceptionHandler):
    """
    Catch-all exception handler.

    Covers unmatched requests as well as errors raised while handling one.
    Logs the error and apologizes without exposing any details.
    """

    def can_handle(self, handler_input, exception):
        return True

    def handle(self, handler_input, exception):
        logger.error(exception, exc_info=True)

        t = get_request_translator(handler_input)
        speech = t("ERROR_MESSAGE")
        handler_input.response_builder.speak(speech).ask(speech)

        return handler_input.response_builder.response
