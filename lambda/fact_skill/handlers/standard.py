"""Standard Alexa intent handlers (Help, Exit, Fallback, SessionEnded)."""

import logging

from ask_sdk_core.dispatch_components import AbstractRequestHandler
from ask_sdk_core.utils import is_intent_name, is_request_type

logger = logging.getLogger(__name__)


class HelpIntentHandler(AbstractRequestHandler):
    """Handler for help intent. Keeps the session open."""

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.HelpIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In HelpIntentHandler")

        t = handler_input.attributes_manager.request_attributes["t"]
        handler_input.response_builder.speak(t("HELP_MESSAGE")).ask(t("HELP_REPROMPT"))
        return handler_input.response_builder.response


class ExitIntentHandler(AbstractRequestHandler):
    """Handler for Cancel and Stop intents."""

    def can_handle(self, handler_input):
        return (
            is_intent_name("AMAZON.CancelIntent")(handler_input)
            or is_intent_name("AMAZON.StopIntent")(handler_input)
        )

    def handle(self, handler_input):
        logger.info("In ExitIntentHandler")

        t = handler_input.attributes_manager.request_attributes["t"]
        handler_input.response_builder.speak(t("STOP_MESSAGE")).set_should_end_session(True)
        return handler_input.response_builder.response


class FallbackIntentHandler(AbstractRequestHandler):
    """
    Handler for fallback intent.

    Triggered when Alexa doesn't understand the user's input. Only sent in
    locales that support AMAZON.FallbackIntent.
    """

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.FallbackIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In FallbackIntentHandler")

        t = handler_input.attributes_manager.request_attributes["t"]
        handler_input.response_builder.speak(t("FALLBACK_MESSAGE")).ask(t("FALLBACK_REPROMPT"))
        return handler_input.response_builder.response


class SessionEndedRequestHandler(AbstractRequestHandler):
    """Handler for session end."""

    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        logger.info("In SessionEndedRequestHandler")

        reason = handler_input.request_envelope.request.reason
        logger.info(f"Session ended with reason: {getattr(reason, 'value', reason)}")
        return handler_input.response_builder.response
