"""Fact request handler."""

import logging

from ask_sdk_core.dispatch_components import AbstractRequestHandler
from ask_sdk_core.utils import is_intent_name, is_request_type
from ask_sdk_model.ui import SimpleCard

logger = logging.getLogger(__name__)


class GetNewFactHandler(AbstractRequestHandler):
    """
    Handler for skill launch and GetNewFactIntent.

    Speaks a random fact and shows the same fact on a simple card.
    The session is left to the platform default, so no reprompt is set.
    """

    def can_handle(self, handler_input):
        return (
            is_request_type("LaunchRequest")(handler_input)
            or is_intent_name("GetNewFactIntent")(handler_input)
        )

    def handle(self, handler_input):
        logger.info("In GetNewFactHandler")

        t = handler_input.attributes_manager.request_attributes["t"]
        random_fact = t("FACTS")
        speech = t("GET_FACT_MESSAGE") + random_fact

        handler_input.response_builder.speak(speech).set_card(
            SimpleCard(title=t("SKILL_NAME"), content=random_fact)
        )
        return handler_input.response_builder.response
