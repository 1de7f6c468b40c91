"""Alexa skill request handlers."""

from fact_skill.handlers.facts import GetNewFactHandler
from fact_skill.handlers.standard import (
    ExitIntentHandler,
    FallbackIntentHandler,
    HelpIntentHandler,
    SessionEndedRequestHandler,
)

# Registration order; the first handler that can handle a request wins
REQUEST_HANDLERS = (
    GetNewFactHandler,
    HelpIntentHandler,
    ExitIntentHandler,
    FallbackIntentHandler,
    SessionEndedRequestHandler,
)

__all__ = [
    "GetNewFactHandler",
    "HelpIntentHandler",
    "ExitIntentHandler",
    "FallbackIntentHandler",
    "SessionEndedRequestHandler",
    "REQUEST_HANDLERS",
]
