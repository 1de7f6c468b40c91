"""Thrissur Facts Alexa skill."""
