"""supportkit -- client transport for an embeddable support chatbot.

Sends one line of user text to an HTTP chat-completions endpoint or a
WebSocket chat server and returns one line of displayable bot text.
"""

__version__ = "0.1.0"
