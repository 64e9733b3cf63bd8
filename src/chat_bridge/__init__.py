"""chat-bridge -- async bridge from free-text input to a chat-completion endpoint."""

__version__ = '0.1.0'
