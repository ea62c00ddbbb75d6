"""Relay service module for tutorchat.

Forwards a conversation transcript to the generative model under the
tutor persona and returns the generated text.

Module structure:
- service.py: Validation and the single upstream call
- app.py: HTTP surface (chat route, CORS, static assets)
"""

from .app import create_app
from .service import RelayService

__all__ = [
    "RelayService",
    "create_app",
]
