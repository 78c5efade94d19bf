# emitter/__init__.py

from .emitter import Emitter, Subscription, Listener, create_emitter
from .logger import get_logger

__version__ = "0.1.0"

__all__ = [
    'Emitter', 'Subscription', 'Listener',
    'create_emitter',
    'get_logger',
]
