"""
Protocols exposed by the core to its collaborators
"""

from pingpong.core.interfaces.presenter import EventSink
from pingpong.core.interfaces.presenter import PresenterProtocol

__all__ = ["EventSink", "PresenterProtocol"]
