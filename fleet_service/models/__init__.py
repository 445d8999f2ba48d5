from .beam import Beam
from .satellite import Satellite
from .transponder import Transponder

__all__ = [
    "Satellite",
    "Beam",
    "Transponder",
]
