from .coords import router as coords_router
from .misc import router as misc_router

__all__ = ["coords_router", "misc_router"]
