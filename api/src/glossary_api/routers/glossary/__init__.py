import logging
from fastapi import APIRouter


router = APIRouter(prefix="/glossary", tags=["glossary"])
logger = logging.getLogger(__name__)


# Import submodules to register routes on the shared router
# Static GET routes go first so '/glossary/status' is not taken for an identifier
from . import endpoints_list  # noqa: F401,E402
from . import endpoints_mutations  # noqa: F401,E402

__all__ = ["router"]
