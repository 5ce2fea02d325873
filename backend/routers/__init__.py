# Routers package
from .admin import router as admin_router
from .admin_auth import router as admin_auth_router
from .catalog import router as catalog_router
from .leads import router as leads_router
from .properties import router as properties_router
from .uploads import router as uploads_router
