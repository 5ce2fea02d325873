"""
Time helpers shared by models and routers
"""
import os
from datetime import datetime, timezone

import pytz

LOCAL_TZ = pytz.timezone(os.getenv("TIMEZONE", "Asia/Amman"))


def get_local_now():
    """Current time in the site's timezone (Amman)"""
    return datetime.now(LOCAL_TZ)


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp for database columns"""
    return datetime.now(timezone.utc)
