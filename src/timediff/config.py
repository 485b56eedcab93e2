import os
import pytz
from dotenv import load_dotenv

from timediff.util import UNITS

# Load environment variables from .env file
load_dotenv()

# Locale Configuration
# Hint consulted when humanize() gets no explicit locale (e.g. "ru_RU.UTF-8")
LOCALE_HINT = os.getenv('TIMEDIFF_LOCALE') or os.getenv('LANG', '')
DEFAULT_BASE_UNIT = os.getenv('TIMEDIFF_BASE_UNIT', 'seconds')

# Timezone Configuration (naive datetimes are read as wall-clock time here)
TIMEZONE = pytz.timezone(os.getenv('TIMEZONE', 'UTC'))

# Validate environment variables
if DEFAULT_BASE_UNIT not in UNITS:
    raise ValueError(f"TIMEDIFF_BASE_UNIT must be one of {', '.join(UNITS)}, got {DEFAULT_BASE_UNIT!r}")
