from linkshortener.utils.config import app_env, project_root, load_yaml, load_bounds
from linkshortener.utils.helpers import utcnow, expiry_from, remaining_time, format_timedelta
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'project_root',
    'load_yaml',
    'load_bounds',
    'utcnow',
    'expiry_from',
    'remaining_time',
    'format_timedelta',
    'initialize_logging',
]
