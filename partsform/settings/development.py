"""
Development Settings
"""

from dotenv import load_dotenv

# Load .env before the config module reads the environment
load_dotenv()

from .base import *
from partsform.config import config, get_database_config

DEBUG = True
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = config.security.allowed_hosts

DATABASES = {
    "default": get_database_config(),
}
