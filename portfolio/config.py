# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import os
from dotenv import load_dotenv

from .assets.store import DEFAULT_CONTENT_DIR

# Load environment variables from .env file
load_dotenv()

class Config:
    # Content bundle
    CONTENT_DIR = os.getenv("PORTFOLIO_CONTENT_DIR", str(DEFAULT_CONTENT_DIR))

    # Theming
    DEFAULT_THEME = os.getenv("PORTFOLIO_THEME", "green-nebula-terminal")

    # Debug mode
    DEBUG = os.getenv("FLASK_ENV") == "development"

    # Cache-Control max-age, in seconds
    CACHE_MAX_AGE = int(os.getenv("CACHE_MAX_AGE", "3600"))
    PARTIAL_CACHE_MAX_AGE = int(os.getenv("PARTIAL_CACHE_MAX_AGE", "600"))

    # Set when served over HTTPS
    SECURE_COOKIES = os.getenv("SECURE_COOKIES", "false").lower() == "true"

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
