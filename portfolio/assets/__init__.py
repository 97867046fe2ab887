# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import current_app

from .store import AssetStore, DEFAULT_CONTENT_DIR
from .post import Post
from .manager import AssetManager

def current_asset_manager() -> AssetManager:
    """The AssetManager registered on the running Flask app."""
    return current_app.extensions["asset_manager"]
