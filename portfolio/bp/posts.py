# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, jsonify
from ..assets import current_asset_manager
from ..errors import NotFoundError, PortfolioError
import logging

logger = logging.getLogger(__name__)
posts_bp = Blueprint('posts', __name__)

# GET /posts
@posts_bp.route('/posts', methods=['GET'])
def list_posts():
    posts = current_asset_manager().list_posts()
    return jsonify({
        'posts': [post.to_dict(include_content=False) for post in posts]
    })

# GET /posts/<slug>
@posts_bp.route('/posts/<slug>', methods=['GET'])
def get_post(slug):
    try:
        post = current_asset_manager().get_post(slug)
    except NotFoundError as e:
        logger.info(f"Post {slug} not found: {e}")
        return jsonify({'error': 'post not found'}), 404
    except PortfolioError as e:
        logger.error(f"Failed to load post {slug}: {e}")
        return jsonify({'error': 'failed to load post'}), 500

    response = jsonify(post.to_dict())
    response.headers['Cache-Control'] = f"public, max-age={current_app.config['CACHE_MAX_AGE']}"
    return response
