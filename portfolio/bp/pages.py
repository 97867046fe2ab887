# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, make_response, render_template
from markupsafe import Markup
from ..assets import current_asset_manager
from ..errors import NotFoundError, PortfolioError
from ..themes import current_theme, current_theme_manager
import logging

logger = logging.getLogger(__name__)
pages_bp = Blueprint('pages', __name__)

def _page(name, status=200, **context):
    theme = current_theme()
    body = render_template(
        current_theme_manager().template(theme, name),
        theme=theme,
        themes=current_theme_manager().themes(),
        **context,
    )
    response = make_response(body, status)
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    return response

@pages_bp.route('/', methods=['GET'])
def home():
    assets = current_asset_manager()
    try:
        resume = assets.get_data()
    except PortfolioError as e:
        logger.error(f"Failed to get data for home page: {e}")
        response = make_response("<h1>Error</h1><p>Failed to load home page</p>", 500)
        response.headers['Content-Type'] = 'text/html; charset=utf-8'
        return response

    response = _page('home', resume=resume, posts=assets.list_posts())
    response.headers['Cache-Control'] = f"public, max-age={current_app.config['CACHE_MAX_AGE']}"
    return response

@pages_bp.route('/blog/<slug>', methods=['GET'])
def blog_post(slug):
    try:
        post = current_asset_manager().get_post(slug)
    except NotFoundError as e:
        logger.info(f"Blog page for {slug} not found: {e}")
        return _page('not_found', 404, slug=slug)
    except PortfolioError as e:
        logger.error(f"Failed to render blog page for {slug}: {e}")
        response = make_response("<h1>Error</h1><p>Failed to render page</p>", 500)
        response.headers['Content-Type'] = 'text/html; charset=utf-8'
        return response

    # content is HTML produced by the markdown renderer
    return _page('post', post=post, body=Markup(post.content.decode('utf-8')))
