# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, jsonify, make_response, render_template, request
from typing import Iterable, List
from ..assets import Post, current_asset_manager
from ..errors import PortfolioError
from ..themes import THEME_COOKIE, current_theme, current_theme_manager
import logging

logger = logging.getLogger(__name__)
api_bp = Blueprint('api', __name__)

THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # 1 year

def filter_posts(posts: Iterable[Post], tag: str | None = None, search: str | None = None) -> List[Post]:
    """
    Filter posts by tag and by a search string.
    Args:
        posts: The posts to filter, in display order.
        tag (str): Keep posts carrying this tag (case-insensitive).
        search (str): Keep posts whose title or description contains this text (case-insensitive).
    Returns:
        list: The matching posts, order preserved.
    """
    tag = (tag or "").strip().lower()
    search = (search or "").strip().lower()

    matches = []
    for post in posts:
        if tag and tag not in (t.lower() for t in post.tags()):
            continue
        if search and search not in post.title().lower() and search not in post.description().lower():
            continue
        matches.append(post)
    return matches

def _html_response(body, status=200, max_age=None):
    response = make_response(body, status)
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    if max_age is not None:
        response.headers['Cache-Control'] = f"public, max-age={max_age}"
    return response

# GET /api/data
@api_bp.route('/data', methods=['GET'])
def get_data():
    try:
        resume = current_asset_manager().get_data()
    except PortfolioError as e:
        logger.error(f"Failed to get data: {e}")
        return jsonify({'error': 'failed to retrieve data'}), 500

    response = jsonify(resume.to_dict())
    response.headers['Cache-Control'] = f"public, max-age={current_app.config['CACHE_MAX_AGE']}"
    return response

# GET /api/posts/partial?tag=...&search=...
@api_bp.route('/posts/partial', methods=['GET'])
def posts_partial():
    tag = request.args.get('tag')
    search = request.args.get('search')
    posts = filter_posts(current_asset_manager().list_posts(), tag=tag, search=search)
    logger.debug(f"Posts partial: tag={tag!r} search={search!r} matched {len(posts)}")

    body = render_template(
        current_theme_manager().template(current_theme(), 'partials/posts'),
        posts=posts, tag=tag, search=search,
    )
    return _html_response(body, max_age=current_app.config['PARTIAL_CACHE_MAX_AGE'])

# GET /api/experience/partial
@api_bp.route('/experience/partial', methods=['GET'])
def experience_partial():
    try:
        resume = current_asset_manager().get_data()
    except PortfolioError as e:
        logger.error(f"Failed to get data for experience partial: {e}")
        return _html_response("<p>Error loading experience</p>", 500)

    body = render_template(
        current_theme_manager().template(current_theme(), 'partials/experience'),
        experience=resume.experience,
    )
    return _html_response(body, max_age=current_app.config['CACHE_MAX_AGE'])

# GET /api/skills/partial
@api_bp.route('/skills/partial', methods=['GET'])
def skills_partial():
    try:
        resume = current_asset_manager().get_data()
    except PortfolioError as e:
        logger.error(f"Failed to get data for skills partial: {e}")
        return _html_response("<p>Error loading skills</p>", 500)

    body = render_template(
        current_theme_manager().template(current_theme(), 'partials/skills'),
        skills=resume.skills,
    )
    return _html_response(body, max_age=current_app.config['CACHE_MAX_AGE'])

# POST /api/theme (form field "theme")
@api_bp.route('/theme', methods=['POST'])
def switch_theme():
    theme = request.form.get('theme', '').strip()
    if not theme:
        response = make_response("theme parameter required", 400)
        response.headers['Content-Type'] = 'text/plain'
        return response

    if not current_theme_manager().is_valid(theme):
        logger.warning(f"Rejected unknown theme {theme!r}")
        response = make_response(f"unknown theme: {theme}", 400)
        response.headers['Content-Type'] = 'text/plain'
        return response

    response = _html_response("<!-- Theme switched -->")
    response.set_cookie(
        THEME_COOKIE,
        theme,
        max_age=THEME_COOKIE_MAX_AGE,
        path='/',
        httponly=True,
        secure=current_app.config['SECURE_COOKIES'],
        samesite='Lax',
    )
    response.headers['HX-Redirect'] = '/'
    logger.info(f"Theme switched to {theme}")
    return response
