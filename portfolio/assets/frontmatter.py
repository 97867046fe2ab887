# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from typing import Any, Dict, Tuple

import yaml

from ..errors import FrontmatterParseError

logger = logging.getLogger(__name__)

DELIMITER = b"---"
SEPARATOR = b"\n---\n"

def extract(data: bytes) -> Tuple[Dict[str, Any], bytes]:
    """
    Split a document into its YAML frontmatter and its markdown body.

    The frontmatter must open with ``---`` at the very start of the document and
    is closed by the first ``\\n---\\n``. When either marker is missing the
    document is treated as having no frontmatter at all.

    Args:
        data (bytes): The raw document.
    Returns:
        tuple: The decoded metadata mapping and the remaining content bytes.
    Raises:
        FrontmatterParseError: The frontmatter block is not a valid YAML mapping.
    """
    if not data.startswith(DELIMITER):
        return {}, data

    block, separator, content = data.partition(SEPARATOR)
    if not separator:
        logger.debug("Document opens with a frontmatter delimiter but never closes it; rendering as-is")
        return {}, data

    block = block.removeprefix(DELIMITER + b"\n")

    try:
        decoded = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterParseError(f"failed to parse frontmatter: {e}") from e

    if decoded is None:
        return {}, content
    if not isinstance(decoded, dict):
        raise FrontmatterParseError(
            f"failed to parse frontmatter: expected a mapping, got {type(decoded).__name__}"
        )

    # YAML allows non-string keys; metadata is always keyed by string
    return {str(key): value for key, value in decoded.items()}, content
