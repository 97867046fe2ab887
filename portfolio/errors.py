# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

class PortfolioError(Exception):
    """Base class for errors raised while loading site content."""

class NotFoundError(PortfolioError, LookupError):
    """The requested asset does not exist in the content bundle."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        message = f"asset \"{path}\" does not exist"
        if reason:
            message += f": {reason}"
        super().__init__(message)

class FrontmatterParseError(PortfolioError):
    """A frontmatter block is present but could not be decoded."""

class RenderError(PortfolioError):
    """The markdown converter failed while producing HTML."""

class DataParseError(PortfolioError):
    """data.yaml could not be decoded into a resume."""
