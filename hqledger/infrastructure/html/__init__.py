"""HTML rendering infrastructure."""

from hqledger.infrastructure.html.template_renderer import JinjaHtmlRenderer, build_environment

__all__ = ["JinjaHtmlRenderer", "build_environment"]
