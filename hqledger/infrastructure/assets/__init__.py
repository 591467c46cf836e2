"""Logo and image asset loading."""

from hqledger.infrastructure.assets.logo_loader import LogoLoader

__all__ = ["LogoLoader"]
