"""Marfa Gallery: NFT art gallery backend with two-word art piece identifiers."""

__version__ = "0.1.0"
