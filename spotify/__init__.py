"""Spotify integration modules."""

from spotify.client import SpotifyClient

__all__ = ["SpotifyClient"]
