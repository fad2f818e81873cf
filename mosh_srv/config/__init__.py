"""Configuration module for mosh-srv."""

from mosh_srv.config.settings import Settings

__all__ = ["Settings"]
