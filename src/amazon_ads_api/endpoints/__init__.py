"""Endpoint groups. Each module is a set of stateless functions over a transport."""

from . import ad_groups

__all__ = ["ad_groups"]
