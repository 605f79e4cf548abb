"""Identifier types for the registry domain."""

from typing import NewType

RightId = NewType("RightId", str)
"""Name of a capability, e.g. ``"view site"``."""

GroupId = NewType("GroupId", str)
"""Name of a bundle of rights, e.g. ``"admin"``."""

Nickname = NewType("Nickname", str)
"""Primary key of a user record."""

RIGHT_PREFIX = "right"
GROUP_PREFIX = "group"

DEFAULT_GROUP = GroupId("basic")
"""Group every newly created user starts in."""

ADMIN_RIGHT = RightId("delete users")
"""Right required by administrative command handlers."""
