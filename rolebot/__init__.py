"""RoleBot package providing the reaction role menu pipeline."""

from . import config, filters, gateway, models, reaction_roles, role_list, roles, utils  # noqa: F401

__all__ = ["config", "filters", "gateway", "models", "reaction_roles", "role_list", "roles", "utils"]
