"""Admin use cases."""

from .seed_admin import SeedAdminUseCase, SeedOutcome

__all__ = ["SeedAdminUseCase", "SeedOutcome"]
