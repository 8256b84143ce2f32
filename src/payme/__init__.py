"""PayMe payment link builder."""

from payme.domain.errors import ValidationError
from payme.domain.link_builder import LinkBuilder

__all__ = ["LinkBuilder", "ValidationError"]


# Import main lazily to avoid loading click for library users
def __getattr__(name):
    if name == "main":
        from payme.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
