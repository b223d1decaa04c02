"""Domain Services."""

from apps.social_auth.domain.services.display_name import (
    DisplayNameGenerator,
    random_suffix,
)

__all__ = ["DisplayNameGenerator", "random_suffix"]
