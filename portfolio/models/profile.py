"""
Data model for the portfolio owner and contact channels.
"""

from dataclasses import dataclass, field

from portfolio.core.config import Settings


@dataclass(frozen=True)
class ContactChannel:
    """A contact link with icons for light and dark color schemes."""

    url: str
    icon: str
    icon_dark: str

    @classmethod
    def create(cls, name: str, url: str) -> "ContactChannel":
        """Create a channel using the bundled icons for ``name``."""
        return cls(url=url, icon=f"icons/{name}.svg", icon_dark=f"icons/{name}-dark.svg")


@dataclass(frozen=True)
class Profile:
    """Who the portfolio belongs to and how to reach them."""

    username: str
    profile_name: str
    contact: dict[str, ContactChannel] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Profile":
        """Build the profile with email, linkedin and github channels."""
        return cls(
            username=settings.github_username,
            profile_name=settings.profile_name,
            contact={
                "email": ContactChannel.create("email", f"mailto:{settings.contact_email}"),
                "linkedin": ContactChannel.create(
                    "linkedin", f"https://www.linkedin.com/in/{settings.contact_linkedin}"
                ),
                "github": ContactChannel.create(
                    "github", f"https://github.com/{settings.github_username}"
                ),
            },
        )
