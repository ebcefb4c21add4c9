"""Catalog of social platforms a link can point at.

Each platform knows its display name, icon identifier and how to turn a
handle into a profile URL. Mastodon is parameterized by its instance host,
so `SocialPlatform.mastodon("mastodon.social")` and
`SocialPlatform.mastodon("iosdev.space")` are different platforms.

Handles are percent-encoded with no safe characters: "a b" becomes "a%20b".
"""

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class SocialPlatform:
    key: str  # stable identifier, e.g. "twitter"
    name: str  # human-readable, e.g. "X/Twitter"
    icon: str  # SF Symbol name
    url_template: str  # contains {handle}, and {instance} for Mastodon
    instance: str | None = None

    @classmethod
    def mastodon(cls, instance: str) -> "SocialPlatform":
        return cls(
            key="mastodon",
            name="Mastodon",
            icon="square.split.1x2",
            url_template="https://{instance}/@{handle}",
            instance=instance,
        )

    @classmethod
    def parse(cls, text: str) -> "SocialPlatform":
        """Parse "twitter" or "mastodon:iosdev.space" into a platform."""
        key, _, instance = text.strip().partition(":")
        key = key.lower()
        if key == "mastodon":
            if not instance:
                raise ValueError("Mastodon needs an instance: 'mastodon:<host>'")
            return cls.mastodon(instance)
        try:
            return CATALOG[key]
        except KeyError:
            raise ValueError(f"Unknown social platform: {text!r}") from None

    def url(self, handle: str) -> str:
        return self.url_template.format(
            handle=quote(handle, safe=""), instance=self.instance or ""
        )

    def describe(self, handle: str) -> tuple[str, str, str]:
        """Return (display name, icon, URL) for a handle on this platform."""
        return self.name, self.icon, self.url(handle)

    def __str__(self) -> str:
        if self.instance:
            return f"{self.key}:{self.instance}"
        return self.key


FACEBOOK = SocialPlatform("facebook", "Facebook", "hand.thumbsup", "https://facebook.com/{handle}")
GITHUB = SocialPlatform("github", "GitHub", "cat.circle.fill", "https://github.com/{handle}")
INSTAGRAM = SocialPlatform("instagram", "Instagram", "camera.circle", "https://instagram.com/{handle}")
LINKEDIN = SocialPlatform(
    "linkedin",
    "LinkedIn",
    "point.topleft.down.to.point.bottomright.curvepath",
    "https://www.linkedin.com/in/{handle}",
)
PINTEREST = SocialPlatform("pinterest", "Pinterest", "pin.circle", "https://pinterest.com/{handle}")
REDDIT = SocialPlatform(
    "reddit",
    "Reddit",
    "antenna.radiowaves.left.and.right.circle",
    "https://reddit.com/user/{handle}",
)
THREADS = SocialPlatform("threads", "Threads", "at.circle", "https://www.threads.net/@{handle}")
TIKTOK = SocialPlatform("tiktok", "TikTok", "music.note", "https://www.tiktok.com/@{handle}")
TWITTER = SocialPlatform("twitter", "X/Twitter", "bird", "https://twitter.com/{handle}")
YOUTUBE = SocialPlatform("youtube", "YouTube", "play.rectangle.fill", "https://www.youtube.com/{handle}")

# Fixed platforms by key; Mastodon is built per instance.
CATALOG: dict[str, SocialPlatform] = {
    p.key: p
    for p in (
        FACEBOOK,
        GITHUB,
        INSTAGRAM,
        LINKEDIN,
        PINTEREST,
        REDDIT,
        THREADS,
        TIKTOK,
        TWITTER,
        YOUTUBE,
    )
}
