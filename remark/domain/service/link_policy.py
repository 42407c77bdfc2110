"""External link policy for comment text.

Comment text is markdown. Links of the form ``[label](url)`` pointing at an
external site are only accepted when the entity type has no allow-list, or
when the url contains one of the allow-listed fragments.
"""

import re
from collections.abc import Iterator, Mapping, Sequence

import logfire

from remark.domain.error import LinkNotAllowedError

from .base import Service

# A link followed anywhere later by a back-tick sits inside inline code
MARKDOWN_LINK_PATTERN = re.compile(
    r"\[[^\]]*\]\((?P<url>.*?)\)(?![^`]*`)", re.IGNORECASE
)


def extract_link_urls(text: str) -> Iterator[str]:
    """Yield the target of every markdown link outside inline code."""
    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        yield match.group("url")


def normalize_url(url: str) -> str:
    """Drop every ``www.`` and a single trailing slash."""
    url = url.replace("www.", "")
    if url.endswith("/"):
        url = url[:-1]
    return url


def is_external_url(url: str) -> bool:
    """Whether the url points at another site (http or https)."""
    return url.lower().startswith("http")


class ExternalLinkPolicy(Service):
    """Validates external links embedded in comment text."""

    def __init__(self, allowed_external_urls: Mapping[str, Sequence[str]]) -> None:
        """Initialize link policy.

        Args:
            allowed_external_urls: Allow-listed url fragments per entity type.
                Entity types without an entry accept any external url.
        """
        self.allowed_external_urls = allowed_external_urls

    def validate(self, entity_type: str, text: str) -> None:
        """Reject text containing a disallowed external link.

        Args:
            entity_type: Type of the entity the comment belongs to
            text: Comment text

        Raises:
            LinkNotAllowedError: On the first external url not allow-listed
        """
        allowed = self.allowed_external_urls.get(entity_type)
        if allowed is None:
            return

        fragments = [normalize_url(fragment).lower() for fragment in allowed]

        for raw_url in extract_link_urls(text):
            url = normalize_url(raw_url)
            if not is_external_url(url):
                continue

            lowered = url.lower()
            if not any(fragment in lowered for fragment in fragments):
                logfire.warn(
                    "External link rejected",
                    entity_type=entity_type,
                    url=raw_url,
                )
                raise LinkNotAllowedError(raw_url)
