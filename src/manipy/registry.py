from logging import getLogger
from typing import Dict, Iterator, List

from .errors import DuplicateLinkError, UnknownLinkError
from .links.link import Link

logger = getLogger(__name__)


class LinkRegistry:
    """Sole owner of the manipulator's links, keyed by identifier."""

    def __init__(self) -> None:
        self._links: Dict[int, Link] = {}

    def insert(self, link: Link) -> bool:
        """Register a link. A duplicate identifier is rejected and the existing link kept.

        Returns:
            True if the link was stored, False if it was discarded.
        """
        if link.id in self._links:
            logger.warning(str(DuplicateLinkError(link.id)))
            return False
        self._links[link.id] = link
        return True

    def lookup(self, link_id: int) -> Link | None:
        return self._links.get(link_id)

    def get(self, link_id: int) -> Link:
        """Like :meth:`lookup`, but raises UnknownLinkError when unregistered."""
        link = self._links.get(link_id)
        if link is None:
            raise UnknownLinkError(link_id)
        return link

    def ids(self) -> List[int]:
        return sorted(self._links)

    def clear(self) -> None:
        self._links.clear()

    def __contains__(self, link_id: object) -> bool:
        return link_id in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        """Iterate over links in ascending identifier order."""
        for link_id in self.ids():
            yield self._links[link_id]
