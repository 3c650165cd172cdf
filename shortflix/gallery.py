import httpx
import logging
from typing import List, Optional, Set

from .client import CatalogClient
from .config import Settings, get_settings
from .engine import matches_query
from .models import Short
from .storage import FavoritesStore, KeyValueStorage

logger = logging.getLogger("shortflix.gallery")

SKELETON_TILES = 8
LOAD_ERROR = "Failed to load shorts. Please try again."


class GalleryState:
    """State behind the shorts grid, independent of any UI toolkit.

    ``shorts`` holds the last server response. Everything a view renders is
    derived from it plus the local search text, favorites and selection.
    Overlapping fetches are not fenced: whichever response resolves last
    overwrites ``shorts``.
    """

    def __init__(self, client: CatalogClient, favorites_store: FavoritesStore):
        self.client = client
        self.favorites_store = favorites_store
        self.shorts: List[Short] = []
        self.search: str = ""
        self.favorites: Set[int] = set()
        self.show_favorites_only: bool = False
        self.active_short: Optional[Short] = None
        self.autoplay: bool = False
        self.loading: bool = True
        self.error: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GalleryState":
        settings = settings or get_settings()
        client = CatalogClient(settings.api_base_url)
        favorites_store = FavoritesStore(KeyValueStorage(settings.favorites_path), settings.favorites_key)
        return cls(client, favorites_store)

    async def mount(self) -> None:
        self.favorites = self.favorites_store.load()
        await self.fetch_shorts()

    async def fetch_shorts(self, query: Optional[str] = None) -> None:
        self.loading = True
        self.error = None
        try:
            self.shorts = await self.client.get_shorts(query)
        except (httpx.HTTPError, ValueError):
            logger.exception("Failed to fetch shorts (query=%r)", query)
            self.error = LOAD_ERROR
        finally:
            self.loading = False

    # search box

    def set_search(self, text: str) -> None:
        self.search = text

    async def submit_search(self) -> None:
        await self.fetch_shorts(self.search)

    async def clear_search(self) -> None:
        self.search = ""
        await self.fetch_shorts()

    # favorites

    def is_favorite(self, short_id: int) -> bool:
        return short_id in self.favorites

    def toggle_favorite(self, short_id: int) -> bool:
        """Flip the favorite flag for one short and persist the set.

        Returns the new flag.
        """
        if short_id in self.favorites:
            self.favorites.discard(short_id)
        else:
            self.favorites.add(short_id)
        self.favorites_store.save(self.favorites)
        return short_id in self.favorites

    def set_show_favorites_only(self, flag: bool) -> None:
        self.show_favorites_only = flag

    @property
    def favorites_filter_enabled(self) -> bool:
        return bool(self.favorites)

    # playback overlay

    def open_short(self, short: Short) -> None:
        self.active_short = short
        self.autoplay = True

    def close_dialog(self) -> None:
        self.active_short = None
        self.autoplay = False

    @property
    def dialog_open(self) -> bool:
        return self.active_short is not None

    # derived view data

    @property
    def visible_shorts(self) -> List[Short]:
        items = self.shorts
        if self.show_favorites_only:
            items = [s for s in items if s.id in self.favorites]
        if not self.search.strip():
            return list(items)
        return [s for s in items if matches_query(s, self.search)]

    @property
    def skeleton_count(self) -> int:
        return SKELETON_TILES if self.loading else 0

    @property
    def empty_message(self) -> Optional[str]:
        if self.loading or self.visible_shorts:
            return None
        suffix = " or show all instead." if self.show_favorites_only else "."
        return "No shorts found. Try another search term" + suffix

    @property
    def total_shorts(self) -> int:
        return len(self.shorts)

    @property
    def total_favorites(self) -> int:
        return len(self.favorites)
