from typing import Iterable, List, Optional

from .engine import filter_shorts
from .models import Short, ShortCreate

SEED_SHORTS = [
    {"id": 1, "videoUrl": "https://www.w3schools.com/html/mov_bbb.mp4", "title": "Big Buck Bunny Intro", "tags": ["animation", "fun", "sample"]},
    {"id": 2, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-5s.mp4", "title": "Sample Clip 5 Seconds", "tags": ["sample", "short"]},
    {"id": 3, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-10s.mp4", "title": "Sample Clip 10 Seconds", "tags": ["sample", "medium"]},
    {"id": 4, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-15s.mp4", "title": "Sample Clip 15 Seconds", "tags": ["sample", "long"]},
    {"id": 5, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-5s.mp4", "title": "City Vibes Short", "tags": ["city", "vibes", "short"]},
    {"id": 6, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-20s.mp4", "title": "Fast Street Run", "tags": ["action", "street", "fast"]},
    {"id": 7, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-30s.mp4", "title": "Calm Nature View", "tags": ["nature", "calm", "relax"]},
    {"id": 8, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-30s.mp4", "title": "Tech Neon Short", "tags": ["tech", "neon", "vfx"]},
    {"id": 9, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-30s.mp4", "title": "Travel Moments", "tags": ["travel", "vlog", "lifestyle"]},
    {"id": 10, "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-30s.mp4", "title": "Ocean Waves Short", "tags": ["ocean", "relax", "nature"]},
]


class ShortsStore:
    """In-memory catalog of shorts, kept in insertion order.

    Records live for the lifetime of the process. There is no update or
    delete, so an id is never handed out twice.
    """

    def __init__(self, seed: Optional[Iterable[dict]] = None):
        items = SEED_SHORTS if seed is None else seed
        self._shorts: List[Short] = [Short(**s) for s in items]

    def __len__(self) -> int:
        return len(self._shorts)

    def list(self, tag: Optional[str] = None, q: Optional[str] = None) -> List[Short]:
        return filter_shorts(self._shorts, tag=tag, q=q)

    def next_id(self) -> int:
        return max((s.id for s in self._shorts), default=0) + 1

    def create(self, payload: ShortCreate) -> Short:
        short = Short(id=self.next_id(), **payload.model_dump())
        self._shorts.append(short)
        return short
