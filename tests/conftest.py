from datetime import datetime

import pytest
import pytz

from giftradar.core.models import Document


def make_doc(doc_id, title, summary="", source="Test Source", published=None, keywords=()):
    published_at = None
    if published:
        published_at = pytz.utc.localize(datetime.strptime(published, "%Y-%m-%d"))
    return Document(
        id=doc_id,
        title=title,
        summary=summary,
        source=source,
        published_at=published_at,
        keywords=keywords,
    )


@pytest.fixture
def doc_factory():
    return make_doc


@pytest.fixture
def sample_documents():
    return [
        make_doc(
            "a1",
            "Sustainable Corporate Gifts",
            "Recycled bamboo desk sets for new hires",
            source="Sustainable Gifts Hub",
            published="2025-03-12",
            keywords=("sustainable", "corporate", "recycled"),
        ),
        make_doc(
            "a2",
            "Smart Gadgets for the Office",
            "Wireless chargers remain popular client gifts",
            source="Tech Gifting Review",
            published="2025-02-03",
            keywords=("tech", "wireless"),
        ),
        make_doc(
            "a3",
            "Mindfulness Kits Replace Hampers",
            "HR teams choose meditation boxes",
            source="Corporate Trends Weekly",
            published="2024-12-18",
            keywords=("wellness",),
        ),
        make_doc(
            "a4",
            "Packaging Update",
            "eco-friendly packaging trends",
            source="Global Gift Trends",
        ),
    ]
