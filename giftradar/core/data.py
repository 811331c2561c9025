# coding=utf-8
"""
Document Loading Module

Reads article collections from JSON and turns them into Document objects.
Two file shapes are accepted:
- a list of plain documents ({title, summary, source, published_date, keywords, ...})
- a list of source bundles ({source_file, data: [{Heading, Content, Date, ...}]})
"""

import hashlib
import json
import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from giftradar.core.models import Document
from giftradar.core.ranker import DATE_DESC, rank
from giftradar.utils.errors import DataNotFoundError
from giftradar.utils.time import DEFAULT_TIMEZONE, parse_publish_date

logger = logging.getLogger(__name__)


MAX_KEYWORDS = 8
SHORT_CONTENT_LENGTH = 200
SUMMARY_LENGTH = 150

STOPWORDS = {
    "the", "and", "for", "with", "that", "this", "from", "are", "was", "were",
    "have", "has", "had", "will", "would", "could", "should", "can", "may",
    "might", "must", "shall",
}

# Vocabulary used when an article carries no topics of its own
COMMON_KEYWORDS = [
    "gift", "gifting", "corporate", "business", "employee", "client",
    "trend", "trending", "luxury", "premium", "sustainable",
    "eco-friendly", "eco", "friendly", "green", "recycled", "bamboo",
    "organic", "plantable", "reusable", "personalized", "custom", "branded", "wellness",
    "remote", "hybrid", "workplace", "culture", "retention", "onboarding",
    "appreciation", "recognition", "loyalty", "engagement", "productivity",
    "technology", "innovation", "experience", "quality", "value",
    "digital", "smart", "wireless", "portable", "gadget", "tech",
    "health", "self-care", "mindfulness", "fitness",
    "travel", "lifestyle", "fashion", "style", "design", "artistic",
    "food", "gourmet", "culinary", "beverage", "coffee", "tea",
    "home", "office", "workspace", "desk", "stationery", "accessories",
    "event", "celebration", "festival", "holiday", "seasonal", "anniversary",
    "birthday", "wedding", "graduation", "promotion", "achievement",
]

KNOWN_SOURCES = {
    "bundledgifting": "Bundled Gifting",
    "bigimpex": "Big Impex",
    "corporategift": "Corporate Gift",
    "ppai": "PPAI",
    "woodanytime": "Wood Anytime",
    "consortiumgifts": "Consortium Gifts",
}


def generate_id(*parts: str) -> str:
    """Stable identifier from the given text parts"""
    digest = hashlib.md5("".join(parts).encode("utf-8")).hexdigest()
    return digest[:12]


def extract_source_name(source_file: str) -> str:
    """
    Derive a display source name from a scraped file name

    Examples:
        >>> extract_source_name("ppai_articles.csv")
        'PPAI'
        >>> extract_source_name("gift_market_insights.xlsx")
        'Gift Market Insights'
    """
    lowered = source_file.lower()
    for fragment, name in KNOWN_SOURCES.items():
        if fragment in lowered:
            return name

    stem = re.sub(r"\.(csv|xlsx)$", "", source_file)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), stem.replace("_", " "))


def normalize_url(url: str) -> str:
    """Add https:// when the URL has no scheme ('#' and empty stay as they are)"""
    url = (url or "").strip()
    if not url or url == "#":
        return url
    if not url.startswith(("http://", "https://")):
        return "https://" + url
    return url


def create_summary(content: str, title: str) -> str:
    """
    Create a short summary from article content

    Content of at most 200 characters is used as is. Longer content is
    cleaned (markup, bracketed notes, extra whitespace, leading title) and
    cut to whole sentences within 150 characters, or hard-cut with "...".
    """
    if len(content) <= SHORT_CONTENT_LENGTH:
        return content

    summary = re.sub(r"<[^>]*>", "", content)
    summary = re.sub(r"\[.*?\]", "", summary)
    summary = re.sub(r"\s+", " ", summary).strip()

    if title and summary.lower().startswith(title.lower()):
        summary = summary[len(title):].strip()

    if len(summary) > SUMMARY_LENGTH:
        sentences = re.split(r"[.!?]", summary)
        if len(sentences) > 1:
            truncated = ""
            for sentence in sentences:
                if len(truncated + sentence) <= SUMMARY_LENGTH:
                    truncated += sentence + ". "
                else:
                    break
            summary = truncated.strip()
        else:
            summary = summary[:SUMMARY_LENGTH] + "..."

    return summary


def extract_keywords(title: str, content: str, topics: Optional[str] = None) -> List[str]:
    """
    Extract keyword tags for an article

    Args:
        title: Article title
        content: Article body
        topics: Comma-separated topics supplied by the scraper

    Returns:
        At most 8 tags longer than two characters, stopwords removed
    """
    if topics:
        keywords = [topic.strip() for topic in topics.split(",") if topic.strip()]
    else:
        text = f"{title} {content}".lower()
        keywords = [keyword for keyword in COMMON_KEYWORDS if keyword in text]

        title_words = [
            word for word in title.lower().split()
            if len(word) > 3 and word not in STOPWORDS
        ]
        keywords.extend(title_words[:3])

        compounds = [
            phrase for phrase in re.findall(r"\b\w+(?:-\w+)*\b", text)
            if len(phrase) > 5 and "-" in phrase
        ]
        keywords.extend(compounds[:2])

    relevant = [
        keyword for keyword in keywords
        if len(keyword) > 2 and keyword.lower() not in STOPWORDS
    ]
    return relevant[:MAX_KEYWORDS]


def document_from_dict(data: Dict[str, Any], timezone: str = DEFAULT_TIMEZONE) -> Document:
    """
    Create a Document from a plain record

    Raises:
        ValueError: Record has no title
    """
    title = (data.get("title") or "").strip()
    if not title:
        raise ValueError("Document record has no title")

    url = normalize_url(data.get("url", ""))
    keywords = data.get("keywords") or []
    if isinstance(keywords, str):
        keywords = [k.strip() for k in keywords.split(",") if k.strip()]

    return Document(
        id=str(data.get("id") or generate_id(title, url)),
        title=title,
        summary=data.get("summary") or "",
        source=data.get("source") or "",
        published_at=parse_publish_date(
            data.get("published_date") or data.get("publishedDate"), timezone
        ),
        keywords=tuple(keywords),
        url=url,
    )


def document_from_scraped(
    record: Dict[str, Any],
    source_file: str,
    timezone: str = DEFAULT_TIMEZONE,
) -> Document:
    """Create a Document from a scraped record of a source bundle"""
    title = record.get("Heading") or record.get("Title") or "Untitled"
    url = normalize_url(record.get("Article URL") or record.get("URL") or "#")
    content = record.get("Content") or ""

    return Document(
        id=generate_id(title, url),
        title=title,
        summary=create_summary(content, title),
        source=extract_source_name(source_file) if source_file else record.get("Source", ""),
        published_at=parse_publish_date(record.get("Date"), timezone),
        keywords=tuple(extract_keywords(title, content, record.get("Extracted Topics"))),
        url=url,
    )


def _dedupe_ids(documents: Iterable[Document]) -> List[Document]:
    seen = {}
    result = []
    for document in documents:
        count = seen.get(document.id, 0)
        seen[document.id] = count + 1
        if count:
            document = replace(document, id=f"{document.id}-{count}")
        result.append(document)
    return result


def parse_documents(raw: List[Any], timezone: str = DEFAULT_TIMEZONE) -> List[Document]:
    """
    Convert decoded JSON into a newest-first document list

    Malformed records are skipped with a warning.
    """
    documents = []
    for entry in raw or []:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-object entry: %r", entry)
            continue

        if "data" in entry and isinstance(entry["data"], list):
            source_file = entry.get("source_file", "")
            for record in entry["data"]:
                if not isinstance(record, dict):
                    logger.warning("Skipping non-object record in %s", source_file)
                    continue
                documents.append(document_from_scraped(record, source_file, timezone))
            continue

        try:
            documents.append(document_from_dict(entry, timezone))
        except ValueError as e:
            logger.warning("Skipping document record: %s", e)

    return rank(_dedupe_ids(documents), DATE_DESC)


def load_documents(path: Union[str, Path], timezone: str = DEFAULT_TIMEZONE) -> List[Document]:
    """
    Load documents from a JSON file

    Args:
        path: JSON file path
        timezone: Timezone applied to dates without offset

    Returns:
        Documents sorted newest first (undated last)

    Raises:
        DataNotFoundError: File does not exist
        json.JSONDecodeError: File is not valid JSON
    """
    data_path = Path(path)
    if not data_path.exists():
        raise DataNotFoundError(f"Data file {data_path} not found")

    with open(data_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        raw = raw.get("articles") or raw.get("documents") or []

    documents = parse_documents(raw, timezone)
    logger.info("Loaded %d documents from %s", len(documents), data_path)
    return documents
