import os
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from presentations.config import Settings, get_settings
from presentations.schemas.files import FileEntry


class Category(str, Enum):
    ALL = "all"
    PRESENTATION = "presentation"
    PDF = "pdf"


# Selectbox labels, in display order
CATEGORY_LABELS = {
    Category.ALL: "All",
    Category.PRESENTATION: "PPT",
    Category.PDF: "PDF",
}


def extension_of(name: str) -> str:
    return os.path.splitext(name)[1].lower()


def _normalise(extensions: Iterable[str]) -> set[str]:
    return {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}


def matches_category(name: str, category: Category, settings: Optional[Settings] = None) -> bool:
    category = Category(category)
    if category is Category.ALL:
        return True
    settings = settings or get_settings()
    if category is Category.PRESENTATION:
        return extension_of(name) in _normalise(settings.PRESENTATION_EXTENSIONS)
    return extension_of(name) in _normalise(settings.PDF_EXTENSIONS)


def filter_files(
    files: Sequence[FileEntry],
    search_term: str = "",
    category: Category = Category.ALL,
    settings: Optional[Settings] = None,
) -> List[FileEntry]:
    """Case-sensitive name search combined with the category filter. Order is kept."""
    return [
        f for f in files
        if search_term in f.name and matches_category(f.name, category, settings)
    ]
