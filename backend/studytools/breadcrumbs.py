from typing import List

from models import Breadcrumb

HOME = Breadcrumb("/", "Home")

# Old per-grade English pages now live under one combined page.
# Keyed by raw segment; only applied to the second segment of a path.
SEGMENT_ALIASES = {
    "english-9": Breadcrumb("/english/english-9-12", "English 9-12"),
    "english-10": Breadcrumb("/english/english-9-12", "English 9-12"),
    "english-11": Breadcrumb("/english/english-9-12", "English 9-12"),
    "english-12": Breadcrumb("/english/english-9-12", "English 9-12"),
}
ALIAS_POSITION = 2


def split_path(path: str):
    return tuple(s for s in (path or "").split("/") if s)


def humanize_segment(segment: str) -> str:
    # "algebraic-equations" -> "Algebraic Equations"
    return " ".join(word[:1].upper() + word[1:] for word in segment.split("-"))


def label_path(path: str) -> List[Breadcrumb]:
    """Breadcrumb trail for a route, root to leaf, with Home first.

    The root path (or anything without a real segment) gives an empty trail
    so the caller can hide the breadcrumb bar entirely.
    """
    segments = split_path(path)
    if not segments:
        return []
    crumbs = [HOME]
    for i, segment in enumerate(segments, start=1):
        alias = SEGMENT_ALIASES.get(segment) if i == ALIAS_POSITION else None
        if alias is not None:
            crumbs.append(alias)
            continue
        href = "/" + "/".join(segments[:i])
        crumbs.append(Breadcrumb(href, humanize_segment(segment)))
    return crumbs
