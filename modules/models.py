"""
Modèle des fiches AniList (``Media``).

Chaque fiche est construite une seule fois à partir du JSON renvoyé par l'API
GraphQL et n'est jamais modifiée ensuite. Les champs garantis par AniList (id,
URL du site, au moins un titre) sont vérifiés ici : un payload cassé lève
``MalformedUpstreamRecord`` au lieu de planter au milieu d'un embed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


class MalformedUpstreamRecord(ValueError):
    """Le payload AniList ne respecte pas le schéma attendu."""

    def __init__(self, field: str, message: str = "missing required field") -> None:
        self.field = field
        super().__init__(f"{message}: {field}")


def _require(payload: Dict[str, Any], key: str) -> Any:
    value = payload.get(key)
    if value is None:
        raise MalformedUpstreamRecord(key)
    return value


@dataclass(frozen=True)
class Title:
    romaji: Optional[str] = None
    english: Optional[str] = None
    native: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "Title":
        payload = payload or {}
        title = cls(
            romaji=payload.get("romaji"),
            english=payload.get("english"),
            native=payload.get("native"),
        )
        if title.romaji is None and title.english is None and title.native is None:
            raise MalformedUpstreamRecord("title", "no title variant present")
        return title


@dataclass(frozen=True)
class FuzzyDate:
    """Date AniList dont chaque composante peut manquer."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> Optional["FuzzyDate"]:
        if payload is None:
            return None
        return cls(year=payload.get("year"), month=payload.get("month"), day=payload.get("day"))

    @property
    def is_empty(self) -> bool:
        return self.year is None and self.month is None and self.day is None

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None and self.day is not None


@dataclass(frozen=True)
class CoverImage:
    extra_large: Optional[str] = None
    large: Optional[str] = None
    medium: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "CoverImage":
        payload = payload or {}
        return cls(
            extra_large=payload.get("extraLarge"),
            large=payload.get("large"),
            medium=payload.get("medium"),
            color=payload.get("color"),
        )


@dataclass(frozen=True)
class Credit:
    """Studio ou membre du staff crédité, avec son rôle."""

    name: str
    role: str = ""
    is_main: bool = False


def _node_name(node: Dict[str, Any]) -> str:
    # studios: {"name": "..."} ; staff: {"name": {"full": "..."}}
    name = node.get("name")
    if isinstance(name, dict):
        name = name.get("full")
    return name or ""


def zip_credits(connection: Optional[Dict[str, Any]]) -> Tuple[Credit, ...]:
    """Associe ``edges[i]`` et ``nodes[i]`` en une liste de ``Credit``.

    Si les deux listes n'ont pas la même longueur, aucun crédit n'est
    résolu : on ne peut plus garantir que l'index identifie la même entité.
    """
    if not connection:
        return ()
    edges: List[Dict[str, Any]] = connection.get("edges") or []
    nodes: List[Dict[str, Any]] = connection.get("nodes") or []
    if len(edges) != len(nodes):
        return ()
    return tuple(
        Credit(
            name=_node_name(node),
            role=edge.get("role") or "",
            is_main=bool(edge.get("isMain")),
        )
        for edge, node in zip(edges, nodes)
    )


@dataclass(frozen=True)
class ExternalLink:
    url: str
    type: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ExternalLink":
        return cls(url=payload.get("url") or "", type=payload.get("type") or "")


@dataclass(frozen=True)
class Trailer:
    id: str
    site: str

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> Optional["Trailer"]:
        if not payload or payload.get("id") is None or payload.get("site") is None:
            return None
        return cls(id=str(payload["id"]), site=payload["site"])


@dataclass(frozen=True)
class Tag:
    name: str


def _links(payload: Dict[str, Any]) -> Optional[Tuple[ExternalLink, ...]]:
    links = payload.get("externalLinks")
    if links is None:
        return None
    return tuple(ExternalLink.from_dict(entry) for entry in links if entry)


@dataclass(frozen=True)
class Anime:
    id: int
    title: Title
    site_url: str
    cover_image: CoverImage
    id_mal: Optional[int] = None
    season: Optional[str] = None
    season_year: Optional[int] = None
    format: Optional[str] = None
    status: Optional[str] = None
    episodes: Optional[int] = None
    duration: Optional[int] = None
    genres: Tuple[str, ...] = ()
    source: Optional[str] = None
    average_score: Optional[int] = None
    studios: Optional[Tuple[Credit, ...]] = None
    external_links: Optional[Tuple[ExternalLink, ...]] = None
    trailer: Optional[Trailer] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "Anime":
        if not payload:
            raise MalformedUpstreamRecord("Media")
        studios = payload.get("studios")
        return cls(
            id=_require(payload, "id"),
            title=Title.from_dict(payload.get("title")),
            site_url=_require(payload, "siteUrl"),
            cover_image=CoverImage.from_dict(payload.get("coverImage")),
            id_mal=payload.get("idMal"),
            season=payload.get("season"),
            season_year=payload.get("seasonYear"),
            format=payload.get("format"),
            status=payload.get("status"),
            episodes=payload.get("episodes"),
            duration=payload.get("duration"),
            genres=tuple(payload.get("genres") or ()),
            source=payload.get("source"),
            average_score=payload.get("averageScore"),
            studios=None if studios is None else zip_credits(studios),
            external_links=_links(payload),
            trailer=Trailer.from_dict(payload.get("trailer")),
            description=payload.get("description"),
        )


@dataclass(frozen=True)
class Manga:
    id: int
    title: Title
    site_url: str
    cover_image: CoverImage
    media_type: Optional[str] = None
    id_mal: Optional[int] = None
    start_date: Optional[FuzzyDate] = None
    end_date: Optional[FuzzyDate] = None
    format: Optional[str] = None
    status: Optional[str] = None
    chapters: Optional[int] = None
    volumes: Optional[int] = None
    genres: Tuple[str, ...] = ()
    source: Optional[str] = None
    average_score: Optional[int] = None
    staff: Optional[Tuple[Credit, ...]] = None
    description: Optional[str] = None
    tags: Tuple[Tag, ...] = ()

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, Any]]) -> "Manga":
        if not payload:
            raise MalformedUpstreamRecord("Media")
        staff = payload.get("staff")
        return cls(
            id=_require(payload, "id"),
            title=Title.from_dict(payload.get("title")),
            site_url=_require(payload, "siteUrl"),
            cover_image=CoverImage.from_dict(payload.get("coverImage")),
            media_type=payload.get("type"),
            id_mal=payload.get("idMal"),
            start_date=FuzzyDate.from_dict(payload.get("startDate")),
            end_date=FuzzyDate.from_dict(payload.get("endDate")),
            format=payload.get("format"),
            status=payload.get("status"),
            chapters=payload.get("chapters"),
            volumes=payload.get("volumes"),
            genres=tuple(payload.get("genres") or ()),
            source=payload.get("source"),
            average_score=payload.get("averageScore"),
            staff=None if staff is None else zip_credits(staff),
            description=payload.get("description"),
            tags=tuple(Tag(name=t["name"]) for t in payload.get("tags") or () if t and t.get("name")),
        )
