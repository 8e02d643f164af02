from __future__ import annotations

import copy

import pytest

ANIME_PAYLOAD = {
    "id": 16498,
    "idMal": 16498,
    "title": {"romaji": "Shingeki no Kyojin", "english": "Attack on Titan", "native": "進撃の巨人"},
    "season": "SPRING",
    "seasonYear": 2013,
    "format": "TV",
    "status": "FINISHED",
    "episodes": 25,
    "duration": 24,
    "genres": ["Action", "Drama", "sci-fi"],
    "source": "MANGA",
    "averageScore": 85,
    "siteUrl": "https://anilist.co/anime/16498",
    "description": "Several hundred years ago, <i>humans</i> were nearly exterminated.<br>\n<br>\nThe end.",
    "coverImage": {
        "extraLarge": "https://img.anili.st/xl.jpg",
        "large": "https://img.anili.st/l.jpg",
        "medium": "https://img.anili.st/m.jpg",
        "color": "#e4a15d",
    },
    "studios": {
        "edges": [{"id": 1, "isMain": True}, {"id": 2, "isMain": False}],
        "nodes": [
            {"id": 858, "name": "WIT STUDIO"},
            {"id": 102, "name": "Funimation"},
        ],
    },
    "externalLinks": [
        {"url": "https://www.crunchyroll.com/attack-on-titan", "type": "STREAMING"},
        {"url": "https://twitter.com/anime_shingeki", "type": "SOCIAL"},
    ],
    "trailer": {"id": "LHtdKWJdif4", "site": "youtube"},
}

MANGA_PAYLOAD = {
    "id": 30002,
    "idMal": 2,
    "type": "MANGA",
    "title": {"romaji": "Berserk", "english": "Berserk", "native": "ベルセルク"},
    "startDate": {"year": 1989, "month": 8, "day": 25},
    "endDate": {"year": None, "month": None, "day": None},
    "format": "MANGA",
    "status": "RELEASING",
    "chapters": None,
    "volumes": None,
    "genres": ["Action", "Fantasy"],
    "source": "ORIGINAL",
    "averageScore": 93,
    "siteUrl": "https://anilist.co/manga/30002",
    "description": "His name is Guts, the Black Swordsman.",
    "coverImage": {"extraLarge": None, "large": "https://img.anili.st/berserk-l.jpg", "medium": None, "color": "#e4a143"},
    "staff": {
        "edges": [{"id": 1, "role": "Story & Art"}, {"id": 2, "role": "Assistant"}],
        "nodes": [
            {"id": 96879, "name": {"full": "Kentarou Miura"}},
            {"id": 1, "name": {"full": "Kouji Mori"}},
        ],
    },
    "tags": [{"name": "Gore"}, {"name": "Revenge"}],
}


@pytest.fixture
def anime_payload() -> dict:
    return copy.deepcopy(ANIME_PAYLOAD)


@pytest.fixture
def manga_payload() -> dict:
    return copy.deepcopy(MANGA_PAYLOAD)
