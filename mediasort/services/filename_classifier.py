"""
Classification des noms de fichiers media.

Decoupe un nom de fichier en tokens puis en extrait :
- la qualite video : 3 chiffres ou plus suivis de "p" (ex: 720p, 1080P)
- le code saison/episode : "s" + chiffres + "e" + chiffres (ex: S01E02)
- le titre : les tokens situes avant le premier token reconnu

Regle de departage : pour chaque motif, le PREMIER token qui correspond
l'emporte. Le point de coupure du titre est l'index le plus bas auquel
l'un ou l'autre motif a ete trouve. Les placeholders d'un nom deja
normalise (SXXEXX, UNKNOWNp) coupent aussi le titre.
"""

import re
from typing import Iterable, Optional

from mediasort.core.value_objects.media_name import MediaName
from mediasort.utils.constants import MEDIA_EXTENSIONS, UNKNOWN_EPISODE, UNKNOWN_QUALITY

# Separateurs de tokens : suites de ".", "-" ou espaces
TOKEN_SEPARATOR = re.compile(r"[. -]+")

RE_QUALITY = re.compile(r"([0-9]{3,}p)", re.IGNORECASE)
RE_EPISODE = re.compile(r"(s[0-9]+e[0-9]+)", re.IGNORECASE)

# Placeholders d'un nom deja normalise : coupent le titre sans fournir de valeur
PLACEHOLDER_TOKENS = frozenset({UNKNOWN_QUALITY, UNKNOWN_EPISODE})


def tokenize(filename: str) -> list[str]:
    """
    Decoupe un nom de fichier sur les suites de `.`, `-` ou espace.

    Un separateur en tete produit un premier token vide.

    Args:
        filename: Nom de fichier (sans repertoire)

    Returns:
        Liste des tokens, le dernier etant le candidat extension.
    """
    return TOKEN_SEPARATOR.split(filename)


def match_quality(token: str) -> Optional[str]:
    """Retourne la qualite en minuscules si le token en contient une."""
    match = RE_QUALITY.search(token)
    return match.group(1).lower() if match else None


def match_episode(token: str) -> Optional[str]:
    """Retourne le code saison/episode en majuscules si le token en contient un."""
    match = RE_EPISODE.search(token)
    return match.group(1).upper() if match else None


def classify(
    filename: str,
    allowed_extensions: Iterable[str] = MEDIA_EXTENSIONS,
) -> Optional[MediaName]:
    """
    Classe les tokens d'un nom de fichier media.

    Args:
        filename: Nom de fichier a analyser
        allowed_extensions: Extensions acceptees (en minuscules, sans point)

    Returns:
        MediaName decompose, ou None si l'extension n'est pas acceptee.
    """
    tokens = tokenize(filename)
    if len(tokens) < 2:
        return None

    extension = tokens[-1]
    if extension.lower() not in set(allowed_extensions):
        return None

    extension_index = len(tokens) - 1
    quality: Optional[str] = None
    episode: Optional[str] = None
    cut_point = extension_index

    for index, token in enumerate(tokens[:extension_index]):
        if token in PLACEHOLDER_TOKENS:
            cut_point = min(cut_point, index)
            continue
        if quality is None:
            quality = match_quality(token)
            if quality is not None:
                cut_point = min(cut_point, index)
        if episode is None:
            episode = match_episode(token)
            if episode is not None:
                cut_point = min(cut_point, index)

    return MediaName(
        tokens=tuple(tokens),
        cut_point=cut_point,
        quality=quality,
        episode=episode,
    )
