"""
Objet valeur pour les noms de fichiers media decomposes.

Un nom de fichier est decoupe en tokens (separateurs `.`, `-` ou espace).
Le classifieur en extrait la qualite (ex: 1080p), le code saison/episode
(ex: S01E02) et le titre, forme des tokens situes avant le point de coupure.
"""

from dataclasses import dataclass
from typing import Optional

from mediasort.utils.constants import UNKNOWN_EPISODE, UNKNOWN_QUALITY


def capitalize_first(token: str) -> str:
    """Met en majuscule le premier caractere, le reste est laisse tel quel."""
    if not token:
        return token
    return token[0].upper() + token[1:]


@dataclass(frozen=True)
class MediaName:
    """
    Nom de fichier media decompose.

    Attributs:
        tokens: Tous les tokens du nom, extension comprise
        cut_point: Index du premier token qualite ou episode
                   (index de l'extension si aucun n'a ete trouve)
        quality: Qualite en minuscules (ex: "1080p"), None si absente
        episode: Code saison/episode en majuscules (ex: "S01E02"), None si absent
    """

    tokens: tuple[str, ...]
    cut_point: int
    quality: Optional[str] = None
    episode: Optional[str] = None

    @property
    def extension(self) -> str:
        """Extension d'origine (casse conservee)."""
        return self.tokens[-1]

    @property
    def title_tokens(self) -> tuple[str, ...]:
        return self.tokens[: self.cut_point]

    @property
    def title(self) -> str:
        """Titre : tokens avant le point de coupure, capitalises, joints par un espace."""
        return " ".join(capitalize_first(token) for token in self.title_tokens)

    def target_filename(self) -> str:
        """
        Genere le nom de fichier normalise.

        Format : {Titre}-{EPISODE}-{qualite}.{ext}
        Les tokens absents sont remplaces par SXXEXX et UNKNOWNp.
        """
        episode = self.episode or UNKNOWN_EPISODE
        quality = self.quality or UNKNOWN_QUALITY
        return f"{self.title}-{episode}-{quality}.{self.extension}"
