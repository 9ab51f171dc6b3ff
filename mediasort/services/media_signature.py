"""
Detection du conteneur video d'un fichier par sa signature (magic bytes).

Un fichier n'est traite comme media que si son contenu commence par
une signature connue, quelle que soit son extension :
- Matroska (mkv, webm) : en-tete EBML 1A 45 DF A3 a l'offset 0
- MP4 (ISO BMFF) : boite "ftyp" a l'offset 4, apres la taille de la boite
"""

from enum import Enum
from typing import Optional

MKV_SIGNATURE = b"\x1a\x45\xdf\xa3"
MP4_BOX_TYPE = b"ftyp"
MP4_BOX_OFFSET = 4

# Nombre d'octets a lire pour reconnaitre toutes les signatures
SIGNATURE_SIZE = max(len(MKV_SIGNATURE), MP4_BOX_OFFSET + len(MP4_BOX_TYPE))


class MediaContainer(str, Enum):
    """Conteneurs video reconnus."""

    MKV = "mkv"
    MP4 = "mp4"


def detect_container(header: bytes) -> Optional[MediaContainer]:
    """
    Identifie le conteneur video a partir des premiers octets d'un fichier.

    Args:
        header: Premiers octets du fichier (au moins SIGNATURE_SIZE)

    Returns:
        Le conteneur reconnu, ou None si la signature est inconnue.
    """
    if header.startswith(MKV_SIGNATURE):
        return MediaContainer.MKV
    if header[MP4_BOX_OFFSET:MP4_BOX_OFFSET + len(MP4_BOX_TYPE)] == MP4_BOX_TYPE:
        return MediaContainer.MP4
    return None
