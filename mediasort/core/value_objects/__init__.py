"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- DatasetFile : Fichier de dataset IMDb (archive .tsv.gz et fichier .tsv)
- MediaName : Nom de fichier media decompose (titre, qualite, episode, extension)
"""

from mediasort.core.value_objects.dataset import DatasetFile
from mediasort.core.value_objects.media_name import MediaName

__all__ = [
    "DatasetFile",
    "MediaName",
]
